from decimal import Decimal
from numbers import Number
from typing import Optional

from onbalance.common import Bar
from onbalance.errors import BadBar


# On-Balance Volume
# Holds at zero until the running total is seeded through `value`. Up and down closes only move a
# non-zero total.
class Obv:
    value: Decimal = Decimal("0.0")

    _previous_bar: Optional[Bar] = None

    def __init__(self, name: str = "OBV") -> None:
        self.name = name

    @property
    def maturity(self) -> int:
        return 1

    @property
    def mature(self) -> bool:
        return self._previous_bar is not None

    def current(self) -> Decimal:
        return self.value

    def is_ready(self) -> bool:
        return self.mature

    def update(self, bar: Bar) -> Decimal:
        if not isinstance(bar.value, Number):
            raise BadBar(f"Invalid close ({bar.close!r})")
        if not isinstance(bar.volume, Number) or bar.volume < 0:
            raise BadBar(f"Invalid volume ({bar.volume})")

        # State is only written once the comparison has succeeded.
        previous_bar = self._previous_bar
        if previous_bar is None:
            value = Decimal("0.0")
        elif bar.value == previous_bar.value or self.value == 0:
            value = self.value
        elif bar.value > previous_bar.value:
            value = self.value + bar.volume
        else:
            value = self.value - bar.volume

        self.value = value
        self._previous_bar = bar
        return self.value

    def reset(self) -> None:
        self.value = Decimal("0.0")
        self._previous_bar = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self.value})"
