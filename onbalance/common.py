from decimal import Decimal
from typing import NamedTuple

from onbalance.primitives import Timestamp, Timestamp_


class Bar(NamedTuple):
    time: Timestamp = 0  # Bar start time.
    close: Decimal = Decimal("0.0")
    volume: Decimal = Decimal("0.0")  # Within bar.

    @property
    def value(self) -> Decimal:
        # The value indicators compare between bars.
        return self.close

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(time={Timestamp_.to_datetime_utc(self.time)}, "
            f"close={self.close}, volume={self.volume})"
        )
