import logging
from decimal import Decimal
from typing import Iterable, Iterator

from onbalance.common import Bar
from onbalance.indicators import Obv

_log = logging.getLogger(__name__)


def stream(obv: Obv, bars: Iterable[Bar]) -> Iterator[Decimal]:
    """Feeds bars to the accumulator as they are consumed. The accumulator is not reset, so the
    bars continue from whatever state it currently holds."""
    for bar in bars:
        yield obv.update(bar)


def replay(obv: Obv, bars: Iterable[Bar], reset: bool = True) -> list[Decimal]:
    if reset:
        obv.reset()

    values = list(stream(obv, bars))
    _log.debug(f"replayed {len(values)} bar(s) through {obv.name}; value: {obv.value}")
    return values
