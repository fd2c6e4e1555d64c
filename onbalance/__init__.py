from .common import Bar
from .errors import BadBar
from .indicators import Obv
from .primitives import Timestamp, Timestamp_

__all__ = [
    "BadBar",
    "Bar",
    "Obv",
    "Timestamp",
    "Timestamp_",
]
