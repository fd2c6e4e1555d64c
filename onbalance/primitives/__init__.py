from ._aliases import Timestamp
from .timestamp import Timestamp_

__all__ = [
    "Timestamp",
    "Timestamp_",
]
