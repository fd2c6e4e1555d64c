from datetime import datetime, timezone
from types import ModuleType

from ._aliases import Timestamp


# Bar times are milliseconds since EPOCH, always UTC.
class Timestamp_(ModuleType):
    @staticmethod
    def from_datetime_utc(dt: datetime) -> Timestamp:
        assert dt.tzinfo == timezone.utc
        return int(round(dt.timestamp() * 1000.0))

    @staticmethod
    def to_datetime_utc(ms: Timestamp) -> datetime:
        return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)

    @staticmethod
    def format(timestamp: Timestamp) -> str:
        return Timestamp_.to_datetime_utc(timestamp).isoformat()

    @staticmethod
    def parse(timestamp: str) -> Timestamp:
        dt = datetime.fromisoformat(timestamp)
        # Naive is handled as UTC.
        dt = dt.astimezone(timezone.utc) if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
        return Timestamp_.from_datetime_utc(dt)
