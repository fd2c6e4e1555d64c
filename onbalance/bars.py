from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from onbalance.common import Bar
from onbalance.errors import BadBar
from onbalance.files import load_file
from onbalance.primitives import Timestamp, Timestamp_


def load_bars(path: str | Path) -> list[Bar]:
    """Reads bars from a JSON or YAML file holding a list of `{time, close, volume}` records.

    Time is either milliseconds since EPOCH or an ISO 8601 date/time. Bars are returned in file
    order; they are not sorted or checked for gaps.
    """
    records = load_file(path)
    if not isinstance(records, list):
        raise BadBar(f"Expected a list of bars in {path}")
    return [to_bar(record) for record in records]


def to_bar(record: dict[str, Any]) -> Bar:
    try:
        time, close, volume = record["time"], record["close"], record["volume"]
    except (KeyError, TypeError) as exc:
        raise BadBar(f"Bar record {record!r} is missing a field") from exc
    return Bar(time=_to_timestamp(time), close=_to_decimal(close), volume=_to_decimal(volume))


def _to_timestamp(value: Any) -> Timestamp:
    # YAML resolves unquoted ISO dates to `date` and `datetime` objects.
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return Timestamp_.from_datetime_utc(value.astimezone(timezone.utc))
    if isinstance(value, date):
        return Timestamp_.from_datetime_utc(
            datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        )
    if isinstance(value, str):
        return Timestamp_.parse(value)
    return int(value)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        # Floats go through `str` so that 0.1 becomes Decimal("0.1").
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise BadBar(f"Invalid number ({value!r})") from exc
