"""
Timestamp Service

Parsing, normalization and display helpers for sleep record timestamps.

Rules:
- Incoming timestamps are ISO-8601 strings: date, 'T', hour:minute,
  optionally seconds (fractions and UTC offsets are tolerated)
- Minute-precision input is completed to second precision, never truncated
- Offset-aware input is converted to UTC; the store holds naive UTC values
- Naive stored values are read back as UTC instants
"""

from datetime import date, datetime, timezone, tzinfo
from typing import Union

from dateutil import parser as dt_parser


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """
    Parse a timestamp into the naive, second-precision datetime the store keeps.

    Raises:
        ValueError: if the value is empty, has no time component, or does
        not parse as ISO-8601.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip() if value is not None else ""
        if not text:
            raise ValueError("Timestamp is required")

        _, sep, time_part = text.partition("T")
        if not sep or ":" not in time_part:
            raise ValueError(f"Timestamp must include a time (YYYY-MM-DDTHH:MM): {text!r}")

        try:
            dt = dt_parser.isoparse(text)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Invalid timestamp: {text!r}") from e

    if dt.tzinfo is not None:
        try:
            dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e

    return dt.replace(microsecond=0)


def normalize_timestamp(value: Union[str, datetime]) -> str:
    """Reformat a timestamp as YYYY-MM-DDTHH:MM:SS."""
    return parse_timestamp(value).strftime(TIMESTAMP_FORMAT)


def to_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive stored value, or convert an aware one."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def local_day(dt: datetime, tz: tzinfo) -> date:
    """Calendar date the viewer's clock shows for a stored instant."""
    return to_utc(dt).astimezone(tz).date()


def format_duration(start: datetime, end: datetime) -> str:
    """Format an interval as '7h 45m' (minutes floored)."""
    total_minutes = int((end - start).total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def isoformat_utc(dt: datetime) -> str:
    """Render a stored value as an ISO-8601 UTC string ('...Z')."""
    return to_utc(dt).strftime(TIMESTAMP_FORMAT) + "Z"
