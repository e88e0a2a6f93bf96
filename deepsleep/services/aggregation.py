"""
Daily Aggregation Service

Turns an unordered list of sleep records into the two chart series:
- total hours slept per calendar day
- average hours per record for each calendar day

Records are bucketed by the calendar date of their start time in the
viewer's timezone. Two viewers in different timezones can see different day
boundaries over the same stored instants; callers pass the timezone
explicitly so the choice stays visible.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional

from deepsleep.services.timestamps import local_day


@dataclass(frozen=True)
class DailyAggregate:
    day: date
    label: str
    value: float


def round_hours(hours: float) -> float:
    """Round to 2 decimal places, ties away from zero."""
    return float(Decimal(hours).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def record_duration_hours(start: datetime, end: datetime) -> float:
    """Duration in hours. Negative or zero intervals are returned as-is."""
    return (end - start).total_seconds() / 3600


def day_label(day: date) -> str:
    """Locale date string used as the chart label."""
    return day.strftime("%x")


def _group_by_day(records: Iterable, tz: Optional[tzinfo]) -> Dict[date, List[float]]:
    tz = tz or timezone.utc
    groups = defaultdict(list)
    for record in records:
        day = local_day(record.start_time, tz)
        groups[day].append(record_duration_hours(record.start_time, record.end_time))
    return groups


def totals_by_day(records: Iterable, tz: Optional[tzinfo] = None) -> List[DailyAggregate]:
    """
    Sum sleep hours per local calendar day.

    Args:
        records: Objects with start_time / end_time datetimes
        tz: Viewer timezone used for bucketing (UTC when omitted)

    Returns:
        DailyAggregate items sorted ascending by date, totals rounded to
        2 decimal places. Empty input gives an empty list.
    """
    groups = _group_by_day(records, tz)
    return [
        DailyAggregate(day=day, label=day_label(day), value=round_hours(sum(groups[day])))
        for day in sorted(groups)
    ]


def averages_by_day(records: Iterable, tz: Optional[tzinfo] = None) -> List[DailyAggregate]:
    """Average hours per record for each local calendar day, sorted by date."""
    groups = _group_by_day(records, tz)
    return [
        DailyAggregate(
            day=day,
            label=day_label(day),
            value=round_hours(sum(groups[day]) / len(groups[day])),
        )
        for day in sorted(groups)
    ]


def chart_series(records: Iterable, tz: Optional[tzinfo] = None) -> dict:
    """Labels and datasets for the daily total and daily average bar charts."""
    records = list(records)
    totals = totals_by_day(records, tz)
    averages = averages_by_day(records, tz)
    return {
        "labels": [item.label for item in totals],
        "totals": [item.value for item in totals],
        "averages": [item.value for item in averages],
    }
