"""Centralized Jinja2 template configuration with timezone support."""
import os
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi.templating import Jinja2Templates

from deepsleep.services.timestamps import to_utc, format_duration

# Viewer timezone used for display and for bucketing records by day
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "UTC")

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


def get_app_tz() -> ZoneInfo:
    """Get the application timezone."""
    return ZoneInfo(APP_TIMEZONE)


def resolve_tz(name: Optional[str]) -> ZoneInfo:
    """Look up an IANA timezone name, falling back to the app timezone.

    Raises ValueError for names the tz database does not know.
    """
    if not name:
        return get_app_tz()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e


def to_local(dt: datetime) -> datetime:
    """Convert a stored datetime to the app's local timezone for display.

    Naive datetimes are assumed to be UTC.
    """
    if dt is None:
        return None
    return to_utc(dt).astimezone(get_app_tz())


def localtime(dt: datetime, fmt: str = None) -> str:
    """Jinja filter to convert UTC datetime to local time string.

    Usage in templates:
        {{ record.start_time | localtime }}
        {{ record.start_time | localtime('%b %d, %H:%M') }}
    """
    if dt is None:
        return ""

    local_dt = to_local(dt)

    if fmt:
        return local_dt.strftime(fmt)

    # Default format: "2025-06-07 23:00"
    return local_dt.strftime("%Y-%m-%d %H:%M")


def duration(record) -> str:
    """Jinja filter: '{{ record | duration }}' -> '7h 45m'."""
    return format_duration(record.start_time, record.end_time)


def create_templates() -> Jinja2Templates:
    """Create a Jinja2Templates instance with custom filters."""
    templates = Jinja2Templates(directory=TEMPLATE_DIR)

    templates.env.filters["localtime"] = localtime
    templates.env.filters["duration"] = duration

    return templates


# Singleton template instance - import this in route files
templates = create_templates()
