"""
Sleep Record Validators

Validation for the record write path. The store itself performs no ordering
checks, so every caller that writes goes through these functions first.
"""

from datetime import datetime
from typing import Optional, Dict, Any, List

from deepsleep.services.timestamps import parse_timestamp


INTERVAL_ERROR = "Wake time must be later than sleep start time"


class ValidationResult:
    """Container for validation results and the cleaned values."""
    def __init__(self):
        self.errors: List[str] = []
        self.cleaned: Dict[str, Any] = {}

    def add_error(self, msg: str):
        self.errors.append(msg)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


def _is_empty(value: Any) -> bool:
    """Check if value is None or empty string."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


def validate_sleep_interval(start: datetime, end: datetime) -> ValidationResult:
    """Reject intervals whose end is not strictly after the start."""
    result = ValidationResult()
    if end <= start:
        result.add_error(INTERVAL_ERROR)
    return result


def validate_sleep_record(data: Dict[str, Any]) -> ValidationResult:
    """
    Validate raw record input (form fields or JSON).

    Required: start_time, end_time (ISO-8601 with at least minute precision)
    Rule: end_time must be later than start_time
    Optional: note (blank becomes None)

    Returns:
        ValidationResult; on success `cleaned` holds start_time, end_time
        (naive datetimes) and note.
    """
    result = ValidationResult()
    parsed: Dict[str, Optional[datetime]] = {}

    for field, label in (("start_time", "Sleep start time"), ("end_time", "Wake time")):
        raw = data.get(field)
        if _is_empty(raw):
            result.add_error(f"{label} is required")
            continue
        try:
            parsed[field] = parse_timestamp(raw)
        except ValueError:
            result.add_error(f"{label} is not a valid date and time")

    if len(parsed) == 2:
        interval = validate_sleep_interval(parsed["start_time"], parsed["end_time"])
        result.errors.extend(interval.errors)

    note = data.get("note")
    result.cleaned = {
        **parsed,
        "note": None if _is_empty(note) else str(note).strip(),
    }
    return result
