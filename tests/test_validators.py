"""
Unit tests for sleep record validation.
"""

from datetime import datetime

from deepsleep.services.validators import (
    INTERVAL_ERROR,
    validate_sleep_interval,
    validate_sleep_record,
)


class TestValidateSleepInterval:
    def test_end_after_start(self):
        assert validate_sleep_interval(
            datetime(2025, 6, 7, 23, 0), datetime(2025, 6, 8, 7, 0)
        ).is_valid

    def test_end_equal_start(self):
        result = validate_sleep_interval(
            datetime(2025, 6, 7, 23, 0), datetime(2025, 6, 7, 23, 0)
        )
        assert not result.is_valid
        assert result.errors == [INTERVAL_ERROR]

    def test_end_before_start(self):
        result = validate_sleep_interval(
            datetime(2025, 6, 8, 7, 0), datetime(2025, 6, 7, 23, 0)
        )
        assert result.errors == [INTERVAL_ERROR]


class TestValidateSleepRecord:
    def test_valid_record_cleaned(self):
        result = validate_sleep_record({
            "start_time": "2025-06-07T23:00",
            "end_time": "2025-06-08T07:00",
            "note": "  snoring ",
        })
        assert result.is_valid
        assert result.cleaned == {
            "start_time": datetime(2025, 6, 7, 23, 0),
            "end_time": datetime(2025, 6, 8, 7, 0),
            "note": "snoring",
        }

    def test_blank_note_becomes_none(self):
        result = validate_sleep_record({
            "start_time": "2025-06-07T23:00",
            "end_time": "2025-06-08T07:00",
            "note": "   ",
        })
        assert result.cleaned["note"] is None

    def test_missing_fields(self):
        result = validate_sleep_record({})
        assert result.errors == ["Sleep start time is required", "Wake time is required"]

    def test_invalid_timestamp(self):
        result = validate_sleep_record({"start_time": "soon", "end_time": "2025-06-08T07:00"})
        assert result.errors == ["Sleep start time is not a valid date and time"]

    def test_equal_times_rejected(self):
        result = validate_sleep_record({
            "start_time": "2025-06-07T23:00",
            "end_time": "2025-06-07T23:00:00",
        })
        assert result.errors == [INTERVAL_ERROR]
