from deepsleep.models.sleep_record import SleepRecord

__all__ = [
    "SleepRecord",
]
