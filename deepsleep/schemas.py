from typing import List, Optional
from pydantic import BaseModel

from deepsleep.models import SleepRecord
from deepsleep.services.aggregation import DailyAggregate
from deepsleep.services.timestamps import isoformat_utc


class SleepRecordPayload(BaseModel):
    startTime: str
    endTime: str
    note: Optional[str] = None

    def as_form_data(self) -> dict:
        return {"start_time": self.startTime, "end_time": self.endTime, "note": self.note}


class SleepRecordOut(BaseModel):
    id: int
    startTime: str
    endTime: str
    note: Optional[str] = None
    createdAt: str

    @classmethod
    def from_record(cls, record: SleepRecord) -> "SleepRecordOut":
        return cls(
            id=record.id,
            startTime=isoformat_utc(record.start_time),
            endTime=isoformat_utc(record.end_time),
            note=record.note,
            createdAt=isoformat_utc(record.created_at),
        )


class DeletedOut(BaseModel):
    deleted: bool = True


class DailyValueOut(BaseModel):
    day: str
    label: str
    hours: float

    @classmethod
    def from_aggregate(cls, item: DailyAggregate) -> "DailyValueOut":
        return cls(day=item.day.isoformat(), label=item.label, hours=item.value)


class DailyStatsOut(BaseModel):
    timezone: str
    totals: List[DailyValueOut]
    averages: List[DailyValueOut]
