"""
Sleep Records API

JSON CRUD over sleep records plus the daily statistics used by the charts.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from deepsleep.database import get_db
from deepsleep.schemas import (
    DailyStatsOut,
    DailyValueOut,
    DeletedOut,
    SleepRecordOut,
    SleepRecordPayload,
)
from deepsleep.services.aggregation import averages_by_day, totals_by_day
from deepsleep.services.records import (
    create_record,
    delete_record,
    list_records,
    update_record,
)
from deepsleep.services.validators import validate_sleep_record
from deepsleep.template_config import resolve_tz

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/records", tags=["records"])


def _validated(payload: SleepRecordPayload) -> dict:
    """Validate a request body; 422 before any store call on failure."""
    result = validate_sleep_record(payload.as_form_data())
    if not result.is_valid:
        raise HTTPException(status_code=422, detail="; ".join(result.errors))
    return result.cleaned


@router.get("", response_model=List[SleepRecordOut])
async def get_records(db: Session = Depends(get_db)):
    """All records, newest first."""
    return [SleepRecordOut.from_record(r) for r in list_records(db)]


@router.get("/stats", response_model=DailyStatsOut)
async def get_daily_stats(
    tz: str = Query(None, description="IANA timezone used to bucket records by day"),
    db: Session = Depends(get_db),
):
    """Daily total and average sleep hours, oldest day first."""
    try:
        zone = resolve_tz(tz)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    records = list_records(db)
    return DailyStatsOut(
        timezone=zone.key,
        totals=[DailyValueOut.from_aggregate(item) for item in totals_by_day(records, zone)],
        averages=[DailyValueOut.from_aggregate(item) for item in averages_by_day(records, zone)],
    )


@router.post("", response_model=SleepRecordOut)
async def post_record(payload: SleepRecordPayload, db: Session = Depends(get_db)):
    data = _validated(payload)
    record = create_record(db, data["start_time"], data["end_time"], data["note"])
    return SleepRecordOut.from_record(record)


@router.put("/{record_id}", response_model=SleepRecordOut)
async def put_record(
    record_id: int, payload: SleepRecordPayload, db: Session = Depends(get_db)
):
    data = _validated(payload)
    record = update_record(db, record_id, data["start_time"], data["end_time"], data["note"])
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return SleepRecordOut.from_record(record)


@router.delete("/{record_id}", response_model=DeletedOut)
async def remove_record(record_id: int, db: Session = Depends(get_db)):
    if not delete_record(db, record_id):
        raise HTTPException(status_code=404, detail="Record not found")
    return DeletedOut(deleted=True)
