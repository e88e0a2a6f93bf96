"""
Record Store Service

Create / list / update / delete for sleep records. Each call is one ORM
operation followed by a single commit. Callers validate input first; nothing
here checks that the end time follows the start time.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from deepsleep.models import SleepRecord

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """A write or read against the record table failed."""


def _commit(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Failed to {action} sleep record")
        raise RecordStoreError(f"Failed to {action} sleep record") from e


def list_records(db: Session) -> List[SleepRecord]:
    """All records, newest first."""
    try:
        return (
            db.query(SleepRecord)
            .order_by(SleepRecord.created_at.desc(), SleepRecord.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Failed to list sleep records")
        raise RecordStoreError("Failed to list sleep records") from e


def get_record(db: Session, record_id: int) -> Optional[SleepRecord]:
    return db.query(SleepRecord).filter(SleepRecord.id == record_id).first()


def create_record(
    db: Session, start_time: datetime, end_time: datetime, note: Optional[str] = None
) -> SleepRecord:
    """Insert a record and return it with its store-assigned id and created_at."""
    record = SleepRecord(start_time=start_time, end_time=end_time, note=note)
    db.add(record)
    _commit(db, "create")
    db.refresh(record)
    logger.info(f"Created sleep record {record.id}")
    return record


def update_record(
    db: Session,
    record_id: int,
    start_time: datetime,
    end_time: datetime,
    note: Optional[str] = None,
) -> Optional[SleepRecord]:
    """Replace start/end/note on an existing record. Returns None if missing."""
    record = get_record(db, record_id)
    if not record:
        logger.warning(f"Update requested for missing sleep record {record_id}")
        return None

    record.replace(start_time, end_time, note)
    _commit(db, "update")
    db.refresh(record)
    logger.info(f"Updated sleep record {record.id}")
    return record


def delete_record(db: Session, record_id: int) -> bool:
    """Delete a record. Returns False if it did not exist."""
    record = get_record(db, record_id)
    if not record:
        logger.warning(f"Delete requested for missing sleep record {record_id}")
        return False

    db.delete(record)
    _commit(db, "delete")
    logger.info(f"Deleted sleep record {record_id}")
    return True
