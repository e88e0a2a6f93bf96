#!/usr/bin/env python3
"""
Seed script to create a week of demo sleep records.

Usage:
    python scripts/seed_records.py            # adds records if the table is empty
    python scripts/seed_records.py --force    # adds records regardless
"""
import os
import sys
from datetime import datetime, timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from deepsleep.database import SessionLocal, init_db
from deepsleep.services.records import create_record, list_records


# (bedtime offset from midnight in minutes, hours slept, note)
NIGHTS = [
    (-60, 7.5, None),
    (-30, 6.0, "Woke up twice"),
    (-90, 8.25, None),
    (15, 5.5, "Late night, coffee after 6pm"),
    (-45, 7.0, None),
    (-120, 9.0, "Weekend"),
    (-15, 6.75, "Snoring"),
]


def seed_records(force: bool = False):
    """Create one record per night for the last week."""
    init_db()
    db = SessionLocal()
    try:
        if list_records(db) and not force:
            print("Records already present, skipping (use --force to add anyway)")
            return

        today = datetime.utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
        for days_ago, (offset, hours, note) in zip(range(len(NIGHTS), 0, -1), NIGHTS):
            start = today - timedelta(days=days_ago) + timedelta(minutes=offset)
            end = start + timedelta(hours=hours)
            record = create_record(db, start, end, note)
            print(f"  created #{record.id}: {start:%Y-%m-%d %H:%M} -> {end:%H:%M}")
    finally:
        db.close()


if __name__ == "__main__":
    seed_records(force="--force" in sys.argv)
