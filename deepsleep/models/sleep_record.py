from datetime import datetime
from sqlalchemy import Column, Integer, Text, DateTime
from deepsleep.database import Base


class SleepRecord(Base):
    __tablename__ = "sleep_records"

    id = Column(Integer, primary_key=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)

    def replace(self, start_time: datetime, end_time: datetime, note: str = None):
        """Overwrite the editable fields in one go."""
        self.start_time = start_time
        self.end_time = end_time
        self.note = note
        return self

    def __repr__(self):
        return f"<SleepRecord {self.id}>"
