# tuition_api/models/activity_log.py
from sqlalchemy import Column, String, Text, DateTime
from .base import Base


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    action = Column(String(100), nullable=False)     # e.g. "Student Added", "Fee Payment"
    admin_name = Column(String(100))
    details = Column(Text)
    timestamp = Column(DateTime, nullable=False, index=True)
