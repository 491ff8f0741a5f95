# tuition_api/models/branch.py
from sqlalchemy import Column, String, Integer, DateTime, JSON
from .base import Base


class Branch(Base):
    __tablename__ = "branches"

    name = Column(String(100), nullable=False, index=True)
    address = Column(String(500))
    phone = Column(String(20))
    manager = Column(String(100))

    # Advisory counters, not derived from student rows
    capacity = Column(Integer, default=0)
    current_students = Column(Integer, default=0)

    status = Column(String(20), default="active", nullable=False)
    established_date = Column(DateTime)

    # Embedded admin summary {name, email, phone}; never holds secrets
    admin = Column(JSON, nullable=True)
