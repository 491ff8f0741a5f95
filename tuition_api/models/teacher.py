# tuition_api/models/teacher.py
from sqlalchemy import Column, String, Integer, Float, DateTime, JSON
from .base import Base


class Teacher(Base):
    __tablename__ = "teachers"

    name = Column(String(100), nullable=False, index=True)
    email = Column(String(100), index=True)
    phone = Column(String(20))

    subjects = Column(JSON, nullable=False, default=list)
    branches = Column(JSON, nullable=False, default=list)        # branch names
    qualifications = Column(JSON, nullable=False, default=list)

    experience = Column(Integer, default=0)
    salary = Column(Float, default=0)
    join_date = Column(DateTime, nullable=False)
    onboarded_by = Column(String(100))
    status = Column(String(20), default="active", nullable=False)
    class_type = Column(String(20), default="regular", nullable=False)
