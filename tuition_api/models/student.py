# tuition_api/models/student.py
from sqlalchemy import Column, String, Float, DateTime, JSON, CheckConstraint, Index
from .base import Base


class Student(Base):
    __tablename__ = "students"

    # Basic Information
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(100), index=True)
    phone = Column(String(20))
    grade = Column(String(20))
    subjects = Column(JSON, nullable=False, default=list)

    # Branch link is by name; branch_id is kept when the client knows it
    branch = Column(String(100), nullable=False, index=True)
    branch_id = Column(String(36), nullable=True)

    # Fees
    monthly_fee = Column(Float, nullable=False, default=0)
    fees_paid = Column(Float, nullable=False, default=0)
    fees_remaining = Column(Float, nullable=False, default=0)
    initial_payment = Column(Float, nullable=False, default=0)
    additional_payment = Column(Float, nullable=False, default=0)

    registration_date = Column(DateTime, nullable=False)
    onboarded_by = Column(String(100))
    status = Column(String(20), default="active", nullable=False)
    class_type = Column(String(20), default="regular", nullable=False)

    __table_args__ = (
        CheckConstraint('fees_remaining >= 0', name='ck_student_fees_remaining_positive'),
        Index('idx_student_branch_status', 'branch', 'status'),
    )
