# tuition_api/models/receipt.py
from sqlalchemy import Column, String, Float, DateTime
from .base import Base


class Receipt(Base):
    __tablename__ = "receipts"

    student_id = Column(String(36), nullable=False, index=True)
    receipt_number = Column(String(50), nullable=False, unique=True, index=True)
    issue_date = Column(DateTime, nullable=False)
    total_amount = Column(Float, nullable=False)
    payment_method = Column(String(50), nullable=False)
