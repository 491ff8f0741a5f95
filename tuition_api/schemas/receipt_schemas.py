# tuition_api/schemas/receipt_schemas.py
from typing import Optional
from datetime import datetime
from uuid import UUID
from pydantic import Field

from .base import CamelModel


class ReceiptCreate(CamelModel):
    student_id: str = Field(..., min_length=1, max_length=36)
    receipt_number: str = Field(..., min_length=1, max_length=50)
    issue_date: datetime
    total_amount: float = Field(..., ge=0)
    payment_method: str = Field(..., min_length=1, max_length=50)


class ReceiptOut(ReceiptCreate):
    id: UUID
    created_at: Optional[datetime] = None
