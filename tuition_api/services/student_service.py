# tuition_api/services/student_service.py
import logging
from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..schemas.base import utc_now
from ..models.student import Student

logger = logging.getLogger(__name__)

FEE_FIELDS = ("monthly_fee", "fees_paid", "fees_remaining")


def remaining_fees(monthly_fee: float, fees_paid: float) -> float:
    """Outstanding balance, never negative"""
    return max(0.0, (monthly_fee or 0) - (fees_paid or 0))


class StudentService(BaseService[Student]):
    def __init__(self, db: AsyncSession):
        super().__init__(Student, db)

    async def list_students(self, branch: Optional[str] = None) -> List[Student]:
        return await self.get_multi(order_by="created_at", sort="desc", branch=branch)

    async def create(self, obj_in: Dict[str, Any]) -> Student:
        """Stamp registration date and derive the outstanding balance"""
        data = dict(obj_in)
        data.pop("fees_remaining", None)
        data["registration_date"] = utc_now()
        data["fees_remaining"] = remaining_fees(data.get("monthly_fee", 0), data.get("fees_paid", 0))
        student = await super().create(data)
        logger.info(f"Student created: {student.id} ({student.branch})")
        return student

    async def update(self, id: UUID, obj_in: Dict[str, Any]) -> Optional[Student]:
        student = await self.get(id)
        if not student:
            return None

        for key, value in obj_in.items():
            if key != "fees_remaining":
                setattr(student, key, value)

        # Any fee-related change recomputes the balance from its sources
        if any(field in obj_in for field in FEE_FIELDS):
            student.fees_remaining = remaining_fees(student.monthly_fee, student.fees_paid)

        await self.commit()
        await self.db.refresh(student)
        return student

    async def record_fee_payment(self, id: UUID, amount: float) -> Optional[Student]:
        """Add a payment to fees_paid and recompute fees_remaining"""
        student = await self.get(id)
        if not student:
            return None

        student.fees_paid = (student.fees_paid or 0) + amount
        student.fees_remaining = remaining_fees(student.monthly_fee, student.fees_paid)
        await self.commit()
        await self.db.refresh(student)
        logger.info(f"Fee payment of {amount} recorded for student {id}")
        return student
