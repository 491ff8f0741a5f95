# tuition_api/services/receipt_service.py
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..models.receipt import Receipt


class ReceiptService(BaseService[Receipt]):
    # Receipt numbers are generated client-side; a collision is reported, not retried
    duplicate_field = ("Receipt", "receipt_number")

    def __init__(self, db: AsyncSession):
        super().__init__(Receipt, db)

    async def list_receipts(self, student_id: Optional[str] = None) -> List[Receipt]:
        return await self.get_multi(order_by="issue_date", sort="desc", student_id=student_id)
