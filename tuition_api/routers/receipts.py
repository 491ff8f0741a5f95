from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.receipt_schemas import ReceiptCreate, ReceiptOut
from ..services.receipt_service import ReceiptService

router = APIRouter(prefix="/api/receipts", tags=["Receipts"])

@router.get("", response_model=List[ReceiptOut])
async def get_receipts(
    student_id: Optional[str] = Query(None, alias="studentId"),
    db: AsyncSession = Depends(get_db)
):
    service = ReceiptService(db)
    return await service.list_receipts(student_id=student_id)

@router.post("", response_model=ReceiptOut)
async def create_receipt(
    receipt_data: ReceiptCreate,
    db: AsyncSession = Depends(get_db)
):
    service = ReceiptService(db)
    return await service.create(receipt_data.model_dump())
