from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import NotFoundError
from ..schemas.student_schemas import FeePayment, StudentCreate, StudentOut, StudentUpdate
from ..services.student_service import StudentService

router = APIRouter(prefix="/api/students", tags=["Student Management"])

@router.get("", response_model=List[StudentOut])
async def get_students(
    branch: Optional[str] = Query(None, description="Only students of this branch"),
    db: AsyncSession = Depends(get_db)
):
    """All students, newest first"""
    service = StudentService(db)
    return await service.list_students(branch=branch)

@router.post("", response_model=StudentOut)
async def create_student(
    student_data: StudentCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create new student; registration date is stamped by the server"""
    service = StudentService(db)
    return await service.create(student_data.model_dump())

@router.get("/{student_id}", response_model=StudentOut)
async def get_student(
    student_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    service = StudentService(db)
    student = await service.get(student_id)
    if not student:
        raise NotFoundError("Student")
    return student

@router.put("/{student_id}", response_model=StudentOut)
async def update_student(
    student_id: UUID,
    student_data: StudentUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Partial update; fee balance is recomputed when fee fields change"""
    service = StudentService(db)
    student = await service.update(student_id, student_data.model_dump(exclude_unset=True))
    if not student:
        raise NotFoundError("Student")
    return student

@router.post("/{student_id}/fees", response_model=StudentOut)
async def record_fee_payment(
    student_id: UUID,
    payment: FeePayment,
    db: AsyncSession = Depends(get_db)
):
    service = StudentService(db)
    student = await service.record_fee_payment(student_id, payment.amount)
    if not student:
        raise NotFoundError("Student")
    return student
