from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import NotFoundError
from ..schemas.teacher_schemas import TeacherCreate, TeacherOut, TeacherUpdate
from ..services.teacher_service import TeacherService

router = APIRouter(prefix="/api/teachers", tags=["Teacher Management"])

@router.get("", response_model=List[TeacherOut])
async def get_teachers(
    branch: Optional[str] = Query(None, description="Only teachers assigned to this branch"),
    db: AsyncSession = Depends(get_db)
):
    service = TeacherService(db)
    return await service.list_teachers(branch=branch)

@router.post("", response_model=TeacherOut)
async def create_teacher(
    teacher_data: TeacherCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create new teacher; join date is stamped by the server"""
    service = TeacherService(db)
    return await service.create(teacher_data.model_dump())

@router.put("/{teacher_id}", response_model=TeacherOut)
async def update_teacher(
    teacher_id: UUID,
    teacher_data: TeacherUpdate,
    db: AsyncSession = Depends(get_db)
):
    service = TeacherService(db)
    teacher = await service.update(teacher_id, teacher_data.model_dump(exclude_unset=True))
    if not teacher:
        raise NotFoundError("Teacher")
    return teacher
