from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.database import get_db
from ..schemas.activity_log_schemas import ActivityLogCreate, ActivityLogOut
from ..services.activity_log_service import ActivityLogService

router = APIRouter(prefix="/api/logs", tags=["Activity Log"])

@router.get("", response_model=List[ActivityLogOut])
async def get_logs(
    limit: int = Query(settings.activity_log_limit, ge=1, le=settings.activity_log_limit),
    db: AsyncSession = Depends(get_db)
):
    """Most recent entries first"""
    service = ActivityLogService(db)
    return await service.list_recent(limit)

@router.post("", response_model=ActivityLogOut)
async def create_log(
    log_data: ActivityLogCreate,
    db: AsyncSession = Depends(get_db)
):
    """Append an entry; the collection is trimmed to the newest entries"""
    service = ActivityLogService(db)
    return await service.append(log_data.model_dump())
