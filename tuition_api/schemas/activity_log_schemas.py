# tuition_api/schemas/activity_log_schemas.py
from typing import Optional
from datetime import datetime
from uuid import UUID
from pydantic import Field

from .base import CamelModel


class ActivityLogCreate(CamelModel):
    action: str = Field(..., min_length=1, max_length=100)
    admin_name: Optional[str] = Field(default=None, max_length=100)
    details: Optional[str] = None


class ActivityLogOut(ActivityLogCreate):
    id: UUID
    timestamp: datetime
