# tuition_api/services/teacher_service.py
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..schemas.base import utc_now
from ..models.teacher import Teacher


class TeacherService(BaseService[Teacher]):
    def __init__(self, db: AsyncSession):
        super().__init__(Teacher, db)

    async def list_teachers(self, branch: Optional[str] = None) -> List[Teacher]:
        teachers = await self.get_multi(order_by="created_at", sort="desc")
        if branch:
            # branches is a JSON list; filter in Python to stay backend-neutral
            teachers = [t for t in teachers if branch in (t.branches or [])]
        return teachers

    async def create(self, obj_in: Dict[str, Any]) -> Teacher:
        data = dict(obj_in)
        data["join_date"] = utc_now()
        return await super().create(data)
