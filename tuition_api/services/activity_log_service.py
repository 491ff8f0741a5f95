# tuition_api/services/activity_log_service.py
import logging
from typing import Any, Dict, List
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..core.config import settings
from ..schemas.base import utc_now
from ..models.activity_log import ActivityLog

logger = logging.getLogger(__name__)


class ActivityLogService(BaseService[ActivityLog]):
    def __init__(self, db: AsyncSession, limit: int = None):
        super().__init__(ActivityLog, db)
        self.limit = limit or settings.activity_log_limit

    async def list_recent(self, limit: int = None) -> List[ActivityLog]:
        return await self.get_multi(limit=limit or self.limit, order_by="timestamp", sort="desc")

    async def append(self, obj_in: Dict[str, Any]) -> ActivityLog:
        """Insert an entry, then evict the oldest rows beyond the cap in one batch"""
        log = ActivityLog(**obj_in, timestamp=utc_now())
        self.db.add(log)
        await self.flush()

        excess = await self.get_total_count() - self.limit
        if excess > 0:
            stmt = (
                select(ActivityLog.id)
                .order_by(ActivityLog.timestamp.asc(), ActivityLog.created_at.asc())
                .limit(excess)
            )
            stale_ids = list((await self.db.execute(stmt)).scalars().all())
            await self.db.execute(
                delete(ActivityLog).where(ActivityLog.id.in_(stale_ids)).execution_options(synchronize_session=False)
            )
            logger.debug(f"Evicted {len(stale_ids)} activity log entries")

        await self.commit()
        await self.db.refresh(log)
        return log
