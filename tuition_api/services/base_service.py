# tuition_api/services/base_service.py
"""Base service with common CRUD operations."""
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Type, Any, Dict, Optional, List, TypeVar, Generic

from ..core.exceptions import DatabaseError, DuplicateRecordError, InvalidRecordError

logger = logging.getLogger(__name__)

# Define generic type
T = TypeVar('T')

# SQLSTATE for unique_violation on PostgreSQL
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    orig = error.orig
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION or getattr(orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    # SQLite: "UNIQUE constraint failed: ..."
    return "unique" in str(orig).lower()


class BaseService(Generic[T]):
    # (resource, field) reported when a unique constraint trips on commit
    duplicate_field = ("Record", "id")

    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def get(self, id: Any) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_multi(self, skip: int = 0, limit: Optional[int] = None, order_by: str = None, sort: str = "asc", **filters) -> List[T]:
        stmt = select(self.model)

        for key, value in filters.items():
            if hasattr(self.model, key) and value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            stmt = stmt.order_by(order_field.desc() if sort.lower() == "desc" else order_field.asc())

        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, obj_in: Dict) -> T:
        obj = self.model(**obj_in)
        self.db.add(obj)
        await self.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, id: Any, obj_in: Dict) -> Optional[T]:
        obj = await self.get(id)
        if not obj:
            return None
        for key, value in obj_in.items():
            setattr(obj, key, value)
        await self.commit()
        await self.db.refresh(obj)
        return obj

    async def commit(self):
        """Commit the unit of work; roll everything back on failure."""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise self._integrity_error(e)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Commit failed on {self.model.__name__}: {e}")
            raise DatabaseError()

    async def flush(self):
        """Flush pending rows so generated ids exist; same error mapping as commit."""
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise self._integrity_error(e)

    def _integrity_error(self, error: IntegrityError) -> Exception:
        """Unique collisions become 409; NOT NULL and CHECK failures become 400"""
        logger.warning(f"Integrity error on {self.model.__name__}: {error.orig}")
        if is_unique_violation(error):
            resource, field = self.duplicate_field
            return DuplicateRecordError(resource, field)
        return InvalidRecordError(self.model.__name__)

    async def get_total_count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        result = await self.db.execute(stmt)
        return result.scalar()
