# tuition_api/services/admin_service.py
"""Super-admin and branch-admin authentication."""
import hmac
import logging
from typing import Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..core.security import CredentialCodec, credential_codec
from ..models.admin import BranchAdmin, SuperAdmin

logger = logging.getLogger(__name__)


class SuperAdminService(BaseService[SuperAdmin]):
    duplicate_field = ("Super admin", "email")

    def __init__(self, db: AsyncSession):
        super().__init__(SuperAdmin, db)

    async def get_by_email(self, email: str) -> Optional[SuperAdmin]:
        stmt = select(self.model).where(self.model.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> Optional[SuperAdmin]:
        """Plain-text comparison; super-admin passwords are stored unhashed"""
        admin = await self.get_by_email(email)
        if not admin:
            return None
        if not hmac.compare_digest(admin.password.encode("utf-8"), password.encode("utf-8")):
            return None
        return admin

    async def seed(self, admins: List[Dict[str, str]]) -> List[str]:
        """Create the given super-admins, skipping emails that already exist"""
        created = []
        for data in admins:
            if await self.get_by_email(data["email"]):
                logger.info(f"Super admin already exists: {data['email']}")
                continue
            await self.create({**data, "role": "super_admin"})
            logger.info(f"Created super admin: {data['email']}")
            created.append(data["email"])
        return created


class BranchAdminService(BaseService[BranchAdmin]):
    duplicate_field = ("Branch admin", "email")

    def __init__(self, db: AsyncSession, codec: CredentialCodec = credential_codec):
        super().__init__(BranchAdmin, db)
        self.codec = codec

    async def get_by_email(self, email: str) -> Optional[BranchAdmin]:
        stmt = select(self.model).where(self.model.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> Optional[BranchAdmin]:
        admin = await self.get_by_email(email)
        if not admin:
            return None
        if not self.codec.verify(password, admin.password_hash):
            return None
        return admin
