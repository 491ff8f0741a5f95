# tuition_api/services/branch_service.py
"""Branches and their paired branch-admin credential rows.

A branch and its admin credential are always written in one transaction, so
a failure on the credential upsert leaves no half-created branch behind.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..core.security import CredentialCodec, credential_codec
from ..schemas.base import utc_now
from ..models.admin import BranchAdmin
from ..models.branch import Branch
from ..models.student import Student
from ..models.teacher import Teacher

logger = logging.getLogger(__name__)

ADMIN_SUMMARY_FIELDS = ("name", "email", "phone")


class BranchService(BaseService[Branch]):
    duplicate_field = ("Branch admin", "email")

    def __init__(self, db: AsyncSession, codec: CredentialCodec = credential_codec):
        super().__init__(Branch, db)
        self.codec = codec

    # Reads

    async def get_admin(self, branch_id: Any) -> Optional[BranchAdmin]:
        stmt = select(BranchAdmin).where(BranchAdmin.branch_id == str(branch_id))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_admins(self) -> List[Tuple[Branch, Optional[BranchAdmin]]]:
        branches = await self.get_multi(order_by="created_at", sort="asc")
        if not branches:
            return []

        stmt = select(BranchAdmin).where(BranchAdmin.branch_id.in_([str(b.id) for b in branches]))
        result = await self.db.execute(stmt)
        admins = {admin.branch_id: admin for admin in result.scalars().all()}
        return [(branch, admins.get(str(branch.id))) for branch in branches]

    async def get_with_admin(self, branch_id: UUID) -> Optional[Tuple[Branch, Optional[BranchAdmin]]]:
        branch = await self.get(branch_id)
        if not branch:
            return None
        return branch, await self.get_admin(branch.id)

    def to_response(self, branch: Branch, admin: Optional[BranchAdmin], include_password: bool) -> Dict[str, Any]:
        """Branch row joined with its credential row; secrets only on request"""
        data = {
            "id": branch.id,
            "name": branch.name,
            "address": branch.address,
            "phone": branch.phone,
            "manager": branch.manager,
            "capacity": branch.capacity,
            "current_students": branch.current_students,
            "status": branch.status,
            "established_date": branch.established_date,
            "admin": dict(branch.admin) if branch.admin else None,
            "created_at": branch.created_at,
            "updated_at": branch.updated_at,
        }
        if admin:
            data["admin"] = {
                "name": admin.name,
                "email": admin.email,
                "phone": admin.phone,
            }
            if include_password:
                data["admin"]["password"] = self.codec.decrypt(admin.password_encrypted)
        return data

    async def recover_admin_password(self, branch_id: UUID) -> Optional[Dict[str, str]]:
        """Administrative recovery of a branch admin's current password"""
        branch = await self.get(branch_id)
        if not branch:
            return None
        admin = await self.get_admin(branch.id)
        if not admin:
            return None
        logger.warning(f"Branch admin password recovered for branch {branch_id}")
        return {
            "branch_id": admin.branch_id,
            "email": admin.email,
            "password": self.codec.decrypt(admin.password_encrypted),
        }

    # Writes

    async def create_branch(self, obj_in: Dict[str, Any]) -> Tuple[Branch, Optional[BranchAdmin]]:
        data = dict(obj_in)
        admin_in = data.pop("admin", None) or {}

        data.setdefault("established_date", None)
        if data["established_date"] is None:
            data["established_date"] = utc_now()

        branch = Branch(**data)
        if admin_in:
            branch.admin = self._admin_summary({}, admin_in)
        self.db.add(branch)
        await self.flush()

        admin = None
        if admin_in.get("email") and admin_in.get("password"):
            admin = await self._upsert_admin(branch, admin_in)

        await self.commit()
        await self.db.refresh(branch)
        logger.info(f"Branch created: {branch.name} ({branch.id})")
        return branch, admin

    async def update_branch(self, branch_id: UUID, obj_in: Dict[str, Any]) -> Optional[Tuple[Branch, Optional[BranchAdmin]]]:
        branch = await self.get(branch_id)
        if not branch:
            return None

        data = dict(obj_in)
        admin_in = data.pop("admin", None)
        old_name = branch.name

        for key, value in data.items():
            setattr(branch, key, value)

        if branch.name != old_name:
            await self._propagate_rename(branch, old_name)

        if admin_in:
            branch.admin = self._admin_summary(branch.admin or {}, admin_in)
            admin = await self._upsert_admin(branch, admin_in)
        else:
            admin = await self.get_admin(branch.id)
            if admin and admin.branch_name != branch.name:
                admin.branch_name = branch.name

        await self.commit()
        await self.db.refresh(branch)
        return branch, admin

    @staticmethod
    def _admin_summary(current: Dict[str, Any], admin_in: Dict[str, Any]) -> Dict[str, Any]:
        summary = dict(current)
        for field in ADMIN_SUMMARY_FIELDS:
            if admin_in.get(field) is not None:
                summary[field] = admin_in[field]
        return summary

    async def _upsert_admin(self, branch: Branch, admin_in: Dict[str, Any]) -> Optional[BranchAdmin]:
        """Insert or overwrite the credential row keyed by branch id.

        Both encodings are recomputed only when a new password is supplied.
        """
        admin = await self.get_admin(branch.id)
        password = admin_in.get("password")

        if admin is None:
            if not (admin_in.get("email") and password):
                logger.warning(f"Branch {branch.id}: admin details without email/password, credential row not created")
                return None
            admin = BranchAdmin(branch_id=str(branch.id))
            self.db.add(admin)

        for field in ADMIN_SUMMARY_FIELDS:
            if admin_in.get(field) is not None:
                setattr(admin, field, admin_in[field])
        if not admin.name:
            admin.name = admin_in.get("email")

        if password:
            admin.password_hash = self.codec.hash(password)
            admin.password_encrypted = self.codec.encrypt(password)

        admin.role = "branch_admin"
        admin.branch_name = branch.name or admin_in.get("branch_name")
        await self.flush()
        return admin

    async def _propagate_rename(self, branch: Branch, old_name: str):
        """Branch links are by name; rewrite them in the same transaction"""
        await self.db.execute(
            update(Student).where(Student.branch == old_name).values(branch=branch.name)
        )

        result = await self.db.execute(select(Teacher))
        for teacher in result.scalars().all():
            if old_name in (teacher.branches or []):
                teacher.branches = [branch.name if b == old_name else b for b in teacher.branches]

        logger.info(f"Branch renamed: {old_name} -> {branch.name}")
