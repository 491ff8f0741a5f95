# tuition_api/schemas/auth_schemas.py
from typing import Literal, Optional
from datetime import datetime
from uuid import UUID
from pydantic import Field

from .base import CamelModel

SUPER_ADMIN = "super_admin"
BRANCH_ADMIN = "branch_admin"


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)


class SuperAdminOut(CamelModel):
    id: UUID
    name: str
    email: str
    role: str


class BranchAdminOut(CamelModel):
    """Branch admin fields minus both secret encodings"""
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    role: str
    branch_id: str
    branch_name: str


class AdminIdentity(CamelModel):
    """Identity of the logged-in admin as held by the client session"""
    id: str
    name: str
    email: str
    role: Literal["super_admin", "branch_admin"]
    login_time: datetime
    branch_id: Optional[str] = None
    branch_name: Optional[str] = None

    @property
    def is_super_admin(self) -> bool:
        return self.role == SUPER_ADMIN

    @property
    def is_branch_admin(self) -> bool:
        return self.role == BRANCH_ADMIN
