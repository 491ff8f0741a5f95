# tuition_api/schemas/branch_schemas.py
"""Pydantic schemas for Branch entity and its paired admin credential."""
from typing import Literal, Optional
from datetime import datetime
from uuid import UUID
from pydantic import EmailStr, Field

from .base import CamelModel, reject_null


class BranchAdminInput(CamelModel):
    """Admin sub-object carried on branch create/update"""
    name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    password: Optional[str] = Field(default=None, min_length=1, max_length=128)
    branch_name: Optional[str] = Field(default=None, max_length=100)


class BranchBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(default=None, max_length=500)
    phone: Optional[str] = Field(default=None, max_length=20)
    manager: Optional[str] = Field(default=None, max_length=100)
    capacity: int = Field(default=0, ge=0)
    current_students: int = Field(default=0, ge=0)
    status: Literal["active", "inactive"] = "active"
    established_date: Optional[datetime] = None


class BranchCreate(BranchBase):
    admin: Optional[BranchAdminInput] = None


class BranchUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    address: Optional[str] = Field(default=None, max_length=500)
    phone: Optional[str] = Field(default=None, max_length=20)
    manager: Optional[str] = Field(default=None, max_length=100)
    capacity: Optional[int] = Field(default=None, ge=0)
    current_students: Optional[int] = Field(default=None, ge=0)
    status: Optional[Literal["active", "inactive"]] = None
    established_date: Optional[datetime] = None
    admin: Optional[BranchAdminInput] = None

    no_nulls = reject_null("name", "status")


class BranchAdminSummary(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None


class BranchOut(BranchBase):
    id: UUID
    admin: Optional[BranchAdminSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BranchUpdateResponse(CamelModel):
    message: str
    branch: BranchOut


class BranchAdminCredentials(CamelModel):
    branch_id: str
    email: str
    password: str
