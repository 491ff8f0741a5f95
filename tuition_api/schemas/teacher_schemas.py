# tuition_api/schemas/teacher_schemas.py
from typing import List, Literal, Optional
from datetime import datetime
from uuid import UUID
from pydantic import Field

from .base import CamelModel, reject_null


class TeacherBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    subjects: List[str] = Field(default_factory=list)
    branches: List[str] = Field(default_factory=list, description="Branch names")
    qualifications: List[str] = Field(default_factory=list)
    experience: int = Field(default=0, ge=0)
    salary: float = Field(default=0, ge=0)
    onboarded_by: Optional[str] = Field(default=None, max_length=100)
    status: Literal["active", "inactive"] = "active"
    class_type: Literal["regular", "vacation"] = "regular"


class TeacherCreate(TeacherBase):
    pass


class TeacherUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    subjects: Optional[List[str]] = None
    branches: Optional[List[str]] = None
    qualifications: Optional[List[str]] = None
    experience: Optional[int] = Field(default=None, ge=0)
    salary: Optional[float] = Field(default=None, ge=0)
    onboarded_by: Optional[str] = Field(default=None, max_length=100)
    status: Optional[Literal["active", "inactive"]] = None
    class_type: Optional[Literal["regular", "vacation"]] = None

    no_nulls = reject_null("name", "subjects", "branches", "qualifications", "status", "class_type")


class TeacherOut(TeacherBase):
    id: UUID
    join_date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
