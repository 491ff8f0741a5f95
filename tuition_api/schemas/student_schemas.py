# tuition_api/schemas/student_schemas.py
"""Pydantic schemas for Student entity."""
from typing import List, Literal, Optional
from datetime import datetime
from uuid import UUID
from pydantic import Field

from .base import CamelModel, reject_null

StudentStatus = Literal["active", "inactive"]
ClassType = Literal["regular", "vacation"]


class StudentBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, description="Student name")
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    grade: Optional[str] = Field(default=None, max_length=20)
    subjects: List[str] = Field(default_factory=list)
    branch: str = Field(..., min_length=1, max_length=100, description="Branch name")
    branch_id: Optional[str] = Field(default=None, max_length=36)

    monthly_fee: float = Field(default=0, ge=0)
    fees_paid: float = Field(default=0, ge=0)
    initial_payment: float = Field(default=0, ge=0)
    additional_payment: float = Field(default=0, ge=0)

    onboarded_by: Optional[str] = Field(default=None, max_length=100)
    status: StudentStatus = "active"
    class_type: ClassType = "regular"


class StudentCreate(StudentBase):
    """id, registrationDate and feesRemaining are server-assigned"""
    pass


class StudentUpdate(CamelModel):
    """Schema for updating student - all fields optional"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    grade: Optional[str] = Field(default=None, max_length=20)
    subjects: Optional[List[str]] = None
    branch: Optional[str] = Field(default=None, min_length=1, max_length=100)
    branch_id: Optional[str] = Field(default=None, max_length=36)
    monthly_fee: Optional[float] = Field(default=None, ge=0)
    fees_paid: Optional[float] = Field(default=None, ge=0)
    fees_remaining: Optional[float] = Field(default=None, ge=0)
    initial_payment: Optional[float] = Field(default=None, ge=0)
    additional_payment: Optional[float] = Field(default=None, ge=0)
    onboarded_by: Optional[str] = Field(default=None, max_length=100)
    status: Optional[StudentStatus] = None
    class_type: Optional[ClassType] = None

    no_nulls = reject_null(
        "name", "subjects", "branch", "monthly_fee", "fees_paid",
        "initial_payment", "additional_payment", "status", "class_type",
    )


class FeePayment(CamelModel):
    amount: float = Field(..., gt=0, description="Amount received")


class StudentOut(StudentBase):
    id: UUID
    fees_remaining: float
    registration_date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
