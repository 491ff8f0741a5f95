# tuition_api/client/cache.py
"""Session-scoped mirror of the API collections.

Everything is fetched once by ``load``; scoping and aggregation run locally.
Each mutation waits for the server round trip before the mirror changes,
then records an activity log entry.
"""
import logging
import random
from datetime import date
from typing import List, Optional
from uuid import UUID

from .api import APIError, TuitionAPIClient
from ..core.config import settings
from ..schemas.activity_log_schemas import ActivityLogCreate, ActivityLogOut
from ..schemas.auth_schemas import AdminIdentity
from ..schemas.base import utc_now
from ..schemas.branch_schemas import BranchCreate, BranchOut, BranchUpdate
from ..schemas.receipt_schemas import ReceiptCreate, ReceiptOut
from ..schemas.student_schemas import StudentCreate, StudentOut, StudentUpdate
from ..schemas.teacher_schemas import TeacherCreate, TeacherOut, TeacherUpdate
from ..utils.scoping import (
    ScopedData, can_manage_branches, can_manage_student, can_manage_teacher, scope
)
from ..utils.stats import DashboardStats, dashboard_stats

logger = logging.getLogger(__name__)


class ScopeViolation(Exception):
    """The acting admin may not perform this change"""


class RecordNotFound(LookupError):
    pass


def generate_receipt_number(prefix: str = None, today: Optional[date] = None, rng: random.Random = None) -> str:
    """``PREFIX-YYMMDD-NNNN`` with a random four-digit suffix"""
    prefix = prefix or settings.receipt_prefix
    today = today or date.today()
    suffix = (rng or random).randrange(9999)
    return f"{prefix}-{today:%y%m%d}-{suffix:04d}"


class DataCache:
    def __init__(self, api: TuitionAPIClient, log_limit: int = None):
        self.api = api
        self.log_limit = log_limit or settings.activity_log_limit
        self.students: List[StudentOut] = []
        self.teachers: List[TeacherOut] = []
        self.branches: List[BranchOut] = []
        self.activity_logs: List[ActivityLogOut] = []
        self.receipts: List[ReceiptOut] = []

    async def load(self):
        self.students = await self.api.list_students()
        self.teachers = await self.api.list_teachers()
        self.branches = await self.api.list_branches()
        self.activity_logs = await self.api.list_logs()
        try:
            self.receipts = await self.api.list_receipts()
        except APIError as e:
            logger.warning(f"Error fetching receipts: {e}")
            self.receipts = []

    # Views

    def scoped(self, admin: Optional[AdminIdentity]) -> ScopedData:
        return scope(admin, self.students, self.teachers, self.branches)

    def stats(self, admin: Optional[AdminIdentity]) -> DashboardStats:
        return dashboard_stats(self.scoped(admin))

    def student_receipts(self, student_id: str) -> List[ReceiptOut]:
        return [r for r in self.receipts if r.student_id == str(student_id)]

    def _find_student(self, student_id: UUID) -> StudentOut:
        for student in self.students:
            if student.id == student_id:
                return student
        raise RecordNotFound(f"Student not found: {student_id}")

    def _find_teacher(self, teacher_id: UUID) -> TeacherOut:
        for teacher in self.teachers:
            if teacher.id == teacher_id:
                return teacher
        raise RecordNotFound(f"Teacher not found: {teacher_id}")

    def _replace(self, items: list, updated) -> list:
        return [updated if item.id == updated.id else item for item in items]

    # Students

    async def add_student(self, admin: AdminIdentity, student: StudentCreate) -> StudentOut:
        if not can_manage_student(admin, student.branch):
            raise ScopeViolation("You can only add students to your assigned branch")

        branch = next((b for b in self.branches if b.name == student.branch), None)
        if branch is None:
            raise RecordNotFound(f"Branch not found: {student.branch}")

        student = student.model_copy(update={
            "branch_id": str(branch.id),
            "onboarded_by": admin.name,
        })
        saved = await self.api.create_student(student)
        self.students.insert(0, saved)
        await self.log_activity(admin, "Student Added", f"Added new student: {saved.name}")
        return saved

    async def update_student(self, admin: AdminIdentity, student_id: UUID, updates: StudentUpdate) -> StudentOut:
        student = self._find_student(student_id)
        if not can_manage_student(admin, student.branch):
            raise ScopeViolation("You can only edit students from your assigned branch")
        if updates.branch is not None and not can_manage_student(admin, updates.branch):
            raise ScopeViolation("You can only move students within your assigned branch")

        saved = await self.api.update_student(student_id, updates)
        self.students = self._replace(self.students, saved)
        await self.log_activity(admin, "Student Updated", f"Updated student with ID: {student_id}")
        return saved

    async def update_student_fees(self, admin: AdminIdentity, student_id: UUID, amount: float) -> StudentOut:
        student = self._find_student(student_id)
        if not can_manage_student(admin, student.branch):
            raise ScopeViolation("You can only update fees for students from your assigned branch")

        saved = await self.api.record_fee_payment(student_id, amount)
        self.students = self._replace(self.students, saved)
        await self.log_activity(admin, "Fee Payment", f"Payment of {amount:g} recorded for student ID: {student_id}")
        return saved

    # Teachers

    async def add_teacher(self, admin: AdminIdentity, teacher: TeacherCreate) -> TeacherOut:
        if not can_manage_teacher(admin, teacher.branches, creating=True):
            raise ScopeViolation("You can only add teachers to your assigned branch")

        teacher = teacher.model_copy(update={"onboarded_by": admin.name})
        saved = await self.api.create_teacher(teacher)
        self.teachers.insert(0, saved)
        await self.log_activity(admin, "Teacher Added", f"Added new teacher: {saved.name}")
        return saved

    async def update_teacher(self, admin: AdminIdentity, teacher_id: UUID, updates: TeacherUpdate) -> TeacherOut:
        teacher = self._find_teacher(teacher_id)
        if not can_manage_teacher(admin, teacher.branches):
            raise ScopeViolation("You can only edit teachers from your assigned branch")
        if updates.branches is not None and not can_manage_teacher(admin, updates.branches):
            raise ScopeViolation("You can only reassign teachers within your assigned branch")

        saved = await self.api.update_teacher(teacher_id, updates)
        self.teachers = self._replace(self.teachers, saved)
        await self.log_activity(admin, "Teacher Updated", f"Updated teacher: {saved.name}")
        return saved

    # Branches

    async def add_branch(self, admin: AdminIdentity, branch: BranchCreate) -> BranchOut:
        if not can_manage_branches(admin):
            raise ScopeViolation("Only Super Admins can add new branches")

        saved = await self.api.create_branch(branch)
        # Re-fetch so the joined admin summary is current
        self.branches = await self.api.list_branches()
        await self.log_activity(admin, "Branch Added", f"Added new branch: {saved.name}")
        return saved

    async def update_branch(self, admin: AdminIdentity, branch_id: UUID, updates: BranchUpdate) -> BranchOut:
        if not can_manage_branches(admin):
            raise ScopeViolation("Only Super Admins can update branches")

        saved = await self.api.update_branch(branch_id, updates)
        self.branches = await self.api.list_branches()
        if updates.name is not None:
            # A rename is propagated server-side to students and teachers
            self.students = await self.api.list_students()
            self.teachers = await self.api.list_teachers()
        await self.log_activity(admin, "Branch Updated", f"Updated branch with ID: {branch_id}")
        return saved

    # Receipts

    async def add_receipt(self, admin: AdminIdentity, receipt: ReceiptCreate) -> ReceiptOut:
        saved = await self.api.create_receipt(receipt)
        self.receipts.insert(0, saved)
        await self.log_activity(
            admin, "Receipt Generated",
            f"Generated receipt {saved.receipt_number} for student ID: {saved.student_id}",
        )
        return saved

    async def issue_receipt(self, admin: AdminIdentity, student_id: UUID, payment_method: str = "Multiple") -> ReceiptOut:
        """Reuse the student's existing receipt, or create one for the fees paid so far"""
        student = self._find_student(student_id)
        existing = self.student_receipts(str(student.id))
        if existing:
            return existing[0]

        receipt = ReceiptCreate(
            student_id=str(student.id),
            receipt_number=generate_receipt_number(),
            issue_date=utc_now(),
            total_amount=student.fees_paid,
            payment_method=payment_method,
        )
        return await self.add_receipt(admin, receipt)

    # Activity log

    async def log_activity(self, admin: Optional[AdminIdentity], action: str, details: str) -> Optional[ActivityLogOut]:
        if admin is None:
            return None
        entry = await self.api.create_log(ActivityLogCreate(action=action, admin_name=admin.name, details=details))
        self.activity_logs = [entry, *self.activity_logs][: self.log_limit]
        return entry
