# tuition_api/utils/scoping.py
"""Role-scoped views over already-fetched collections.

The acting admin is always passed in explicitly. These are pure filters:
they never mutate their inputs and return the same result for the same
arguments.
"""
from typing import Iterable, List, NamedTuple, Optional, Sequence

from ..schemas.auth_schemas import AdminIdentity
from ..schemas.branch_schemas import BranchOut
from ..schemas.student_schemas import StudentOut
from ..schemas.teacher_schemas import TeacherOut


class ScopedData(NamedTuple):
    students: List[StudentOut]
    teachers: List[TeacherOut]
    branches: List[BranchOut]


EMPTY = ScopedData([], [], [])


def scope(
    admin: Optional[AdminIdentity],
    students: Sequence[StudentOut],
    teachers: Sequence[TeacherOut],
    branches: Sequence[BranchOut],
) -> ScopedData:
    """Restrict the collections to the rows ``admin`` may see."""
    if admin is None:
        return EMPTY
    if admin.is_super_admin:
        return ScopedData(list(students), list(teachers), list(branches))
    if admin.is_branch_admin and admin.branch_name:
        name = admin.branch_name
        return ScopedData(
            students=[s for s in students if s.branch == name],
            teachers=[t for t in teachers if name in t.branches],
            branches=[b for b in branches if b.name == name],
        )
    return EMPTY


# Mutation guards

def can_manage_branches(admin: Optional[AdminIdentity]) -> bool:
    return admin is not None and admin.is_super_admin


def can_manage_student(admin: Optional[AdminIdentity], branch: Optional[str]) -> bool:
    """Branch admins may only touch students of their own branch"""
    if admin is None:
        return False
    if admin.is_super_admin:
        return True
    return admin.is_branch_admin and bool(admin.branch_name) and branch == admin.branch_name


def can_manage_teacher(admin: Optional[AdminIdentity], branches: Iterable[str], creating: bool = False) -> bool:
    """Creation needs every listed branch to be the admin's; edits need membership"""
    if admin is None:
        return False
    if admin.is_super_admin:
        return True
    if not (admin.is_branch_admin and admin.branch_name):
        return False
    branches = list(branches)
    if creating:
        return bool(branches) and all(b == admin.branch_name for b in branches)
    return admin.branch_name in branches


# Search filters

def _matches(term: Optional[str], *values: Optional[str]) -> bool:
    if not term:
        return True
    term = term.lower()
    return any(term in (value or "").lower() for value in values)


def _selected(choice: Optional[str], value: Optional[str]) -> bool:
    return choice in (None, "", "all") or value == choice


def filter_students(
    students: Sequence[StudentOut],
    search: Optional[str] = None,
    status: Optional[str] = None,
    branch: Optional[str] = None,
    class_type: Optional[str] = None,
) -> List[StudentOut]:
    return [
        s for s in students
        if _matches(search, s.name, s.email)
        and _selected(status, s.status)
        and _selected(branch, s.branch)
        and _selected(class_type, s.class_type)
    ]


def filter_teachers(
    teachers: Sequence[TeacherOut],
    search: Optional[str] = None,
    status: Optional[str] = None,
    branch: Optional[str] = None,
    class_type: Optional[str] = None,
) -> List[TeacherOut]:
    return [
        t for t in teachers
        if _matches(search, t.name, t.email)
        and _selected(status, t.status)
        and (branch in (None, "", "all") or branch in t.branches)
        and _selected(class_type, t.class_type)
    ]


def filter_branches(
    branches: Sequence[BranchOut],
    search: Optional[str] = None,
    status: Optional[str] = None,
) -> List[BranchOut]:
    return [
        b for b in branches
        if _matches(search, b.name, b.address) and _selected(status, b.status)
    ]
