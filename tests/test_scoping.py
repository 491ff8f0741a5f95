from datetime import datetime
from uuid import uuid4

import pytest

from tuition_api.schemas.auth_schemas import AdminIdentity
from tuition_api.schemas.branch_schemas import BranchOut
from tuition_api.schemas.student_schemas import StudentOut
from tuition_api.schemas.teacher_schemas import TeacherOut
from tuition_api.utils.scoping import (
    EMPTY, can_manage_branches, can_manage_student, can_manage_teacher,
    filter_branches, filter_students, filter_teachers, scope,
)
from tuition_api.utils.stats import dashboard_stats

LOGIN = datetime(2024, 3, 5, 9, 0)


def student(name, branch, monthly_fee=0, fees_paid=0, **extra):
    return StudentOut(
        id=uuid4(), name=name, email=f"{name.lower()}@v18tuition.com", branch=branch,
        monthly_fee=monthly_fee, fees_paid=fees_paid,
        fees_remaining=max(0, monthly_fee - fees_paid),
        registration_date=LOGIN, **extra,
    )


def teacher(name, branches, **extra):
    return TeacherOut(id=uuid4(), name=name, branches=branches, join_date=LOGIN, **extra)


def branch(name, **extra):
    return BranchOut(id=uuid4(), name=name, address=f"1 {name} Road", **extra)


@pytest.fixture
def data():
    return dict(
        students=[
            student("Asha", "North", 8000, 3000),
            student("Bilal", "South", 2000, 2000),
            student("Chen", "North", 1000, 0, status="inactive", class_type="vacation"),
        ],
        teachers=[
            teacher("Ravi", ["North", "South"]),
            teacher("Meera", ["South"]),
        ],
        branches=[branch("North"), branch("South", status="inactive")],
    )


@pytest.fixture
def super_admin():
    return AdminIdentity(id="1", name="Sarah", email="admin@v18tuition.com", role="super_admin", login_time=LOGIN)


@pytest.fixture
def north_admin():
    return AdminIdentity(
        id="2", name="North Admin", email="a@b.com", role="branch_admin", login_time=LOGIN,
        branch_id="b-1", branch_name="North",
    )


def test_super_admin_sees_everything(data, super_admin):
    scoped = scope(super_admin, **data)
    assert scoped.students == data["students"]
    assert scoped.teachers == data["teachers"]
    assert scoped.branches == data["branches"]


def test_branch_admin_sees_own_branch_only(data, north_admin):
    scoped = scope(north_admin, **data)
    assert [s.name for s in scoped.students] == ["Asha", "Chen"]
    assert [t.name for t in scoped.teachers] == ["Ravi"]
    assert [b.name for b in scoped.branches] == ["North"]


def test_no_identity_or_unknown_role_sees_nothing(data, north_admin):
    assert scope(None, **data) == EMPTY

    stranger = AdminIdentity.model_construct(id="3", name="X", email="x@v18tuition.com", role="teacher", login_time=LOGIN)
    assert scope(stranger, **data) == EMPTY

    unassigned = north_admin.model_copy(update={"branch_name": None})
    assert scope(unassigned, **data) == EMPTY


def test_scope_is_pure(data, north_admin):
    before = [s.name for s in data["students"]]
    assert scope(north_admin, **data) == scope(north_admin, **data)
    assert [s.name for s in data["students"]] == before


def test_mutation_guards(super_admin, north_admin):
    assert can_manage_branches(super_admin)
    assert not can_manage_branches(north_admin)
    assert not can_manage_branches(None)

    assert can_manage_student(super_admin, "South")
    assert can_manage_student(north_admin, "North")
    assert not can_manage_student(north_admin, "South")

    assert can_manage_teacher(north_admin, ["North"], creating=True)
    assert not can_manage_teacher(north_admin, ["North", "South"], creating=True)
    assert not can_manage_teacher(north_admin, [], creating=True)
    assert can_manage_teacher(north_admin, ["North", "South"])
    assert not can_manage_teacher(north_admin, ["South"])


def test_filters(data):
    students = data["students"]
    assert [s.name for s in filter_students(students, search="ASH")] == ["Asha"]
    assert [s.name for s in filter_students(students, search="v18tuition", status="inactive")] == ["Chen"]
    assert len(filter_students(students, status="all", branch="all", class_type="all")) == 3
    assert [s.name for s in filter_students(students, class_type="vacation")] == ["Chen"]

    assert [t.name for t in filter_teachers(data["teachers"], branch="North")] == ["Ravi"]
    assert [b.name for b in filter_branches(data["branches"], search="road", status="active")] == ["North"]


def test_dashboard_stats_for_super_admin(data, super_admin):
    stats = dashboard_stats(scope(super_admin, **data))
    assert stats.active_students == 2
    assert stats.active_teachers == 2
    assert stats.active_branches == 1
    assert stats.total_collected_fees == 5000
    assert stats.total_pending_fees == 6000
    assert stats.total_expected_revenue == 11000

    north = next(b for b in stats.branches if b.name == "North")
    assert north.student_count == 2
    assert north.collection_rate == pytest.approx(3000 / 9000 * 100)


def test_dashboard_stats_for_branch_admin(data, north_admin):
    stats = dashboard_stats(scope(north_admin, **data))
    assert stats.active_students == 1
    assert [b.name for b in stats.branches] == ["North"]
    assert stats.total_expected_revenue == 9000


def test_branch_without_fees_has_zero_collection_rate(super_admin):
    stats = dashboard_stats(scope(super_admin, [], [], [branch("Empty")]))
    assert stats.branches[0].collection_rate == 0
