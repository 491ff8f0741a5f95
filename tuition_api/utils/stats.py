# tuition_api/utils/stats.py
"""Dashboard aggregates computed over a scoped view."""
from typing import List
from pydantic import BaseModel

from .scoping import ScopedData


class BranchFeeStats(BaseModel):
    branch_id: str
    name: str
    student_count: int
    collected_fees: float
    pending_fees: float
    total_fees: float
    collection_rate: float  # percent


class DashboardStats(BaseModel):
    active_students: int
    active_teachers: int
    active_branches: int
    total_collected_fees: float
    total_pending_fees: float
    total_expected_revenue: float
    branches: List[BranchFeeStats]


def dashboard_stats(data: ScopedData) -> DashboardStats:
    per_branch = []
    for branch in data.branches:
        branch_students = [s for s in data.students if s.branch == branch.name]
        collected = sum(s.fees_paid for s in branch_students)
        pending = sum(s.fees_remaining for s in branch_students)
        total = sum(s.monthly_fee for s in branch_students)
        per_branch.append(BranchFeeStats(
            branch_id=str(branch.id),
            name=branch.name,
            student_count=len(branch_students),
            collected_fees=collected,
            pending_fees=pending,
            total_fees=total,
            collection_rate=(collected / total * 100) if total > 0 else 0.0,
        ))

    return DashboardStats(
        active_students=sum(1 for s in data.students if s.status == "active"),
        active_teachers=sum(1 for t in data.teachers if t.status == "active"),
        active_branches=sum(1 for b in data.branches if b.status == "active"),
        total_collected_fees=sum(s.fees_paid for s in data.students),
        total_pending_fees=sum(s.fees_remaining for s in data.students),
        total_expected_revenue=sum(s.monthly_fee for s in data.students),
        branches=per_branch,
    )
