from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.database import get_db
from ..core.exceptions import NotFoundError
from ..schemas.branch_schemas import (
    BranchAdminCredentials, BranchCreate, BranchOut, BranchUpdate, BranchUpdateResponse
)
from ..services.branch_service import BranchService

router = APIRouter(prefix="/api/branches", tags=["Branch Management"])

@router.get("", response_model=List[BranchOut])
async def get_branches(db: AsyncSession = Depends(get_db)):
    """All branches joined with their admin credential row"""
    service = BranchService(db)
    rows = await service.list_with_admins()
    return [
        service.to_response(branch, admin, settings.expose_admin_password_on_read)
        for branch, admin in rows
    ]

@router.post("", response_model=BranchOut)
async def create_branch(
    branch_data: BranchCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create branch and, when email and password are given, its admin login"""
    service = BranchService(db)
    branch, admin = await service.create_branch(branch_data.model_dump(exclude_none=True))
    return service.to_response(branch, admin, include_password=False)

@router.get("/{branch_id}", response_model=BranchOut)
async def get_branch(
    branch_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    service = BranchService(db)
    row = await service.get_with_admin(branch_id)
    if not row:
        raise NotFoundError("Branch")
    branch, admin = row
    return service.to_response(branch, admin, settings.expose_admin_password_on_read)

@router.put("/{branch_id}", response_model=BranchUpdateResponse)
async def update_branch(
    branch_id: UUID,
    branch_data: BranchUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update branch fields and upsert the paired admin login"""
    service = BranchService(db)
    row = await service.update_branch(branch_id, branch_data.model_dump(exclude_unset=True))
    if not row:
        raise NotFoundError("Branch")
    branch, admin = row
    return {
        "message": "Branch and admin updated successfully",
        "branch": service.to_response(branch, admin, include_password=False),
    }

@router.get("/{branch_id}/admin/credentials", response_model=BranchAdminCredentials)
async def recover_branch_admin_password(
    branch_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    """Administrative recovery: current password of the branch admin"""
    service = BranchService(db)
    credentials = await service.recover_admin_password(branch_id)
    if not credentials:
        raise NotFoundError("Branch admin")
    return credentials
