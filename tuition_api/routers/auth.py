"""Super-admin and branch-admin login endpoints.

The client tries super-admin login first and falls back to branch-admin
login; no token is issued, identity is held client-side.
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import InvalidCredentials
from ..schemas.auth_schemas import BranchAdminOut, LoginRequest, SuperAdminOut
from ..services.admin_service import BranchAdminService, SuperAdminService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Authentication"])

@router.post("/superadmins/login", response_model=SuperAdminOut)
async def super_admin_login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    service = SuperAdminService(db)
    admin = await service.authenticate(credentials.email, credentials.password)
    if not admin:
        logger.info(f"Super admin login failed for {credentials.email}")
        raise InvalidCredentials()
    return admin

@router.post("/branchadmins/login", response_model=BranchAdminOut)
async def branch_admin_login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    service = BranchAdminService(db)
    admin = await service.authenticate(credentials.email, credentials.password)
    if not admin:
        logger.info(f"Branch admin login failed for {credentials.email}")
        raise InvalidCredentials()
    return admin
