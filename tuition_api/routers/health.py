"""Health check endpoints."""
from fastapi import APIRouter
import logging

from ..core.config import settings
from ..core.database import health_check_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])

@router.get("/")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": "Tuition Back-Office API",
        "version": settings.app_version,
        "environment": settings.environment,
    }

@router.get("/db")
async def database_health():
    """Database connectivity check"""
    db_healthy = await health_check_db()
    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "database": settings.database_url.split("://", 1)[0],
    }
