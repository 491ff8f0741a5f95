#!/usr/bin/env python3
"""Create the default super-admin accounts; existing emails are left alone.

    python -m scripts.seed_super_admins
"""
import asyncio
import logging

from tuition_api.core.database import AsyncSessionLocal, close_db_connections, init_models
from tuition_api.core.logging import setup_logging
from tuition_api.services.admin_service import SuperAdminService

logger = logging.getLogger(__name__)

DEFAULT_SUPER_ADMINS = [
    {"name": "Sarah Johnson", "email": "admin@v18tuition.com", "password": "admin123"},
    {"name": "Michael Chen", "email": "michael@v18tuition.com", "password": "admin123"},
    {"name": "Emily Davis", "email": "emily@v18tuition.com", "password": "admin123"},
]


async def seed_super_admins(admins=DEFAULT_SUPER_ADMINS):
    await init_models()
    async with AsyncSessionLocal() as session:
        created = await SuperAdminService(session).seed(admins)
    logger.info(f"Seeded {len(created)} super admin(s)")
    return created


async def main():
    setup_logging()
    try:
        await seed_super_admins()
    finally:
        await close_db_connections()


if __name__ == "__main__":
    asyncio.run(main())
