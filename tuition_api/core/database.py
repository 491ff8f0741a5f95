# tuition_api/core/database.py
"""Database connection and session management using SQLAlchemy."""
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy import text
import logging

from .config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **overrides) -> AsyncEngine:
    """Create an async engine; pool tuning only applies to PostgreSQL."""
    options = {
        "pool_pre_ping": True,
        "echo": False,
    }
    if database_url.startswith("postgresql"):
        options.update(
            pool_size=10,
            max_overflow=20,
            pool_timeout=60,
            pool_recycle=1800,
            connect_args={
                "command_timeout": 60,
                "server_settings": {
                    "application_name": "tuition_api",
                    "idle_in_transaction_session_timeout": "60s",
                },
            },
        )
    options.update(overrides)
    return create_async_engine(database_url, **options)


engine = build_engine(settings.database_url)

AsyncSessionLocal = async_sessionmaker(
    engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for API requests with proper error handling"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception as e:
            logger.error(f"Database session error: {e}")
            await session.rollback()
            raise
        finally:
            await session.close()

async def init_models(bind: AsyncEngine = engine):
    """Create all tables that do not exist yet (local/dev databases)."""
    from ..models import Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")

async def health_check_db() -> bool:
    """Fast health check"""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False

async def close_db_connections():
    """Properly close all database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
