"""
Base configuration for SQLAlchemy models
"""
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from contact_board.config.settings import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the process-wide async engine described by settings"""
    url = settings.ASYNC_DATABASE_URL

    if url.startswith("postgresql+asyncpg://"):
        return create_async_engine(
            url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_reset_on_return="rollback",
            echo=settings.DB_ECHO,
            connect_args={
                "prepared_statement_cache_size": 0,
                "statement_cache_size": 0
            }
        )

    # sqlite and friends don't take the pool sizing arguments
    return create_async_engine(url, echo=settings.DB_ECHO)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Create an async session factory bound to engine"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


async def init_db(engine: AsyncEngine) -> bool:
    """Create missing tables. Returns False when the database can't be reached."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        return True
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        return False
