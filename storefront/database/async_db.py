import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from urllib.parse import quote_plus

from sqlalchemy import text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from storefront.config.settings import Settings
from storefront.core.domain.exceptions import DomainException, IntegrationException
from storefront.models.db.base import Base

logger = logging.getLogger(__name__)


def get_async_database_url(settings: Settings) -> str:
    """Build the async connection URL from DATABASE_URL or the DB_* fields."""
    if settings.DATABASE_URL:
        url = settings.DATABASE_URL
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://") :]
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    if not settings.DB_NAME:
        raise ValueError("Database name is required (DB_NAME)")

    encoded_user = quote_plus(settings.DB_USER)
    if settings.DB_PASSWORD:
        encoded_password = quote_plus(settings.DB_PASSWORD)
        return (
            f"postgresql+asyncpg://{encoded_user}:{encoded_password}"
            f"@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
        )
    return f"postgresql+asyncpg://{encoded_user}@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"


def create_async_database_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured environment."""
    database_url = get_async_database_url(settings)
    base_config = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,
    }

    if settings.DEBUG:
        logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
        engine_config = {**base_config, "poolclass": NullPool}
    else:
        logger.info("Creating async database engine for PRODUCTION (pooled)")
        engine_config = {
            **base_config,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
        }

    try:
        return create_async_engine(database_url, **engine_config)
    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise


class Database:
    """
    Store client owning the engine and session factory.

    Constructed once at startup and handed to every component that needs
    the store; nothing in the package reaches for a module-level engine.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_async_database_engine(settings))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Unit of work.

        Commits when the block exits normally and rolls back on any error, so a
        failing operation never leaves partial writes behind. Connectivity
        errors are reported as IntegrationException("database").
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except DomainException:
                await session.rollback()
                raise
            except (OperationalError, InterfaceError) as e:
                logger.error(f"Database connectivity error: {e}")
                await session.rollback()
                raise IntegrationException("database", "Data store is unavailable", e) from e
            except Exception as e:
                logger.error(f"Async database error: {e}")
                await session.rollback()
                raise

    async def check_connection(self) -> bool:
        try:
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    async def create_tables(self) -> None:
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")
