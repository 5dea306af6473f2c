"""
Application lifecycle management using the FastAPI lifespan pattern.

Startup verifies the store and bootstraps the schema when configured;
shutdown releases the connection pool.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront.core.container import DependencyContainer
from storefront.database import init_database

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self, container: DependencyContainer) -> None:
        self._container = container
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")
        settings = self._container.settings

        if settings.DB_CREATE_TABLES:
            await init_database(self._container.database)

        if await self._container.database.check_connection():
            logger.info("Database connection verified")
        else:
            logger.warning("Database is not reachable, requests will fail until it recovers")

        if not settings.TEXT_GENERATION_API_KEY:
            logger.warning("TEXT_GENERATION_API_KEY not set, text generation mutations will fail")

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await self._container.database.dispose()
        self._initialized = False
        logger.info("Application lifecycle shutdown completed")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """FastAPI lifespan: startup before the first request, shutdown after the last."""
    manager = LifecycleManager(app.state.container)
    await manager.startup()
    try:
        yield
    finally:
        await manager.shutdown()
