"""
Application factory for FastAPI.

Creates the composition root, installs middleware and mounts the GraphQL
endpoint and the health check.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from storefront.api.graphql import get_context, schema
from storefront.api.middleware import AuthContextMiddleware, RequestLoggingMiddleware
from storefront.config.settings import Settings, get_settings
from storefront.core.container import DependencyContainer
from storefront.core.lifecycle import lifespan

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None, container: DependencyContainer | None = None) -> None:
        """
        Initialize app factory.

        Args:
            settings: Application settings (uses default if not provided)
            container: Pre-built container, mainly for tests
        """
        self._settings = settings or get_settings()
        self._container = container or DependencyContainer(self._settings)

    def create_app(self) -> FastAPI:
        app = FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=None,
            redoc_url=None,
            lifespan=lifespan,
        )
        app.state.container = self._container

        self._configure_middleware(app)
        self._configure_graphql(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Configure application middleware.

        Starlette runs the last added middleware first, so the resulting order is
        CORS, request logging, then auth context closest to the handlers.
        """
        app.add_middleware(AuthContextMiddleware, token_service=self._container.token_service)
        app.add_middleware(RequestLoggingMiddleware)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.CORS_ORIGINS,
            allow_credentials="*" not in self._settings.CORS_ORIGINS,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    def _configure_graphql(self, app: FastAPI) -> None:
        graphql_app = GraphQLRouter(
            schema,
            context_getter=get_context,
            graphql_ide="graphiql" if self._settings.GRAPHQL_IDE else None,
        )
        app.include_router(graphql_app, prefix=self._settings.GRAPHQL_PATH)
        logger.info(f"GraphQL endpoint mounted at {self._settings.GRAPHQL_PATH}")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            """Service status and store connectivity."""
            database_ok = await self._container.database.check_connection()
            return {
                "status": "ok" if database_ok else "degraded",
                "database": "ok" if database_ok else "unavailable",
                "environment": self._settings.ENVIRONMENT,
            }


def create_app(settings: Settings | None = None, container: DependencyContainer | None = None) -> FastAPI:
    """
    Create FastAPI application using the factory.

    Args:
        settings: Optional settings override
        container: Optional pre-built container

    Returns:
        Configured FastAPI application
    """
    return AppFactory(settings, container).create_app()
