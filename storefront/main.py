"""
Application entry point.

All configuration, middleware, and lifecycle management is delegated to
specialized modules.

Run with ``uvicorn storefront.main:app`` or ``python -m storefront.main``.
"""

import logging

import sentry_sdk

from storefront.config.settings import get_settings
from storefront.core.app_factory import create_app
from storefront.core.shared import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

logger = logging.getLogger(__name__)

if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )

app = create_app(settings)


def run() -> None:
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "storefront.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
