"""
Quote Compliance FastAPI application entry point.

Features:
- FastAPI application creation and configuration
- Middleware (CORS, logging, audit, error handling)
- API router registration

Usage:
    Development:
        uvicorn quote_compliance.main:app --reload --log-level debug

    Production:
        uvicorn quote_compliance.main:app --workers 4 --host 0.0.0.0 --port 8001
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from quote_compliance.api import router as api_router
from quote_compliance.core.config import settings
from quote_compliance.core.logging import audit_log, get_logger, setup_logging
from quote_compliance.core.middleware import setup_middleware
from quote_compliance.locales import LOCALE_PACKS
from quote_compliance.services.risk import LEGAL_MENTIONS, RISK_PATTERNS

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle.

    The pattern catalog and locale packs are validated at import time, so
    startup only records what was loaded.

    Args:
        app: FastAPI application instance

    Yields:
        None: Application running period
    """
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version}",
        extra={"environment": settings.environment},
    )

    audit_log.info(
        "Application startup",
        extra={
            "event_type": "application_startup",
            "app_version": settings.app_version,
            "environment": settings.environment,
        },
    )

    logger.info(
        f"Loaded {len(RISK_PATTERNS)} risk patterns, {len(LEGAL_MENTIONS)} legal "
        f"mentions, locales: {', '.join(LOCALE_PACKS)}",
    )

    yield

    logger.info(f"Shutting down {settings.app_name}...")

    audit_log.info(
        "Application shutdown",
        extra={
            "event_type": "application_shutdown",
        },
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    logger.info("Creating FastAPI application...")

    app = FastAPI(
        title=settings.app_name,
        description="""
        # Quote Compliance

        Legal risk detection and locale compliance for construction quotes.

        ## Features

        - **Risk analysis**: risky phrasing and missing legal mentions
        - **Corrections**: proposed rewordings and mention insertion
        - **Locale packs**: fr-BE, fr-FR, fr-CH, nl-BE, de-BE

        ## API version

        Current API version: v1
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    setup_middleware(app)

    app.include_router(api_router, prefix="/api/v1")
    logger.debug("API router registered: /api/v1")

    @app.get("/health", tags=["System"])
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.app_version,
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        }

    @app.get("/", tags=["System"])
    async def root() -> dict:
        return {
            "name": settings.app_name,
            "description": "Legal risk detection and compliance for quotes",
            "version": settings.app_version,
            "docs_url": "/docs" if settings.debug else None,
            "api_url": "/api/v1",
        }

    logger.info("FastAPI application created")

    return app


app = create_app()
