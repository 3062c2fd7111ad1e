"""Health check endpoints."""

from fastapi import APIRouter

from quote_compliance.core.config import settings
from quote_compliance.locales import LOCALE_PACKS
from quote_compliance.services.risk import LEGAL_MENTIONS, RISK_PATTERNS

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """
    API health check.

    Returns:
        dict: Health status
    """
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/status")
async def get_status() -> dict:
    """Get detailed application status.

    Returns:
        Application status including the loaded catalog sizes.
    """
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "engine": {
            "default_locale": settings.default_locale,
            "default_sensitivity": settings.default_sensitivity,
            "auto_fix_enabled": settings.enable_auto_fix,
        },
        "catalog": {
            "locales": list(LOCALE_PACKS),
            "risk_patterns": len(RISK_PATTERNS),
            "legal_mentions": len(LEGAL_MENTIONS),
        },
    }
