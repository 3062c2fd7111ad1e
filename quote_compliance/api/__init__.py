"""API router aggregation.

Combines all endpoint routers into a single API router.
Routes:
- /health - Health check endpoints
- /compliance - Quote risk analysis endpoints
- /locales - Locale pack endpoints
"""

from fastapi import APIRouter

from quote_compliance.api.endpoints import compliance, health, locales

router = APIRouter()

# Include endpoint routers
router.include_router(
    health.router,
    tags=["Health"],
)
router.include_router(
    compliance.router,
    prefix="/compliance",
    tags=["Compliance"],
)
router.include_router(
    locales.router,
    prefix="/locales",
    tags=["Locales"],
)
