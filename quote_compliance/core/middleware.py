"""
Quote Compliance middleware.

Middleware and exception handlers applied to the FastAPI application.

Features:
- Request ID generation and propagation
- Request/response logging with timing
- Audit log for compliance endpoints
- Security headers
- JSON error responses

Usage:
    from fastapi import FastAPI
    from quote_compliance.core.middleware import setup_middleware

    app = FastAPI()
    setup_middleware(app)
"""

import time
import traceback
from collections.abc import Callable
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from quote_compliance.core.config import settings
from quote_compliance.core.exceptions import QuoteComplianceError
from quote_compliance.core.logging import (
    audit_log,
    get_logger,
    get_request_id,
    perf_log,
    set_request_id,
)

logger = get_logger(__name__)


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# =============================================================================
# Security headers
# =============================================================================


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add defensive HTTP headers to every response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value

        return response


# =============================================================================
# Request logging
# =============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request and response.

    Reuses the caller's X-Request-ID (or generates one) so log lines can be
    traced back to a single request.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_id(request.headers.get("X-Request-ID"))
        start_time = time.time()

        method = request.method
        path = request.url.path

        logger.info(
            f"Request started: {method} {path}",
            extra={"method": method, "path": path},
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Unexpected error: {e}",
                exc_info=True,
                extra={"method": method, "path": path},
            )
            raise

        status_code = response.status_code
        duration_ms = (time.time() - start_time) * 1000

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time-Ms"] = f"{duration_ms:.2f}"

        log_level = logger.warning if status_code >= 400 else logger.info
        log_level(
            f"Request completed: {method} {path} -> {status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )

        perf_log.info(
            f"HTTP {method} {path}",
            extra={
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )

        return response


# =============================================================================
# Audit log
# =============================================================================


class AuditLogMiddleware(BaseHTTPMiddleware):
    """Record access to compliance endpoints in the audit log."""

    AUDIT_PATHS = [
        "/api/v1/compliance",
        "/api/v1/locales",
    ]

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        method = request.method

        if not any(path.startswith(p) for p in self.AUDIT_PATHS):
            return await call_next(request)

        audit_log.info(
            f"Audited access: {method} {path}",
            extra={"event_type": "api_access", "method": method, "path": path},
        )

        response = await call_next(request)

        audit_log.info(
            f"Audited response: {method} {path} -> {response.status_code}",
            extra={
                "event_type": "api_response",
                "method": method,
                "path": path,
                "status_code": response.status_code,
            },
        )
        return response


# =============================================================================
# Exception handlers
# =============================================================================


async def quote_compliance_exception_handler(
    request: Request, exc: QuoteComplianceError
) -> JSONResponse:
    """
    Convert a QuoteComplianceError into a JSON response.

    Args:
        request: HTTP request
        exc: Application exception

    Returns:
        JSONResponse: Error payload with the exception's status code
    """
    request_id = get_request_id()

    logger.error(
        f"QuoteComplianceError: {exc.message}",
        extra={"error_code": exc.error_code},
    )

    return JSONResponse(
        status_code=exc.http_status_code,
        content={
            "success": False,
            "error": exc.to_dict(),
            "meta": {
                "request_id": request_id,
                "timestamp": _utc_timestamp(),
            },
        },
        headers={"X-Request-ID": request_id},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Convert an unhandled exception into a 500 JSON response.

    The traceback is only included in debug mode.
    """
    request_id = get_request_id()

    logger.error(f"Unhandled Exception: {exc}", exc_info=True)

    if settings.debug:
        detail = {
            "exception_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        }
    else:
        detail = {}

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "error_code": "INTERNAL_ERROR",
                "message": str(exc) if settings.debug else "An internal error occurred",
                "detail": detail,
            },
            "meta": {
                "request_id": request_id,
                "timestamp": _utc_timestamp(),
            },
        },
        headers={"X-Request-ID": request_id},
    )


def setup_middleware(app: FastAPI) -> None:
    """
    Register middleware and exception handlers.

    Middleware runs in reverse registration order; on a request:
    1. CORSMiddleware
    2. SecurityHeadersMiddleware
    3. RequestLoggingMiddleware
    4. AuditLogMiddleware

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(AuditLogMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Processing-Time-Ms"],
    )

    app.add_exception_handler(QuoteComplianceError, quote_compliance_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Middleware configured")
