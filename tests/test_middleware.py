"""Middleware unit tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from quote_compliance.core.exceptions import LocalePackError
from quote_compliance.core.middleware import (
    SECURITY_HEADERS,
    AuditLogMiddleware,
    setup_middleware,
)


@pytest.fixture
def failing_client() -> TestClient:
    """Bare application whose routes raise."""
    app = FastAPI()
    setup_middleware(app)

    @app.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("unexpected failure")

    @app.get("/pack")
    async def pack() -> dict:
        raise LocalePackError("Broken pack", locale="fr-XX")

    return TestClient(app, raise_server_exceptions=False)


class TestSecurityHeaders:
    """Security header configuration"""

    def test_headers_defined(self):
        assert SECURITY_HEADERS["X-Content-Type-Options"] == "nosniff"
        assert SECURITY_HEADERS["X-Frame-Options"] == "DENY"

    def test_headers_on_response(self, client):
        response = client.get("/health")
        for header, value in SECURITY_HEADERS.items():
            assert response.headers[header] == value


class TestMiddlewareIntegration:
    """Middleware integration (via TestClient)"""

    def test_request_id_header(self, client):
        response = client.get("/health")
        assert "x-request-id" in response.headers

    def test_request_id_propagated(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["x-request-id"] == "abc123"

    def test_processing_time_header(self, client):
        response = client.get("/api/v1/locales")
        assert float(response.headers["x-processing-time-ms"]) >= 0

    def test_cors_headers(self, client):
        response = client.get("/health", headers={"Origin": "http://localhost:3000"})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_audit_paths(self):
        assert "/api/v1/compliance" in AuditLogMiddleware.AUDIT_PATHS


class TestExceptionHandlers:
    """JSON error responses"""

    def test_application_error(self, failing_client):
        response = failing_client.get("/pack")
        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["error"]["error_code"] == "LOCALE_PACK_ERROR"
        assert data["error"]["detail"]["locale"] == "fr-XX"
        assert data["meta"]["timestamp"].endswith("Z")

    def test_unhandled_error(self, failing_client):
        response = failing_client.get("/boom")
        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["error"]["error_code"] == "INTERNAL_ERROR"
