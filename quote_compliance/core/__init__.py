"""
Quote Compliance core module.

Modules:
- config: settings (environment variables, .env file)
- logging: logging system (structured logs, request IDs, audit log)
- exceptions: custom exception classes
"""

from quote_compliance.core.config import settings
from quote_compliance.core.exceptions import (
    CatalogError,
    CatalogIntegrityError,
    InvalidSensitivityError,
    LocalePackError,
    PatternCompileError,
    QuoteComplianceError,
    ValidationError,
)
from quote_compliance.core.logging import (
    LogContext,
    audit_log,
    get_logger,
    get_request_id,
    perf_log,
    set_request_id,
    setup_logging,
)

__all__ = [
    # Settings
    "settings",
    # Logging
    "setup_logging",
    "get_logger",
    "audit_log",
    "perf_log",
    "get_request_id",
    "set_request_id",
    "LogContext",
    # Exceptions
    "QuoteComplianceError",
    "ValidationError",
    "InvalidSensitivityError",
    "CatalogError",
    "PatternCompileError",
    "CatalogIntegrityError",
    "LocalePackError",
]
