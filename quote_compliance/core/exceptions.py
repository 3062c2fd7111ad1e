"""
Quote Compliance exception classes.

Exception hierarchy:
    QuoteComplianceError (base)
    ├── ValidationError
    │   └── InvalidSensitivityError
    ├── CatalogError
    │   ├── PatternCompileError
    │   └── CatalogIntegrityError
    └── LocalePackError

Catalog and locale-pack errors indicate a broken release and are raised at
import time. Input-shape problems in quote records never raise; the engine
treats the offending field as absent.

Usage:
    from quote_compliance.core.exceptions import PatternCompileError

    raise PatternCompileError(
        message="Invalid regular expression",
        pattern_id="binding_guarantee",
        source=r"garanti[",
    )
"""

from typing import Any


class QuoteComplianceError(Exception):
    """
    Base exception class.

    Attributes:
        message: Error message
        error_code: Error code (API responses)
        detail: Additional detail
        http_status_code: HTTP status code
    """

    error_code: str = "QUOTE_COMPLIANCE_ERROR"
    http_status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        detail: dict[str, Any] | None = None,
        http_status_code: int | None = None
    ):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        if http_status_code:
            self.http_status_code = http_status_code
        self.detail = detail or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the exception to an API response dictionary.

        Returns:
            dict: Error information
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "detail": self.detail
        }

    def __str__(self) -> str:
        if self.detail:
            return f"[{self.error_code}] {self.message} - {self.detail}"
        return f"[{self.error_code}] {self.message}"


# ========================================
# Validation errors
# ========================================

class ValidationError(QuoteComplianceError):
    """Base class for request validation errors."""

    error_code = "VALIDATION_ERROR"
    http_status_code = 400


class InvalidSensitivityError(ValidationError):
    """Raised when a sensitivity level outside strict/normal/permissive is requested."""

    error_code = "INVALID_SENSITIVITY"

    def __init__(
        self,
        message: str,
        sensitivity: str | None = None,
        allowed: list[str] | None = None,
        **kwargs
    ):
        detail = kwargs.pop("detail", {})
        if sensitivity is not None:
            detail["sensitivity"] = sensitivity
        if allowed:
            detail["allowed"] = allowed
        super().__init__(message, detail=detail, **kwargs)


# ========================================
# Catalog errors (fatal at import time)
# ========================================

class CatalogError(QuoteComplianceError):
    """Base class for risk pattern / legal mention catalog defects."""

    error_code = "CATALOG_ERROR"
    http_status_code = 500


class PatternCompileError(CatalogError):
    """
    Regular expression compilation failure.

    Raised when a risk pattern matcher is not a valid regular expression.
    """

    error_code = "PATTERN_COMPILE_ERROR"

    def __init__(
        self,
        message: str,
        pattern_id: str,
        source: str | None = None,
        original_error: Exception | None = None,
        **kwargs
    ):
        detail = kwargs.pop("detail", {})
        detail["pattern_id"] = pattern_id
        if source is not None:
            detail["source"] = source
        if original_error:
            detail["original_error"] = str(original_error)
        super().__init__(message, detail=detail, **kwargs)


class CatalogIntegrityError(CatalogError):
    """
    Inconsistent catalog entry.

    Duplicate ids, empty matcher lists, unknown locale codes or auto-fix
    entries referring to a pattern that does not exist.
    """

    error_code = "CATALOG_INTEGRITY_ERROR"

    def __init__(
        self,
        message: str,
        entry_id: str,
        reason: str | None = None,
        **kwargs
    ):
        detail = kwargs.pop("detail", {})
        detail["entry_id"] = entry_id
        if reason:
            detail["reason"] = reason
        super().__init__(message, detail=detail, **kwargs)


# ========================================
# Locale pack errors
# ========================================

class LocalePackError(QuoteComplianceError):
    """Inconsistent locale pack definition (duplicate code, bad template)."""

    error_code = "LOCALE_PACK_ERROR"
    http_status_code = 500

    def __init__(
        self,
        message: str,
        locale: str,
        **kwargs
    ):
        detail = kwargs.pop("detail", {})
        detail["locale"] = locale
        super().__init__(message, detail=detail, **kwargs)
