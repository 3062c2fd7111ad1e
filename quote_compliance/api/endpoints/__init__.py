"""API endpoint modules.

Available endpoints:
- health: Health check and system status
- compliance: Quote risk analysis and corrections
- locales: Locale packs, detection, validation and numbering
"""

from quote_compliance.api.endpoints import compliance, health, locales

__all__ = [
    "health",
    "compliance",
    "locales",
]
