"""
Locale packs.

One immutable pack per supported jurisdiction (fr-BE, fr-FR, fr-CH, nl-BE,
de-BE) plus the registry helpers built on them.
"""

from quote_compliance.locales.base import (
    ComplianceRule,
    ComplianceSeverity,
    LocalePack,
    TaxRate,
)
from quote_compliance.locales.registry import (
    LOCALE_PACKS,
    ComplianceReport,
    detect_locale,
    format_currency,
    format_date,
    format_invoice_number,
    format_quote_number,
    generate_legal_mentions,
    get_pack,
    get_quote_pack,
    get_standard_tax_rate,
    get_tax_rates,
    is_valid_locale_code,
    list_packs,
    resolve_quote_locale,
    validate_compliance,
)

__all__ = [
    "LOCALE_PACKS",
    "LocalePack",
    "ComplianceRule",
    "ComplianceSeverity",
    "ComplianceReport",
    "TaxRate",
    "get_pack",
    "list_packs",
    "is_valid_locale_code",
    "detect_locale",
    "format_quote_number",
    "format_invoice_number",
    "format_currency",
    "format_date",
    "validate_compliance",
    "generate_legal_mentions",
    "get_tax_rates",
    "get_standard_tax_rate",
    "resolve_quote_locale",
    "get_quote_pack",
]
