"""Trigger conditions for conditional legal mentions.

Each condition reads the raw quote record and never raises: a missing or
mistyped field simply makes the condition false.
"""

from collections.abc import Mapping
from typing import Any

from quote_compliance.locales.checks import as_flag, as_number, field_value

FR_DECENNALE_SECTORS = frozenset(
    {"CONSTRUCTION", "RENOVATION", "TOITURE", "ELECTRICITE", "PLOMBERIE"}
)

CH_SMALL_BUSINESS_REVENUE = 100_000


def renovation_reduced_vat(quote: Mapping[str, Any]) -> bool:
    """6% VAT on a renovation job (Belgian reduced rate)."""
    return (
        as_number(field_value(quote, "tax_rate")) == 6
        and field_value(quote, "sector") == "RENOVATION"
    )


def consumer_remote_contract(quote: Mapping[str, Any]) -> bool:
    """Consumer client and a contract concluded at a distance or off-premises."""
    return as_flag(field_value(quote, "is_consumer")) and as_flag(
        field_value(quote, "is_remote_contract")
    )


def decennale_sector(quote: Mapping[str, Any]) -> bool:
    sector = field_value(quote, "sector")
    return isinstance(sector, str) and sector in FR_DECENNALE_SECTORS


def auto_entrepreneur_vat_exempt(quote: Mapping[str, Any]) -> bool:
    return (
        as_flag(field_value(quote, "is_auto_entrepreneur"))
        and as_number(field_value(quote, "tax_rate")) == 0
    )


def swiss_small_business(quote: Mapping[str, Any]) -> bool:
    """Turnover under the Swiss VAT threshold and no VAT number on file.

    A missing turnover means the exemption cannot be claimed.
    """
    revenue = as_number(field_value(quote, "annual_revenue"))
    if revenue is None:
        return False
    return revenue < CH_SMALL_BUSINESS_REVENUE and not field_value(quote, "vat_number")
