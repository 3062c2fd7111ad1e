"""Compliance rule predicates shared by the locale packs.

Every predicate takes the raw quote record (a mapping) and returns a bool.
Missing or wrongly typed fields are treated as absent; predicates never
raise on malformed input.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

QuoteCheck = Callable[[Mapping[str, Any]], bool]

BE_VAT_RE = re.compile(r"^BE0?\d{3}\.?\d{3}\.?\d{3}$")
FR_VAT_RE = re.compile(r"^FR\s?\d{2}\s?\d{9}$")
SIRET_RE = re.compile(r"^\d{14}$")
CH_IDE_RE = re.compile(r"^CHE-?\d{3}\.?\d{3}\.?\d{3}$")
CH_VAT_RE = re.compile(r"^CHE-?\d{3}\.?\d{3}\.?\d{3}\s*(TVA|MWST|IVA)?$")

BUILDING_SECTORS = frozenset(
    {"CONSTRUCTION", "RENOVATION", "TOITURE", "ELECTRICITE", "PLOMBERIE", "CHAUFFAGE"}
)

# Swiss turnover above which VAT registration is mandatory (CHF)
CH_VAT_THRESHOLD = 100_000


# =========================================================
# Field coercion
# =========================================================


def as_text(value: Any) -> str | None:
    """Return ``value`` if it is a string, else None."""
    return value if isinstance(value, str) else None


def as_number(value: Any) -> float | None:
    """Return ``value`` if it is an int/float (bools excluded), else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def as_flag(value: Any) -> bool:
    """Only a real boolean ``True`` counts as set."""
    return value is True


def field_value(quote: Mapping[str, Any], key: str) -> Any:
    if not isinstance(quote, Mapping):
        return None
    return quote.get(key)


# =========================================================
# Shared predicates
# =========================================================


def passes(quote: Mapping[str, Any]) -> bool:
    """Informational rule: surfaced in the pack, never fails."""
    return True


def belgian_vat_format(quote: Mapping[str, Any]) -> bool:
    vat = as_text(field_value(quote, "vat_number"))
    if not vat:
        return False
    return BE_VAT_RE.match(vat) is not None


def consumer_deposit_within_limit(quote: Mapping[str, Any]) -> bool:
    deposit = as_number(field_value(quote, "deposit_percent"))
    if as_flag(field_value(quote, "is_consumer")) and deposit is not None:
        return deposit <= 50
    return True


def tax_rate_in(valid_rates: Iterable[float]) -> QuoteCheck:
    """Build a predicate accepting a missing tax rate or one of ``valid_rates``."""
    allowed = frozenset(valid_rates)

    def check(quote: Mapping[str, Any]) -> bool:
        rate = as_number(field_value(quote, "tax_rate"))
        if rate is None:
            return True
        return rate in allowed

    return check


def siret_format(quote: Mapping[str, Any]) -> bool:
    siret = as_text(field_value(quote, "siret"))
    if not siret:
        return False
    return SIRET_RE.match(re.sub(r"\s", "", siret)) is not None


def french_vat_format(quote: Mapping[str, Any]) -> bool:
    vat = as_text(field_value(quote, "vat_number"))
    if not vat:
        return True  # may be VAT-exempt
    return FR_VAT_RE.match(vat) is not None


def auto_entrepreneur_mention_present(quote: Mapping[str, Any]) -> bool:
    if as_flag(field_value(quote, "is_auto_entrepreneur")) and as_number(
        field_value(quote, "tax_rate")
    ) == 0:
        notes = as_text(field_value(quote, "notes")) or ""
        return "art. 293 B" in notes
    return True


def decennale_declared(quote: Mapping[str, Any]) -> bool:
    sector = field_value(quote, "sector")
    if isinstance(sector, str) and sector in BUILDING_SECTORS:
        return isinstance(quote, Mapping) and "decennale_number" in quote
    return True


def swiss_ide_format(quote: Mapping[str, Any]) -> bool:
    ide = as_text(field_value(quote, "ide_number"))
    if not ide:
        return False
    return CH_IDE_RE.match(ide) is not None


def swiss_vat_format(quote: Mapping[str, Any]) -> bool:
    vat = as_text(field_value(quote, "vat_number"))
    if not vat:
        return True  # may not be registered
    return CH_VAT_RE.match(vat) is not None


def swiss_vat_registration(quote: Mapping[str, Any]) -> bool:
    revenue = as_number(field_value(quote, "annual_revenue"))
    if not revenue:
        return True
    return not (revenue > CH_VAT_THRESHOLD and not field_value(quote, "vat_number"))


def swiss_qr_iban(quote: Mapping[str, Any]) -> bool:
    iban = as_text(field_value(quote, "iban"))
    if iban and not iban.startswith("CH"):
        return False
    return True


def swiss_franc_currency(quote: Mapping[str, Any]) -> bool:
    currency = field_value(quote, "currency")
    return not currency or currency == "CHF"
