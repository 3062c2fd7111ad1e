"""
Locale pack registry.

Resolves locale codes to packs, detects a locale from company/client hints
and exposes the helpers built on top of a pack: document numbering, currency
and date formatting, compliance validation and legal-mention generation.

Unknown or missing codes resolve to the default pack (fr-BE) so that quotes
stored before a pack existed stay renderable.
"""

import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any

from quote_compliance.core.config import DEFAULT_LOCALE
from quote_compliance.core.exceptions import LocalePackError
from quote_compliance.core.logging import get_logger
from quote_compliance.locales.base import ComplianceSeverity, LocalePack, TaxRate
from quote_compliance.locales.de_be import DE_BE
from quote_compliance.locales.fr_be import FR_BE
from quote_compliance.locales.fr_ch import FR_CH
from quote_compliance.locales.fr_fr import FR_FR
from quote_compliance.locales.nl_be import NL_BE

logger = get_logger(__name__)

_PLACEHOLDER_RE = re.compile(r"\{([A-Z]+)\}")
_KNOWN_PLACEHOLDERS = frozenset({"YYYY", "YY", "MM", "NNNN", "NNN"})
_DATE_TOKEN_RE = re.compile(r"YYYY|DD|MM")


def _validate_packs(packs: tuple[LocalePack, ...]) -> dict[str, LocalePack]:
    """Index packs by code, rejecting duplicates and unknown numbering placeholders."""
    registry: dict[str, LocalePack] = {}
    for pack in packs:
        if pack.code in registry:
            raise LocalePackError("Duplicate locale pack code", locale=pack.code)
        for template in (pack.number_formats.quote, pack.number_formats.invoice):
            unknown = set(_PLACEHOLDER_RE.findall(template)) - _KNOWN_PLACEHOLDERS
            if unknown:
                raise LocalePackError(
                    f"Unknown numbering placeholder(s): {sorted(unknown)}",
                    locale=pack.code,
                    detail={"template": template},
                )
        registry[pack.code] = pack
    return registry


LOCALE_PACKS: dict[str, LocalePack] = _validate_packs((FR_BE, FR_FR, FR_CH, NL_BE, DE_BE))


# =========================================================
# Lookup
# =========================================================


def get_pack(code: str | None) -> LocalePack:
    """Return the pack for ``code``; unknown, empty or None yields the default pack."""
    if isinstance(code, str) and code in LOCALE_PACKS:
        return LOCALE_PACKS[code]
    return LOCALE_PACKS[DEFAULT_LOCALE]


def list_packs() -> list[LocalePack]:
    return list(LOCALE_PACKS.values())


def is_valid_locale_code(code: Any) -> bool:
    return isinstance(code, str) and code in LOCALE_PACKS


def resolve_quote_locale(value: Any) -> str:
    """Keep a stored quote locale when it is valid, else fall back to the default."""
    if is_valid_locale_code(value):
        return value
    return DEFAULT_LOCALE


def get_quote_pack(value: Any) -> LocalePack:
    return get_pack(resolve_quote_locale(value))


def get_tax_rates(code: str | None) -> tuple[TaxRate, ...]:
    return get_pack(code).tax.rates


def get_standard_tax_rate(code: str | None) -> float:
    return get_pack(code).tax.standard


# =========================================================
# Detection
# =========================================================


def _locale_from_postal_code(postal_code: str, country: str) -> str | None:
    if not postal_code.isdigit():
        return None
    number = int(postal_code)
    if len(postal_code) == 4 and 1000 <= number <= 9999:
        # Belgian and Swiss codes share the 4-digit range
        if _locale_from_country(country) == "fr-CH":
            return "fr-CH"
        return "fr-BE"
    if len(postal_code) == 5 and 1000 <= number <= 98999:
        return "fr-FR"
    return None


def _locale_from_country(country: str) -> str | None:
    if "belgië" in country or "belgie" in country:
        return "nl-BE"
    if "belgien" in country:
        return "de-BE"
    if "belgique" in country or "belgium" in country or country == "be":
        return "fr-BE"
    if "france" in country or country == "fr":
        return "fr-FR"
    if (
        "suisse" in country
        or "swiss" in country
        or "switzerland" in country
        or "schweiz" in country
        or country == "ch"
    ):
        return "fr-CH"
    return None


def _locale_from_browser(browser_locale: str) -> str | None:
    if browser_locale in ("nl-be", "nl") or browser_locale.startswith("nl-be"):
        return "nl-BE"
    if browser_locale.startswith("de-be"):
        return "de-BE"
    if "be" in browser_locale:
        return "fr-BE"
    if "ch" in browser_locale:
        return "fr-CH"
    if "fr" in browser_locale:
        return "fr-FR"
    return None


def detect_locale(
    vat_number: str | None = None,
    postal_code: str | None = None,
    country: str | None = None,
    browser_locale: str | None = None,
) -> str:
    """
    Guess a locale code from company/client hints.

    Hints are tried in priority order (VAT prefix, postal code, country
    name, browser locale) and the first one that matches wins. Non-string
    hints are ignored; with no usable hint the default locale is returned.
    """
    country_hint = country.strip().lower() if isinstance(country, str) else ""

    if isinstance(vat_number, str) and vat_number:
        vat = vat_number.strip().upper()
        if vat.startswith("BE"):
            return "fr-BE"
        if vat.startswith("FR"):
            return "fr-FR"
        if vat.startswith("CHE"):
            return "fr-CH"

    if isinstance(postal_code, str) and postal_code.strip():
        detected = _locale_from_postal_code(postal_code.strip(), country_hint)
        if detected:
            return detected

    if country_hint:
        detected = _locale_from_country(country_hint)
        if detected:
            return detected

    if isinstance(browser_locale, str) and browser_locale:
        detected = _locale_from_browser(browser_locale.strip().lower())
        if detected:
            return detected

    return DEFAULT_LOCALE


# =========================================================
# Formatting
# =========================================================


def _format_number(template: str, sequence_number: int, on_date: date | None) -> str:
    on_date = on_date or date.today()
    year = f"{on_date.year:04d}"
    return (
        template.replace("{YYYY}", year)
        .replace("{YY}", year[-2:])
        .replace("{MM}", f"{on_date.month:02d}")
        .replace("{NNNN}", f"{sequence_number:04d}")
        .replace("{NNN}", f"{sequence_number:03d}")
    )


def format_quote_number(
    code: str | None, sequence_number: int, on_date: date | None = None
) -> str:
    """
    Render the pack's quote numbering template.

    Example:
        >>> format_quote_number("fr-FR", 7, date(2024, 3, 15))
        'D202403-007'
    """
    return _format_number(get_pack(code).number_formats.quote, sequence_number, on_date)


def format_invoice_number(
    code: str | None, sequence_number: int, on_date: date | None = None
) -> str:
    return _format_number(get_pack(code).number_formats.invoice, sequence_number, on_date)


def format_currency(amount: float, pack: LocalePack) -> str:
    """Format ``amount`` with the pack's separators and symbol placement."""
    currency = pack.currency
    raw = f"{abs(amount):,.{currency.decimals}f}"
    number = (
        raw.replace(",", "\0")
        .replace(".", currency.decimal_separator)
        .replace("\0", currency.thousands_separator)
    )
    sign = "-" if amount < 0 else ""
    if currency.position == "before":
        return f"{sign}{currency.symbol}{number}"
    return f"{sign}{number} {currency.symbol}"


def format_date(value: date | datetime | str, pack: LocalePack) -> str:
    """Render a date using the pack's ``DD``/``MM``/``YYYY`` pattern."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    tokens = {
        "YYYY": f"{value.year:04d}",
        "MM": f"{value.month:02d}",
        "DD": f"{value.day:02d}",
    }
    return _DATE_TOKEN_RE.sub(lambda m: tokens[m.group(0)], pack.date.format)


# =========================================================
# Compliance
# =========================================================


@dataclass
class ComplianceReport:
    """Outcome of running a pack's rules against a quote record."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    info: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def validate_compliance(quote: Mapping[str, Any], code: str | None) -> ComplianceReport:
    """
    Run every rule of the pack in declaration order.

    Failed rule descriptions are bucketed by severity; the report is valid
    when no error-severity rule failed. A predicate that raises on malformed
    input counts as failed.
    """
    pack = get_pack(code)
    record = quote if isinstance(quote, Mapping) else {}
    buckets: dict[ComplianceSeverity, list[str]] = {
        ComplianceSeverity.ERROR: [],
        ComplianceSeverity.WARNING: [],
        ComplianceSeverity.INFO: [],
    }

    for rule in pack.compliance.rules:
        try:
            passed = bool(rule.check(record))
        except Exception:
            logger.warning(
                f"Compliance rule {rule.id} raised; counting as failed",
                extra={"locale": pack.code, "event_type": "compliance_rule_error"},
                exc_info=True,
            )
            passed = False
        if not passed:
            buckets[rule.severity].append(rule.description)

    errors = buckets[ComplianceSeverity.ERROR]
    return ComplianceReport(
        valid=not errors,
        errors=errors,
        warnings=buckets[ComplianceSeverity.WARNING],
        info=buckets[ComplianceSeverity.INFO],
    )


def generate_legal_mentions(
    code: str | None,
    include_data_protection: bool = True,
    include_insurance: bool = True,
    custom_terms: str | None = None,
) -> str:
    """Assemble the pack's legal boilerplate into one block separated by blank lines."""
    legal = get_pack(code).legal
    mentions = [legal.quote_validity, legal.payment_terms, legal.late_payment_penalties]

    if legal.withdrawal_right:
        mentions.append(legal.withdrawal_right)

    mentions.append(legal.jurisdiction)

    if include_data_protection:
        mentions.append(legal.data_protection)

    if include_insurance and legal.professional_insurance:
        mentions.append(legal.professional_insurance)

    if custom_terms:
        mentions.append(custom_terms)

    return "\n\n".join(mentions)
