"""Locale pack data types.

A locale pack bundles everything jurisdiction-specific about a quote:
tax rates, currency and date formatting, legal boilerplate, vocabulary,
compliance rules and document numbering. Packs are immutable module-level
constants; adding a jurisdiction means adding a pack, never editing one.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Literal


class ComplianceSeverity(StrEnum):
    """Outcome level of a failed compliance rule."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class TaxRate:
    """One selectable VAT rate."""

    value: float
    label: str
    description: str = ""


@dataclass(frozen=True)
class TaxConfig:
    """Jurisdiction VAT configuration (looked up, never computed)."""

    standard: float
    reduced: float
    zero: float
    label: str
    rates: tuple[TaxRate, ...]
    super_reduced: float | None = None


@dataclass(frozen=True)
class CurrencyConfig:
    code: str
    symbol: str
    position: Literal["before", "after"]
    decimal_separator: str
    thousands_separator: str
    decimals: int = 2


@dataclass(frozen=True)
class DateConfig:
    format: str  # e.g. "DD/MM/YYYY"
    locale: str


@dataclass(frozen=True)
class LegalTexts:
    """Canonical legal boilerplate for quotes."""

    quote_validity: str
    payment_terms: str
    late_payment_penalties: str
    jurisdiction: str
    data_protection: str
    withdrawal_right: str | None = None
    professional_insurance: str | None = None


@dataclass(frozen=True)
class Vocabulary:
    """Domain terms: a fixed core set plus pack-specific extensions."""

    quote: str
    invoice: str
    client: str
    provider: str
    vat: str
    vat_number: str
    subtotal: str
    total: str
    deposit: str
    balance: str
    terms: str
    conditions: str
    validity: str
    payment_due: str
    bank_transfer: str
    cash: str
    extra: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        # Freeze the extension map so packs cannot be patched at runtime
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Look up a core term or a pack-specific extension term."""
        if key != "extra" and key in self._core_keys():
            return getattr(self, key)
        return self.extra.get(key, default)

    def as_dict(self) -> dict[str, str]:
        terms = {key: getattr(self, key) for key in self._core_keys()}
        terms.update(self.extra)
        return terms

    @classmethod
    def _core_keys(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.name != "extra"]


@dataclass(frozen=True)
class ComplianceRule:
    """A jurisdiction rule; ``check`` is a pure predicate over the quote record."""

    id: str
    description: str
    check: Callable[[Mapping[str, Any]], bool]
    severity: ComplianceSeverity

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class ComplianceRequirements:
    required_fields: tuple[str, ...]
    mandatory_mentions: tuple[str, ...]
    rules: tuple[ComplianceRule, ...]


@dataclass(frozen=True)
class NumberFormats:
    """Numbering templates; placeholders {YYYY} {YY} {MM} {NNNN} {NNN}."""

    quote: str
    invoice: str


@dataclass(frozen=True)
class OfficialContacts:
    consumer_protection: str | None = None
    trade_register: str | None = None
    tax_authority: str | None = None


@dataclass(frozen=True)
class LocalePack:
    """Immutable per-jurisdiction configuration bundle."""

    code: str
    name: str
    country: str
    flag: str
    tax: TaxConfig
    currency: CurrencyConfig
    date: DateConfig
    legal: LegalTexts
    vocabulary: Vocabulary
    compliance: ComplianceRequirements
    number_formats: NumberFormats
    official_contacts: OfficialContacts

    def summary(self) -> dict[str, Any]:
        """Short description for locale pickers."""
        return {
            "code": self.code,
            "name": self.name,
            "country": self.country,
            "flag": self.flag,
            "currency": self.currency.code,
            "standard_tax_rate": self.tax.standard,
        }

    def to_dict(self) -> dict[str, Any]:
        """Serializable view of the pack (rule predicates are omitted)."""
        return {
            **self.summary(),
            "tax": {
                "standard": self.tax.standard,
                "reduced": self.tax.reduced,
                "super_reduced": self.tax.super_reduced,
                "zero": self.tax.zero,
                "label": self.tax.label,
                "rates": [
                    {"value": r.value, "label": r.label, "description": r.description}
                    for r in self.tax.rates
                ],
            },
            "currency": {
                "code": self.currency.code,
                "symbol": self.currency.symbol,
                "position": self.currency.position,
                "decimal_separator": self.currency.decimal_separator,
                "thousands_separator": self.currency.thousands_separator,
                "decimals": self.currency.decimals,
            },
            "date": {"format": self.date.format, "locale": self.date.locale},
            "legal": {
                "quote_validity": self.legal.quote_validity,
                "payment_terms": self.legal.payment_terms,
                "late_payment_penalties": self.legal.late_payment_penalties,
                "withdrawal_right": self.legal.withdrawal_right,
                "jurisdiction": self.legal.jurisdiction,
                "data_protection": self.legal.data_protection,
                "professional_insurance": self.legal.professional_insurance,
            },
            "vocabulary": self.vocabulary.as_dict(),
            "compliance": {
                "required_fields": list(self.compliance.required_fields),
                "mandatory_mentions": list(self.compliance.mandatory_mentions),
                "rules": [r.to_dict() for r in self.compliance.rules],
            },
            "number_formats": {
                "quote": self.number_formats.quote,
                "invoice": self.number_formats.invoice,
            },
            "official_contacts": {
                "consumer_protection": self.official_contacts.consumer_protection,
                "trade_register": self.official_contacts.trade_register,
                "tax_authority": self.official_contacts.tax_authority,
            },
        }
