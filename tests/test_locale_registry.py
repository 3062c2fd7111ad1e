"""Unit tests for the locale pack registry."""

from collections.abc import Iterator, Mapping
from datetime import date, datetime

import pytest

from quote_compliance.locales import (
    LOCALE_PACKS,
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

# ============================================================
# Lookup
# ============================================================


class TestLookup:
    """Pack lookup and default fallback"""

    def test_get_known_pack(self):
        assert get_pack("fr-FR").code == "fr-FR"
        assert get_pack("de-BE").code == "de-BE"

    @pytest.mark.parametrize("code", ["en-US", "", None, "fr-be"])
    def test_unknown_code_falls_back_to_default(self, code):
        assert get_pack(code).code == "fr-BE"

    def test_list_packs_registration_order(self):
        codes = [pack.code for pack in list_packs()]
        assert codes == ["fr-BE", "fr-FR", "fr-CH", "nl-BE", "de-BE"]

    def test_registry_keys_match_pack_codes(self):
        for code, pack in LOCALE_PACKS.items():
            assert pack.code == code

    def test_is_valid_locale_code(self):
        assert is_valid_locale_code("fr-CH") is True
        assert is_valid_locale_code("en-US") is False
        assert is_valid_locale_code(None) is False
        assert is_valid_locale_code(42) is False

    def test_resolve_quote_locale(self):
        assert resolve_quote_locale("nl-BE") == "nl-BE"
        assert resolve_quote_locale("xx") == "fr-BE"
        assert resolve_quote_locale(None) == "fr-BE"

    def test_get_quote_pack(self):
        assert get_quote_pack("fr-CH").code == "fr-CH"
        assert get_quote_pack({"not": "a code"}).code == "fr-BE"

    def test_tax_helpers(self):
        assert get_standard_tax_rate("fr-BE") == 21
        assert get_standard_tax_rate("fr-FR") == 20
        assert get_standard_tax_rate("fr-CH") == 8.1
        assert [r.value for r in get_tax_rates("fr-BE")] == [0, 6, 12, 21]


# ============================================================
# Detection
# ============================================================


class TestDetectLocale:
    """Locale detection heuristic chain"""

    def test_vat_prefix(self):
        assert detect_locale(vat_number="BE0123456789") == "fr-BE"
        assert detect_locale(vat_number="FR12345678901") == "fr-FR"
        assert detect_locale(vat_number="CHE-123.456.789") == "fr-CH"

    def test_vat_prefix_case_insensitive(self):
        assert detect_locale(vat_number=" fr12345678901") == "fr-FR"

    def test_vat_wins_over_postal_code(self):
        assert detect_locale(vat_number="FR12345678901", postal_code="1000") == "fr-FR"

    def test_postal_code(self):
        assert detect_locale(postal_code="75001") == "fr-FR"
        assert detect_locale(postal_code="1000") == "fr-BE"

    def test_swiss_postal_code_with_country(self):
        assert detect_locale(postal_code="1200", country="Suisse") == "fr-CH"

    @pytest.mark.parametrize("country", ["Schweiz", "CH", "Switzerland", "Swiss"])
    def test_swiss_postal_code_with_any_swiss_country_name(self, country):
        assert detect_locale(postal_code="8000", country=country) == "fr-CH"

    def test_non_numeric_postal_code_is_ignored(self):
        assert detect_locale(postal_code="SW1A 1AA", country="France") == "fr-FR"

    def test_country_names(self):
        assert detect_locale(country="België") == "nl-BE"
        assert detect_locale(country="Belgien") == "de-BE"
        assert detect_locale(country="Belgique") == "fr-BE"
        assert detect_locale(country="Schweiz") == "fr-CH"
        assert detect_locale(country="FR") == "fr-FR"

    def test_browser_locale(self):
        assert detect_locale(browser_locale="nl-BE") == "nl-BE"
        assert detect_locale(browser_locale="de-BE") == "de-BE"
        assert detect_locale(browser_locale="fr-CH") == "fr-CH"
        assert detect_locale(browser_locale="fr-FR") == "fr-FR"

    def test_no_hint_returns_default(self):
        assert detect_locale() == "fr-BE"
        assert detect_locale(browser_locale="en-US") == "fr-BE"

    def test_non_string_hints_are_ignored(self):
        assert detect_locale(vat_number=123, postal_code=75001, country=None) == "fr-BE"


# ============================================================
# Formatting
# ============================================================


class TestNumbering:
    """Quote and invoice numbering templates"""

    def test_french_quote_number(self):
        assert format_quote_number("fr-FR", 7, date(2024, 3, 15)) == "D202403-007"

    def test_belgian_quote_number(self):
        assert format_quote_number("fr-BE", 42, date(2024, 3, 15)) == "DEV-2024-0042"

    def test_invoice_number(self):
        assert format_invoice_number("fr-FR", 7, date(2024, 3, 15)) == "F202403-007"
        assert format_invoice_number("de-BE", 3, date(2025, 1, 2)) == "REC-2025-0003"

    def test_unknown_locale_uses_default_template(self):
        assert format_quote_number("xx", 1, date(2024, 1, 1)) == "DEV-2024-0001"

    def test_sequence_wider_than_template(self):
        assert format_quote_number("fr-FR", 12345, date(2024, 3, 15)) == "D202403-12345"

    def test_defaults_to_today(self):
        number = format_quote_number("fr-BE", 1)
        assert number == f"DEV-{date.today().year}-0001"


class TestCurrencyAndDate:
    """Currency and date formatting"""

    def test_belgian_currency(self):
        assert format_currency(1234.56, get_pack("fr-BE")) == "1.234,56 €"

    def test_french_currency(self):
        assert format_currency(1234.56, get_pack("fr-FR")) == "1 234,56 €"

    def test_swiss_currency(self):
        assert format_currency(1234.56, get_pack("fr-CH")) == "CHF1'234.56"

    def test_negative_amount(self):
        assert format_currency(-5, get_pack("fr-BE")) == "-5,00 €"

    def test_large_amount(self):
        assert format_currency(1234567.8, get_pack("fr-BE")) == "1.234.567,80 €"

    def test_date_formats(self):
        d = date(2024, 3, 5)
        assert format_date(d, get_pack("fr-BE")) == "05/03/2024"
        assert format_date(d, get_pack("fr-CH")) == "05.03.2024"

    def test_date_from_datetime_and_iso_string(self):
        assert format_date(datetime(2024, 3, 5, 10, 30), get_pack("fr-FR")) == "05/03/2024"
        assert format_date("2024-03-05T10:30:00", get_pack("de-BE")) == "05.03.2024"


# ============================================================
# Compliance
# ============================================================


class _ExplodingQuote(Mapping):
    """Mapping whose every lookup fails."""

    def __getitem__(self, key):
        raise RuntimeError("broken record")

    def __iter__(self) -> Iterator:
        return iter(())

    def __len__(self) -> int:
        return 0


class TestValidateCompliance:
    """Compliance rule evaluation"""

    def test_belgian_quote_valid(self):
        report = validate_compliance({"vat_number": "BE0123.456.789"}, "fr-BE")
        assert report.valid is True
        assert report.errors == []
        assert report.warnings == []
        assert report.info == []

    def test_belgian_quote_missing_vat(self):
        report = validate_compliance({}, "fr-BE")
        assert report.valid is False
        assert len(report.errors) == 1
        assert "TVA" in report.errors[0]

    def test_belgian_consumer_deposit_over_limit(self):
        report = validate_compliance(
            {"vat_number": "BE0123456789", "is_consumer": True, "deposit_percent": 60},
            "fr-BE",
        )
        assert report.valid is True
        assert len(report.warnings) == 1

    def test_non_standard_rate_is_informational(self):
        report = validate_compliance(
            {"vat_number": "BE0123456789", "tax_rate": 7}, "fr-BE"
        )
        assert report.valid is True
        assert len(report.info) == 1

    def test_french_siret_ok(self):
        report = validate_compliance({"siret": "123 456 789 00012"}, "fr-FR")
        assert report.valid is True

    def test_french_siret_invalid(self):
        report = validate_compliance({"siret": "12345"}, "fr-FR")
        assert report.valid is False

    def test_french_auto_entrepreneur_needs_mention(self):
        quote = {"siret": "12345678900012", "is_auto_entrepreneur": True, "tax_rate": 0}
        assert validate_compliance(quote, "fr-FR").valid is False

        quote["notes"] = "TVA non applicable, art. 293 B du CGI."
        assert validate_compliance(quote, "fr-FR").valid is True

    def test_french_building_sector_without_decennale(self):
        report = validate_compliance(
            {"siret": "12345678900012", "sector": "RENOVATION"}, "fr-FR"
        )
        assert report.valid is True
        assert len(report.warnings) == 1

    def test_swiss_ide(self):
        assert validate_compliance({"ide_number": "CHE-123.456.789"}, "fr-CH").valid
        assert not validate_compliance({"ide_number": "123"}, "fr-CH").valid

    def test_swiss_euro_currency_warning(self):
        report = validate_compliance(
            {"ide_number": "CHE-123.456.789", "currency": "EUR"}, "fr-CH"
        )
        assert report.valid is True
        assert len(report.warnings) == 1

    def test_raising_predicate_counts_as_failed(self):
        report = validate_compliance(_ExplodingQuote(), "fr-BE")
        assert report.valid is False
        assert len(report.errors) == 1
        assert len(report.warnings) == 1
        assert len(report.info) == 1

    def test_non_mapping_quote(self):
        report = validate_compliance(None, "fr-BE")
        assert report.valid is False

    def test_to_dict(self):
        data = validate_compliance({}, "fr-BE").to_dict()
        assert set(data) == {"valid", "errors", "warnings", "info"}


# ============================================================
# Legal mentions
# ============================================================


class TestGenerateLegalMentions:
    """Legal boilerplate assembly"""

    def test_includes_all_sections(self):
        legal = get_pack("fr-BE").legal
        text = generate_legal_mentions("fr-BE")
        parts = text.split("\n\n")
        assert parts[0] == legal.quote_validity
        assert legal.withdrawal_right in parts
        assert legal.data_protection in parts
        assert parts[-1] == legal.professional_insurance

    def test_optional_sections_can_be_excluded(self):
        legal = get_pack("fr-BE").legal
        text = generate_legal_mentions(
            "fr-BE", include_data_protection=False, include_insurance=False
        )
        assert legal.data_protection not in text
        assert legal.professional_insurance not in text
        assert text.split("\n\n")[-1] == legal.jurisdiction

    def test_custom_terms_appended_last(self):
        text = generate_legal_mentions("fr-FR", custom_terms="Conditions maison.")
        assert text.endswith("\n\nConditions maison.")
