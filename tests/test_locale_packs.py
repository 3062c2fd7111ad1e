"""Unit tests for the locale pack definitions."""

import dataclasses

import pytest

from quote_compliance.core.exceptions import LocalePackError
from quote_compliance.locales import LOCALE_PACKS, get_pack
from quote_compliance.locales.base import NumberFormats, Vocabulary
from quote_compliance.locales.checks import (
    as_flag,
    as_number,
    belgian_vat_format,
    decennale_declared,
    swiss_vat_registration,
    tax_rate_in,
)
from quote_compliance.locales.fr_be import FR_BE
from quote_compliance.locales.registry import _validate_packs

# ============================================================
# Pack contents
# ============================================================


class TestPackContents:
    """Jurisdiction data carried by each pack"""

    @pytest.mark.parametrize("code", ["fr-BE", "fr-FR", "fr-CH", "nl-BE", "de-BE"])
    def test_pack_is_complete(self, code):
        pack = get_pack(code)
        assert pack.code == code
        assert pack.tax.rates
        assert pack.compliance.rules
        assert pack.legal.quote_validity
        assert pack.number_formats.quote

    def test_belgian_packs_share_tax_rates(self):
        be_rates = [r.value for r in get_pack("fr-BE").tax.rates]
        assert [r.value for r in get_pack("nl-BE").tax.rates] == be_rates
        assert [r.value for r in get_pack("de-BE").tax.rates] == be_rates

    def test_swiss_currency(self):
        currency = get_pack("fr-CH").currency
        assert currency.code == "CHF"
        assert currency.position == "before"

    def test_translated_vocabulary(self):
        assert get_pack("nl-BE").vocabulary.quote == "Offerte"
        assert get_pack("de-BE").vocabulary.quote == "Angebot"

    def test_summary(self):
        summary = get_pack("fr-FR").summary()
        assert summary["code"] == "fr-FR"
        assert summary["currency"] == "EUR"
        assert summary["standard_tax_rate"] == 20

    def test_to_dict_omits_predicates(self):
        data = get_pack("fr-BE").to_dict()
        rule = data["compliance"]["rules"][0]
        assert set(rule) == {"id", "description", "severity"}
        assert data["number_formats"]["quote"] == "DEV-{YYYY}-{NNNN}"
        assert data["currency"]["symbol"] == "€"

    def test_packs_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FR_BE.code = "xx"  # type: ignore[misc]


# ============================================================
# Vocabulary
# ============================================================


class TestVocabulary:
    """Core terms plus pack-specific extensions"""

    def test_core_and_extra_lookup(self):
        vocabulary = get_pack("fr-BE").vocabulary
        assert vocabulary.get("quote") == "Devis"
        assert vocabulary.get("registration_number") == "Numéro BCE"
        assert vocabulary.get("unknown") is None
        assert vocabulary.get("unknown", "?") == "?"

    def test_extension_keys_differ_per_pack(self):
        assert get_pack("fr-CH").vocabulary.get("qr_bill") == "QR-facture"
        assert get_pack("fr-FR").vocabulary.get("siret") == "SIRET"
        assert get_pack("fr-FR").vocabulary.get("qr_bill") is None

    def test_extra_is_read_only(self):
        vocabulary = get_pack("fr-BE").vocabulary
        with pytest.raises(TypeError):
            vocabulary.extra["hack"] = "x"  # type: ignore[index]

    def test_as_dict_merges_terms(self):
        terms = get_pack("nl-BE").vocabulary.as_dict()
        assert terms["quote"] == "Offerte"
        assert terms["registration_number"] == "KBO-nummer"
        assert "extra" not in terms

    def test_plain_dict_extra_is_frozen(self):
        vocabulary = dataclasses.replace(
            get_pack("fr-BE").vocabulary, extra={"custom": "value"}
        )
        assert isinstance(vocabulary, Vocabulary)
        assert vocabulary.get("custom") == "value"
        with pytest.raises(TypeError):
            vocabulary.extra["custom"] = "other"  # type: ignore[index]


# ============================================================
# Registry validation
# ============================================================


class TestPackValidation:
    """Registry construction checks"""

    def test_registered_packs(self):
        assert list(LOCALE_PACKS) == ["fr-BE", "fr-FR", "fr-CH", "nl-BE", "de-BE"]

    def test_duplicate_code_rejected(self):
        with pytest.raises(LocalePackError) as exc_info:
            _validate_packs((FR_BE, FR_BE))
        assert exc_info.value.detail["locale"] == "fr-BE"

    def test_unknown_placeholder_rejected(self):
        broken = dataclasses.replace(
            FR_BE,
            number_formats=NumberFormats(quote="DEV-{QQ}-{NNNN}", invoice="FAC-{NNNN}"),
        )
        with pytest.raises(LocalePackError):
            _validate_packs((broken,))


# ============================================================
# Rule predicates
# ============================================================


class TestChecks:
    """Predicates never raise on malformed records"""

    def test_coercion(self):
        assert as_number(True) is None
        assert as_number("6") is None
        assert as_number(6) == 6
        assert as_flag("true") is False
        assert as_flag(True) is True

    def test_belgian_vat_wrong_type(self):
        assert belgian_vat_format({"vat_number": 123456789}) is False

    def test_tax_rate_in(self):
        check = tax_rate_in((0, 6, 21))
        assert check({}) is True
        assert check({"tax_rate": 6}) is True
        assert check({"tax_rate": 7}) is False
        assert check({"tax_rate": "7"}) is True

    def test_decennale_with_unhashable_sector(self):
        assert decennale_declared({"sector": ["RENOVATION"]}) is True

    def test_decennale_declared(self):
        assert decennale_declared({"sector": "CHAUFFAGE"}) is False
        assert decennale_declared({"sector": "CHAUFFAGE", "decennale_number": "X1"}) is True

    def test_swiss_vat_registration(self):
        assert swiss_vat_registration({"annual_revenue": 150_000}) is False
        assert swiss_vat_registration(
            {"annual_revenue": 150_000, "vat_number": "CHE-123.456.789 TVA"}
        ) is True
        assert swiss_vat_registration({"annual_revenue": 50_000}) is True
