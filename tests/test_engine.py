"""Unit tests for the legal risk engine."""

import logging

import pytest

from quote_compliance.core.exceptions import InvalidSensitivityError
from quote_compliance.services.risk import (
    LegalRiskEngine,
    RiskCategory,
    RiskEngineConfig,
    RiskSeverity,
    Sensitivity,
    analyze_quote,
    parse_sensitivity,
    quick_analyze,
)
from quote_compliance.services.risk.scoring import (
    AUTO_FIX_RECOMMENDATION,
    CATEGORY_RECOMMENDATIONS,
)

# One finding per severity: critical, high, medium, low, info
GRADED_NOTES = (
    "Travaux garantis à 100%. Prix fixe. Environ 10 m. Rapidement. "
    "Paiement à la livraison."
)


def _ids(result) -> list[str]:
    return [r.risk_id for r in result.risks]


# ============================================================
# Sensitivity
# ============================================================


class TestParseSensitivity:
    """Sensitivity parsing"""

    def test_known_values(self):
        assert parse_sensitivity("strict") == Sensitivity.STRICT
        assert parse_sensitivity(Sensitivity.PERMISSIVE) == Sensitivity.PERMISSIVE

    def test_unknown_falls_back_to_normal(self):
        assert parse_sensitivity("paranoid") == Sensitivity.NORMAL
        assert parse_sensitivity(None) == Sensitivity.NORMAL

    def test_strict_mode_raises(self):
        with pytest.raises(InvalidSensitivityError) as exc_info:
            parse_sensitivity("paranoid", strict=True)
        assert exc_info.value.detail["sensitivity"] == "paranoid"
        assert exc_info.value.http_status_code == 400


class TestSensitivityFilter:
    """Severity filtering per sensitivity level"""

    def test_strict_keeps_everything(self):
        result = analyze_quote({"notes": GRADED_NOTES}, sensitivity="strict")
        assert result.total_risks == 5
        assert result.score == 25 + 15 + 8 + 3

    def test_normal_drops_low_and_info(self):
        result = analyze_quote({"notes": GRADED_NOTES}, sensitivity="normal")
        assert result.total_risks == 3
        assert result.low_count == 0
        assert result.score == 25 + 15 + 8

    def test_permissive_keeps_critical(self):
        result = analyze_quote({"notes": GRADED_NOTES}, sensitivity="permissive")
        assert _ids(result) == ["binding_guarantee"]
        assert result.score == 25

    def test_monotonic(self):
        counts = [
            analyze_quote({"notes": GRADED_NOTES}, sensitivity=level).total_risks
            for level in ("strict", "normal", "permissive")
        ]
        assert counts == sorted(counts, reverse=True)


# ============================================================
# Quote analysis
# ============================================================


class TestAnalyzeQuote:
    """End-to-end quote analysis"""

    def test_fixed_price_and_no_cancellation(self, risky_quote):
        result = analyze_quote(risky_quote, "fr-BE", "normal")
        assert _ids(result) == ["fixed_price_guarantee", "no_cancellation"]
        assert result.risks[0].severity == RiskSeverity.HIGH
        assert result.risks[1].severity == RiskSeverity.MEDIUM
        assert result.score == 23
        assert result.recommendations == [
            CATEGORY_RECOMMENDATIONS[RiskCategory.PRICE_GUARANTEE],
            AUTO_FIX_RECOMMENDATION,
        ]
        assert result.auto_fix_available is True

    def test_clean_quote(self, clean_quote):
        result = analyze_quote(clean_quote)
        assert result.has_risks is False
        assert result.score == 0
        assert result.recommendations == []

    @pytest.mark.parametrize("locale", ["fr-BE", "fr-FR", "fr-CH", "nl-BE", "de-BE"])
    def test_empty_quote(self, locale):
        result = analyze_quote({"notes": "", "items": []}, locale)
        assert result.has_risks is False
        assert result.score == 0
        assert result.recommendations == []

    def test_empty_quote_with_missing_mention(self, consumer_remote_quote):
        result = analyze_quote(consumer_remote_quote, "fr-BE")
        assert _ids(result) == ["be_consumer_withdrawal"]
        assert result.has_risks is True
        assert result.score == 15
        assert result.recommendations == [AUTO_FIX_RECOMMENDATION]

    def test_french_renovation(self, french_renovation_quote):
        result = analyze_quote(french_renovation_quote, "fr-FR")
        assert _ids(result) == ["deadline_guarantee", "ambiguous_quantity", "fr_decennale"]
        assert result.risks[1].position.field == "items[0].description"
        assert result.risks[2].id == "missing-fr_decennale"

    def test_field_order(self):
        quote = {
            "title": "Prix fixe",
            "notes": "Environ 10 mètres",
            "description": "Délai garanti",
        }
        result = analyze_quote(quote)
        assert [r.position.field for r in result.risks] == ["notes", "description", "title"]

    def test_malformed_items_are_skipped(self):
        quote = {
            "items": [
                {"description": "prix fixe"},
                "not an item",
                {"description": 42},
                {"label": "no description"},
            ]
        }
        result = analyze_quote(quote)
        assert [r.position.field for r in result.risks] == ["items[0].description"]

    def test_items_not_a_list(self):
        assert analyze_quote({"items": {"description": "prix fixe"}}).has_risks is False

    def test_non_string_fields_are_ignored(self):
        assert analyze_quote({"notes": 42, "title": None}).has_risks is False

    def test_non_mapping_quote(self):
        assert analyze_quote(None).has_risks is False
        assert analyze_quote(["prix fixe"]).has_risks is False

    def test_deterministic(self, french_renovation_quote):
        first = analyze_quote(french_renovation_quote, "fr-FR").to_dict()
        second = analyze_quote(french_renovation_quote, "fr-FR").to_dict()
        assert first == second

    def test_input_not_modified(self, risky_quote):
        snapshot = dict(risky_quote)
        analyze_quote(risky_quote)
        assert risky_quote == snapshot


# ============================================================
# Engine configuration
# ============================================================


class TestEngineConfig:
    """Engine options"""

    def test_defaults_from_settings(self):
        engine = LegalRiskEngine()
        assert engine.locale == "fr-BE"
        assert engine.sensitivity == Sensitivity.NORMAL
        assert engine.config.fields_to_analyze == [
            "notes",
            "description",
            "client_address",
            "title",
        ]

    def test_unknown_locale_falls_back(self):
        engine = LegalRiskEngine(RiskEngineConfig(locale="en-US"))
        assert engine.locale == "fr-BE"

    def test_caller_config_is_not_modified(self):
        config = RiskEngineConfig(locale="zz", sensitivity="paranoid", exclude_patterns=["x"])
        engine = LegalRiskEngine(config)
        engine.set_locale("fr-CH")
        engine.set_sensitivity("strict")
        engine.config.exclude_patterns.append("y")
        assert config.locale == "zz"
        assert config.sensitivity == "paranoid"
        assert config.exclude_patterns == ["x"]
        assert engine.locale == "fr-CH"

    def test_set_locale_enables_locale_patterns(self):
        engine = LegalRiskEngine()
        assert engine.analyze_text("Total: 500€") == []
        engine.set_locale("fr-CH")
        assert [r.risk_id for r in engine.analyze_text("Total: 500€")] == ["ch_currency_eur"]

    def test_set_sensitivity(self):
        engine = LegalRiskEngine()
        engine.set_sensitivity("permissive")
        assert engine.analyze_quote({"notes": GRADED_NOTES}).total_risks == 1

    def test_auto_fix_disabled(self):
        engine = LegalRiskEngine(RiskEngineConfig(enable_auto_fix=False))
        result = engine.analyze_quote({"notes": "prix fixe"})
        assert result.risks[0].auto_fix is None
        assert result.auto_fix_available is False

    def test_exclude_patterns(self):
        engine = LegalRiskEngine(RiskEngineConfig(exclude_patterns=["fixe"]))
        result = engine.analyze_quote({"notes": "Prix fixe, aucune annulation possible."})
        assert _ids(result) == ["no_cancellation"]

    def test_nested_fields(self):
        engine = LegalRiskEngine(RiskEngineConfig(fields_to_analyze=["meta.remarks"]))
        result = engine.analyze_quote(
            {"notes": "prix fixe", "meta": {"remarks": "Environ 10 m"}}
        )
        assert [r.position.field for r in result.risks] == ["meta.remarks"]

    def test_analyze_text_is_unfiltered(self):
        engine = LegalRiskEngine(RiskEngineConfig(sensitivity=Sensitivity.PERMISSIVE))
        assert len(engine.analyze_text(GRADED_NOTES, "notes")) == 5


class TestQuickAnalyze:
    """Single text convenience entry point"""

    def test_returns_findings(self):
        risks = quick_analyze("Prix fixe et définitif")
        assert [r.category for r in risks] == [RiskCategory.PRICE_GUARANTEE]

    def test_locale(self):
        risks = quick_analyze("500 euros", locale="fr-CH")
        assert [r.risk_id for r in risks] == ["ch_currency_eur"]

    def test_non_string(self):
        assert quick_analyze(None) == []


class TestAnalysisLogging:
    """Timing and outcome logs"""

    def test_analysis_is_timed(self, caplog):
        with caplog.at_level(logging.DEBUG):
            analyze_quote({"notes": "prix fixe"}, "fr-BE")
        messages = [r.getMessage() for r in caplog.records]
        assert "analyze_quote started" in messages
        assert "analyze_quote completed" in messages
        timing = [r for r in caplog.records if r.name == "quote_compliance.performance"]
        assert timing[-1].locale == "fr-BE"
        assert timing[-1].duration_ms >= 0
