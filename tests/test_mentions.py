"""Unit tests for missing legal mention detection."""

from quote_compliance.services.risk import (
    AutoFixType,
    MentionChecker,
    RiskSeverity,
    extract_keywords,
)
from quote_compliance.services.risk.mentions import MISSING_MENTION_DESCRIPTION

CONSUMER_REMOTE = {"is_consumer": True, "is_remote_contract": True}


class TestExtractKeywords:
    """Keyword evidence extraction"""

    def test_long_words_only(self):
        text = (
            "Taux de TVA de 6% applicable sous réserve que le logement ait plus de "
            "10 ans et soit utilisé principalement comme habitation privée."
        )
        assert extract_keywords(text) == [
            "applicable",
            "réserve",
            "logement",
            "utilisé",
            "principalement",
        ]

    def test_punctuation_stripped(self):
        assert extract_keywords("(garantie), décennale; assureur!") == [
            "garantie",
            "décennale",
            "assureur",
        ]

    def test_limit(self):
        assert extract_keywords("alpha bravo charlie delta", limit=2) == ["alpha", "bravo"]


class TestMentionChecker:
    """Missing mandatory mentions"""

    def test_no_condition_no_finding(self):
        assert MentionChecker("fr-BE").missing_mentions({"notes": ""}) == []

    def test_missing_withdrawal_mention(self):
        risks = MentionChecker("fr-BE").missing_mentions({**CONSUMER_REMOTE, "notes": ""})
        assert len(risks) == 1
        risk = risks[0]
        assert risk.id == "missing-be_consumer_withdrawal"
        assert risk.risk_id == "be_consumer_withdrawal"
        assert risk.severity == RiskSeverity.HIGH
        assert risk.text == ""
        assert risk.context == ""
        assert (risk.position.field, risk.position.start, risk.position.end) == ("notes", 0, 0)
        assert risk.description == MISSING_MENTION_DESCRIPTION
        assert risk.auto_fix.type == AutoFixType.ADD_MENTION
        assert risk.auto_fix.value == risk.suggestion
        assert risk.auto_fix.value.startswith("Conformément au Code de droit économique")

    def test_single_keyword_is_enough(self):
        quote = {**CONSUMER_REMOTE, "notes": "Le CONSOMMATEUR peut se rétracter."}
        assert MentionChecker("fr-BE").missing_mentions(quote) == []

    def test_short_words_are_not_evidence(self):
        quote = {**CONSUMER_REMOTE, "notes": "Code 14 jours"}
        assert len(MentionChecker("fr-BE").missing_mentions(quote)) == 1

    def test_missing_notes_field(self):
        assert len(MentionChecker("fr-BE").missing_mentions(CONSUMER_REMOTE)) == 1

    def test_non_string_notes(self):
        quote = {**CONSUMER_REMOTE, "notes": ["droit"]}
        assert len(MentionChecker("fr-BE").missing_mentions(quote)) == 1

    def test_french_decennale_present(self):
        quote = {"sector": "RENOVATION", "notes": "Garantie décennale souscrite chez AXA."}
        assert MentionChecker("fr-FR").missing_mentions(quote) == []

    def test_non_mapping_quote(self):
        assert MentionChecker("fr-BE").missing_mentions(None) == []
