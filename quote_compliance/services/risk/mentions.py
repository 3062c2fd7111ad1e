"""Detection of missing mandatory legal mentions.

A mention counts as present when any of its first five significant words
(longer than four characters) appears in the quote notes, ignoring case.
The check is deliberately loose: it looks for evidence, not exact wording.
"""

import re
from collections.abc import Mapping
from typing import Any

from quote_compliance.services.risk.base import (
    AutoFix,
    AutoFixType,
    DetectedRisk,
    RiskPosition,
    RiskSeverity,
)
from quote_compliance.services.risk.patterns import mandatory_mentions_for

MISSING_MENTION_DESCRIPTION = "Mention légale manquante"
MISSING_MENTION_EXPLANATION = (
    "La mention suivante est requise mais n'a pas été détectée dans les notes."
)

_PUNCTUATION_RE = re.compile(r"[.,;:!?()]")


def extract_keywords(text: str, limit: int = 5) -> list[str]:
    """First ``limit`` words longer than four characters, punctuation stripped."""
    words = _PUNCTUATION_RE.sub("", text).split()
    return [w for w in words if len(w) > 4][:limit]


class MentionChecker:
    """Report the mandatory mentions of a locale missing from the notes."""

    def __init__(self, locale: str) -> None:
        self.locale = locale

    def missing_mentions(self, quote: Mapping[str, Any]) -> list[DetectedRisk]:
        record = quote if isinstance(quote, Mapping) else {}
        notes = record.get("notes")
        notes = notes.lower() if isinstance(notes, str) else ""

        risks = []
        for mention in mandatory_mentions_for(self.locale, record):
            keywords = extract_keywords(mention.text)
            if any(kw.lower() in notes for kw in keywords):
                continue

            risks.append(
                DetectedRisk(
                    id=f"missing-{mention.id}",
                    risk_id=mention.id,
                    category=mention.category,
                    severity=RiskSeverity.HIGH,
                    text="",
                    context="",
                    position=RiskPosition(field="notes", start=0, end=0),
                    description=MISSING_MENTION_DESCRIPTION,
                    explanation=MISSING_MENTION_EXPLANATION,
                    suggestion=mention.text,
                    auto_fix=AutoFix(type=AutoFixType.ADD_MENTION, value=mention.text),
                )
            )
        return risks
