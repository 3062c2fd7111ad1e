"""Shared types for legal risk detection.

Defines severities, categories, sensitivity levels and the records exchanged
between the catalog, the scanner, the mention checker and the engine.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class RiskSeverity(StrEnum):
    """Severity level of a detected risk."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"  # reported, never scored


class RiskCategory(StrEnum):
    """Category of risk; declaration order drives recommendation order."""

    BINDING_COMMITMENT = "binding_commitment"
    PRICE_GUARANTEE = "price_guarantee"
    TIMELINE_GUARANTEE = "timeline_guarantee"
    WARRANTY = "warranty"
    PENALTY_CLAUSE = "penalty_clause"
    LIABILITY = "liability"
    CANCELLATION = "cancellation"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    CONFIDENTIALITY = "confidentiality"
    PAYMENT_TERMS = "payment_terms"
    SCOPE_CREEP = "scope_creep"
    AMBIGUITY = "ambiguity"
    MISSING_INFO = "missing_info"


class Sensitivity(StrEnum):
    """How many severities survive the final filter."""

    STRICT = "strict"
    NORMAL = "normal"
    PERMISSIVE = "permissive"


SENSITIVITY_FILTERS: dict[Sensitivity, frozenset[RiskSeverity]] = {
    Sensitivity.STRICT: frozenset(RiskSeverity),
    Sensitivity.NORMAL: frozenset(
        {RiskSeverity.CRITICAL, RiskSeverity.HIGH, RiskSeverity.MEDIUM}
    ),
    Sensitivity.PERMISSIVE: frozenset({RiskSeverity.CRITICAL}),
}


class AutoFixType(StrEnum):
    """Kind of edit an automatic correction performs."""

    REPLACE = "replace"
    APPEND = "append"
    REMOVE = "remove"
    ADD_MENTION = "add_mention"


REGEX_FLAGS = re.IGNORECASE | re.MULTILINE


@dataclass(frozen=True)
class RiskPattern:
    """Catalog entry describing one kind of risky phrasing.

    ``patterns`` holds regular expression sources; an empty ``locales`` tuple
    makes the entry apply to every locale.
    """

    id: str
    category: RiskCategory
    severity: RiskSeverity
    patterns: tuple[str, ...]
    description: str
    explanation: str
    suggestion: str | None = None
    locales: tuple[str, ...] = ()

    def applies_to(self, locale: str) -> bool:
        return not self.locales or locale in self.locales

    def compile(self) -> tuple[re.Pattern[str], ...]:
        """Compile every matcher (case-insensitive, multi-line)."""
        return tuple(re.compile(source, REGEX_FLAGS) for source in self.patterns)


@dataclass(frozen=True)
class LegalMention:
    """A legal sentence a quote must carry when ``condition`` holds."""

    id: str
    category: RiskCategory
    locale: str
    text: str
    mandatory: bool = True
    condition: Callable[[Mapping[str, Any]], bool] | None = None

    def is_required(self, quote: Mapping[str, Any]) -> bool:
        if not self.mandatory:
            return False
        return self.condition is None or bool(self.condition(quote))


@dataclass(frozen=True)
class AutoFix:
    """Proposed correction attached to a finding."""

    type: AutoFixType
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "value": self.value}


@dataclass(frozen=True)
class RiskPosition:
    """Location of a finding: field path plus character span."""

    field: str
    start: int
    end: int

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "start": self.start, "end": self.end}


@dataclass
class DetectedRisk:
    """Single finding produced by the scanner or the mention checker."""

    id: str
    risk_id: str
    category: RiskCategory
    severity: RiskSeverity
    text: str
    context: str
    position: RiskPosition
    description: str
    explanation: str
    suggestion: str | None = None
    auto_fix: AutoFix | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase output contract."""
        data: dict[str, Any] = {
            "id": self.id,
            "riskId": self.risk_id,
            "category": self.category.value,
            "severity": self.severity.value,
            "text": self.text,
            "context": self.context,
            "position": self.position.to_dict(),
            "description": self.description,
            "explanation": self.explanation,
        }
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        if self.auto_fix is not None:
            data["autoFix"] = self.auto_fix.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DetectedRisk":
        """Rebuild a finding from its ``to_dict()`` form.

        Raises:
            KeyError: A required key is missing.
            TypeError: A text field or the correction value is not a string.
            ValueError: An enum value is unknown.
        """
        position = data["position"]
        auto_fix = data.get("autoFix")
        _require_str("position.field", position["field"])
        _require_str("text", data.get("text", ""))
        if auto_fix:
            _require_str("autoFix.value", auto_fix["value"])
        return cls(
            id=data["id"],
            risk_id=data["riskId"],
            category=RiskCategory(data["category"]),
            severity=RiskSeverity(data["severity"]),
            text=data.get("text", ""),
            context=data.get("context", ""),
            position=RiskPosition(
                field=position["field"],
                start=int(position["start"]),
                end=int(position["end"]),
            ),
            description=data.get("description", ""),
            explanation=data.get("explanation", ""),
            suggestion=data.get("suggestion"),
            auto_fix=AutoFix(AutoFixType(auto_fix["type"]), auto_fix["value"])
            if auto_fix
            else None,
        )


def _require_str(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


@dataclass
class RiskAnalysisResult:
    """Aggregated outcome of analysing one quote."""

    has_risks: bool = False
    total_risks: int = 0
    critical_count: int = 0
    high_count: int = 0
    medium_count: int = 0
    low_count: int = 0
    risks: list[DetectedRisk] = field(default_factory=list)
    score: int = 0
    recommendations: list[str] = field(default_factory=list)
    auto_fix_available: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase output contract."""
        return {
            "hasRisks": self.has_risks,
            "totalRisks": self.total_risks,
            "criticalCount": self.critical_count,
            "highCount": self.high_count,
            "mediumCount": self.medium_count,
            "lowCount": self.low_count,
            "risks": [r.to_dict() for r in self.risks],
            "score": self.score,
            "recommendations": self.recommendations,
            "autoFixAvailable": self.auto_fix_available,
        }
