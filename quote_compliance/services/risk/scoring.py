"""Risk scoring and recommendations.

Scoring methodology:
1. Base score starts at 0 (no risk)
2. Each finding adds points based on its severity
3. Score is capped at 100

Recommendations: one sentence per risk category present (category
declaration order), followed by a note when automatic corrections exist.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from quote_compliance.services.risk.base import (
    DetectedRisk,
    RiskAnalysisResult,
    RiskCategory,
    RiskSeverity,
)

SEVERITY_WEIGHTS: dict[RiskSeverity, int] = {
    RiskSeverity.CRITICAL: 25,
    RiskSeverity.HIGH: 15,
    RiskSeverity.MEDIUM: 8,
    RiskSeverity.LOW: 3,
    RiskSeverity.INFO: 0,
}

CATEGORY_RECOMMENDATIONS: dict[RiskCategory, str] = {
    RiskCategory.BINDING_COMMITMENT: (
        "Revoyez les formulations d'engagement pour éviter les promesses absolues."
    ),
    RiskCategory.PRICE_GUARANTEE: (
        "Ajoutez une clause de révision des prix en cas de variation importante des coûts."
    ),
    RiskCategory.TIMELINE_GUARANTEE: (
        "Précisez que les délais sont indicatifs et soumis à conditions."
    ),
    RiskCategory.LIABILITY: (
        "Limitez votre responsabilité au montant du devis ou à vos couvertures "
        "d'assurance."
    ),
    RiskCategory.SCOPE_CREEP: (
        "Définissez précisément le périmètre inclus et les exclusions."
    ),
    RiskCategory.AMBIGUITY: (
        "Précisez les quantités, dates et conditions pour éviter les malentendus."
    ),
}

AUTO_FIX_RECOMMENDATION = (
    "Des corrections automatiques sont disponibles pour certains risques."
)


@dataclass
class ScoringConfig:
    """Configuration for risk scoring."""

    severity_weights: dict[RiskSeverity, int] = field(
        default_factory=lambda: dict(SEVERITY_WEIGHTS)
    )

    # Maximum score cap
    max_score: int = 100


def calculate_score(risks: Iterable[DetectedRisk], config: ScoringConfig | None = None) -> int:
    """Sum severity weights, capped at ``config.max_score``."""
    config = config or ScoringConfig()
    total = sum(config.severity_weights.get(r.severity, 0) for r in risks)
    return min(config.max_score, total)


def generate_recommendations(risks: Sequence[DetectedRisk]) -> list[str]:
    categories = {r.category for r in risks}
    recommendations = [
        sentence
        for category, sentence in CATEGORY_RECOMMENDATIONS.items()
        if category in categories
    ]
    if any(r.auto_fix is not None for r in risks):
        recommendations.append(AUTO_FIX_RECOMMENDATION)
    return recommendations


def summarize(
    risks: list[DetectedRisk], config: ScoringConfig | None = None
) -> RiskAnalysisResult:
    """Build the aggregated result for already-filtered findings."""
    counts = {severity: 0 for severity in RiskSeverity}
    for risk in risks:
        counts[risk.severity] += 1

    return RiskAnalysisResult(
        has_risks=bool(risks),
        total_risks=len(risks),
        critical_count=counts[RiskSeverity.CRITICAL],
        high_count=counts[RiskSeverity.HIGH],
        medium_count=counts[RiskSeverity.MEDIUM],
        low_count=counts[RiskSeverity.LOW],
        risks=risks,
        score=calculate_score(risks, config),
        recommendations=generate_recommendations(risks),
        auto_fix_available=any(r.auto_fix is not None for r in risks),
    )
