"""Business logic services for Quote Compliance.

Services:
- risk: legal risk detection, scoring and automatic corrections
"""

from quote_compliance.services.risk import (
    LegalRiskEngine,
    RiskAnalysisResult,
    RiskEngineConfig,
    analyze_quote,
    quick_analyze,
)

__all__ = [
    "LegalRiskEngine",
    "RiskEngineConfig",
    "RiskAnalysisResult",
    "analyze_quote",
    "quick_analyze",
]
