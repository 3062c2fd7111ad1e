"""Legal risk detection for quotes.

Modules:
- base: severities, categories, findings and result types
- patterns: risk pattern and legal mention catalog (validated at import)
- conditions: trigger conditions of conditional legal mentions
- scanner: regex scanner over one text field
- mentions: missing mandatory mention detection
- autofix: proposed corrections and their application
- scoring: score and recommendations
- engine: orchestration over a full quote record
"""

from quote_compliance.services.risk.autofix import (
    AutoFixGenerator,
    apply_all_fixes,
    apply_fix,
)
from quote_compliance.services.risk.base import (
    SENSITIVITY_FILTERS,
    AutoFix,
    AutoFixType,
    DetectedRisk,
    LegalMention,
    RiskAnalysisResult,
    RiskCategory,
    RiskPattern,
    RiskPosition,
    RiskSeverity,
    Sensitivity,
)
from quote_compliance.services.risk.engine import (
    LegalRiskEngine,
    RiskEngineConfig,
    analyze_quote,
    parse_sensitivity,
    quick_analyze,
)
from quote_compliance.services.risk.mentions import MentionChecker, extract_keywords
from quote_compliance.services.risk.patterns import (
    LEGAL_MENTIONS,
    RISK_PATTERNS,
    mandatory_mentions_for,
    patterns_for,
    validate_catalog,
)
from quote_compliance.services.risk.scanner import TextScanner
from quote_compliance.services.risk.scoring import (
    SEVERITY_WEIGHTS,
    ScoringConfig,
    calculate_score,
    generate_recommendations,
)

__all__ = [
    # Types
    "RiskSeverity",
    "RiskCategory",
    "Sensitivity",
    "SENSITIVITY_FILTERS",
    "AutoFix",
    "AutoFixType",
    "RiskPattern",
    "LegalMention",
    "RiskPosition",
    "DetectedRisk",
    "RiskAnalysisResult",
    # Catalog
    "RISK_PATTERNS",
    "LEGAL_MENTIONS",
    "patterns_for",
    "mandatory_mentions_for",
    "validate_catalog",
    # Components
    "TextScanner",
    "MentionChecker",
    "extract_keywords",
    "AutoFixGenerator",
    "apply_fix",
    "apply_all_fixes",
    "SEVERITY_WEIGHTS",
    "ScoringConfig",
    "calculate_score",
    "generate_recommendations",
    # Engine
    "LegalRiskEngine",
    "RiskEngineConfig",
    "parse_sensitivity",
    "analyze_quote",
    "quick_analyze",
]
