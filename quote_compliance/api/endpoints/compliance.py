"""Quote compliance endpoints.

Risk analysis of full quotes, single-text scans and application of the
proposed corrections.
"""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PayloadError

from quote_compliance.core.config import settings
from quote_compliance.core.exceptions import ValidationError
from quote_compliance.core.logging import audit_log, get_logger
from quote_compliance.services.risk import (
    AutoFixType,
    DetectedRisk,
    LegalRiskEngine,
    RiskCategory,
    RiskEngineConfig,
    RiskSeverity,
    apply_all_fixes,
    apply_fix,
    parse_sensitivity,
)

logger = get_logger(__name__)

router = APIRouter()


class AnalyzeRequest(BaseModel):
    """Quote analysis request body."""

    quote: dict[str, Any]
    locale: str | None = Field(None, description="Locale code; defaults to quote.locale")
    sensitivity: str | None = Field(None, description="strict, normal or permissive")
    enable_auto_fix: bool | None = None
    exclude_patterns: list[str] = Field(default_factory=list)


class ScanRequest(BaseModel):
    """Single text scan request body."""

    text: str
    field: str = "unknown"
    locale: str | None = None


class PositionPayload(BaseModel):
    field: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)


class AutoFixPayload(BaseModel):
    type: AutoFixType
    value: str


class RiskPayload(BaseModel):
    """A finding as returned by /analyze or /scan."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    risk_id: str = Field(alias="riskId")
    category: RiskCategory
    severity: RiskSeverity
    text: str = ""
    context: str = ""
    position: PositionPayload
    description: str = ""
    explanation: str = ""
    suggestion: str | None = None
    auto_fix: AutoFixPayload | None = Field(None, alias="autoFix")


class ApplyFixRequest(BaseModel):
    """Correction request body: the quote and the finding to fix."""

    quote: dict[str, Any]
    risk: dict[str, Any]


class ApplyAllFixesRequest(BaseModel):
    quote: dict[str, Any]
    risks: list[dict[str, Any]]


def _build_engine(
    locale: str | None,
    sensitivity: str | None = None,
    enable_auto_fix: bool | None = None,
    exclude_patterns: list[str] | None = None,
) -> LegalRiskEngine:
    config = RiskEngineConfig(
        locale=locale or settings.default_locale,
        sensitivity=parse_sensitivity(
            sensitivity or settings.default_sensitivity, strict=True
        ),
        exclude_patterns=list(exclude_patterns or []),
    )
    if enable_auto_fix is not None:
        config.enable_auto_fix = enable_auto_fix
    return LegalRiskEngine(config)


def _parse_risk(data: dict[str, Any]) -> DetectedRisk:
    try:
        payload = RiskPayload.model_validate(data)
    except PayloadError as e:
        raise ValidationError(
            "Malformed risk payload",
            detail={
                "risk_id": data.get("riskId"),
                "errors": [
                    {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
                ],
            },
        ) from e
    return DetectedRisk.from_dict(payload.model_dump(by_alias=True))


# --- Endpoints ---


@router.post("/analyze")
def analyze(request: AnalyzeRequest) -> dict[str, Any]:
    """Analyze a quote for risky phrasing and missing legal mentions.

    Args:
        request: Quote, optional locale, sensitivity and engine options.

    Returns:
        Analysis result with the resolved locale and sensitivity.

    Raises:
        InvalidSensitivityError: Unknown sensitivity level (400).
    """
    engine = _build_engine(
        request.locale or request.quote.get("locale"),
        request.sensitivity,
        request.enable_auto_fix,
        request.exclude_patterns,
    )
    result = engine.analyze_quote(request.quote)

    audit_log.info(
        "Quote analyzed",
        extra={
            "event_type": "quote_analysis",
            "locale": engine.locale,
            "sensitivity": engine.sensitivity.value,
            "total_risks": result.total_risks,
            "score": result.score,
        },
    )

    return {
        "locale": engine.locale,
        "sensitivity": engine.sensitivity.value,
        **result.to_dict(),
    }


@router.post("/scan")
def scan(request: ScanRequest) -> dict[str, Any]:
    """Scan one text field; no sensitivity filtering is applied."""
    engine = _build_engine(request.locale)
    risks = engine.analyze_text(request.text, request.field)
    return {
        "locale": engine.locale,
        "risks": [r.to_dict() for r in risks],
        "total": len(risks),
    }


@router.post("/apply-fix")
def fix(request: ApplyFixRequest) -> dict[str, Any]:
    """Apply the correction of one finding to a copy of the quote.

    A finding whose span no longer holds its text leaves the quote unchanged.
    """
    risk = _parse_risk(request.risk)
    if risk.auto_fix is None:
        raise ValidationError(
            "Risk has no automatic correction",
            detail={"risk_id": risk.risk_id},
        )
    fixed = apply_fix(request.quote, risk)
    return {"quote": fixed, "applied": fixed != request.quote}


@router.post("/apply-all-fixes")
def fix_all(request: ApplyAllFixesRequest) -> dict[str, Any]:
    """Apply every available correction to a copy of the quote."""
    risks = [_parse_risk(r) for r in request.risks]
    fixed = apply_all_fixes(request.quote, risks)
    logger.info(
        "Corrections applied",
        extra={"total_risks": len(risks), "event_type": "apply_all_fixes"},
    )
    return {"quote": fixed, "applied": fixed != request.quote}
