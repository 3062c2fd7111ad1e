"""Legal risk engine.

Orchestrates the scanner, the mention checker and the scorer over a quote
record:

1. Scan each configured field (dotted paths, non-string or blank skipped)
2. Scan each ``items[i].description``
3. Check the mandatory legal mentions of the locale
4. Keep the severities allowed by the sensitivity level
5. Count, score and recommend

The engine never raises because of the shape of the quote record; missing or
mistyped fields are treated as absent.
"""

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from quote_compliance.core.config import settings
from quote_compliance.core.exceptions import InvalidSensitivityError
from quote_compliance.core.logging import LogContext, get_logger
from quote_compliance.locales.registry import resolve_quote_locale
from quote_compliance.services.risk.autofix import AutoFixGenerator
from quote_compliance.services.risk.base import (
    SENSITIVITY_FILTERS,
    DetectedRisk,
    RiskAnalysisResult,
    Sensitivity,
)
from quote_compliance.services.risk.mentions import MentionChecker
from quote_compliance.services.risk.scanner import TextScanner
from quote_compliance.services.risk.scoring import ScoringConfig, summarize

logger = get_logger(__name__)


def parse_sensitivity(value: Any, strict: bool = False) -> Sensitivity:
    """Convert ``value`` to a sensitivity level.

    Args:
        value: Level name or Sensitivity member.
        strict: Raise instead of falling back to ``normal``.

    Raises:
        InvalidSensitivityError: ``value`` is unknown and ``strict`` is set.
    """
    try:
        return Sensitivity(value)
    except ValueError:
        if strict:
            raise InvalidSensitivityError(
                f"Unknown sensitivity level: {value!r}",
                sensitivity=str(value),
                allowed=[s.value for s in Sensitivity],
            ) from None
        logger.warning(
            f"Unknown sensitivity level {value!r}, using normal",
            extra={"sensitivity": str(value)},
        )
        return Sensitivity.NORMAL


def _nested_value(record: Any, path: str) -> Any:
    current = record
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
    return current


@dataclass
class RiskEngineConfig:
    """Engine configuration; defaults come from application settings."""

    locale: str = field(default_factory=lambda: settings.default_locale)
    sensitivity: Sensitivity = field(
        default_factory=lambda: Sensitivity(settings.default_sensitivity)
    )
    enable_auto_fix: bool = field(default_factory=lambda: settings.enable_auto_fix)
    fields_to_analyze: list[str] = field(
        default_factory=lambda: list(settings.fields_to_analyze)
    )
    exclude_patterns: list[str] = field(default_factory=list)
    context_chars: int = field(default_factory=lambda: settings.context_window_chars)


class LegalRiskEngine:
    """Detect risky phrasing and missing legal mentions in quotes."""

    def __init__(
        self,
        config: RiskEngineConfig | None = None,
        scoring: ScoringConfig | None = None,
    ) -> None:
        # Own copy: locale and sensitivity are resolved in place
        self.config = dataclasses.replace(config) if config else RiskEngineConfig()
        self.config.fields_to_analyze = list(self.config.fields_to_analyze)
        self.config.exclude_patterns = list(self.config.exclude_patterns)
        self.set_locale(self.config.locale)
        self.set_sensitivity(self.config.sensitivity)
        self.scoring = scoring or ScoringConfig()
        self._auto_fix = AutoFixGenerator() if self.config.enable_auto_fix else None

    @property
    def locale(self) -> str:
        return self.config.locale

    @property
    def sensitivity(self) -> Sensitivity:
        return self.config.sensitivity

    def set_locale(self, locale: str) -> None:
        """Switch locale; unknown codes fall back to the default locale."""
        resolved = resolve_quote_locale(locale)
        if resolved != locale:
            logger.debug(
                f"Unknown locale {locale!r}, falling back to {resolved}",
                extra={"locale": resolved},
            )
        self.config.locale = resolved

    def set_sensitivity(self, sensitivity: Sensitivity | str) -> None:
        self.config.sensitivity = parse_sensitivity(sensitivity)

    def _scanner(self) -> TextScanner:
        return TextScanner(
            locale=self.config.locale,
            exclude_patterns=self.config.exclude_patterns,
            auto_fix=self._auto_fix,
            context_chars=self.config.context_chars,
        )

    def analyze_text(self, text: Any, field: str = "unknown") -> list[DetectedRisk]:
        """Scan one text; no sensitivity filtering is applied."""
        return self._scanner().scan(text, field)

    def analyze_quote(self, quote: Any) -> RiskAnalysisResult:
        """Analyze a full quote record.

        Args:
            quote: Quote mapping. Anything else is treated as an empty record.

        Returns:
            RiskAnalysisResult with the findings allowed by the sensitivity.
        """
        record: Mapping[str, Any] = quote if isinstance(quote, Mapping) else {}
        scanner = self._scanner()
        risks: list[DetectedRisk] = []

        with LogContext(
            logger,
            "analyze_quote",
            level=logging.DEBUG,
            locale=self.config.locale,
            sensitivity=self.config.sensitivity.value,
        ):
            for path in self.config.fields_to_analyze:
                value = _nested_value(record, path)
                if isinstance(value, str) and value.strip():
                    risks.extend(scanner.scan(value, path))

            items = record.get("items")
            if isinstance(items, list):
                for i, item in enumerate(items):
                    description = (
                        item.get("description") if isinstance(item, Mapping) else None
                    )
                    if isinstance(description, str) and description:
                        risks.extend(
                            scanner.scan(description, f"items[{i}].description")
                        )

            risks.extend(MentionChecker(self.config.locale).missing_mentions(record))

            allowed = SENSITIVITY_FILTERS[self.config.sensitivity]
            filtered = [r for r in risks if r.severity in allowed]
            result = summarize(filtered, self.scoring)

        logger.debug(
            "Quote analyzed",
            extra={
                "locale": self.config.locale,
                "sensitivity": self.config.sensitivity.value,
                "total_risks": result.total_risks,
                "score": result.score,
            },
        )
        return result


# =========================================================
# Convenience entry points
# =========================================================


def analyze_quote(
    quote: Any, locale: str = "fr-BE", sensitivity: Sensitivity | str = "normal"
) -> RiskAnalysisResult:
    engine = LegalRiskEngine(
        RiskEngineConfig(locale=locale, sensitivity=parse_sensitivity(sensitivity))
    )
    return engine.analyze_quote(quote)


def quick_analyze(text: Any, locale: str = "fr-BE") -> list[DetectedRisk]:
    """Scan a single text with default settings."""
    return LegalRiskEngine(RiskEngineConfig(locale=locale)).analyze_text(text)
