"""Regex scanner producing risk findings for one text field."""

from collections.abc import Iterable
from typing import Any

from quote_compliance.services.risk.autofix import AutoFixGenerator
from quote_compliance.services.risk.base import DetectedRisk, RiskPosition
from quote_compliance.services.risk.patterns import matchers_for, patterns_for

DEFAULT_CONTEXT_CHARS = 50


class TextScanner:
    """Scan text against the patterns applicable to one locale.

    Every pattern (catalog order) and every matcher (declaration order)
    reports all of its non-overlapping matches. A match whose text contains
    one of ``exclude_patterns`` is dropped.
    """

    def __init__(
        self,
        locale: str,
        exclude_patterns: Iterable[str] = (),
        auto_fix: AutoFixGenerator | None = None,
        context_chars: int = DEFAULT_CONTEXT_CHARS,
    ) -> None:
        self.locale = locale
        self.exclude_patterns = tuple(p for p in exclude_patterns if p)
        self.auto_fix = auto_fix
        self.context_chars = context_chars

    def _excluded(self, matched: str) -> bool:
        return any(p in matched for p in self.exclude_patterns)

    def scan(self, text: Any, field: str = "unknown") -> list[DetectedRisk]:
        """Return the findings in ``text``; non-string input yields none."""
        if not isinstance(text, str) or not text:
            return []

        risks: list[DetectedRisk] = []
        for pattern in patterns_for(self.locale):
            for matcher in matchers_for(pattern):
                for match in matcher.finditer(text):
                    matched = match.group(0)
                    if self._excluded(matched):
                        continue

                    start, end = match.start(), match.end()
                    context = text[
                        max(0, start - self.context_chars) : min(
                            len(text), end + self.context_chars
                        )
                    ]
                    risks.append(
                        DetectedRisk(
                            id=f"{pattern.id}-{start}",
                            risk_id=pattern.id,
                            category=pattern.category,
                            severity=pattern.severity,
                            text=matched,
                            context=context,
                            position=RiskPosition(field=field, start=start, end=end),
                            description=pattern.description,
                            explanation=pattern.explanation,
                            suggestion=pattern.suggestion,
                            auto_fix=self.auto_fix.fix_for(pattern, matched)
                            if self.auto_fix
                            else None,
                        )
                    )
        return risks
