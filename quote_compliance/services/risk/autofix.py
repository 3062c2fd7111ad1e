"""Automatic corrections for detected risks.

Provides:
- AutoFixGenerator: proposes a correction for a matched risky phrase
- apply_fix / apply_all_fixes: apply proposed corrections to a quote record
"""

import copy
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from quote_compliance.core.logging import get_logger
from quote_compliance.services.risk.base import (
    AutoFix,
    AutoFixType,
    DetectedRisk,
    RiskPattern,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class FixRule:
    """How to build the correction for one pattern id.

    ``search`` set: replace every occurrence in the matched text with
    ``value``. ``search`` unset: ``value`` is used as is.
    """

    type: AutoFixType
    value: str
    search: str | None = None

    def build(self, matched_text: str) -> AutoFix:
        if self.search is None:
            return AutoFix(type=self.type, value=self.value)
        replaced = re.sub(self.search, self.value, matched_text, flags=re.IGNORECASE)
        return AutoFix(type=self.type, value=replaced)


AUTO_FIX_RULES: dict[str, FixRule] = {
    "binding_guarantee": FixRule(
        type=AutoFixType.REPLACE,
        search=r"garanti[es]?\s+(à\s+100%|totale?ment|absolument)",
        value="prévu sous réserve des conditions habituelles",
    ),
    "fixed_price_guarantee": FixRule(
        type=AutoFixType.APPEND,
        value=" (hors variations exceptionnelles des prix des matières premières)",
    ),
    "deadline_guarantee": FixRule(
        type=AutoFixType.REPLACE,
        search=r"garanti",
        value="indicatif, sous réserve de disponibilité",
    ),
}

AUTO_FIX_PATTERN_IDS: tuple[str, ...] = tuple(AUTO_FIX_RULES)


class AutoFixGenerator:
    """Propose corrections from the fixed per-pattern table."""

    def __init__(self, rules: Mapping[str, FixRule] | None = None) -> None:
        self._rules = dict(AUTO_FIX_RULES if rules is None else rules)

    def fix_for(self, pattern: RiskPattern, matched_text: str) -> AutoFix | None:
        """Return the correction for ``pattern``, or None when it has none."""
        rule = self._rules.get(pattern.id)
        if rule is None:
            return None
        return rule.build(matched_text)


# =========================================================
# Applying fixes
# =========================================================

_PATH_PART_RE = re.compile(r"^(?P<key>[^\[\]]+)(?:\[(?P<index>\d+)\])?$")


def _resolve_parent(record: Any, path: str) -> tuple[Any, Any] | None:
    """Walk ``path`` (``items[0].description``, ``a.b``) to the parent container.

    Returns:
        (container, key) for the last path segment, or None if the path
        does not exist in ``record``.
    """
    steps: list[Any] = []
    for part in path.split("."):
        match = _PATH_PART_RE.match(part)
        if match is None:
            return None
        steps.append(match.group("key"))
        if match.group("index") is not None:
            steps.append(int(match.group("index")))

    container = record
    for step in steps[:-1]:
        container = _child(container, step)
        if container is None:
            return None

    last = steps[-1]
    if isinstance(last, int):
        if not isinstance(container, list) or last >= len(container):
            return None
    elif not isinstance(container, dict):
        return None
    return container, last


def _child(container: Any, step: Any) -> Any:
    if isinstance(step, int):
        if isinstance(container, list) and step < len(container):
            return container[step]
        return None
    if isinstance(container, dict):
        return container.get(step)
    return None


def _edit_span(text: str, risk: DetectedRisk) -> str | None:
    start, end = risk.position.start, risk.position.end
    if not (0 <= start <= end <= len(text)) or text[start:end] != risk.text:
        return None

    fix = risk.auto_fix
    if fix.type == AutoFixType.REPLACE:
        return text[:start] + fix.value + text[end:]
    if fix.type == AutoFixType.APPEND:
        return text[:end] + fix.value + text[end:]
    if fix.type == AutoFixType.REMOVE:
        return text[:start] + text[end:]
    return None


def _apply_in_place(record: dict[str, Any], risk: DetectedRisk) -> bool:
    fix = risk.auto_fix
    if fix is None:
        return False

    if fix.type == AutoFixType.ADD_MENTION:
        notes = record.get("notes")
        if isinstance(notes, str) and notes.strip():
            record["notes"] = f"{notes}\n\n{fix.value}"
        else:
            record["notes"] = fix.value
        return True

    target = _resolve_parent(record, risk.position.field)
    if target is None:
        return False
    container, key = target
    current = container[key]
    if not isinstance(current, str):
        return False

    edited = _edit_span(current, risk)
    if edited is None:
        logger.debug(
            "Stale or invalid span, fix skipped",
            extra={"risk_id": risk.risk_id, "field": risk.position.field},
        )
        return False
    container[key] = edited
    return True


def apply_fix(quote: Mapping[str, Any], risk: DetectedRisk) -> dict[str, Any]:
    """Return a copy of ``quote`` with the correction of ``risk`` applied.

    The span is edited only while it still holds the finding's text; otherwise
    the copy is returned unchanged. ``quote`` itself is never modified.
    """
    record = copy.deepcopy(dict(quote)) if isinstance(quote, Mapping) else {}
    _apply_in_place(record, risk)
    return record


def apply_all_fixes(
    quote: Mapping[str, Any], risks: Iterable[DetectedRisk]
) -> dict[str, Any]:
    """Apply every available correction, right to left within each field.

    Findings are deduplicated on their id and field before applying.
    """
    record = copy.deepcopy(dict(quote)) if isinstance(quote, Mapping) else {}

    fixable: list[DetectedRisk] = []
    seen: set[tuple[str, str]] = set()
    for risk in risks:
        key = (risk.id, risk.position.field)
        if risk.auto_fix is None or key in seen:
            continue
        seen.add(key)
        fixable.append(risk)

    span_fixes = [r for r in fixable if r.auto_fix.type != AutoFixType.ADD_MENTION]
    mentions = [r for r in fixable if r.auto_fix.type == AutoFixType.ADD_MENTION]

    span_fixes.sort(key=lambda r: (r.position.field, r.position.start), reverse=True)

    applied = 0
    for risk in [*span_fixes, *mentions]:
        if _apply_in_place(record, risk):
            applied += 1

    logger.debug(f"Applied {applied}/{len(fixable)} automatic corrections")
    return record
