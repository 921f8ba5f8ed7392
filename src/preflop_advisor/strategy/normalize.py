"""Parsing and normalization of model completions.

The model is asked for strict JSON but nothing guarantees it. Text that does
not parse is replaced by ``FALLBACK_DECISION``; parsed or not, every field is
then coerced to the ``Decision`` schema so callers always get the same shape.
"""

from __future__ import annotations

import copy
import json
import math
from typing import Any, Dict, List

from ..state.model import Decision
from ..telemetry.logger import get_logger


PARSE_FAILED_FLAG = "Model JSON parse failed; used fallback"

FALLBACK_DECISION: Dict[str, Any] = {
    "decision": "Call",
    "confidence": 0.5,
    "rationale": "Fallback: price/position looks acceptable; JSON from model was invalid.",
    "when_fold": ["Facing large raises out of position", "Tight ranges from early position"],
    "when_call": ["Good price vs bluff-heavy opponents", "In position with playable hands"],
    "when_raise": ["Premium hands for value", "Late position vs weak opens"],
    "risk_flags": [PARSE_FAILED_FLAG],
}

DEFAULT_DECISION = "Call"
DEFAULT_CONFIDENCE = 0.5
DEFAULT_RATIONALE = "No rationale provided."

LIST_FIELDS = ("when_fold", "when_call", "when_raise", "risk_flags")


def parse_completion(text: str) -> Dict[str, Any]:
    """Parse completion text as JSON, substituting the fallback on failure.

    A valid JSON value that is not an object yields an empty mapping, so every
    field falls back to its default during normalization.
    """
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        get_logger().warning("Completion is not valid JSON, using fallback: %.200r", text)
        return copy.deepcopy(FALLBACK_DECISION)
    if not isinstance(parsed, dict):
        return {}
    return parsed


def _coerce_confidence(value: Any) -> float:
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_CONFIDENCE
    return number if math.isfinite(number) else DEFAULT_CONFIDENCE


def _coerce_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else json.dumps(item) for item in value]


def normalize_decision(parsed: Dict[str, Any]) -> Decision:
    """Coerce every field of a parsed payload to the decision schema."""
    decision = parsed.get("decision")
    rationale = parsed.get("rationale")
    return Decision(
        decision=str(decision) if decision else DEFAULT_DECISION,
        confidence=_coerce_confidence(parsed.get("confidence")),
        rationale=str(rationale) if rationale else DEFAULT_RATIONALE,
        **{name: _coerce_list(parsed.get(name)) for name in LIST_FIELDS},
    )
