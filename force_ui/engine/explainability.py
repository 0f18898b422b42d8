# force_ui/engine/explainability.py

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from uuid import uuid4

from ..models import ComponentDecision, DecisionLog, IntentResult
from ..timeutils import now_iso, now_ms


def round_half_up(value: float, places: int = 0) -> float:
    """Round with halves going up (12.25 -> 12.3), unlike the builtin round()."""
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def create_decision_log(
    intent_result: IntentResult,
    selected_components: list[ComponentDecision],
    layout_reasoning: str,
) -> DecisionLog:
    # the log keeps its own copies; callers may still edit props on theirs
    return DecisionLog(
        id=f"log-{now_ms()}-{uuid4().hex[:9]}",
        timestamp=now_iso(),
        intent_analysis=intent_result,
        selected_components=[c.model_copy(deep=True) for c in selected_components],
        layout_reasoning=layout_reasoning,
    )


def format_for_display(log: DecisionLog) -> dict[str, Any]:
    """
    Presentation view of a decision log.

    - confidence as an integer percentage
    - scores rounded to one decimal
    """
    intent = log.intent_analysis
    return {
        "intent_analysis": {
            "input": intent.raw_input,
            "primary": intent.primary_intent,
            "confidence": int(round_half_up(intent.confidence * 100)),
            "sub_intents": list(intent.sub_intents),
        },
        "component_decisions": [
            {
                "name": c.component_id,
                "score": round_half_up(c.score, 1),
                "reasoning": c.reasoning,
            }
            for c in log.selected_components
        ],
        "layout_reasoning": log.layout_reasoning,
    }
