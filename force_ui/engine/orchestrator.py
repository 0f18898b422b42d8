# force_ui/engine/orchestrator.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..config.intent_mappings import INTENT_COMPONENT_MAP
from ..models import (
    ComponentDecision,
    ComponentSelection,
    Intent,
    IntentResult,
    UserMemory,
)
from .component_registry import ComponentRegistry
from .explainability import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_MAX_COMPONENTS = 5
USAGE_WEIGHT = 0.5
USAGE_CAP = 5.0
HIGH_PRIORITY = 8

NO_COMPONENTS_REASONING = "No components selected for this intent"


# ---------------------------------------------------------------------- #
# Default props per component
# ---------------------------------------------------------------------- #

def _timeline_props(intent_result: IntentResult) -> dict[str, Any]:
    title = intent_result.entities[0] if intent_result.entities else "Project Timeline"
    return {"title": title, "events": []}


def _kanban_props(intent_result: IntentResult) -> dict[str, Any]:
    return {"title": "Tasks", "columns": ["To Do", "In Progress", "Done"]}


def _stats_props(intent_result: IntentResult) -> dict[str, Any]:
    return {"metrics": []}


def _chart_props(intent_result: IntentResult) -> dict[str, Any]:
    return {"type": "bar", "data": []}


def _notes_props(intent_result: IntentResult) -> dict[str, Any]:
    return {"title": "Notes", "content": ""}


PROP_BUILDERS: dict[str, Callable[[IntentResult], dict[str, Any]]] = {
    "Timeline": _timeline_props,
    "KanbanBoard": _kanban_props,
    "StatsCard": _stats_props,
    "ChartView": _chart_props,
    "NotesPanel": _notes_props,
}


def generate_component_props(component_id: str, intent_result: IntentResult) -> dict[str, Any]:
    """Best-effort default props; the rendering layer may override them."""
    props: dict[str, Any] = {
        "intent": intent_result.primary_intent,
        "entities": list(intent_result.entities),
    }
    builder = PROP_BUILDERS.get(component_id)
    if builder is not None:
        props.update(builder(intent_result))
    return props


class Orchestrator:
    """
    Turns a classified intent into a ranked, bounded ComponentSelection.

    Score per candidate:
    - confidence * 10 if the component serves the primary intent
    - 2 per sub intent the component also serves
    - 3 if the component suits the detected persona
    - 0.5 per recorded use, capped at 5
    - priority * 0.5
    Candidates missing from the registry score 0.
    """

    def __init__(
        self,
        registry: ComponentRegistry,
        intent_component_map: dict[Intent, list[str]] | None = None,
    ) -> None:
        self.registry = registry
        self.intent_component_map = (
            INTENT_COMPONENT_MAP if intent_component_map is None else intent_component_map
        )

    # ------------------------------------------------------------------ #
    # Candidates & scoring
    # ------------------------------------------------------------------ #

    def _candidate_ids(self, intent_result: IntentResult) -> list[str]:
        ids: list[str] = list(self.intent_component_map.get(intent_result.primary_intent, []))
        for sub_intent in intent_result.sub_intents:
            ids.extend(self.intent_component_map.get(sub_intent, []))
        return list(dict.fromkeys(ids))

    def score_component(
        self,
        component_id: str,
        intent_result: IntentResult,
        memory: UserMemory | None = None,
    ) -> float:
        metadata = self.registry.get(component_id)
        if metadata is None:
            logger.info("[Orchestrator.score_component] %s is not registered, scoring 0", component_id)
            return 0.0

        score = 0.0

        if intent_result.primary_intent in metadata.intents:
            score += intent_result.confidence * 10

        sub_matches = sum(1 for si in intent_result.sub_intents if si in metadata.intents)
        score += sub_matches * 2

        if intent_result.persona in metadata.personas:
            score += 3

        if memory is not None:
            usage_count = memory.component_history.get(component_id, 0)
            score += min(usage_count * USAGE_WEIGHT, USAGE_CAP)

        score += metadata.priority * 0.5
        return score

    # ------------------------------------------------------------------ #
    # Reasoning
    # ------------------------------------------------------------------ #

    def _component_reasoning(self, component_id: str, intent_result: IntentResult) -> str:
        metadata = self.registry.get(component_id)
        if metadata is None:
            return "Selected based on system defaults"

        reasons: list[str] = []

        if intent_result.primary_intent in metadata.intents:
            reasons.append(f"Matches primary intent: {intent_result.primary_intent}")

        sub_matches = [si for si in intent_result.sub_intents if si in metadata.intents]
        if sub_matches:
            reasons.append(f"Also relevant for: {', '.join(sub_matches)}")

        if intent_result.persona in metadata.personas:
            reasons.append(f"Optimized for {intent_result.persona} persona")

        if metadata.priority >= HIGH_PRIORITY:
            reasons.append("High priority component")

        return " • ".join(reasons) or "Standard selection"

    @staticmethod
    def _layout_reasoning(
        components: list[ComponentDecision],
        intent_result: IntentResult,
    ) -> str:
        if not components:
            return NO_COMPONENTS_REASONING

        top = components[0]
        top_score = round_half_up(top.score, 1)
        reasons = [f"{top.component_id} placed prominently (highest match: {top_score:.1f}pts)"]

        if len(components) > 1:
            supporting = [c.component_id for c in components[1:3]]
            reasons.append(f"Supporting components: {', '.join(supporting)}")

        reasons.append(f"Layout optimized for {intent_result.persona} workflow")
        return " • ".join(reasons)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def orchestrate(
        self,
        intent_result: IntentResult,
        memory: UserMemory | None = None,
        max_components: int = DEFAULT_MAX_COMPONENTS,
    ) -> ComponentSelection:
        candidates = self._candidate_ids(intent_result)

        scored = [
            (cid, self.score_component(cid, intent_result, memory))
            for cid in candidates
        ]
        # stable sort: ties keep discovery order
        scored.sort(key=lambda s: s[1], reverse=True)
        scored = scored[: max(max_components, 0)]

        components = [
            ComponentDecision(
                component_id=cid,
                score=score,
                reasoning=self._component_reasoning(cid, intent_result),
                props=generate_component_props(cid, intent_result),
            )
            for cid, score in scored
        ]

        return ComponentSelection(
            components=components,
            layout_reasoning=self._layout_reasoning(components, intent_result),
        )
