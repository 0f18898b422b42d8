# force_ui/forceui.py

from __future__ import annotations

import logging
from typing import Any

from .engine.component_registry import ComponentRegistry
from .engine.context_resolver import ContextResolver, has_significant_change
from .engine.explainability import create_decision_log, format_for_display
from .engine.intent_classifier import IntentClassifier
from .engine.orchestrator import DEFAULT_MAX_COMPONENTS, Orchestrator
from .llm.enhancer import IntentEnhancer
from .models import ComponentSelection, DecisionLog, Persona, ResolvedContext
from .storage.decision_log_store import DecisionLogStore
from .storage.memory_store import MemoryStore
from .storage.persona_store import PersonaStore
from .storage.sqlite_store import SqliteStore

logger = logging.getLogger(__name__)


class ForceUI:
    """
    Public facade.

    process() runs one user submission through the whole pipeline:
        text -> IntentClassifier -> ContextResolver -> Orchestrator
             -> DecisionLog (stored) -> memory updates
    and returns the ComponentSelection for the rendering layer.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        config = config or {}

        sqlite_path = config.get("sqlite_path", "~/.forceui/state.db")
        openai_api_key = config.get("openai_api_key")
        llm_model = config.get("llm_model", "gpt-4.1-mini")
        llm_temp = float(config.get("llm_temperature", 0.0))
        llm_timeout = float(config.get("llm_timeout", 10.0))

        self.use_llm = bool(config.get("use_llm", False))
        self.max_components = int(config.get("max_components", DEFAULT_MAX_COMPONENTS))

        # Durable state
        self.state_store = SqliteStore(path=sqlite_path)
        self.memory_store = MemoryStore(store=self.state_store)
        self.decision_logs = DecisionLogStore(store=self.state_store)
        self.persona_store = PersonaStore(store=self.state_store)
        self.memory_store.load()
        self.decision_logs.load()
        self.persona_store.load()

        # Engine
        enhancer = None
        if self.use_llm:
            enhancer = IntentEnhancer(
                api_key=openai_api_key,
                model=llm_model,
                temperature=llm_temp,
                timeout=llm_timeout,
                client=config.get("llm_client"),
            )
        self.registry = ComponentRegistry()
        self.classifier = IntentClassifier(enhancer=enhancer)
        self.orchestrator = Orchestrator(registry=self.registry)
        self.context_resolver = ContextResolver(session_storage=config.get("session_storage"))

        self.last_selection: ComponentSelection | None = None
        self.last_context: ResolvedContext | None = None

    # ------------------------------------------------------------------ #
    # PROCESS
    # ------------------------------------------------------------------ #

    def process(self, user_input: str) -> ComponentSelection:
        """
        Pipeline:
        1. Classify intent (keywords, optionally refined by the LLM).
        2. Resolve context from the current persona and memory.
        3. Orchestrate components against memory.
        4. Record a DecisionLog.
        5. Count usage of every selected component.
        6. Append the intent sequence to memory.
        """
        # 1. Classification
        intent_result = self.classifier.classify(user_input, use_llm=self.use_llm)

        # 2. Context
        memory = self.memory_store.memory
        self.last_context = self.context_resolver.resolve(self.persona_store.current, memory)

        # 3. Orchestration
        selection = self.orchestrator.orchestrate(
            intent_result,
            memory,
            max_components=self.max_components,
        )
        logger.info(
            "[ForceUI.process] %s -> %s",
            intent_result.primary_intent,
            [c.component_id for c in selection.components],
        )

        # 4. Decision log
        log = create_decision_log(
            intent_result,
            selection.components,
            selection.layout_reasoning,
        )
        self.decision_logs.add_log(log)

        # 5. Usage tracking
        for decision in selection.components:
            self.memory_store.increment_component_usage(decision.component_id)

        # 6. Intent pattern
        self.memory_store.add_intent_pattern(
            [intent_result.primary_intent, *intent_result.sub_intents],
            satisfaction=True,
        )

        self.last_selection = selection
        return selection

    # ------------------------------------------------------------------ #
    # Persona & context
    # ------------------------------------------------------------------ #

    def set_persona(self, persona: Persona) -> None:
        self.persona_store.set_persona(persona)
        self.memory_store.set_last_persona(persona)

    def context_changed(self) -> bool:
        """
        Compare a fresh context snapshot with the one from the last process().

        True when there is no previous snapshot.
        """
        current = self.context_resolver.resolve(self.persona_store.current, self.memory_store.memory)
        if self.last_context is None:
            return True
        return has_significant_change(self.last_context, current)

    # ------------------------------------------------------------------ #
    # Explainability
    # ------------------------------------------------------------------ #

    def explain(self, log: DecisionLog | None = None) -> dict[str, Any] | None:
        log = log or self.decision_logs.current_log
        if log is None:
            return None
        return format_for_display(log)

    def recent_logs(self, count: int = 5) -> list[DecisionLog]:
        return self.decision_logs.get_recent_logs(count)

    def close(self) -> None:
        self.state_store.close()
