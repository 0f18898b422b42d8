# force_ui/storage/memory_store.py

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..models import Intent, IntentSequence, LayoutConfig, Persona, UserMemory
from ..timeutils import now_iso

if TYPE_CHECKING:
    from .sqlite_store import SqliteStore

logger = logging.getLogger(__name__)

MEMORY_KEY = "forceui-memory"
MAX_INTENT_PATTERNS = 50


def serialize_memory(memory: UserMemory) -> dict[str, Any]:
    """
    JSON-ready dict for a UserMemory.

    Map fields are written as explicit [key, value] pair lists so their
    mapping semantics survive any JSON round trip.
    """
    data = memory.model_dump(mode="json")
    data["component_history"] = [[k, v] for k, v in memory.component_history.items()]
    data["vocabulary_map"] = [[k, v] for k, v in memory.vocabulary_map.items()]
    return data


def deserialize_memory(data: dict[str, Any]) -> UserMemory:
    data = dict(data)
    data["component_history"] = dict(data.get("component_history") or [])
    data["vocabulary_map"] = dict(data.get("vocabulary_map") or [])
    return UserMemory.model_validate(data)


class MemoryStore:
    """
    Usage history and preferences that bias future orchestration.

    Holds one UserMemory. When a SqliteStore is attached every mutation is
    persisted immediately under MEMORY_KEY; load() restores it.
    """

    def __init__(self, store: SqliteStore | None = None) -> None:
        self.store = store
        self.memory = UserMemory()

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    def load(self) -> UserMemory:
        if self.store is None:
            return self.memory

        try:
            data = self.store.get_state(MEMORY_KEY)
        except ValueError as e:
            logger.error("[MemoryStore.load] Stored memory is not valid JSON, starting fresh: %s", e)
            return self.memory

        if data is None:
            return self.memory

        try:
            self.memory = deserialize_memory(data)
        except (ValidationError, TypeError, ValueError) as e:
            logger.error("[MemoryStore.load] Stored memory is malformed, starting fresh: %s", e)
        return self.memory

    def save(self) -> None:
        if self.store is None:
            return
        self.store.set_state(MEMORY_KEY, serialize_memory(self.memory))

    def reset(self) -> None:
        self.memory = UserMemory()
        self.save()

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #

    def increment_component_usage(self, component_id: str) -> int:
        history = self.memory.component_history
        history[component_id] = history.get(component_id, 0) + 1
        self.save()
        return history[component_id]

    def add_intent_pattern(self, intents: list[Intent], satisfaction: bool) -> IntentSequence:
        pattern = IntentSequence(
            intents=list(intents),
            timestamp=now_iso(),
            satisfaction=satisfaction,
        )
        patterns = self.memory.intent_patterns + [pattern]
        self.memory.intent_patterns = patterns[-MAX_INTENT_PATTERNS:]
        self.save()
        return pattern

    def update_vocabulary(self, user_term: str, canonical: str) -> None:
        self.memory.vocabulary_map[user_term.lower()] = canonical
        self.save()

    def update_layout_preference(self, **changes: Any) -> None:
        current = self.memory.layout_preferences.model_dump()
        current.update(changes)
        self.memory.layout_preferences = LayoutConfig.model_validate(current)
        self.save()

    def set_last_persona(self, persona: Persona) -> None:
        self.memory.last_persona = persona
        self.save()
