# force_ui/storage/persona_store.py

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..models import DEFAULT_PERSONA, PERSONAS, Persona

if TYPE_CHECKING:
    from .sqlite_store import SqliteStore

logger = logging.getLogger(__name__)

PERSONA_KEY = "forceui-persona"


class PersonaStore:
    """The single current persona; "founder" until the user picks another."""

    def __init__(self, store: SqliteStore | None = None) -> None:
        self.store = store
        self.current: Persona = DEFAULT_PERSONA

    def load(self) -> Persona:
        if self.store is None:
            return self.current

        try:
            data = self.store.get_state(PERSONA_KEY)
        except ValueError as e:
            logger.error("[PersonaStore.load] Stored persona is not valid JSON: %s", e)
            return self.current

        persona = data.get("current_persona") if isinstance(data, dict) else None
        if persona in PERSONAS:
            self.current = persona
        elif persona is not None:
            logger.warning("[PersonaStore.load] Ignoring unknown stored persona %r", persona)
        return self.current

    def set_persona(self, persona: Persona) -> None:
        if persona not in PERSONAS:
            raise ValueError(f"Unknown persona {persona!r}, expected one of {', '.join(PERSONAS)}")
        self.current = persona
        if self.store is not None:
            self.store.set_state(PERSONA_KEY, {"current_persona": persona})
