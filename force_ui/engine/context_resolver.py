# force_ui/engine/context_resolver.py

from __future__ import annotations

from collections.abc import MutableMapping
from datetime import timedelta
from uuid import uuid4

from ..models import Persona, ResolvedContext, UserMemory
from ..timeutils import now_iso, now_ms, parse_iso_maybe

SESSION_KEY = "forceui-session-id"
SERVER_SESSION_ID = "server"
SIGNIFICANT_GAP = timedelta(minutes=30)


class ContextResolver:
    """
    Combines the current persona, user memory and session identity.

    `session_storage` is any mutable mapping that lives as long as the user's
    session (owned by the host environment). Without one the fixed "server"
    session id is used.
    """

    def __init__(self, session_storage: MutableMapping[str, str] | None = None) -> None:
        self.session_storage = session_storage

    def session_id(self) -> str:
        if self.session_storage is None:
            return SERVER_SESSION_ID

        session_id = self.session_storage.get(SESSION_KEY)
        if not session_id:
            session_id = f"session-{now_ms()}-{uuid4().hex[:9]}"
            self.session_storage[SESSION_KEY] = session_id
        return session_id

    def resolve(self, persona: Persona, memory: UserMemory | None = None) -> ResolvedContext:
        return ResolvedContext(
            persona=persona,
            memory=memory,
            timestamp=now_iso(),
            session_id=self.session_id(),
        )


def has_significant_change(old: ResolvedContext, new: ResolvedContext) -> bool:
    """True if the UI should re-orchestrate between the two snapshots."""
    if old.persona != new.persona:
        return True

    if old.session_id != new.session_id:
        return True

    old_ts = parse_iso_maybe(old.timestamp)
    new_ts = parse_iso_maybe(new.timestamp)
    if old_ts and new_ts and new_ts - old_ts > SIGNIFICANT_GAP:
        return True

    return False
