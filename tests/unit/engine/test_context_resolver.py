"""Unit tests for ContextResolver and has_significant_change."""

from force_ui.engine.context_resolver import (
    SESSION_KEY,
    ContextResolver,
    has_significant_change,
)
from force_ui.models import ResolvedContext, UserMemory


def _context(persona="founder", timestamp="2025-01-01T00:00:00Z", session_id="session-1"):
    return ResolvedContext(persona=persona, timestamp=timestamp, session_id=session_id)


class TestResolve:
    """Test cases for ContextResolver.resolve."""

    def test_server_sentinel_without_storage(self):
        """Test the fixed session id when no session storage exists."""
        context = ContextResolver().resolve("founder")

        assert context.session_id == "server"
        assert context.persona == "founder"
        assert context.memory is None
        assert context.timestamp.endswith("Z")

    def test_session_id_created_and_cached(self):
        """Test lazy creation of the session id."""
        storage = {}
        resolver = ContextResolver(session_storage=storage)

        first = resolver.resolve("developer")
        second = resolver.resolve("developer")

        assert first.session_id.startswith("session-")
        assert storage[SESSION_KEY] == first.session_id
        assert second.session_id == first.session_id

    def test_existing_session_id_reused(self):
        """Test that an id already in storage is used as-is."""
        resolver = ContextResolver(session_storage={SESSION_KEY: "session-abc"})

        assert resolver.resolve("founder").session_id == "session-abc"

    def test_memory_passed_through(self):
        """Test that memory is carried unchanged."""
        memory = UserMemory(component_history={"Timeline": 2})

        context = ContextResolver().resolve("analyst", memory)

        assert context.memory.component_history == {"Timeline": 2}


class TestSignificantChange:
    """Test cases for has_significant_change."""

    def test_identical(self):
        """Test that identical snapshots are not a change."""
        assert has_significant_change(_context(), _context()) is False

    def test_persona_change(self):
        """Test that a persona switch is significant."""
        assert has_significant_change(_context(), _context(persona="analyst")) is True

    def test_session_change(self):
        """Test that a new session is significant."""
        assert has_significant_change(_context(), _context(session_id="session-2")) is True

    def test_short_gap(self):
        """Test that ten minutes is not significant."""
        new = _context(timestamp="2025-01-01T00:10:00Z")

        assert has_significant_change(_context(), new) is False

    def test_exactly_thirty_minutes(self):
        """Test that the boundary itself is not significant."""
        new = _context(timestamp="2025-01-01T00:30:00Z")

        assert has_significant_change(_context(), new) is False

    def test_long_gap(self):
        """Test that more than thirty minutes is significant."""
        new = _context(timestamp="2025-01-01T00:31:00Z")

        assert has_significant_change(_context(), new) is True
