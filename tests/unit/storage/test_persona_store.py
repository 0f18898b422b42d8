"""Unit tests for PersonaStore."""

import pytest

from force_ui.storage.persona_store import PERSONA_KEY, PersonaStore


class TestPersonaStore:
    """Test cases for the current persona selection."""

    def test_defaults_to_founder(self):
        """Test the cold-start persona."""
        assert PersonaStore().current == "founder"

    def test_set_persona(self):
        """Test an explicit switch."""
        store = PersonaStore()

        store.set_persona("recruiter")

        assert store.current == "recruiter"

    def test_unknown_persona_rejected(self):
        """Test that ids outside the persona set raise."""
        store = PersonaStore()

        with pytest.raises(ValueError, match="Unknown persona"):
            store.set_persona("ceo")
        assert store.current == "founder"

    def test_persisted_across_instances(self, sqlite_store):
        """Test that the selection survives a reload."""
        PersonaStore(store=sqlite_store).set_persona("developer")

        assert PersonaStore(store=sqlite_store).load() == "developer"

    def test_load_without_saved_state(self, sqlite_store):
        """Test loading before any selection was made."""
        assert PersonaStore(store=sqlite_store).load() == "founder"

    def test_unknown_stored_persona_ignored(self, sqlite_store):
        """Test that a bad stored value keeps the default."""
        sqlite_store.set_state(PERSONA_KEY, {"current_persona": "ceo"})

        assert PersonaStore(store=sqlite_store).load() == "founder"
