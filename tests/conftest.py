"""Shared fixtures for force_ui tests."""

from types import SimpleNamespace

import pytest

from force_ui.engine.component_registry import ComponentRegistry
from force_ui.engine.intent_classifier import IntentClassifier
from force_ui.engine.orchestrator import Orchestrator
from force_ui.models import IntentResult
from force_ui.storage.sqlite_store import SqliteStore


@pytest.fixture
def registry():
    return ComponentRegistry()


@pytest.fixture
def classifier():
    return IntentClassifier()


@pytest.fixture
def orchestrator(registry):
    return Orchestrator(registry=registry)


@pytest.fixture
def sqlite_store(tmp_path):
    store = SqliteStore(path=str(tmp_path / "state.db"))
    yield store
    store.close()


@pytest.fixture
def make_intent():
    def _make(**overrides):
        fields = {
            "primary_intent": "project_planning",
            "sub_intents": [],
            "entities": [],
            "persona": "founder",
            "confidence": 0.6,
            "raw_input": "test input",
        }
        fields.update(overrides)
        return IntentResult(**fields)

    return _make


class FakeCompletions:
    """Stands in for client.chat.completions; records calls."""

    def __init__(self, content=None, error=None, choices=None):
        self.content = content
        self.error = error
        self.choices = choices
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_llm_client():
    def _make(content=None, error=None, choices=None):
        completions = FakeCompletions(content=content, error=error, choices=choices)
        return SimpleNamespace(chat=SimpleNamespace(completions=completions))

    return _make
