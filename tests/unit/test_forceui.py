"""Unit tests for the ForceUI facade."""

import json

import pytest

from force_ui.forceui import ForceUI


@pytest.fixture
def config(tmp_path):
    return {"sqlite_path": str(tmp_path / "forceui.db")}


@pytest.fixture
def app(config):
    forceui = ForceUI(config)
    yield forceui
    forceui.close()


class TestProcess:
    """Test cases for the per-submission pipeline."""

    def test_plan_a_product_launch(self, app):
        """Test the full pipeline on a planning request."""
        selection = app.process("Plan a product launch")

        ids = [c.component_id for c in selection.components]
        assert ids == ["Timeline", "KanbanBoard", "StatsCard", "NotesPanel"]
        assert selection.components[0].props["title"] == "Plan"
        assert app.last_selection == selection

    def test_decision_log_recorded(self, app):
        """Test that each run adds one current log."""
        selection = app.process("Plan a product launch")

        log = app.decision_logs.current_log
        assert len(app.decision_logs) == 1
        assert log.intent_analysis.raw_input == "Plan a product launch"
        assert log.selected_components == selection.components
        assert log.layout_reasoning == selection.layout_reasoning

    def test_log_unaffected_by_prop_overrides(self, app):
        """Test that editing the returned selection leaves the stored log as it was."""
        selection = app.process("Plan a product launch")
        original_score = selection.components[0].score

        selection.components[0].score = -1.0
        selection.components[0].props["title"] = "overridden"

        in_memory = app.decision_logs.current_log
        logged = in_memory.selected_components[0]
        assert logged.score == original_score
        assert logged.props["title"] == "Plan"
        assert app.decision_logs.load()[-1] == in_memory

    def test_memory_updated(self, app):
        """Test usage counts and the intent pattern after a run."""
        app.process("export the project timeline notes")

        memory = app.memory_store.memory
        assert memory.component_history == {
            "Timeline": 1,
            "KanbanBoard": 1,
            "StatsCard": 1,
            "NotesPanel": 1,
        }
        assert [p.intents for p in memory.intent_patterns] == [
            ["project_planning", "timeline_viz", "note_taking"]
        ]
        assert memory.intent_patterns[0].satisfaction is True

    def test_usage_feeds_back_into_scores(self, app):
        """Test that repeated runs raise scores through memory."""
        first = app.process("Plan a product launch").components[0].score
        second = app.process("Plan a product launch").components[0].score

        assert second - first == pytest.approx(0.5)

    def test_max_components_config(self, config):
        """Test the max_components setting."""
        app = ForceUI({**config, "max_components": 2})

        selection = app.process("Plan a product launch")

        assert len(selection.components) == 2
        app.close()

    def test_no_keyword_input(self, app):
        """Test the fallback intent through the pipeline."""
        app.process("hello there")

        log = app.decision_logs.current_log
        assert log.intent_analysis.primary_intent == "project_planning"
        assert log.intent_analysis.confidence == 0.3

    def test_state_survives_restart(self, config):
        """Test that memory, logs and persona are reloaded."""
        first = ForceUI(config)
        first.process("Plan a product launch")
        first.set_persona("analyst")
        first.close()

        second = ForceUI(config)

        assert second.memory_store.memory.component_history["Timeline"] == 1
        assert second.memory_store.memory.last_persona == "analyst"
        assert len(second.recent_logs()) == 1
        assert second.persona_store.current == "analyst"
        second.close()


class TestLLM:
    """Test cases for the optional LLM step through the facade."""

    def test_enhancer_used_for_low_confidence(self, config, fake_llm_client):
        """Test that a configured client refines a vague request."""
        client = fake_llm_client(
            content=json.dumps({"primary_intent": "data_analysis", "confidence": 0.9})
        )
        app = ForceUI({**config, "use_llm": True, "llm_client": client})

        selection = app.process("hmm, what happened last quarter?")

        assert [c.component_id for c in selection.components] == [
            "ChartView",
            "StatsCard",
            "SummaryPanel",
        ]
        app.close()

    def test_enhancer_failure_falls_back(self, config, fake_llm_client):
        """Test that an LLM failure does not break processing."""
        client = fake_llm_client(content="garbage")
        app = ForceUI({**config, "use_llm": True, "llm_client": client})

        app.process("gantt")

        assert app.decision_logs.current_log.intent_analysis.primary_intent == "timeline_viz"
        app.close()


class TestExplainAndContext:
    """Test cases for explainability and context helpers."""

    def test_explain_current(self, app):
        """Test formatting the current log."""
        assert app.explain() is None

        app.process("Plan a product launch")
        view = app.explain()

        assert view["intent_analysis"]["primary"] == "project_planning"
        assert view["intent_analysis"]["confidence"] == 67
        assert view["component_decisions"][0] == {
            "name": "Timeline",
            "score": 14.7,
            "reasoning": (
                "Matches primary intent: project_planning • "
                "Optimized for founder persona • "
                "High priority component"
            ),
        }

    def test_recent_logs(self, app):
        """Test fetching recent logs."""
        for text in ("plan", "gantt", "export"):
            app.process(text)

        recent = app.recent_logs(2)

        assert [log.intent_analysis.raw_input for log in recent] == ["gantt", "export"]

    def test_context_changed(self, app):
        """Test context change detection around a persona switch."""
        assert app.context_changed() is True

        app.process("plan")
        assert app.context_changed() is False

        app.set_persona("developer")
        assert app.context_changed() is True

    def test_session_storage(self, config):
        """Test that a host session mapping supplies the session id."""
        session = {}
        app = ForceUI({**config, "session_storage": session})

        app.process("plan")

        assert app.last_context.session_id == session["forceui-session-id"]
        app.close()

    def test_invalid_persona(self, app):
        """Test that set_persona rejects unknown ids."""
        with pytest.raises(ValueError):
            app.set_persona("ceo")
