# force_ui/config/component_metadata.py

from ..models import ComponentMetadata

ALL_PERSONAS = ["founder", "developer", "recruiter", "analyst"]

COMPONENT_METADATA: list[ComponentMetadata] = [
    ComponentMetadata(
        id="Timeline",
        name="Timeline",
        type="generative",
        intents=["project_planning", "timeline_viz"],
        personas=["founder", "analyst"],
        priority=10,
    ),
    ComponentMetadata(
        id="KanbanBoard",
        name="KanbanBoard",
        type="interactable",
        intents=["task_management", "project_planning"],
        personas=["founder", "developer", "recruiter"],
        priority=9,
    ),
    ComponentMetadata(
        id="StatsCard",
        name="StatsCard",
        type="generative",
        intents=["data_analysis", "project_planning"],
        personas=["founder", "analyst", "recruiter"],
        priority=7,
    ),
    ComponentMetadata(
        id="ChartView",
        name="ChartView",
        type="generative",
        intents=["data_analysis", "timeline_viz"],
        personas=["analyst", "founder"],
        priority=8,
    ),
    ComponentMetadata(
        id="NotesPanel",
        name="NotesPanel",
        type="interactable",
        intents=["note_taking", "task_management"],
        personas=ALL_PERSONAS,
        priority=6,
    ),
    ComponentMetadata(
        id="SummaryPanel",
        name="SummaryPanel",
        type="generative",
        intents=["data_analysis", "ui_explain"],
        personas=["analyst", "founder"],
        priority=5,
    ),
    ComponentMetadata(
        id="PersonaSwitcher",
        name="PersonaSwitcher",
        type="interactable",
        intents=["persona_switch"],
        personas=ALL_PERSONAS,
        priority=10,
    ),
    ComponentMetadata(
        id="ExplainabilityPanel",
        name="ExplainabilityPanel",
        type="generative",
        intents=["ui_explain"],
        personas=ALL_PERSONAS,
        priority=10,
    ),
    ComponentMetadata(
        id="ExportPanel",
        name="ExportPanel",
        type="generative",
        intents=["export_data"],
        personas=ALL_PERSONAS,
        priority=4,
    ),
    ComponentMetadata(
        id="IntentChat",
        name="IntentChat",
        type="interactable",
        intents=[],  # always visible, never selected by intent
        personas=ALL_PERSONAS,
        priority=10,
    ),
]
