# force_ui/config/personas.py

from ..models import PersonaDefinition

PERSONA_DEFINITIONS: list[PersonaDefinition] = [
    PersonaDefinition(
        id="founder",
        name="Founder",
        description="Strategic overview and business metrics",
        emoji="🚀",
        preferred_components=["Timeline", "StatsCard", "ChartView", "SummaryPanel"],
        default_layout="grid",
    ),
    PersonaDefinition(
        id="developer",
        name="Developer",
        description="Code-focused workflow and technical tasks",
        emoji="💻",
        preferred_components=["KanbanBoard", "NotesPanel", "ChartView"],
        default_layout="sidebar",
    ),
    PersonaDefinition(
        id="recruiter",
        name="Recruiter",
        description="Candidate pipeline and hiring metrics",
        emoji="👥",
        preferred_components=["KanbanBoard", "StatsCard", "Timeline"],
        default_layout="grid",
    ),
    PersonaDefinition(
        id="analyst",
        name="Analyst",
        description="Data visualization and reporting",
        emoji="📊",
        preferred_components=["ChartView", "StatsCard", "SummaryPanel", "Timeline"],
        default_layout="fullscreen",
    ),
]


def get_persona(persona_id: str) -> PersonaDefinition | None:
    for definition in PERSONA_DEFINITIONS:
        if definition.id == persona_id:
            return definition
    return None
