from typing import Any, Dict, List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field

Intent = Literal[
    "project_planning",
    "task_management",
    "data_analysis",
    "timeline_viz",
    "note_taking",
    "persona_switch",
    "ui_explain",
    "export_data",
    "workflow_record",
    "mcp_status",
]

Persona = Literal["founder", "developer", "recruiter", "analyst"]

ComponentType = Literal["generative", "interactable"]

INTENTS: tuple = get_args(Intent)
PERSONAS: tuple = get_args(Persona)

DEFAULT_PERSONA = "founder"


class IntentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_intent: Intent
    sub_intents: List[Intent] = []
    entities: List[str] = []
    persona: Persona = DEFAULT_PERSONA
    confidence: float = Field(ge=0.0, le=1.0)
    raw_input: str


class IntentEnhancement(BaseModel):
    """Answer of the optional LLM classification step."""

    primary_intent: Intent
    sub_intents: List[Intent] = []
    confidence: float = Field(ge=0.0, le=1.0)


class ComponentMetadata(BaseModel):
    id: str
    name: str
    type: ComponentType
    intents: List[Intent] = []
    personas: List[Persona] = []
    priority: int = 0


class ComponentDecision(BaseModel):
    component_id: str
    score: float
    reasoning: str = ""
    props: Dict[str, Any] = {}


class ComponentSelection(BaseModel):
    components: List[ComponentDecision] = []
    layout_reasoning: str


class DecisionLog(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: str
    intent_analysis: IntentResult
    selected_components: List[ComponentDecision] = []
    layout_reasoning: str


class IntentSequence(BaseModel):
    model_config = ConfigDict(frozen=True)

    intents: List[Intent]
    timestamp: str
    satisfaction: bool


class LayoutConfig(BaseModel):
    default_grid: Literal["compact", "comfortable", "spacious"] = "comfortable"
    component_sizes: Dict[str, Literal["sm", "md", "lg", "xl"]] = {}


class UserMemory(BaseModel):
    component_history: Dict[str, int] = {}    # component id -> usage count
    intent_patterns: List[IntentSequence] = []
    vocabulary_map: Dict[str, str] = {}       # user term -> canonical term
    layout_preferences: LayoutConfig = Field(default_factory=LayoutConfig)
    last_persona: Persona = DEFAULT_PERSONA


class ResolvedContext(BaseModel):
    persona: Persona
    memory: Optional[UserMemory] = None
    timestamp: str
    session_id: str


class PersonaDefinition(BaseModel):
    id: Persona
    name: str
    description: str
    emoji: str
    preferred_components: List[str] = []
    default_layout: Literal["grid", "sidebar", "fullscreen"] = "grid"
