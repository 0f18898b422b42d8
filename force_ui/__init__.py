"""Intent classification and component orchestration for the ForceUI adaptive dashboard."""

from .engine import (
    ComponentRegistry,
    ContextResolver,
    IntentClassifier,
    Orchestrator,
    create_decision_log,
    format_for_display,
    has_significant_change,
)
from .exceptions import EnhancementError, ForceUIError
from .forceui import ForceUI
from .models import (
    ComponentDecision,
    ComponentMetadata,
    ComponentSelection,
    DecisionLog,
    IntentResult,
    IntentSequence,
    ResolvedContext,
    UserMemory,
)

__version__ = "0.1.0"

__all__ = [
    "ComponentDecision",
    "ComponentMetadata",
    "ComponentRegistry",
    "ComponentSelection",
    "ContextResolver",
    "DecisionLog",
    "EnhancementError",
    "ForceUI",
    "ForceUIError",
    "IntentClassifier",
    "IntentResult",
    "IntentSequence",
    "Orchestrator",
    "ResolvedContext",
    "UserMemory",
    "create_decision_log",
    "format_for_display",
    "has_significant_change",
]
