from .component_registry import ComponentRegistry
from .context_resolver import ContextResolver, has_significant_change
from .explainability import create_decision_log, format_for_display
from .intent_classifier import IntentClassifier
from .orchestrator import Orchestrator, generate_component_props

__all__ = [
    "ComponentRegistry",
    "ContextResolver",
    "IntentClassifier",
    "Orchestrator",
    "create_decision_log",
    "format_for_display",
    "generate_component_props",
    "has_significant_change",
]
