# force_ui/config/__init__.py

from .component_metadata import COMPONENT_METADATA
from .intent_mappings import INTENT_COMPONENT_MAP, INTENT_KEYWORDS
from .personas import PERSONA_DEFINITIONS, get_persona

__all__ = [
    "COMPONENT_METADATA",
    "INTENT_COMPONENT_MAP",
    "INTENT_KEYWORDS",
    "PERSONA_DEFINITIONS",
    "get_persona",
]
