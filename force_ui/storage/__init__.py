# force_ui/storage/__init__.py

from .decision_log_store import DecisionLogStore
from .memory_store import MemoryStore, deserialize_memory, serialize_memory
from .persona_store import PersonaStore
from .sqlite_store import SqliteStore

__all__ = [
    "DecisionLogStore",
    "MemoryStore",
    "PersonaStore",
    "SqliteStore",
    "deserialize_memory",
    "serialize_memory",
]
