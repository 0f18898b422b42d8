# force_ui/engine/component_registry.py

from __future__ import annotations

from collections.abc import Iterable

from ..config.component_metadata import COMPONENT_METADATA
from ..models import ComponentMetadata, ComponentType, Intent, Persona


class ComponentRegistry:
    """
    In-memory store of ComponentMetadata keyed by id.

    Seeded from the static metadata table. register()/unregister() are the
    extension point for components added at runtime.
    """

    def __init__(self, seed: Iterable[ComponentMetadata] | None = None) -> None:
        seed = COMPONENT_METADATA if seed is None else seed
        self._components: dict[str, ComponentMetadata] = {c.id: c for c in seed}

    def get(self, component_id: str) -> ComponentMetadata | None:
        return self._components.get(component_id)

    def all(self) -> list[ComponentMetadata]:
        return list(self._components.values())

    def by_intent(self, intent: Intent) -> list[ComponentMetadata]:
        return [c for c in self._components.values() if intent in c.intents]

    def by_persona(self, persona: Persona) -> list[ComponentMetadata]:
        return [c for c in self._components.values() if persona in c.personas]

    def by_criteria(
        self,
        intents: list[Intent],
        persona: Persona | None = None,
    ) -> list[ComponentMetadata]:
        """Components serving any of `intents` and, if given, suited to `persona`."""
        results = self.all()

        # an empty intent list means no intent filter
        if intents:
            results = [c for c in results if any(i in c.intents for i in intents)]

        if persona:
            results = [c for c in results if persona in c.personas]

        return results

    def by_type(self, component_type: ComponentType) -> list[ComponentMetadata]:
        return [c for c in self._components.values() if c.type == component_type]

    def register(self, metadata: ComponentMetadata) -> None:
        self._components[metadata.id] = metadata

    def unregister(self, component_id: str) -> bool:
        return self._components.pop(component_id, None) is not None

    def has(self, component_id: str) -> bool:
        return component_id in self._components

    def __len__(self) -> int:
        return len(self._components)
