"""Registry of component singletons that can be looked up by id."""

from __future__ import annotations

from typing import ClassVar


class Component:
    """Base for registered components; each subclass remembers its own id."""

    _registry: ClassVar[list["Component"]] = []
    component_id: ClassVar[int] = 0

    @classmethod
    def add_component(cls, component: "Component") -> int:
        """Register ``component`` and return its id, also stored on its class."""
        if not isinstance(component, Component):
            raise TypeError(f"{component!r} is not a Component")
        Component._registry.append(component)
        component_id = len(Component._registry) - 1
        type(component).component_id = component_id
        return component_id

    @classmethod
    def get_by_id(cls, component_id: int) -> "Component":
        if not 0 <= component_id < len(Component._registry):
            raise IndexError(f"no component with id {component_id}")
        return Component._registry[component_id]

    @classmethod
    def clear(cls) -> None:
        Component._registry.clear()