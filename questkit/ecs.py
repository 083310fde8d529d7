"""Game objects composed of behaviour components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Type, TypeVar

from .linked_list import LinkedList

C = TypeVar("C", bound="Component")


class Component(ABC):
    """A piece of behaviour attached to a :class:`GameObject`."""

    def __init__(self) -> None:
        self.owner: Optional[GameObject] = None

    @abstractmethod
    def start(self) -> None:
        """Called once before the first update."""

    @abstractmethod
    def update(self) -> None:
        """Called every frame."""


class GameObject:
    """A container of components, looked up by their exact type."""

    def __init__(self) -> None:
        self._components: LinkedList[Component] = LinkedList()

    def add_component(self, component_type: Type[C]) -> C:
        """Create a component of ``component_type``, attach it and return it."""
        component = component_type()
        self._components.push_back(component)
        component.owner = self
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """The first component whose type is exactly ``component_type``, or None."""
        for component in self._components:
            if type(component) is component_type:
                return component
        return None

    def remove_component(self, component_type: Type[Component]) -> None:
        """Detach the first component whose type is exactly ``component_type``."""
        for position, component in enumerate(self._components):
            if type(component) is component_type:
                self._components.erase(position)
                component.owner = None
                return

    def components(self) -> list[Component]:
        """A copy of the attached components, in the order they were added."""
        return list(self._components)