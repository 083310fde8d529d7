"""Named, taggable game objects that own cloneable components."""

from __future__ import annotations

import copy
from enum import IntEnum
from typing import Optional, Type, TypeVar

C = TypeVar("C", bound="Component")


class Tag(IntEnum):
    """Category a game object belongs to."""

    UNTAGGED = 0
    PLAYER = 1
    MONSTER = 2
    ITEM = 3
    MANAGER = 4


class BaseObject:
    """Root of every object: a name and an active flag.

    An object built without a name is inactive and counts as false.
    Two objects are equal only when they are the same object.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = "" if name is None else name
        self.active = name is not None

    def __bool__(self) -> bool:
        return self.active

    def __str__(self) -> str:
        return self.name


class Component(BaseObject):
    """Behaviour attached to a :class:`GameObject`."""

    def __init__(self) -> None:
        super().__init__()
        self.parent: Optional[GameObject] = None

    def clone(self) -> "Component":
        """A copy of this component, still pointing at the same parent."""
        return copy.copy(self)

    def attach_parent(self, parent: "GameObject") -> None:
        """Make ``parent`` the game object that owns this component."""
        self.parent = parent


class GameObject(BaseObject):
    """A named, tagged object that holds components looked up by exact type."""

    def __init__(self, name: Optional[str] = None, tag: Tag = Tag.UNTAGGED) -> None:
        super().__init__(name)
        self.active_self = name is not None
        self.tag = Tag(tag)
        self._components: list[Component] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.tag.name})"

    def add_component(self, component_type: Type[C]) -> C:
        """Create a component of ``component_type``, attach it and return it."""
        component = component_type()
        self._components.append(component)
        component.attach_parent(self)
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """The first component whose type is exactly ``component_type``, or None."""
        for component in self._components:
            if type(component) is component_type:
                return component
        return None

    def remove_component(self, component_type: Type[Component]) -> bool:
        """Detach the first component of exactly ``component_type``; report success."""
        for position, component in enumerate(self._components):
            if type(component) is component_type:
                del self._components[position]
                component.parent = None
                return True
        return False

    def components(self) -> list[Component]:
        """A copy of the attached components, in the order they were added."""
        return list(self._components)

    def clone(self) -> "GameObject":
        """A copy of this object whose components are cloned and attached to it."""
        duplicate = copy.copy(self)
        duplicate._components = []
        for component in self._components:
            cloned = component.clone()
            cloned.attach_parent(duplicate)
            duplicate._components.append(cloned)
        return duplicate