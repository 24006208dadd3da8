"""Game objects and the components that give them behaviour."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Optional

from zombiefield.rect import Rect


class Component(ABC):
    """Behaviour attached to a game object, which it references weakly."""

    def __init__(self, associated: Optional[GameObject]) -> None:
        self._associated = weakref.ref(associated) if associated is not None else None

    @property
    def associated(self) -> Optional[GameObject]:
        """The owning game object, or None if it no longer exists."""
        if self._associated is None:
            return None
        return self._associated()

    def start(self) -> None:
        """Called once when the owning object starts; does nothing by default."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the component by ``dt`` seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the component."""

    @abstractmethod
    def is_type(self, type_name: str) -> bool:
        """Whether this component answers to ``type_name``."""


class GameObject:
    """An entity in the scene: a bounding box plus a list of components."""

    def __init__(self) -> None:
        self.box = Rect()
        self._components: list[Component] = []
        self._dead = False
        self.started = False

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def is_dead(self) -> bool:
        return self._dead

    def start(self) -> None:
        """Start every component, then mark the object as started."""
        for component in list(self._components):
            component.start()
        self.started = True

    def update(self, dt: float) -> None:
        for component in list(self._components):
            component.update(dt)

    def render(self) -> None:
        for component in list(self._components):
            component.render()

    def request_delete(self) -> None:
        """Mark the object for removal from the scene."""
        self._dead = True

    def add_component(self, component: Component) -> None:
        """Attach a component, starting it at once if the object already started."""
        self._components.append(component)
        if self.started:
            component.start()

    def remove_component(self, component: Component) -> None:
        """Detach ``component`` if it is attached; otherwise do nothing."""
        for index, existing in enumerate(self._components):
            if existing is component:
                del self._components[index]
                return

    def get_component(self, type_name: str) -> Optional[Component]:
        """First attached component that answers to ``type_name``, or None."""
        return next((c for c in self._components if c.is_type(type_name)), None)