"""Actors: owners of components placed in a level."""

from __future__ import annotations

import itertools
from typing import Any, Optional, TypeVar

from .components import ActorComponent, EndPlayReason, SceneComponent
from .geometry import FORWARD_VECTOR, ONE_VECTOR, RIGHT_VECTOR, UP_VECTOR, ZERO_VECTOR, Vector
from .mesh_components import StaticMeshComponent
from .sprites import Texture
from .text import UUIDRenderComponent

UUID_FONT_PATH = "Assets/Texture/font.png"
UUID_FONT_GRID = 106

# Only the ratio of size to grid matters for the generated texture coordinates.
UUID_FONT_TEXTURE = Texture(width=UUID_FONT_GRID, height=UUID_FONT_GRID, name=UUID_FONT_PATH)

_uuids = itertools.count(1)

C = TypeVar("C", bound=ActorComponent)


class Actor:
    """An object in a level that owns and drives a set of components."""

    def __init__(self) -> None:
        self.uuid: int = next(_uuids)
        self.root_component: Optional[SceneComponent] = None
        self.owner: Optional[Actor] = None
        self.level: Any = None
        self.tick_in_editor = True
        self.pending_removal = False
        self.uuid_font: Texture = UUID_FONT_TEXTURE
        self._owned_components: list[ActorComponent] = []
        self._being_destroyed = False
        self._actor_label = ""

    @property
    def world(self) -> Any:
        """The world of the level holding this actor, or None."""
        if self.level is None:
            return None
        return self.level.world

    @property
    def is_being_destroyed(self) -> bool:
        return self._being_destroyed

    @property
    def components(self) -> tuple[ActorComponent, ...]:
        return tuple(self._owned_components)

    def begin_play(self) -> None:
        """Attach a UUID label, then start play on every owned component."""
        label = self.add_component(UUIDRenderComponent)
        label.texture = self.uuid_font
        label.set_row_column_count(UUID_FONT_GRID, UUID_FONT_GRID)
        label.set_text(f"UUID {self.uuid}")
        label.setup_attachment(self.root_component)
        label.relative_scale = Vector(1.0, 1.0, 1.0)
        for component in list(self._owned_components):
            component.begin_play()

    def tick(self, delta_time: float) -> None:
        for component in list(self._owned_components):
            component.tick_component(delta_time)

    def destroyed(self) -> None:
        self.end_play(EndPlayReason.DESTROYED)

    def end_play(self, reason: EndPlayReason) -> None:
        """End play on every component that began it, then uninitialise them."""
        for component in self._owned_components:
            if component.has_begun_play:
                component.end_play(reason)
        self.uninitialize_components()

    def destroy(self) -> bool:
        """Ask the world to destroy this actor; True once it is being destroyed."""
        if not self._being_destroyed:
            world = self.world
            if world is not None:
                world.destroy_actor(self)
                self._being_destroyed = True
        return self._being_destroyed

    def add_component(self, component_type: type[C]) -> C:
        """Create, own, attach and initialise a component of the given type."""
        component = component_type()
        self._owned_components.append(component)
        component.owner = self
        if isinstance(component, SceneComponent):
            if self.root_component is None:
                self.root_component = component
            else:
                component.setup_attachment(self.root_component)
        component.initialize_component()
        return component

    def remove_owned_component(self, component: ActorComponent) -> None:
        self._owned_components[:] = [c for c in self._owned_components if c is not component]

    def component_by_class(self, component_type: type[C]) -> Optional[C]:
        """The first owned component of the given type, or None."""
        for component in self._owned_components:
            if isinstance(component, component_type):
                return component
        return None

    def initialize_components(self) -> None:
        for component in self._owned_components:
            if component.auto_activate and not component.is_active:
                component.activate()
            if not component.has_been_initialized:
                component.initialize_component()

    def uninitialize_components(self) -> None:
        for component in self._owned_components:
            if component.has_been_initialized:
                component.uninitialize_component()

    def set_root_component(self, component: Optional[SceneComponent]) -> bool:
        """Make an owned component (or None) the root; False for a foreign one."""
        if component is not None and component.owner is not self:
            return False
        if self.root_component is not component:
            old_root = self.root_component
            self.root_component = component
            if old_root is not None:
                old_root.setup_attachment(component)
        return True

    def actor_location(self) -> Vector:
        return self.root_component.world_location() if self.root_component else ZERO_VECTOR

    def actor_rotation(self) -> Vector:
        return self.root_component.world_rotation() if self.root_component else ZERO_VECTOR

    def actor_scale(self) -> Vector:
        return self.root_component.world_scale() if self.root_component else ZERO_VECTOR

    def actor_forward_vector(self) -> Vector:
        return self.root_component.forward_vector() if self.root_component else FORWARD_VECTOR

    def actor_right_vector(self) -> Vector:
        return self.root_component.right_vector() if self.root_component else RIGHT_VECTOR

    def actor_up_vector(self) -> Vector:
        return self.root_component.up_vector() if self.root_component else UP_VECTOR

    def set_actor_location(self, location: Vector) -> bool:
        if self.root_component is None:
            return False
        self.root_component.relative_location = location
        return True

    def set_actor_rotation(self, rotation: Vector) -> bool:
        if self.root_component is None:
            return False
        self.root_component.set_rotation(rotation)
        return True

    def set_actor_scale(self, scale: Vector) -> bool:
        if self.root_component is None:
            return False
        self.root_component.relative_scale = scale
        return True

    def default_actor_label(self) -> str:
        return type(self).__name__

    @property
    def actor_label(self) -> str:
        """The editor label; defaults to the class name followed by the UUID."""
        if not self._actor_label:
            self._actor_label = self.default_actor_label() + str(self.uuid)
        return self._actor_label

    @actor_label.setter
    def actor_label(self, label: str) -> None:
        if label != self.actor_label:
            self._actor_label = f"{label}_{self.uuid}"


class StaticMeshActor(Actor):
    """An actor whose root is a static mesh component."""

    def __init__(self) -> None:
        super().__init__()
        self.static_mesh_component = self.add_component(StaticMeshComponent)
        self.root_component = self.static_mesh_component


__all__ = ["Actor", "StaticMeshActor", "UUID_FONT_PATH", "UUID_FONT_GRID", "ONE_VECTOR"]