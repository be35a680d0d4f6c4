"""Levels and worlds: spawning, ticking and destroying actors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TypeVar

from .actor import Actor
from .components import EndPlayReason

A = TypeVar("A", bound=Actor)

INDEX_NONE = -1


class WorldType(Enum):
    EDITOR = 0
    GAME = 1
    PIE = 2


@dataclass
class WorldContext:
    """Bookkeeping for one world managed by the engine."""

    world_type: WorldType = WorldType.EDITOR
    pie_instance: int = INDEX_NONE
    pie_prefix: str = ""
    pie_fixed_tick_seconds: float = 0.0
    pie_accumulated_tick_seconds: float = 0.0
    world: Optional[World] = None

    def set_current_world(self, world: Optional[World]) -> None:
        self.world = world


class Level:
    """A collection of actors that tick together."""

    def __init__(self) -> None:
        self.world: Optional[World] = None
        self.pending_removal = False
        self._initialized = False
        self._actors: dict[Actor, None] = {}
        self._pending_begin_play: list[Actor] = []

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def actors(self) -> tuple[Actor, ...]:
        return tuple(self._actors)

    @property
    def pending_begin_play(self) -> tuple[Actor, ...]:
        return tuple(self._pending_begin_play)

    def initialize_level(self, world: Optional[World]) -> None:
        self.world = world
        self._initialized = True

    def tick(self, delta_time: float) -> None:
        """Start play for newly spawned actors, then tick every actor."""
        pending, self._pending_begin_play = self._pending_begin_play, []
        for actor in pending:
            actor.begin_play()
        for actor in list(self._actors):
            actor.tick(delta_time)

    def release(self) -> None:
        """End play for every actor and mark it and its components for removal."""
        for actor in list(self._actors):
            actor.end_play(EndPlayReason.WORLD_TRANSITION)
            for component in actor.components:
                component.pending_removal = True
            actor.pending_removal = True
        self._actors.clear()


class World:
    """Holds the persistent level and the editor's helper actors."""

    def __init__(
        self,
        editor_player_factory: Optional[Callable[[], Actor]] = None,
        gizmo_factory: Optional[Callable[[], Actor]] = None,
    ) -> None:
        self.persistent_level: Optional[Level] = None
        self.world_type = WorldType.EDITOR
        self.default_map_name = "Default"
        self.selected_actor: Optional[Actor] = None
        self.editor_player: Optional[Actor] = None
        self.local_gizmo: Optional[Actor] = None
        self.pending_removal = False
        self._editor_player_factory = editor_player_factory
        self._gizmo_factory = gizmo_factory
        self._actors: dict[Actor, None] = {}

    def initialize(self) -> None:
        self.create_base_object()

    def create_base_object(self) -> None:
        """Create the editor helpers and the persistent level where missing."""
        if self.editor_player is None and self._editor_player_factory is not None:
            self.editor_player = self._editor_player_factory()
        if self.local_gizmo is None and self._gizmo_factory is not None:
            self.local_gizmo = self._gizmo_factory()
        if self.persistent_level is None:
            self.persistent_level = Level()
            self.persistent_level.initialize_level(self)

    def release_base_object(self) -> None:
        if self.local_gizmo is not None:
            self.local_gizmo.pending_removal = True
            self.local_gizmo = None
        if self.editor_player is not None:
            self.editor_player.pending_removal = True
            self.editor_player = None

    def set_picked_actor(self, actor: Optional[Actor]) -> None:
        self.selected_actor = actor

    def _level(self) -> Level:
        if self.persistent_level is None:
            raise RuntimeError("world has no persistent level; call initialize() first")
        return self.persistent_level

    def spawn_actor(self, actor_type: type[A]) -> A:
        """Create an actor in the persistent level; it begins play on the next tick."""
        level = self._level()
        actor = actor_type()
        actor.level = level
        level._actors[actor] = None
        level._pending_begin_play.append(actor)
        return actor

    def destroy_actor(self, actor: Actor) -> bool:
        """Remove an actor and its components; False if it is in no world."""
        if actor.world is None:
            return False
        if actor.is_being_destroyed:
            return True

        actor.destroyed()
        if actor.owner is not None:
            actor.owner = None
        for component in actor.components:
            component.destroy_component()

        level = actor.level
        if level is not None:
            level._actors.pop(actor, None)
        self._actors.pop(actor, None)
        actor.pending_removal = True
        return True

    def tick(self, delta_time: float) -> None:
        if self.editor_player is not None:
            self.editor_player.tick(delta_time)
        if self.local_gizmo is not None:
            self.local_gizmo.tick(delta_time)
        self._level().tick(delta_time)

    def release(self) -> None:
        level = self._level()
        level.release()
        level.pending_removal = True