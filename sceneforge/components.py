"""Actor components: lifecycle, scene transforms, primitives and lights."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from .geometry import (
    FORWARD_VECTOR,
    ONE_VECTOR,
    RIGHT_VECTOR,
    UP_VECTOR,
    ZERO_VECTOR,
    BoundingBox,
    Quat,
    Vector,
    euler_to_quat,
    quat_to_euler,
    rotate_vector,
)

RayResult = tuple[int, Optional[float]]


class EndPlayReason(Enum):
    """Why gameplay ended for an actor or component."""

    DESTROYED = 0
    WORLD_TRANSITION = 1
    QUIT = 2


class ActorComponent:
    """A component owned by an actor, with an init/play/destroy lifecycle."""

    def __init__(self) -> None:
        self.owner: Any = None
        self.auto_activate = False
        self.pending_removal = False
        self._initialized = False
        self._begun_play = False
        self._being_destroyed = False
        self._active = False

    @property
    def has_been_initialized(self) -> bool:
        return self._initialized

    @property
    def has_begun_play(self) -> bool:
        return self._begun_play

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def is_being_destroyed(self) -> bool:
        return self._being_destroyed

    def initialize_component(self) -> None:
        """Mark the component initialised; it must not be already."""
        if self._initialized:
            raise RuntimeError("component is already initialized")
        self._initialized = True

    def uninitialize_component(self) -> None:
        """Mark the component uninitialised; it must have been initialised."""
        if not self._initialized:
            raise RuntimeError("component is not initialized")
        self._initialized = False

    def begin_play(self) -> None:
        self._begun_play = True

    def tick_component(self, delta_time: float) -> None:
        """Advance the component by one frame."""

    def on_component_destroyed(self) -> None:
        """Hook run when the component is destroyed."""

    def end_play(self, reason: EndPlayReason) -> None:
        if not self._begun_play:
            raise RuntimeError("component has not begun play")
        self._begun_play = False

    def destroy_component(self) -> None:
        """Detach from the owner, end play, uninitialise and mark for removal."""
        if self._being_destroyed:
            return
        self._being_destroyed = True

        owner = self.owner
        if owner is not None:
            owner.remove_owned_component(self)
            if owner.root_component is self:
                owner.set_root_component(None)

        if self._begun_play:
            self.end_play(EndPlayReason.DESTROYED)
        if self._initialized:
            self.uninitialize_component()
        self.on_component_destroyed()
        self.pending_removal = True

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False


class SceneComponent(ActorComponent):
    """A component with a transform that can be attached to a parent."""

    def __init__(self) -> None:
        super().__init__()
        self.relative_location: Vector = ZERO_VECTOR
        self.relative_rotation: Vector = ZERO_VECTOR
        self.relative_scale: Vector = ONE_VECTOR
        self.quat: Quat = euler_to_quat(self.relative_rotation)
        self.attach_parent: Optional[SceneComponent] = None
        self.attach_children: list[SceneComponent] = []

    def forward_vector(self) -> Vector:
        return rotate_vector(FORWARD_VECTOR, self.quat)

    def right_vector(self) -> Vector:
        return rotate_vector(RIGHT_VECTOR, self.quat)

    def up_vector(self) -> Vector:
        return rotate_vector(UP_VECTOR, self.quat)

    def add_location(self, delta: Vector) -> None:
        self.relative_location = self.relative_location + delta

    def add_rotation(self, delta: Vector) -> None:
        self.relative_rotation = self.relative_rotation + delta
        self.quat = euler_to_quat(self.relative_rotation)

    def add_scale(self, delta: Vector) -> None:
        self.relative_scale = self.relative_scale + delta

    def local_rotation(self) -> Vector:
        """Euler rotation (degrees) derived from the stored quaternion."""
        return quat_to_euler(self.quat)

    def world_location(self) -> Vector:
        if self.attach_parent is not None:
            return self.attach_parent.world_location() + self.relative_location
        return self.relative_location

    def world_rotation(self) -> Vector:
        if self.attach_parent is not None:
            return self.attach_parent.local_rotation() + self.local_rotation()
        return self.local_rotation()

    def world_scale(self) -> Vector:
        if self.attach_parent is not None:
            return self.attach_parent.world_scale() * self.relative_scale
        return self.relative_scale

    def set_rotation(self, rotation: Union[Vector, Quat]) -> None:
        """Set rotation from Euler degrees, or set the quaternion alone."""
        if isinstance(rotation, Quat):
            self.quat = rotation
            return
        self.relative_rotation = rotation
        self.quat = euler_to_quat(rotation)

    def setup_attachment(self, parent: Optional[SceneComponent]) -> None:
        """Attach to a parent unless it is None, self, or already the parent."""
        if (
            parent is not None
            and parent is not self.attach_parent
            and parent is not self
            and (self.attach_parent is None or self not in self.attach_parent.attach_children)
        ):
            self.attach_parent = parent
            if self not in parent.attach_children:
                parent.attach_children.append(self)

    def check_ray_intersection(self, origin: Vector, direction: Vector) -> RayResult:
        """Number of hits and nearest hit distance; scene components have none."""
        return 0, None


class PrimitiveComponent(SceneComponent):
    """A scene component with a bounding box and a type name."""

    def __init__(self) -> None:
        super().__init__()
        self.aabb = BoundingBox()
        self.component_type = ""

    def check_ray_intersection(self, origin: Vector, direction: Vector) -> RayResult:
        distance = self.aabb.intersect(origin, direction)
        if distance is None:
            return 0, None
        return 0, distance


class LightComponent(SceneComponent):
    """A light with a colour, a radius and a thin pickable box."""

    def __init__(self) -> None:
        super().__init__()
        self.aabb = BoundingBox(Vector(-1.0, -1.0, -0.1), Vector(1.0, 1.0, 0.1))
        self.color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
        self.radius = 5.0

    def check_ray_intersection(self, origin: Vector, direction: Vector) -> RayResult:
        distance = self.aabb.intersect(origin, direction)
        if distance is None:
            return 0, None
        return 1, distance