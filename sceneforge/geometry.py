"""Vector maths, bounding boxes, vertex layouts and ray tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Union

_TRIANGLE_EPSILON = 1e-6
_NORMAL_EPSILON = 1e-8


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector, float]) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def dot(self, other: Vector) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Vector product."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def safe_normal(self) -> Vector:
        """Unit vector in the same direction, or the zero vector if too short."""
        size = self.length()
        if size < _NORMAL_EPSILON:
            return Vector()
        return self / size


ZERO_VECTOR = Vector(0.0, 0.0, 0.0)
ONE_VECTOR = Vector(1.0, 1.0, 1.0)
FORWARD_VECTOR = Vector(1.0, 0.0, 0.0)
RIGHT_VECTOR = Vector(0.0, 1.0, 0.0)
UP_VECTOR = Vector(0.0, 0.0, 1.0)


@dataclass(frozen=True, slots=True)
class Quat:
    """A rotation quaternion (w, x, y, z)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


def euler_to_quat(euler: Vector) -> Quat:
    """Build a quaternion from roll (x), pitch (y) and yaw (z) in degrees."""
    roll, pitch, yaw = (math.radians(angle) * 0.5 for angle in euler)
    cr, sr = math.cos(roll), math.sin(roll)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    return Quat(
        w=cr * cp * cy + sr * sp * sy,
        x=sr * cp * cy - cr * sp * sy,
        y=cr * sp * cy + sr * cp * sy,
        z=cr * cp * sy - sr * sp * cy,
    )


def quat_to_euler(quat: Quat) -> Vector:
    """Convert a quaternion to roll (x), pitch (y) and yaw (z) in degrees."""
    w, x, y, z = quat.w, quat.x, quat.y, quat.z
    roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
    sin_pitch = max(-1.0, min(1.0, 2.0 * (w * y - z * x)))
    pitch = math.asin(sin_pitch)
    yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
    return Vector(math.degrees(roll), math.degrees(pitch), math.degrees(yaw))


def rotate_vector(vector: Vector, quat: Quat) -> Vector:
    """Rotate a vector by a quaternion."""
    axis = Vector(quat.x, quat.y, quat.z)
    twice = axis.cross(vector) * 2.0
    return vector + twice * quat.w + axis.cross(twice)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """An axis-aligned box."""

    min: Vector = ZERO_VECTOR
    max: Vector = ZERO_VECTOR

    def intersect(self, origin: Vector, direction: Vector) -> Optional[float]:
        """Distance along the ray to the box, or None when the ray misses."""
        t_near = -math.inf
        t_far = math.inf
        for start, step, low, high in zip(origin, direction, self.min, self.max):
            if abs(step) < _NORMAL_EPSILON:
                if start < low or start > high:
                    return None
                continue
            t1 = (low - start) / step
            t2 = (high - start) / step
            if t1 > t2:
                t1, t2 = t2, t1
            t_near = max(t_near, t1)
            t_far = min(t_far, t2)
            if t_near > t_far:
                return None
        if t_far < 0.0:
            return None
        return max(t_near, 0.0)


@dataclass(frozen=True, slots=True)
class VertexSimple:
    """A mesh vertex: position, colour, normal, texture coordinate and material slot."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0
    nx: float = 0.0
    ny: float = 0.0
    nz: float = 0.0
    u: float = 0.0
    v: float = 0.0
    material_index: int = 0

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class VertexTexture:
    """A textured vertex: position and texture coordinate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    u: float = 0.0
    v: float = 0.0

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y, self.z)


QUAD_VERTICES: tuple[VertexSimple, ...] = (
    VertexSimple(-1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0),
    VertexSimple(1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
    VertexSimple(-1.0, -1.0, 0.0, 1.0, 1.0, 0.0, 1.0),
    VertexSimple(1.0, -1.0, 0.0, 1.0, 1.0, 1.0, 1.0),
)

QUAD_INDICES: tuple[int, ...] = (0, 1, 2, 1, 3, 2)

QUAD_TEXTURE_VERTICES: tuple[VertexTexture, ...] = (
    VertexTexture(-1.0, 1.0, 0.0, 0.0, 0.0),
    VertexTexture(1.0, 1.0, 0.0, 1.0, 0.0),
    VertexTexture(-1.0, -1.0, 0.0, 0.0, 1.0),
    VertexTexture(1.0, -1.0, 0.0, 1.0, 1.0),
)

QUAD_TEXTURE_INDICES: tuple[int, ...] = (0, 1, 2, 1, 3, 2)


def intersect_ray_triangle(
    origin: Vector, direction: Vector, v0: Vector, v1: Vector, v2: Vector
) -> Optional[float]:
    """Distance along the ray to the triangle, or None when there is no hit."""
    edge1 = v1 - v0
    edge2 = v2 - v0
    h = direction.cross(edge2)
    a = edge1.dot(h)
    if abs(a) < _TRIANGLE_EPSILON:
        return None

    f = 1.0 / a
    s = origin - v0
    u = f * s.dot(h)
    if u < 0.0 or u > 1.0:
        return None

    q = s.cross(edge1)
    v = f * direction.dot(q)
    if v < 0.0 or u + v > 1.0:
        return None

    t = f * edge2.dot(q)
    if t > _TRIANGLE_EPSILON:
        return t
    return None