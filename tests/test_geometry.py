import math

import pytest

from sceneforge.geometry import (
    QUAD_INDICES,
    QUAD_TEXTURE_INDICES,
    QUAD_TEXTURE_VERTICES,
    QUAD_VERTICES,
    BoundingBox,
    Quat,
    Vector,
    VertexSimple,
    euler_to_quat,
    intersect_ray_triangle,
    quat_to_euler,
    rotate_vector,
)


def test_vector_arithmetic():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(4.0, 5.0, 6.0)
    assert a + b - b == a
    assert a * 2.0 == a + a
    assert a * Vector(1.0, 1.0, 1.0) == a
    assert -a + a == Vector()


def test_dot_and_cross_relations():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-9)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-9)
    assert a.cross(b) == -b.cross(a)


def test_safe_normal_unit_length_and_zero():
    n = Vector(3.0, 4.0, 12.0).safe_normal()
    assert math.isclose(n.length(), 1.0)
    assert Vector().safe_normal() == Vector()


def test_euler_round_trip():
    result = quat_to_euler(euler_to_quat(Vector(10.0, 20.0, 30.0)))
    assert list(result) == pytest.approx([10.0, 20.0, 30.0], abs=1e-5)


def test_identity_rotation_keeps_vector():
    v = Vector(1.5, -2.0, 0.25)
    assert list(rotate_vector(v, Quat())) == pytest.approx([1.5, -2.0, 0.25], abs=1e-5)
    assert list(rotate_vector(v, euler_to_quat(Vector()))) == pytest.approx([1.5, -2.0, 0.25], abs=1e-5)


def test_rotation_preserves_length():
    v = Vector(1.0, 2.0, 3.0)
    q = euler_to_quat(Vector(33.0, -17.0, 71.0))
    assert math.isclose(rotate_vector(v, q).length(), v.length(), rel_tol=1e-9)


def test_yaw_turns_forward_towards_right():
    q = euler_to_quat(Vector(0.0, 0.0, 90.0))
    result = rotate_vector(Vector(1.0, 0.0, 0.0), q)
    assert list(result) == pytest.approx([0.0, 1.0, 0.0], abs=1e-5)


def test_bounding_box_hit_distance():
    box = BoundingBox(Vector(-1.0, -1.0, -1.0), Vector(1.0, 1.0, 1.0))
    distance = box.intersect(Vector(-5.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
    assert math.isclose(distance, 4.0)


def test_bounding_box_misses():
    box = BoundingBox(Vector(-1.0, -1.0, -1.0), Vector(1.0, 1.0, 1.0))
    assert box.intersect(Vector(-5.0, 0.0, 0.0), Vector(-1.0, 0.0, 0.0)) is None
    assert box.intersect(Vector(-5.0, 3.0, 0.0), Vector(1.0, 0.0, 0.0)) is None


def test_bounding_box_origin_inside():
    box = BoundingBox(Vector(-1.0, -1.0, -1.0), Vector(1.0, 1.0, 1.0))
    assert box.intersect(Vector(), Vector(0.0, 0.0, 1.0)) == 0.0


def test_ray_triangle_hit():
    v0 = Vector(-1.0, -1.0, 0.0)
    v1 = Vector(1.0, -1.0, 0.0)
    v2 = Vector(0.0, 1.0, 0.0)
    t = intersect_ray_triangle(Vector(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0), v0, v1, v2)
    assert math.isclose(t, 5.0)


def test_ray_triangle_miss_and_parallel():
    v0 = Vector(-1.0, -1.0, 0.0)
    v1 = Vector(1.0, -1.0, 0.0)
    v2 = Vector(0.0, 1.0, 0.0)
    assert intersect_ray_triangle(Vector(5.0, 5.0, -5.0), Vector(0.0, 0.0, 1.0), v0, v1, v2) is None
    assert intersect_ray_triangle(Vector(0.0, 0.0, -5.0), Vector(1.0, 0.0, 0.0), v0, v1, v2) is None
    assert intersect_ray_triangle(Vector(0.0, 0.0, 5.0), Vector(0.0, 0.0, 1.0), v0, v1, v2) is None


def test_quad_tables():
    assert len(QUAD_VERTICES) == 4
    assert QUAD_INDICES == QUAD_TEXTURE_INDICES
    assert max(QUAD_TEXTURE_INDICES) == len(QUAD_TEXTURE_VERTICES) - 1
    assert QUAD_TEXTURE_VERTICES[3].position == Vector(1.0, -1.0, 0.0)


def test_vertex_defaults():
    vertex = VertexSimple(x=1.0, y=2.0, z=3.0)
    assert vertex.position == Vector(1.0, 2.0, 3.0)
    assert vertex.material_index == 0


@pytest.mark.parametrize("angle", [-80.0, -45.0, 0.0, 45.0, 80.0])
def test_pitch_round_trip(angle):
    result = quat_to_euler(euler_to_quat(Vector(0.0, angle, 0.0)))
    assert list(result) == pytest.approx([0.0, angle, 0.0], abs=1e-5)