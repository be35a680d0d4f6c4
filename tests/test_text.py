import pytest

from sceneforge.console import Console, LogLevel
from sceneforge.geometry import Vector
from sceneforge.sprites import Texture
from sceneforge.text import TextRenderComponent, UUIDRenderComponent

COLUMNS = 106
ROWS = 106


@pytest.fixture
def console():
    return Console()


@pytest.fixture
def component(console):
    comp = TextRenderComponent(console=console)
    comp.texture = Texture(width=1060, height=1060, name="font.png")
    comp.set_row_column_count(ROWS, COLUMNS)
    return comp


def test_space_maps_to_origin(component):
    assert component.start_uv(" ") == (0.0, 0.0)


@pytest.mark.parametrize(
    "character, expected",
    [("A", (11.0, 0.0)), ("a", (37.0, 0.0)), ("0", (1.0, 0.0)), ("\uac00", (63.0, 0.0))],
)
def test_range_starts(component, character, expected):
    assert component.start_uv(character) == expected


def test_consecutive_letters_are_adjacent(component):
    first_u, first_v = component.start_uv("A")
    second_u, second_v = component.start_uv("B")
    assert second_u == first_u + 1
    assert second_v == first_v


def test_wraps_onto_next_row(console):
    comp = TextRenderComponent(console=console)
    comp.set_row_column_count(ROWS, 12)
    u, v = comp.start_uv("B")
    assert u + v * 12 == 11 + 1
    assert v >= 1


def test_unknown_character_logs_warning(component, console):
    u, v = component.start_uv("!")
    assert (u, v) == (-1.0, 0.0)
    assert console.items[-1].level is LogLevel.WARNING
    assert console.items[-1].message == "Text Error"


def test_start_uv_requires_grid(console):
    comp = TextRenderComponent(console=console)
    with pytest.raises(RuntimeError):
        comp.start_uv("A")


def test_invalid_grid_rejected(component):
    with pytest.raises(ValueError):
        component.set_row_column_count(0, COLUMNS)


def test_set_text_builds_six_vertices_per_character(component):
    component.set_text("AB")
    assert len(component.vertices) == 12
    assert component.num_text_vertices == 12
    assert component.text == "AB"


def test_quad_triangles_share_corners(component):
    component.set_text("A")
    verts = component.vertices
    assert verts[1] == verts[3]
    assert verts[2] == verts[5]
    assert verts[1].u - verts[0].u == pytest.approx(1 / COLUMNS)
    assert verts[2].v - verts[0].v == pytest.approx(1 / ROWS)


def test_characters_step_by_quad_width(component):
    component.set_text("AB")
    assert component.vertices[6].x - component.vertices[0].x == component.quad_width


def test_null_characters_are_skipped_but_keep_their_place(component):
    component.set_text("A\0B")
    assert len(component.vertices) == 12
    assert component.vertices[6].x - component.vertices[0].x == 2 * component.quad_width


def test_pick_quad_starts_at_left_edge(component):
    component.set_text("AB")
    assert len(component.quad) == 4
    assert component.quad[0] == Vector(-1.0, 1.0, 0.0)
    assert component.quad[1] == Vector(-1.0, -1.0, 0.0)
    assert component.quad[2].x == component.quad[3].x


def test_vertices_accumulate_until_cleared(component):
    component.set_text("A")
    component.set_text("A")
    assert len(component.vertices) == 12
    component.clear_text()
    assert component.vertices == []


def test_empty_text_clears_and_warns(component, console):
    component.set_text("A")
    component.set_text("")
    assert component.vertices == []
    assert component.quad == []
    assert console.items[-1].message == "Text is empty"


def test_text_needs_texture(console):
    comp = TextRenderComponent(console=console)
    comp.set_row_column_count(ROWS, COLUMNS)
    with pytest.raises(RuntimeError):
        comp.set_text("A")


def test_uuid_component_defaults(console):
    comp = UUIDRenderComponent(console=console)
    assert comp.relative_scale == Vector(0.1, 0.25, 0.25)
    assert comp.relative_location == Vector(0.0, 0.0, 5.0)
    assert comp.component_type == "UUIDRenderComponent"