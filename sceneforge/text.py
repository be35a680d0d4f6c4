"""Billboard text built from a font sprite sheet, and the UUID label component."""

from __future__ import annotations

from typing import Optional

from .components import PrimitiveComponent, SceneComponent
from .console import Console, LogLevel, get_console
from .geometry import Vector, VertexTexture
from .sprites import Texture

QUAD_SIZE = 2
QUAD_WIDTH = 2.0
QUAD_HEIGHT = 2.0

# First sheet cell of each character range, counted along a row.
_SPACE = " "
_UPPER_START = 11
_LOWER_START = 37
_DIGIT_START = 1
_HANGUL_START = 63
_HANGUL_FIRST = "\uac00"
_HANGUL_LAST = "\ud7a3"


def _truncated_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder that goes with it."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


class TextRenderComponent(PrimitiveComponent):
    """A string drawn as a row of quads, each showing one cell of a font sheet."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__()
        self.component_type = TextRenderComponent.__name__
        self.texture: Optional[Texture] = None
        self.parent: Optional[SceneComponent] = None
        self.vertices: list[VertexTexture] = []
        self.quad: list[Vector] = []
        self.num_text_vertices = 0
        self.quad_width = QUAD_WIDTH
        self.quad_height = QUAD_HEIGHT
        self.row_count = 0
        self.column_count = 0
        self._text = ""
        self._console = console

    @property
    def text(self) -> str:
        return self._text

    @property
    def console(self) -> Console:
        return self._console if self._console is not None else get_console()

    def set_row_column_count(self, rows: int, columns: int) -> None:
        """Set the font sheet's grid size."""
        if rows <= 0 or columns <= 0:
            raise ValueError("row and column counts must be positive")
        self.row_count = rows
        self.column_count = columns

    def clear_text(self) -> None:
        """Drop every generated vertex."""
        self.vertices.clear()

    def start_uv(self, character: str) -> tuple[float, float]:
        """Sheet column and row of the cell that shows ``character``.

        Characters outside the known ranges log a warning and map to the
        cell just before the start of the sheet.
        """
        if self.column_count <= 0:
            raise RuntimeError("the font grid is not configured")
        if character == _SPACE:
            return 0.0, 0.0

        start_u = 0
        start_v = 0
        offset = -1
        if "A" <= character <= "Z":
            start_u = _UPPER_START
            offset = ord(character) - ord("A")
        elif "a" <= character <= "z":
            start_u = _LOWER_START
            offset = ord(character) - ord("a")
        elif "0" <= character <= "9":
            start_u = _DIGIT_START
            offset = ord(character) - ord("0")
        elif _HANGUL_FIRST <= character <= _HANGUL_LAST:
            start_u = _HANGUL_START
            offset = ord(character) - ord(_HANGUL_FIRST)

        if offset == -1:
            self.console.add_log(LogLevel.WARNING, "Text Error")

        offset_v, offset_u = _truncated_divmod(offset + start_u, self.column_count)
        return float(offset_u), float(start_v + offset_v)

    def set_text(self, text: str) -> None:
        """Set the text and append the quads that draw it.

        Vertices from earlier calls are kept until ``clear_text``; the pick
        quad is rebuilt each time. An empty string clears everything and logs
        a warning.
        """
        self._text = text
        self.quad = []

        if not text:
            self.console.add_log(LogLevel.WARNING, "Text is empty")
            self.vertices.clear()
            self.num_text_vertices = 0
            return

        if self.texture is None:
            raise RuntimeError("set a texture before the text")
        if self.row_count <= 0 or self.column_count <= 0:
            raise RuntimeError("the font grid is not configured")

        bitmap_width = self.texture.width
        bitmap_height = self.texture.height
        cell_width = float(bitmap_width) / self.column_count
        cell_height = float(bitmap_height) / self.row_count
        u_step = cell_width / bitmap_width
        v_step = cell_height / bitmap_height

        for position, character in enumerate(text):
            if character == "\0":
                continue
            shift = self.quad_width * position
            start_u, start_v = self.start_uv(character)
            base_u = u_step * start_u
            base_v = v_step * start_v

            left_up = VertexTexture(-1.0 + shift, 1.0, 0.0, base_u, base_v)
            right_up = VertexTexture(1.0 + shift, 1.0, 0.0, u_step + base_u, base_v)
            left_down = VertexTexture(-1.0 + shift, -1.0, 0.0, base_u, v_step + base_v)
            right_down = VertexTexture(1.0 + shift, -1.0, 0.0, u_step + base_u, v_step + base_v)

            self.vertices.extend((left_up, right_up, left_down, right_up, right_down, left_down))

        last_x = -1.0 + QUAD_SIZE * len(text)
        self.quad = [
            Vector(-1.0, 1.0, 0.0),
            Vector(-1.0, -1.0, 0.0),
            Vector(last_x, 1.0, 0.0),
            Vector(last_x, -1.0, 0.0),
        ]
        self.num_text_vertices = len(self.vertices)


class UUIDRenderComponent(TextRenderComponent):
    """A small text label floating above its parent."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__(console)
        self.component_type = UUIDRenderComponent.__name__
        self.relative_scale = Vector(0.1, 0.25, 0.25)
        self.relative_location = Vector(0.0, 0.0, 5.0)