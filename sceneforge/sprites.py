"""Textures, billboards and sprite-sheet particle animation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .components import PrimitiveComponent, SceneComponent
from .geometry import QUAD_TEXTURE_VERTICES, VertexTexture

FRAME_INTERVAL = 75.0


@dataclass
class Texture:
    """A loaded image's name and pixel size."""

    width: int
    height: int
    name: str = ""


class BillboardComponent(PrimitiveComponent):
    """A textured quad that faces the camera."""

    def __init__(self) -> None:
        super().__init__()
        self.component_type = BillboardComponent.__name__
        self.texture: Optional[Texture] = None
        self.final_index_u = 0.0
        self.final_index_v = 0.0
        self.uuid_parent: Optional[SceneComponent] = None


class ParticleSubUVComponent(BillboardComponent):
    """A billboard that steps through the cells of a sprite sheet."""

    def __init__(self) -> None:
        super().__init__()
        self.component_type = ParticleSubUVComponent.__name__
        self.loop = True
        self.cells_per_row = 0
        self.cells_per_column = 0
        self.second = 0.0
        self._index_u = 0
        self._index_v = 0
        self.vertices: list[VertexTexture] = []

    @property
    def index_u(self) -> int:
        return self._index_u

    @property
    def index_v(self) -> int:
        return self._index_v

    def _cell_offsets(self) -> tuple[float, float]:
        if self.texture is None:
            raise RuntimeError("particle has no texture")
        if self.cells_per_row <= 0 or self.cells_per_column <= 0:
            raise RuntimeError("particle grid is not configured")
        width, height = self.texture.width, self.texture.height
        cell_width = width // self.cells_per_column
        cell_height = height // self.cells_per_column
        return cell_width / width, cell_height / height

    def set_row_column_count(self, cells_per_row: int, cells_per_column: int) -> None:
        """Set the sheet's grid and rebuild the quad; a texture must be set first."""
        if cells_per_row <= 0 or cells_per_column <= 0:
            raise ValueError("cell counts must be positive")
        if self.texture is None:
            raise ValueError("set a texture before the cell counts")
        self.cells_per_row = cells_per_row
        self.cells_per_column = cells_per_column
        self.vertices = self.sub_uv_vertices()

    def sub_uv_vertices(self) -> list[VertexTexture]:
        """The quad with texture coordinates covering one cell."""
        width_offset, height_offset = self._cell_offsets()
        v0, v1, v2, v3 = QUAD_TEXTURE_VERTICES
        return [
            v0,
            replace(v1, u=width_offset),
            replace(v2, v=height_offset),
            replace(v3, u=width_offset, v=height_offset),
        ]

    def tick_component(self, delta_time: float) -> None:
        """Advance the animation; a non-looping particle deactivates after the last cell."""
        super().tick_component(delta_time)
        if not self.is_active:
            return
        width_offset, height_offset = self._cell_offsets()

        self.second += delta_time
        if self.second >= FRAME_INTERVAL:
            self._index_u += 1
            self.second = 0.0
        if self._index_u >= self.cells_per_column:
            self._index_u = 0
            self._index_v += 1
        if self._index_v >= self.cells_per_row:
            self._index_u = 0
            self._index_v = 0
            if not self.loop:
                self.deactivate()

        self.final_index_u = self._index_u * width_offset
        self.final_index_v = self._index_v * height_offset