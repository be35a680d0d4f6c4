"""Mesh components: material slots, static meshes and the stock shapes."""

from __future__ import annotations

import math
import os
from typing import Optional, Union

from .assets import ObjManager, StaticMesh, default_manager
from .components import PrimitiveComponent, RayResult
from .geometry import BoundingBox, Vector, intersect_ray_triangle
from .material import Material

PathLike = Union[str, "os.PathLike[str]"]

INDEX_NONE = -1
DEFAULT_CUBE_MESH = "Assets/helloBlender.obj"
SKY_SCROLL_STEP = 0.005

_UNIT_BOX = BoundingBox(Vector(-1.0, -1.0, -1.0), Vector(1.0, 1.0, 1.0))


class MeshComponent(PrimitiveComponent):
    """A primitive with per-slot material overrides."""

    def __init__(self) -> None:
        super().__init__()
        self.override_materials: list[Optional[Material]] = []

    def _valid_override(self, index: int) -> bool:
        return 0 <= index < len(self.override_materials)

    def num_materials(self) -> int:
        return 0

    def get_material(self, index: int) -> Optional[Material]:
        """The override material at ``index``, or None."""
        if self._valid_override(index):
            return self.override_materials[index]
        return None

    def material_index(self, slot_name: str) -> int:
        """Index of the named slot; plain mesh components have none."""
        return INDEX_NONE

    def material_by_name(self, slot_name: str) -> Optional[Material]:
        index = self.material_index(slot_name)
        if index < 0:
            return None
        return self.get_material(index)

    def material_slot_names(self) -> list[str]:
        return []

    def set_material(self, index: int, material: Optional[Material]) -> None:
        """Override the material of a slot; out-of-range indices are ignored."""
        if not self._valid_override(index):
            return
        self.override_materials[index] = material

    def set_material_by_name(self, slot_name: str, material: Optional[Material]) -> None:
        index = self.material_index(slot_name)
        if index < 0:
            return
        self.set_material(index, material)

    def used_materials(self) -> list[Material]:
        """Every material in use, in slot order, skipping empty slots."""
        found = (self.get_material(index) for index in range(self.num_materials()))
        return [material for material in found if material is not None]


class StaticMeshComponent(MeshComponent):
    """A mesh component that draws and picks a static mesh."""

    def __init__(self) -> None:
        super().__init__()
        self._static_mesh: Optional[StaticMesh] = None
        self.selected_sub_mesh_index = -1

    @property
    def static_mesh(self) -> Optional[StaticMesh]:
        return self._static_mesh

    @static_mesh.setter
    def static_mesh(self, mesh: StaticMesh) -> None:
        if mesh is None or mesh.render_data is None:
            raise ValueError("a static mesh with render data is required")
        self._static_mesh = mesh
        wanted = len(mesh.materials)
        kept = self.override_materials[:wanted]
        self.override_materials = kept + [None] * (wanted - len(kept))
        data = mesh.render_data
        self.aabb = BoundingBox(data.bounding_box_min, data.bounding_box_max)

    def num_materials(self) -> int:
        if self._static_mesh is None:
            return 0
        return len(self._static_mesh.materials)

    def get_material(self, index: int) -> Optional[Material]:
        """The override for a slot if set, else the mesh's own material."""
        mesh = self._static_mesh
        if mesh is None:
            return None
        override = self.override_materials[index] if self._valid_override(index) else None
        if override is not None:
            return override
        if 0 <= index < len(mesh.materials):
            return mesh.materials[index].material
        return None

    def material_index(self, slot_name: str) -> int:
        if self._static_mesh is None:
            return INDEX_NONE
        return self._static_mesh.material_index(slot_name)

    def material_slot_names(self) -> list[str]:
        if self._static_mesh is None:
            return []
        return [slot.slot_name for slot in self._static_mesh.materials]

    def used_materials(self) -> list[Material]:
        """The mesh's materials with any overrides put in their place."""
        if self._static_mesh is None:
            return []
        materials = self._static_mesh.used_materials()
        for index, override in enumerate(self.override_materials[: len(materials)]):
            if override is not None:
                materials[index] = override
        return materials

    def check_ray_intersection(self, origin: Vector, direction: Vector) -> RayResult:
        """Count triangle hits; the distance is the nearest hit, else the box's."""
        box_distance = self.aabb.intersect(origin, direction)
        if box_distance is None:
            return 0, None
        mesh = self._static_mesh
        if mesh is None or mesh.render_data is None or not mesh.render_data.vertices:
            return 0, box_distance

        vertices = mesh.render_data.vertices
        indices = mesh.render_data.indices
        if indices:
            triangles = [
                (indices[start], indices[start + 2], indices[start + 1])
                for start in range(0, len(indices) // 3 * 3, 3)
            ]
        else:
            triangles = [
                (start, start + 1, start + 2) for start in range(0, len(vertices) // 3 * 3, 3)
            ]

        hits = 0
        nearest = math.inf
        for i0, i1, i2 in triangles:
            distance = intersect_ray_triangle(
                origin,
                direction,
                vertices[i0].position,
                vertices[i1].position,
                vertices[i2].position,
            )
            if distance is not None:
                hits += 1
                nearest = min(nearest, distance)
        return hits, (nearest if hits else box_distance)


class CubeComponent(StaticMeshComponent):
    """A static mesh component that loads its mesh from an OBJ file on initialisation."""

    def __init__(
        self, manager: Optional[ObjManager] = None, mesh_path: PathLike = DEFAULT_CUBE_MESH
    ) -> None:
        super().__init__()
        self.component_type = CubeComponent.__name__
        self.aabb = _UNIT_BOX
        self.mesh_path = mesh_path
        self._manager = manager

    def initialize_component(self) -> None:
        """Initialise and load the mesh; raises OSError if the file cannot be read."""
        super().initialize_component()
        manager = self._manager if self._manager is not None else default_manager()
        self.static_mesh = manager.create_static_mesh(self.mesh_path)


class SphereComponent(StaticMeshComponent):
    """A unit sphere shape."""

    def __init__(self) -> None:
        super().__init__()
        self.component_type = SphereComponent.__name__
        self.aabb = _UNIT_BOX


class SkySphereComponent(StaticMeshComponent):
    """A sky dome whose texture coordinates scroll every tick."""

    def __init__(self) -> None:
        super().__init__()
        self.component_type = SkySphereComponent.__name__
        self.u_offset = 0.0
        self.v_offset = 0.0

    def tick_component(self, delta_time: float) -> None:
        self.u_offset += SKY_SCROLL_STEP
        self.v_offset += SKY_SCROLL_STEP
        super().tick_component(delta_time)