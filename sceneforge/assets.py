"""Static mesh assets: a cached OBJ loader, material registry and binary mesh cache."""

from __future__ import annotations

import functools
import io
import os
import struct
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union

from .geometry import Vector, VertexSimple
from .material import Material, ObjMaterialInfo
from .obj_parser import (
    MaterialSubset,
    StaticMeshRenderData,
    combine_material_index,
    convert_to_static_mesh,
    parse_material,
    parse_obj,
)

PathLike = Union[str, "os.PathLike[str]"]

BINARY_SUFFIX = ".bin"

_COUNT = struct.Struct("<I")
_VERTEX = struct.Struct("<12fI")
_INDEX = struct.Struct("<I")
_MATERIAL_BODY = struct.Struct("<??12f3fI")
_SUBSET = struct.Struct("<3I")
_VECTOR = struct.Struct("<3f")

_TEXTURE_FIELDS = (
    "diffuse_texture",
    "ambient_texture",
    "specular_texture",
    "bump_texture",
    "alpha_texture",
)


@dataclass
class StaticMaterial:
    """A material slot of a static mesh."""

    material: Material
    slot_name: str


class StaticMesh:
    """Render data together with the material slots built from it."""

    def __init__(self, manager: Optional[ObjManager] = None) -> None:
        self.render_data: Optional[StaticMeshRenderData] = None
        self.materials: list[StaticMaterial] = []
        self._manager = manager

    def material_index(self, slot_name: str) -> int:
        """Index of the slot with this name, or -1 if there is none."""
        for index, slot in enumerate(self.materials):
            if slot.slot_name == slot_name:
                return index
        return -1

    def used_materials(self) -> list[Material]:
        """The material of every slot, in slot order."""
        return [slot.material for slot in self.materials]

    def set_data(self, render_data: StaticMeshRenderData) -> None:
        """Take the render data and create a slot for each of its materials."""
        self.render_data = render_data
        if not render_data.vertices:
            return
        manager = self._manager if self._manager is not None else default_manager()
        for info in render_data.materials:
            self.materials.append(StaticMaterial(manager.create_material(info), info.mtl_name))


class ObjManager:
    """Caches loaded OBJ render data, static meshes and materials."""

    def __init__(self) -> None:
        self._render_data: dict[str, StaticMeshRenderData] = {}
        self._static_meshes: dict[str, StaticMesh] = {}
        self._materials: dict[str, Material] = {}

    @property
    def materials(self) -> Mapping[str, Material]:
        return MappingProxyType(self._materials)

    @property
    def static_meshes(self) -> Mapping[str, StaticMesh]:
        return MappingProxyType(self._static_meshes)

    def load_static_mesh_asset(self, path: PathLike) -> StaticMeshRenderData:
        """Render data for an OBJ file, from cache, its binary copy, or by parsing it.

        Raises OSError when the OBJ file or its material library cannot be read.
        """
        key = os.fspath(path)
        cached = self._render_data.get(key)
        if cached is not None:
            return cached

        binary_path = key + BINARY_SUFFIX
        if os.path.isfile(binary_path):
            try:
                render_data = load_static_mesh(binary_path)
            except (OSError, ValueError):
                pass
            else:
                self._render_data[key] = render_data
                return render_data

        raw = parse_obj(key)
        render_data = StaticMeshRenderData()
        if raw.material_subsets:
            parse_material(raw, render_data)
            combine_material_index(render_data)
            for info in render_data.materials:
                self.create_material(info)
        convert_to_static_mesh(raw, render_data)

        try:
            save_static_mesh(binary_path, render_data)
        except OSError:
            pass
        self._render_data[key] = render_data
        return render_data

    def create_material(self, info: ObjMaterialInfo) -> Material:
        """The registered material of this name, creating it if needed."""
        existing = self._materials.get(info.mtl_name)
        if existing is not None:
            return existing
        material = Material.from_info(info)
        self._materials[info.mtl_name] = material
        return material

    def get_material(self, name: str) -> Optional[Material]:
        return self._materials.get(name)

    def create_static_mesh(self, path: PathLike) -> StaticMesh:
        """The static mesh for an OBJ file, registered under its object name."""
        render_data = self.load_static_mesh_asset(path)
        existing = self.get_static_mesh(render_data.object_name)
        if existing is not None:
            return existing
        mesh = StaticMesh(self)
        mesh.set_data(render_data)
        self._static_meshes[render_data.object_name] = mesh
        return mesh

    def get_static_mesh(self, name: str) -> Optional[StaticMesh]:
        return self._static_meshes.get(name)


def _write_string(out: io.BytesIO, text: str) -> None:
    data = text.encode("utf-8")
    out.write(_COUNT.pack(len(data)))
    out.write(data)


def _write_wide_string(out: io.BytesIO, text: str) -> None:
    data = text.encode("utf-16-le")
    out.write(_COUNT.pack(len(data) // 2))
    out.write(data)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def take(self, size: int) -> bytes:
        end = self._offset + size
        if end > len(self._data):
            raise ValueError("truncated static mesh file")
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple:
        return layout.unpack(self.take(layout.size))

    def count(self) -> int:
        return self.unpack(_COUNT)[0]

    def string(self) -> str:
        return self.take(self.count()).decode("utf-8")

    def wide_string(self) -> str:
        return self.take(self.count() * 2).decode("utf-16-le")

    def vector(self) -> Vector:
        return Vector(*self.unpack(_VECTOR))


def save_static_mesh(path: PathLike, mesh: StaticMeshRenderData) -> None:
    """Write render data to a little-endian binary file."""
    out = io.BytesIO()
    _write_wide_string(out, mesh.object_name)
    _write_wide_string(out, mesh.path_name)
    _write_string(out, mesh.display_name)

    out.write(_COUNT.pack(len(mesh.vertices)))
    for vertex in mesh.vertices:
        out.write(
            _VERTEX.pack(
                vertex.x, vertex.y, vertex.z,
                vertex.r, vertex.g, vertex.b, vertex.a,
                vertex.nx, vertex.ny, vertex.nz,
                vertex.u, vertex.v,
                vertex.material_index,
            )
        )

    out.write(_COUNT.pack(len(mesh.indices)))
    for index in mesh.indices:
        out.write(_INDEX.pack(index))

    out.write(_COUNT.pack(len(mesh.materials)))
    for material in mesh.materials:
        _write_string(out, material.mtl_name)
        out.write(
            _MATERIAL_BODY.pack(
                material.has_texture,
                material.transparent,
                *material.diffuse,
                *material.specular,
                *material.ambient,
                *material.emissive,
                material.specular_scalar,
                material.density_scalar,
                material.transparency_scalar,
                material.illuminance_model,
            )
        )
        for prefix in _TEXTURE_FIELDS:
            _write_string(out, getattr(material, prefix + "_name"))
            _write_wide_string(out, getattr(material, prefix + "_path"))

    out.write(_COUNT.pack(len(mesh.material_subsets)))
    for subset in mesh.material_subsets:
        _write_string(out, subset.material_name)
        out.write(_SUBSET.pack(subset.index_start, subset.index_count, subset.material_index))

    out.write(_VECTOR.pack(*mesh.bounding_box_min))
    out.write(_VECTOR.pack(*mesh.bounding_box_max))

    with open(path, "wb") as stream:
        stream.write(out.getvalue())


def load_static_mesh(path: PathLike) -> StaticMeshRenderData:
    """Read render data written by save_static_mesh.

    Raises OSError if the file cannot be opened and ValueError if it is truncated.
    """
    with open(path, "rb") as stream:
        reader = _Reader(stream.read())

    mesh = StaticMeshRenderData()
    mesh.object_name = reader.wide_string()
    mesh.path_name = reader.wide_string()
    mesh.display_name = reader.string()

    for _ in range(reader.count()):
        *floats, material_index = reader.unpack(_VERTEX)
        mesh.vertices.append(VertexSimple(*floats, material_index=material_index))

    mesh.indices = [reader.unpack(_INDEX)[0] for _ in range(reader.count())]

    for _ in range(reader.count()):
        name = reader.string()
        has_texture, transparent, *values = reader.unpack(_MATERIAL_BODY)
        info = ObjMaterialInfo(
            mtl_name=name,
            has_texture=has_texture,
            transparent=transparent,
            diffuse=Vector(*values[0:3]),
            specular=Vector(*values[3:6]),
            ambient=Vector(*values[6:9]),
            emissive=Vector(*values[9:12]),
            specular_scalar=values[12],
            density_scalar=values[13],
            transparency_scalar=values[14],
            illuminance_model=values[15],
        )
        for prefix in _TEXTURE_FIELDS:
            setattr(info, prefix + "_name", reader.string())
            setattr(info, prefix + "_path", reader.wide_string())
        mesh.materials.append(info)

    for _ in range(reader.count()):
        name = reader.string()
        start, count, material_index = reader.unpack(_SUBSET)
        mesh.material_subsets.append(MaterialSubset(name, start, count, material_index))

    mesh.bounding_box_min = reader.vector()
    mesh.bounding_box_max = reader.vector()
    return mesh


@functools.lru_cache(maxsize=None)
def default_manager() -> ObjManager:
    """The shared asset manager."""
    return ObjManager()