"""Parsing of Wavefront OBJ/MTL files into static mesh render data."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Union

from .geometry import ZERO_VECTOR, Vector, VertexSimple
from .material import ObjMaterialInfo

PathLike = Union[str, "os.PathLike[str]"]

FLT_MAX = 3.4028234663852886e38


@dataclass
class MaterialSubset:
    """A run of indices drawn with one material."""

    material_name: str = ""
    index_start: int = 0
    index_count: int = 0
    material_index: int = 0


@dataclass
class ObjInfo:
    """Raw data read from an OBJ file, before vertices are merged."""

    path_name: str = ""
    object_name: str = ""
    display_name: str = ""
    mat_name: str = ""
    group_names: list[str] = field(default_factory=list)
    vertices: list[Vector] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)
    uvs: list[tuple[float, float]] = field(default_factory=list)
    vertex_indices: list[int] = field(default_factory=list)
    texture_indices: list[Optional[int]] = field(default_factory=list)
    normal_indices: list[Optional[int]] = field(default_factory=list)
    material_subsets: list[MaterialSubset] = field(default_factory=list)

    @property
    def num_of_group(self) -> int:
        return len(self.group_names)


@dataclass
class StaticMeshRenderData:
    """Merged vertices, indices and materials ready for drawing."""

    object_name: str = ""
    path_name: str = ""
    display_name: str = ""
    vertices: list[VertexSimple] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    materials: list[ObjMaterialInfo] = field(default_factory=list)
    material_subsets: list[MaterialSubset] = field(default_factory=list)
    bounding_box_min: Vector = ZERO_VECTOR
    bounding_box_max: Vector = ZERO_VECTOR


def _numbers(tokens: Sequence[str], count: int, kind: type = float) -> list:
    """Read up to ``count`` numbers; after the first bad or missing one the rest are zero."""
    values = []
    failed = False
    for position in range(count):
        value = kind(0)
        if not failed and position < len(tokens):
            try:
                value = kind(tokens[position])
            except ValueError:
                failed = True
        else:
            failed = True
        values.append(value)
    return values


def _first(tokens: Sequence[str]) -> str:
    return tokens[0] if tokens else ""


def _split_path(path: str) -> tuple[str, str]:
    cut = max(path.rfind("/"), path.rfind("\\")) + 1
    return path[:cut], path[cut:]


def _close_last_subset(info: ObjInfo) -> None:
    if info.material_subsets:
        last = info.material_subsets[-1]
        last.index_count = len(info.vertex_indices) - last.index_start


def _face_corner(token: str) -> tuple[int, Optional[int], Optional[int]]:
    pieces = token.split("/")
    vertex = int(pieces[0]) - 1 if pieces[0] else 0
    texture = int(pieces[1]) - 1 if len(pieces) > 1 and pieces[1] else None
    normal = int(pieces[2]) - 1 if len(pieces) > 2 and pieces[2] else None
    return vertex, texture, normal


def _add_face(info: ObjInfo, corners: list[tuple[int, Optional[int], Optional[int]]]) -> None:
    if len(corners) == 4:
        order: Iterable[int] = (0, 1, 2, 0, 2, 3)
    elif len(corners) == 3:
        order = (0, 1, 2)
    else:
        return
    for corner in order:
        vertex, texture, normal = corners[corner]
        info.vertex_indices.append(vertex)
        info.texture_indices.append(texture)
        info.normal_indices.append(normal)


def parse_obj(path: PathLike) -> ObjInfo:
    """Read an OBJ file into raw mesh data; raises OSError if it cannot be opened."""
    path_text = os.fspath(path)
    info = ObjInfo()
    with open(path_text, encoding="utf-8") as stream:
        info.path_name, info.object_name = _split_path(path_text)
        stem, dot, _ = info.object_name.rpartition(".")
        info.display_name = stem if dot else info.object_name

        for line in stream:
            if not line or line.startswith("#"):
                continue
            tokens = line.split()
            if not tokens:
                continue
            keyword, args = tokens[0], tokens[1:]

            if keyword == "mtllib":
                info.mat_name = _first(args)
            elif keyword == "usemtl":
                _close_last_subset(info)
                info.material_subsets.append(
                    MaterialSubset(
                        material_name=_first(args),
                        index_start=len(info.vertex_indices),
                        index_count=0,
                    )
                )
            elif keyword in ("g", "o"):
                info.group_names.append(_first(args))
            elif keyword == "v":
                info.vertices.append(Vector(*_numbers(args, 3)))
            elif keyword == "vn":
                info.normals.append(Vector(*_numbers(args, 3)))
            elif keyword == "vt":
                u, v = _numbers(args, 2)
                info.uvs.append((u, v))
            elif keyword == "f":
                _add_face(info, [_face_corner(token) for token in args])

    _close_last_subset(info)
    return info


def parse_material(obj_info: ObjInfo, render_data: StaticMeshRenderData) -> StaticMeshRenderData:
    """Read the OBJ's material library into ``render_data`` and return it.

    Raises OSError if the library cannot be opened and ValueError if a
    property appears before any ``newmtl``.
    """
    render_data.material_subsets = [replace(subset) for subset in obj_info.material_subsets]

    with open(obj_info.path_name + obj_info.mat_name, encoding="utf-8") as stream:
        current: Optional[ObjMaterialInfo] = None
        for line in stream:
            if not line or line.startswith("#"):
                continue
            tokens = line.split()
            if not tokens:
                continue
            keyword, args = tokens[0], tokens[1:]

            if keyword == "newmtl":
                current = ObjMaterialInfo(mtl_name=_first(args))
                render_data.materials.append(current)
                continue

            if keyword not in ("Kd", "Ks", "Ka", "Ke", "Ns", "Ni", "d", "Tr", "illum", "map_Kd"):
                continue
            if current is None:
                raise ValueError(f"material property {keyword!r} before any newmtl")

            if keyword == "Kd":
                current.diffuse = Vector(*_numbers(args, 3))
            elif keyword == "Ks":
                current.specular = Vector(*_numbers(args, 3))
            elif keyword == "Ka":
                current.ambient = Vector(*_numbers(args, 3))
            elif keyword == "Ke":
                current.emissive = Vector(*_numbers(args, 3))
            elif keyword == "Ns":
                current.specular_scalar = _numbers(args, 1)[0]
            elif keyword == "Ni":
                current.density_scalar = _numbers(args, 1)[0]
            elif keyword in ("d", "Tr"):
                current.transparency_scalar = _numbers(args, 1)[0]
                current.transparent = True
            elif keyword == "illum":
                current.illuminance_model = _numbers(args, 1, int)[0]
            elif keyword == "map_Kd":
                current.diffuse_texture_name = _first(args)
                current.diffuse_texture_path = obj_info.path_name + current.diffuse_texture_name
                current.has_texture = True
    return render_data


def _subset_material(subsets: Sequence[MaterialSubset], position: int) -> int:
    for subset in subsets:
        if subset.index_start <= position < subset.index_start + subset.index_count:
            return subset.material_index
    return 0


def convert_to_static_mesh(raw: ObjInfo, render_data: StaticMeshRenderData) -> StaticMeshRenderData:
    """Merge identical v/vt/vn corners into unique vertices and fill ``render_data``."""
    render_data.object_name = raw.object_name
    render_data.path_name = raw.path_name
    render_data.display_name = raw.display_name

    seen: dict[tuple[int, Optional[int], Optional[int]], int] = {}
    corners = zip(raw.vertex_indices, raw.texture_indices, raw.normal_indices)
    for position, key in enumerate(corners):
        index = seen.get(key)
        if index is None:
            v_idx, t_idx, n_idx = key
            if not 0 <= v_idx < len(raw.vertices):
                raise ValueError(f"vertex index {v_idx + 1} out of range")
            point = raw.vertices[v_idx]
            attributes = dict(x=point.x, y=point.y, z=point.z, r=1.0, g=1.0, b=1.0, a=1.0)
            if t_idx is not None and 0 <= t_idx < len(raw.uvs):
                u, v = raw.uvs[t_idx]
                attributes.update(u=u, v=-v)
            if n_idx is not None and 0 <= n_idx < len(raw.normals):
                normal = raw.normals[n_idx]
                attributes.update(nx=normal.x, ny=normal.y, nz=normal.z)
            attributes["material_index"] = _subset_material(render_data.material_subsets, position)

            index = len(render_data.vertices)
            render_data.vertices.append(VertexSimple(**attributes))
            seen[key] = index
        render_data.indices.append(index)

    render_data.bounding_box_min, render_data.bounding_box_max = compute_bounding_box(
        render_data.vertices
    )
    return render_data


def compute_bounding_box(vertices: Iterable[VertexSimple]) -> tuple[Vector, Vector]:
    """Smallest and largest corner of the vertices' axis-aligned box."""
    low = [FLT_MAX, FLT_MAX, FLT_MAX]
    high = [-FLT_MAX, -FLT_MAX, -FLT_MAX]
    for vertex in vertices:
        for axis, value in enumerate((vertex.x, vertex.y, vertex.z)):
            low[axis] = min(low[axis], value)
            high[axis] = max(high[axis], value)
    return Vector(*low), Vector(*high)


def combine_material_index(render_data: StaticMeshRenderData) -> None:
    """Point each subset at the first material whose name it uses."""
    for subset in render_data.material_subsets:
        for index, material in enumerate(render_data.materials):
            if material.mtl_name == subset.material_name:
                subset.material_index = index
                break