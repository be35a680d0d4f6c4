"""Surface materials as described by MTL files."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .geometry import ZERO_VECTOR, Vector


@dataclass
class ObjMaterialInfo:
    """Properties of one material read from an MTL file."""

    mtl_name: str = ""
    has_texture: bool = False
    transparent: bool = False
    diffuse: Vector = ZERO_VECTOR
    specular: Vector = ZERO_VECTOR
    ambient: Vector = ZERO_VECTOR
    emissive: Vector = ZERO_VECTOR
    specular_scalar: float = 0.0
    density_scalar: float = 0.0
    transparency_scalar: float = 0.0
    illuminance_model: int = 0
    diffuse_texture_name: str = ""
    diffuse_texture_path: str = ""
    ambient_texture_name: str = ""
    ambient_texture_path: str = ""
    specular_texture_name: str = ""
    specular_texture_path: str = ""
    bump_texture_name: str = ""
    bump_texture_path: str = ""
    alpha_texture_name: str = ""
    alpha_texture_path: str = ""


@dataclass
class Material:
    """A material object holding its own copy of the material properties."""

    info: ObjMaterialInfo = field(default_factory=ObjMaterialInfo)

    def __post_init__(self) -> None:
        self.info = replace(self.info)

    @classmethod
    def from_info(cls, info: Optional[ObjMaterialInfo] = None) -> Material:
        return cls(info if info is not None else ObjMaterialInfo())

    def set_transparency(self, value: float) -> None:
        """Set the transparency scalar; below 1.0 counts as transparent."""
        self.info.transparency_scalar = value
        self.info.transparent = value < 1.0