"""Entity/brush model consumed by the map serializer.

The model is produced upstream (brush reconstruction from the spatial tree);
this layer only reads it. Brushes are a closed tagged union so the serializer
can dispatch exhaustively instead of sniffing optional fields.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]


@dataclass(slots=True)
class BrushSide:
    vertices: Tuple[Vec3, Vec3, Vec3]
    texture: str
    shift: Vec2 = (0.0, 0.0)
    rotation: float = 0.0
    scale: Vec2 = (1.0, 1.0)
    flags: int = 0


@dataclass(slots=True)
class PatchVertex:
    position: Vec3
    uv: Vec2 = (0.0, 0.0)


@dataclass(slots=True)
class PlanarSides:
    sides: List[BrushSide] = field(default_factory=list)


@dataclass(slots=True)
class Patch:
    texture: str
    count_u: int
    count_v: int
    # Vertex (u, v) lives at index count_u * v + u.
    points: List[PatchVertex] = field(default_factory=list)

    def vertex(self, u: int, v: int) -> PatchVertex:
        return self.points[self.count_u * v + u]


@dataclass(slots=True)
class Terrain:
    texture: str
    side_length: int
    start: Vec3
    if_vector: Vec4
    lf_vector: Vec4
    height_map: List[List[float]] = field(default_factory=list)
    alpha_map: List[List[float]] = field(default_factory=list)
    shift: Vec2 = (0.0, 0.0)
    rotation: float = 0.0
    scale: Vec2 = (1.0, 1.0)
    flags: int = 0


@dataclass(slots=True)
class UnsupportedVariant:
    kind: Optional[str] = None


Brush = Union[PlanarSides, Patch, Terrain, UnsupportedVariant]


@dataclass(slots=True)
class Entity:
    properties: Dict[str, str] = field(default_factory=dict)
    brushes: List[Brush] = field(default_factory=list)

    @classmethod
    def of(cls, *brushes: Brush, **properties: str) -> "Entity":
        return cls(dict(properties), list(brushes))


__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "BrushSide",
    "PatchVertex",
    "PlanarSides",
    "Patch",
    "Terrain",
    "UnsupportedVariant",
    "Brush",
    "Entity",
]
