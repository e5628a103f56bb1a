"""Radiant ``.map`` text encoder.

Public functions:
- serialize(entities, config) -> str
- iter_serialize(entities, config) -> Iterator[EntityBlock]
- serialize_entity(entity, index, out) -> EntityBlock
- serialize_brush(brush, index, out) -> bool

``out`` is a ``MapWriter`` collecting lines for one MapFormat.

The encoder is lossy: unsupported brush variants vanish without a
trace and brushes with fewer than four sides are skipped with a warning. All
numeric output goes through ``format_number`` with the digits taken from the
``MapFormat`` passed in, never from the process locale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from ..logging import get_logger
from .model import (
    Brush,
    BrushSide,
    Entity,
    Patch,
    PlanarSides,
    Terrain,
    UnsupportedVariant,
)
from .numbers import DEFAULT_FORMAT, MapFormat, format_int, format_number

__all__ = [
    "MIN_BRUSH_SIDES",
    "MapWriter",
    "EntityBlock",
    "serialize",
    "iter_serialize",
    "serialize_entity",
    "serialize_brush",
]

MIN_BRUSH_SIDES = 4


class MapWriter:
    """Line buffer bound to one MapFormat; ``text()`` is everything written so far."""

    __slots__ = ("parts", "config")

    def __init__(self, config: MapFormat):
        self.parts: List[str] = []
        self.config = config

    def num(self, value: float) -> str:
        return format_number(
            value,
            self.config.max_fraction_digits,
            self.config.decimal_separator,
        )

    def patch_num(self, value: float) -> str:
        return format_number(
            value,
            self.config.patch_fraction_digits,
            self.config.decimal_separator,
        )

    def nums(self, values: Iterable[float]) -> str:
        return " ".join(self.num(v) for v in values)

    def line(self, text: str = "") -> None:
        self.parts.append(text + self.config.line_terminator)

    def text(self) -> str:
        return "".join(self.parts)


@dataclass(slots=True)
class EntityBlock:
    """Text of one entity plus how many of its brushes were written or dropped."""

    index: int
    text: str
    written: int
    dropped: int


def serialize(
    entities: Sequence[Entity], config: MapFormat = DEFAULT_FORMAT
) -> str:
    return "".join(block.text for block in iter_serialize(entities, config))


def iter_serialize(
    entities: Sequence[Entity], config: MapFormat = DEFAULT_FORMAT
) -> Iterator[EntityBlock]:
    """Yield the document one entity block at a time."""
    for index, entity in enumerate(entities):
        yield serialize_entity(entity, index, MapWriter(config))


def serialize_entity(entity: Entity, index: int, out: MapWriter) -> EntityBlock:
    out.line(f"// entity {index}")
    out.line("{")
    for key, value in entity.properties.items():
        out.line(f'"{key}" "{value}"')
    written = 0
    for brush_index, brush in enumerate(entity.brushes):
        written += serialize_brush(brush, brush_index, out)
    out.line("}")
    return EntityBlock(
        index, out.text(), written, len(entity.brushes) - written
    )


def serialize_brush(brush: Brush, index: int, out: MapWriter) -> bool:
    """Append one brush block; returns False when the brush was dropped."""
    if isinstance(brush, UnsupportedVariant):
        return False
    if isinstance(brush, PlanarSides) and len(brush.sides) < MIN_BRUSH_SIDES:
        get_logger().warning(
            "Tried to create brush from %d sides!", len(brush.sides)
        )
        return False
    out.line(f"// brush {index}")
    out.line("{")
    if isinstance(brush, PlanarSides):
        for side in brush.sides:
            _write_side(side, out)
    elif isinstance(brush, Patch):
        _write_patch(brush, out)
    elif isinstance(brush, Terrain):
        _write_terrain(brush, out)
    else:
        raise TypeError(f"Unhandled brush variant {type(brush).__name__}")
    out.line("}")
    return True


def _write_side(side: BrushSide, out: MapWriter) -> None:
    planes = " ".join(f"( {out.nums(v)} )" for v in side.vertices)
    out.line(
        f"{planes} {side.texture} {out.nums(side.shift)} "
        f"{out.num(side.rotation)} {out.nums(side.scale)} {side.flags} 0 0"
    )


def _write_patch(patch: Patch, out: MapWriter) -> None:
    out.line("patchDef2")
    out.line("{")
    out.line(patch.texture)
    out.line(f"( {format_int(patch.count_u)} {format_int(patch.count_v)} 0 0 0 )")
    out.line("(")
    for u in range(patch.count_u):
        row = ["( "]
        for v in range(patch.count_v):
            vert = patch.vertex(u, v)
            coords = (*vert.position, *vert.uv)
            row.append("( " + " ".join(out.patch_num(c) for c in coords) + " ) ")
        row.append(")")
        out.line("".join(row))
    out.line(")")
    out.line("}")


def _write_rows(rows: Sequence[Sequence[float]], out: MapWriter) -> None:
    for row in rows:
        out.line("      " + "".join(f"{out.num(h)} " for h in row))


def _write_terrain(terrain: Terrain, out: MapWriter) -> None:
    out.line("  terrainDef")
    out.line("  {")
    out.line(
        f"    TEX( {terrain.texture} {out.nums(terrain.shift)} "
        f"{out.num(terrain.rotation)} {out.nums(terrain.scale)} "
        f"{terrain.flags} 0 0 )"
    )
    out.line(f"    TD( {format_int(terrain.side_length)} {out.nums(terrain.start)} )")
    out.line(f"    IF( {out.nums(terrain.if_vector)} )")
    out.line(f"    LF( {out.nums(terrain.lf_vector)} )")
    out.line("    V(")
    _write_rows(terrain.height_map, out)
    out.line("    )")
    out.line("    A(")
    _write_rows(terrain.alpha_map, out)
    out.line("    )")
    out.line("  }")
