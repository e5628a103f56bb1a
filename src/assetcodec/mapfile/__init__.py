"""Radiant map document encoder."""

from .model import (
    Brush,
    BrushSide,
    Entity,
    Patch,
    PatchVertex,
    PlanarSides,
    Terrain,
    UnsupportedVariant,
)
from .numbers import DEFAULT_FORMAT, MapFormat, format_int, format_number
from .serializer import (
    MIN_BRUSH_SIDES,
    EntityBlock,
    MapWriter,
    iter_serialize,
    serialize,
    serialize_brush,
    serialize_entity,
)
from .loader import load_entities, parse_entities

__all__ = [
    "Brush",
    "BrushSide",
    "Entity",
    "Patch",
    "PatchVertex",
    "PlanarSides",
    "Terrain",
    "UnsupportedVariant",
    "DEFAULT_FORMAT",
    "MapFormat",
    "format_int",
    "format_number",
    "MIN_BRUSH_SIDES",
    "serialize",
    "iter_serialize",
    "serialize_entity",
    "serialize_brush",
    "EntityBlock",
    "MapWriter",
    "load_entities",
    "parse_entities",
]
