"""Entity model loading (JSON/YAML) for the ``map`` command.

The upstream reconstruction step hands geometry over as a document::

    entities:
      - properties: {classname: worldspawn}
        brushes:
          - type: planar
            sides:
              - vertices: [[0, 0, 0], [0, 64, 0], [64, 64, 0]]
                texture: common/caulk
                shift: [0, 0]
                rotation: 0
                scale: [0.5, 0.5]
                flags: 0
          - type: patch | terrain | unsupported
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..errors import model_error
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

__all__ = ["load_entities", "parse_entities"]


def load_entities(path: str | Path) -> List[Entity]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        text = p.read_text(encoding="utf-8")
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise model_error(
            f"Unreadable entity document {p.name}: {exc}", "entities"
        ) from exc
    return parse_entities(data)


def parse_entities(data: Any) -> List[Entity]:
    if isinstance(data, dict):
        data = data.get("entities")
    if not isinstance(data, list):
        raise model_error("'entities' must be a list", "entities")
    return [_entity(e, f"entities[{i}]") for i, e in enumerate(data)]


def _require(node: Dict[str, Any], key: str, path: str) -> Any:
    if key not in node:
        raise model_error(f"Missing field '{key}'", f"{path}.{key}")
    return node[key]


def _num(value: Any, kind: type, path: str) -> Any:
    if isinstance(value, (list, tuple, dict)) or value is None:
        raise model_error(f"Expected a number, got {value!r}", path)
    try:
        number = kind(value)
    except (TypeError, ValueError, OverflowError):
        raise model_error(f"Non-numeric value {value!r}", path) from None
    if not math.isfinite(number):
        raise model_error(f"Non-finite value {value!r}", path)
    return number


def _vec(value: Any, n: int, path: str) -> tuple:
    if not isinstance(value, (list, tuple)) or len(value) != n:
        raise model_error(f"Expected a {n}-component vector", path)
    try:
        components = tuple(float(v) for v in value)
    except (TypeError, ValueError, OverflowError):
        raise model_error(f"Non-numeric component in {value!r}", path) from None
    if not all(math.isfinite(c) for c in components):
        raise model_error(f"Non-finite component in {value!r}", path)
    return components


def _rows(value: Any, path: str) -> List[List[float]]:
    if not isinstance(value, list):
        raise model_error("Expected a list of rows", path)
    rows = []
    for i, r in enumerate(value):
        if not isinstance(r, list):
            raise model_error("Expected a row of numbers", f"{path}[{i}]")
        rows.append(list(_vec(r, len(r), f"{path}[{i}]")))
    return rows


def _entity(node: Any, path: str) -> Entity:
    if not isinstance(node, dict):
        raise model_error("Entity must be an object", path)
    props = node.get("properties", {}) or {}
    if not isinstance(props, dict):
        raise model_error("'properties' must be an object", path + ".properties")
    brushes = node.get("brushes", []) or []
    if not isinstance(brushes, list):
        raise model_error("'brushes' must be a list", path + ".brushes")
    return Entity(
        {str(k): str(v) for k, v in props.items()},
        [_brush(b, f"{path}.brushes[{i}]") for i, b in enumerate(brushes)],
    )


def _surface(node: Dict[str, Any], path: str) -> Dict[str, Any]:
    return {
        "shift": _vec(node.get("shift", [0, 0]), 2, path + ".shift"),
        "rotation": _num(node.get("rotation", 0), float, path + ".rotation"),
        "scale": _vec(node.get("scale", [1, 1]), 2, path + ".scale"),
        "flags": _num(node.get("flags", 0), int, path + ".flags"),
    }


def _brush(node: Any, path: str) -> Brush:
    if not isinstance(node, dict):
        raise model_error("Brush must be an object", path)
    kind = node.get("type", "planar")
    if kind == "unsupported":
        return UnsupportedVariant(node.get("kind"))
    if kind == "planar":
        sides = _require(node, "sides", path)
        if not isinstance(sides, list):
            raise model_error("'sides' must be a list", path + ".sides")
        return PlanarSides([_side(s, f"{path}.sides[{i}]") for i, s in enumerate(sides)])
    if kind == "patch":
        count_u = _num(_require(node, "count_u", path), int, path + ".count_u")
        count_v = _num(_require(node, "count_v", path), int, path + ".count_v")
        if count_u < 1 or count_v < 1:
            raise model_error("Patch dimensions must be positive", path + ".count_u")
        points = _require(node, "points", path)
        if not isinstance(points, list) or len(points) != count_u * count_v:
            raise model_error(
                f"Patch needs {count_u * count_v} control points", path + ".points"
            )
        return Patch(
            texture=str(_require(node, "texture", path)),
            count_u=count_u,
            count_v=count_v,
            points=[_patch_vertex(p, f"{path}.points[{i}]") for i, p in enumerate(points)],
        )
    if kind == "terrain":
        return Terrain(
            texture=str(_require(node, "texture", path)),
            side_length=_num(
                _require(node, "side_length", path), int, path + ".side_length"
            ),
            start=_vec(_require(node, "start", path), 3, path + ".start"),
            if_vector=_vec(_require(node, "if", path), 4, path + ".if"),
            lf_vector=_vec(_require(node, "lf", path), 4, path + ".lf"),
            height_map=_rows(node.get("height_map", []), path + ".height_map"),
            alpha_map=_rows(node.get("alpha_map", []), path + ".alpha_map"),
            **_surface(node, path),
        )
    raise model_error(f"Unknown brush type {kind!r}", path + ".type")


def _side(node: Any, path: str) -> BrushSide:
    if not isinstance(node, dict):
        raise model_error("Brush side must be an object", path)
    verts = _require(node, "vertices", path)
    if not isinstance(verts, list) or len(verts) != 3:
        raise model_error("A side needs exactly 3 vertices", path + ".vertices")
    return BrushSide(
        vertices=tuple(_vec(v, 3, f"{path}.vertices[{i}]") for i, v in enumerate(verts)),
        texture=str(_require(node, "texture", path)),
        **_surface(node, path),
    )


def _patch_vertex(node: Any, path: str) -> PatchVertex:
    if isinstance(node, dict):
        return PatchVertex(
            _vec(_require(node, "position", path), 3, path + ".position"),
            _vec(node.get("uv", [0, 0]), 2, path + ".uv"),
        )
    # Compact form: [x, y, z, u, v]
    flat = _vec(node, 5, path)
    return PatchVertex(flat[:3], flat[3:])
