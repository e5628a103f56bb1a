from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from assetcodec.errors import E_MODEL, ModelError
from assetcodec.mapfile import (
    Patch,
    PlanarSides,
    Terrain,
    UnsupportedVariant,
    load_entities,
    parse_entities,
)

SIDE = {
    "vertices": [[0, 0, 0], [0, 64, 0], [64, 64, 0]],
    "texture": "common/caulk",
    "scale": [0.5, 0.5],
}


def _doc():
    return {
        "entities": [
            {
                "properties": {"classname": "worldspawn", "mapversion": 220},
                "brushes": [
                    {"sides": [SIDE] * 4},
                    {
                        "type": "patch",
                        "texture": "curve/pipe",
                        "count_u": 1,
                        "count_v": 2,
                        "points": [
                            [0, 0, 0, 0, 0],
                            {"position": [0, 8, 0], "uv": [0, 1]},
                        ],
                    },
                    {
                        "type": "terrain",
                        "texture": "ground/grass",
                        "side_length": 64,
                        "start": [0, 0, 0],
                        "if": [1, 0, 0, 0],
                        "lf": [0, 1, 0, 0],
                        "height_map": [[0, 1], [2, 3]],
                        "alpha_map": [[1, 1], [0, 0]],
                    },
                    {"type": "unsupported", "kind": "moh_terrain"},
                ],
            }
        ]
    }


def test_parse_all_brush_types():
    (ent,) = parse_entities(_doc())
    assert ent.properties == {"classname": "worldspawn", "mapversion": "220"}
    planar, patch, terrain, unsupported = ent.brushes
    assert isinstance(planar, PlanarSides) and len(planar.sides) == 4
    assert planar.sides[0].scale == (0.5, 0.5)
    assert planar.sides[0].vertices[2] == (64.0, 64.0, 0.0)
    assert isinstance(patch, Patch)
    assert patch.vertex(0, 1).position == (0.0, 8.0, 0.0)
    assert patch.vertex(0, 1).uv == (0.0, 1.0)
    assert isinstance(terrain, Terrain)
    assert terrain.height_map == [[0.0, 1.0], [2.0, 3.0]]
    assert unsupported == UnsupportedVariant("moh_terrain")


def test_bare_list_document():
    assert len(parse_entities([{"properties": {"classname": "info_null"}}])) == 1


def test_load_yaml_and_json(tmp_path: Path):
    y = tmp_path / "level.yaml"
    y.write_text(yaml.safe_dump(_doc()))
    j = tmp_path / "level.json"
    j.write_text(json.dumps(_doc()))
    assert load_entities(y) == load_entities(j)


@pytest.mark.parametrize(
    "doc,path",
    [
        ({"entities": "nope"}, "entities"),
        ({"entities": [{"brushes": [{"type": "sphere"}]}]}, "entities[0].brushes[0].type"),
        (
            {"entities": [{"brushes": [{"sides": [{"texture": "x"}]}]}]},
            "entities[0].brushes[0].sides[0].vertices",
        ),
        (
            {"entities": [{"brushes": [{"type": "patch", "texture": "t", "count_u": 2,
                                        "count_v": 2, "points": [[0, 0, 0, 0, 0]]}]}]},
            "entities[0].brushes[0].points",
        ),
    ],
)
def test_model_errors_carry_path(doc, path):
    with pytest.raises(ModelError) as exc:
        parse_entities(doc)
    assert exc.value.code == E_MODEL
    assert exc.value.context["path"] == path


def test_missing_model_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_entities(tmp_path / "absent.json")


def _terrain(**overrides):
    node = {
        "type": "terrain",
        "texture": "ground/grass",
        "side_length": 64,
        "start": [0, 0, 0],
        "if": [1, 0, 0, 0],
        "lf": [0, 1, 0, 0],
    }
    node.update(overrides)
    return {"entities": [{"brushes": [node]}]}


def _one_side(**overrides):
    return {"entities": [{"brushes": [{"sides": [dict(SIDE, **overrides)]}]}]}


@pytest.mark.parametrize(
    "doc,path",
    [
        (_one_side(rotation="abc"), "entities[0].brushes[0].sides[0].rotation"),
        (_one_side(flags=[1]), "entities[0].brushes[0].sides[0].flags"),
        (_one_side(rotation=float("nan")), "entities[0].brushes[0].sides[0].rotation"),
        (
            _one_side(vertices=[[float("inf"), 0, 0], [0, 1, 0], [1, 1, 0]]),
            "entities[0].brushes[0].sides[0].vertices[0]",
        ),
        (_one_side(shift=["a", 0]), "entities[0].brushes[0].sides[0].shift"),
        (_terrain(height_map=[1, 2]), "entities[0].brushes[0].height_map[0]"),
        (_terrain(side_length="wide"), "entities[0].brushes[0].side_length"),
        (
            {"entities": [{"brushes": [{"type": "patch", "texture": "t", "count_u": "x",
                                        "count_v": 1, "points": []}]}]},
            "entities[0].brushes[0].count_u",
        ),
        (
            {"entities": [{"brushes": [{"type": "patch", "texture": "t", "count_u": 0,
                                        "count_v": 1, "points": []}]}]},
            "entities[0].brushes[0].count_u",
        ),
    ],
)
def test_bad_numbers_raise_model_error(doc, path):
    with pytest.raises(ModelError) as exc:
        parse_entities(doc)
    assert exc.value.code == E_MODEL
    assert exc.value.context["path"] == path


def test_json_infinity_rejected(tmp_path: Path):
    j = tmp_path / "level.json"
    j.write_text(
        '{"entities": [{"brushes": [{"sides": [{"vertices": '
        '[[0, 0, 0], [0, 64, 0], [64, 64, 0]], "texture": "x", '
        '"rotation": Infinity}]}]}]}'
    )
    with pytest.raises(ModelError) as exc:
        load_entities(j)
    assert exc.value.context["path"] == "entities[0].brushes[0].sides[0].rotation"


@pytest.mark.parametrize(
    "name,content",
    [
        ("broken.json", "{not json"),
        ("broken.yaml", "entities: [unclosed"),
    ],
)
def test_unparseable_document(tmp_path: Path, name, content):
    f = tmp_path / name
    f.write_text(content)
    with pytest.raises(ModelError) as exc:
        load_entities(f)
    assert exc.value.code == E_MODEL
    assert exc.value.context["path"] == "entities"
    assert name in exc.value.message


def test_non_utf8_document(tmp_path: Path):
    f = tmp_path / "level.json"
    f.write_bytes(b'{"entities": ["\xff"]}')
    with pytest.raises(ModelError):
        load_entities(f)
