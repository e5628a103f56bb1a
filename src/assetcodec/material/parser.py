"""Material definition parser.

The text format is a brace-delimited, case-insensitive key/value document::

    "LightmappedGeneric"
    {
        "$basetexture" "concrete/wall01"
        insert
        {
            "$surfaceprop" "concrete"
        }
    }

Only one level of named sub-block is understood. ``insert``/``replace`` blocks
override root parameters; every other sub-block (fallbacks, proxies, ...) is
skipped. ``patch`` materials are resolved through their ``include`` target.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, Optional, Tuple, Union

from ..errors import (
    E_INCLUDE_CYCLE,
    E_MISSING_INCLUDE,
    E_PATCH_NO_INCLUDE,
    IncludeCycle,
    MissingInclude,
    PatchWithoutInclude,
)
from ..logging import get_logger
from ..utils.io import read_asset_text
from .model import OVERRIDE_BLOCKS, PATCH_SHADER, MaterialDefinition

__all__ = ["parse_material_text", "load_material", "resolve_include"]


# Parser states -----------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class _Root:
    pass


@dataclass(frozen=True, slots=True)
class _InBlock:
    pending: Optional[str] = None  # sub-block name waiting for its "{"


@dataclass(frozen=True, slots=True)
class _InNamedSubBlock:
    name: str
    extra_depth: int = 0


_State = Union[_Root, _InBlock, _InNamedSubBlock]


def _unquote(token: str) -> str:
    return token.strip().strip('"')


def _split_pair(line: str) -> Optional[Tuple[str, str]]:
    parts = line.split(None, 1)
    if len(parts) < 2:
        return None
    return _unquote(parts[0]).lower(), _unquote(parts[1])


def _logical_lines(text: str) -> Iterator[str]:
    for raw in text.splitlines():
        line = raw.strip().replace('""', '" "')
        if not line or line.startswith("//"):
            continue
        # `insert {` style headers carry their opening brace on the same line.
        if line.endswith("{") and len(line) > 1:
            head = line[:-1].strip()
            if head and len(head.split()) == 1:
                yield head
                yield "{"
                continue
        yield line


def _open(state: _State) -> _State:
    if isinstance(state, _Root):
        return _InBlock()
    if isinstance(state, _InBlock):
        return _InNamedSubBlock(state.pending or "")
    return _InNamedSubBlock(state.name, state.extra_depth + 1)


def _close(state: _State) -> Optional[_State]:
    """Next state after a ``}``; ``None`` once the root block is closed."""
    if isinstance(state, _Root):
        return state
    if isinstance(state, _InBlock):
        return None
    if state.extra_depth:
        return _InNamedSubBlock(state.name, state.extra_depth - 1)
    return _InBlock()


def parse_material_text(
    text: str, source: Optional[Path] = None
) -> MaterialDefinition:
    """Parse a single material document without following includes."""
    shader: Optional[str] = None
    params: Dict[str, str] = {}
    state: Optional[_State] = _Root()
    for line in _logical_lines(text):
        if line.startswith("{"):
            state = _open(state)
            continue
        if line.startswith("}"):
            state = _close(state)
            if state is None:
                break
            continue
        if isinstance(state, _Root):
            if shader is None:
                shader = _unquote(line).lower()
        elif isinstance(state, _InBlock):
            pair = _split_pair(line)
            if pair is None:
                state = _InBlock(pending=_unquote(line).lower())
            else:
                params[pair[0]] = pair[1]
        elif state.extra_depth == 0 and state.name in OVERRIDE_BLOCKS:
            pair = _split_pair(line)
            if pair is not None:
                params[pair[0]] = pair[1]
    return MaterialDefinition.build(shader or "", params, source=source)


def resolve_include(base_dir: Path, include: str) -> Optional[Path]:
    """Locate an include target relative to ``base_dir``.

    The literal path is tried first, then its lowercased form.
    """
    rel = include.replace("\\", "/")
    for candidate in (rel, rel.lower()):
        p = base_dir / candidate
        if p.is_file():
            return p
    return None


def _load(path: Path, visited: FrozenSet[Path]) -> MaterialDefinition:
    key = path.resolve()
    if key in visited:
        raise IncludeCycle(
            code=E_INCLUDE_CYCLE,
            message=f"Include cycle through {path}",
            context={"path": str(path), "visited": sorted(str(v) for v in visited)},
        )
    stub = parse_material_text(read_asset_text(path), source=path)
    if stub.shader != PATCH_SHADER:
        return stub

    include = stub.parameters.get("include")
    if include is None:
        raise PatchWithoutInclude(
            code=E_PATCH_NO_INCLUDE,
            message=f"Patch material {path} has no include",
            context={"path": str(path)},
        )
    target = resolve_include(path.parent, include)
    if target is None:
        raise MissingInclude(
            code=E_MISSING_INCLUDE,
            message=f"Included material not found: {include}",
            context={"path": str(path), "include": include},
        )
    get_logger().debug("Resolving patch %s -> %s", path, target)
    base = _load(target, visited | {key})

    params = dict(base.parameters)
    for k, v in stub.parameters.items():
        if k != "include":
            params[k] = v
    return MaterialDefinition.build(
        base.shader,
        params,
        source=base.source,
        include_chain=(path,) + base.include_chain,
    )


def load_material(path: Union[str, Path]) -> MaterialDefinition:
    """Load a material file, following ``patch`` includes to their target."""
    return _load(Path(path), frozenset())
