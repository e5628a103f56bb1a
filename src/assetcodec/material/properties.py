"""Typed view over a resolved material parameter mapping."""

from __future__ import annotations

import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional, Tuple

from ..logging import get_logger

__all__ = ["MaterialProperties", "extract_properties", "parse_color"]

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True, slots=True)
class MaterialProperties:
    base_texture: Optional[str] = None
    base_texture2: Optional[str] = None
    bump_map: Optional[str] = None
    detail_texture: Optional[str] = None
    detail_scale: Optional[float] = None
    surface_prop: Optional[str] = None
    dudv_map: Optional[str] = None
    env_map: Optional[str] = None
    env_map_tint: Optional[Tuple[float, float, float]] = None
    env_map_contrast: Optional[float] = None
    env_map_saturation: Optional[float] = None
    base_alpha_env_map_mask: bool = False
    alpha_test: bool = False
    translucent: bool = False
    self_illum: bool = False
    additive: bool = False

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        if self.env_map_tint is not None:
            d["env_map_tint"] = list(self.env_map_tint)
        return d


def _keys(name: str) -> Tuple[str, ...]:
    # Keys are matched with and without the conventional "$" prefix.
    return (f"${name}", name)


def _first(params: Mapping[str, str], *keys: str) -> Optional[str]:
    for key in keys:
        if key in params:
            return params[key]
    return None


def _flag(params: Mapping[str, str], name: str) -> bool:
    return any(params.get(k) == "1" for k in _keys(name))


def _float(params: Mapping[str, str], name: str) -> Optional[float]:
    raw = _first(params, *_keys(name))
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        get_logger().debug("Ignoring non-numeric %s value %r", name, raw)
        return None


def parse_color(raw: str) -> Optional[Tuple[float, float, float]]:
    """``[r g b]`` (0..1 floats), ``{r g b}`` (0..255 ints) or a scalar."""
    text = raw.strip()
    values = [float(m) for m in _NUMBER_RE.findall(text)]
    if len(values) == 1 and not text.startswith(("[", "{")):
        values = values * 3
    if len(values) != 3:
        return None
    if text.startswith("{"):
        values = [v / 255.0 for v in values]
    return (values[0], values[1], values[2])


def extract_properties(params: Mapping[str, str]) -> MaterialProperties:
    tint_raw = _first(params, *_keys("envmaptint"))
    return MaterialProperties(
        base_texture=_first(
            params, "$basetexture", "basetexture", "%tooltexture", "$iris"
        ),
        base_texture2=_first(params, *_keys("basetexture2")),
        bump_map=_first(params, *_keys("bumpmap")),
        detail_texture=_first(params, *_keys("detail")),
        detail_scale=_float(params, "detailscale"),
        surface_prop=_first(params, *_keys("surfaceprop")),
        dudv_map=_first(params, *_keys("normalmap"), *_keys("dudvmap")),
        env_map=_first(params, *_keys("envmap")),
        env_map_tint=parse_color(tint_raw) if tint_raw is not None else None,
        env_map_contrast=_float(params, "envmapcontrast"),
        env_map_saturation=_float(params, "envmapsaturation"),
        base_alpha_env_map_mask=_flag(params, "basealphaenvmapmask"),
        alpha_test=_flag(params, "alphatest"),
        translucent=_flag(params, "translucent"),
        self_illum=_flag(params, "selfillum"),
        additive=_flag(params, "additive"),
    )
