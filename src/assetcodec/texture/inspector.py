"""Texture container inspection (JSON-friendly summaries for the CLI)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from ..utils.io import safe_read_file
from .constants import ImageFormat
from .payload import DecodedTexture, Unsupported, decode_texture, largest_mip

__all__ = ["format_name", "describe_texture", "inspect_texture"]


def format_name(code: int) -> str:
    try:
        return ImageFormat(code).name
    except ValueError:
        return Unsupported(code).name


def describe_texture(texture: DecodedTexture) -> Dict[str, Any]:
    h = texture.header
    return {
        "header": h.to_dict(),
        "high_res_format_name": format_name(h.high_res_format),
        "low_res_format_name": format_name(h.low_res_format),
        "format_tag": texture.format.name,
        "supported": texture.supported,
        "thumbnail_bytes": len(texture.thumbnail),
        "main_bytes": len(texture.main),
        "largest_mip_bytes": len(largest_mip(texture)),
    }


def inspect_texture(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    data = safe_read_file(p)
    info = describe_texture(decode_texture(data))
    info["file"] = p.name
    info["file_size"] = len(data)
    return info
