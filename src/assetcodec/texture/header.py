"""Texture container header decoding."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

from ..errors import malformed_signature, truncated
from .constants import HEADER_FIXED_SIZE, HEADER_STRUCT, MAGIC

__all__ = ["TextureHeader", "decode_header", "encode_header"]


@dataclass(frozen=True, slots=True)
class TextureHeader:
    signature: bytes
    version: Tuple[int, int]
    header_size: int
    width: int
    height: int
    flags: int
    frame_count: int
    first_frame: int
    reflectivity: Tuple[float, float, float]
    bump_scale: float
    high_res_format: int
    mip_count: int
    low_res_format: int
    low_res_width: int
    low_res_height: int
    depth: int

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["signature"] = self.signature.decode("latin-1").rstrip("\x00")
        d["version"] = list(self.version)
        d["reflectivity"] = list(self.reflectivity)
        return d


def decode_header(data: bytes) -> TextureHeader:
    if len(data) < len(MAGIC):
        raise truncated("signature", 0, len(MAGIC), len(data))
    signature = bytes(data[: len(MAGIC)])
    if signature != MAGIC:
        raise malformed_signature(signature, MAGIC)
    if len(data) < HEADER_FIXED_SIZE:
        raise truncated("header", 0, HEADER_FIXED_SIZE, len(data))
    (
        signature,
        v_major,
        v_minor,
        header_size,
        width,
        height,
        flags,
        frames,
        first_frame,
        r_x,
        r_y,
        r_z,
        bump_scale,
        high_res_format,
        mip_count,
        low_res_format,
        low_res_width,
        low_res_height,
        depth,
    ) = HEADER_STRUCT.unpack_from(data, 0)
    return TextureHeader(
        signature=signature,
        version=(v_major, v_minor),
        header_size=header_size,
        width=width,
        height=height,
        flags=flags,
        frame_count=frames,
        first_frame=first_frame,
        reflectivity=(r_x, r_y, r_z),
        bump_scale=bump_scale,
        high_res_format=high_res_format,
        mip_count=mip_count,
        low_res_format=low_res_format,
        low_res_width=low_res_width,
        low_res_height=low_res_height,
        depth=depth,
    )


def encode_header(header: TextureHeader) -> bytes:
    """Pack a header back to its fixed 65-byte form (no trailing padding)."""
    return HEADER_STRUCT.pack(
        header.signature,
        *header.version,
        header.header_size,
        header.width,
        header.height,
        header.flags,
        header.frame_count,
        header.first_frame,
        *header.reflectivity,
        header.bump_scale,
        header.high_res_format,
        header.mip_count,
        header.low_res_format,
        header.low_res_width,
        header.low_res_height,
        header.depth,
    )
