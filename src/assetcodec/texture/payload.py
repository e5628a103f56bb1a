"""Pixel payload sizing and extraction.

Sizes follow the container's native storage: block formats are stored as
whole 4x4 blocks, everything else as tightly packed pixels. Nothing here
decompresses; the payload leaves as raw bytes plus a format tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..errors import truncated
from ..logging import get_logger
from .constants import (
    BLOCK_BYTES,
    BLOCK_EDGE,
    BYTES_PER_PIXEL,
    DEFAULT_BYTES_PER_PIXEL,
    ONE_BYTE_FORMATS,
    ImageFormat,
)
from .header import TextureHeader, decode_header

__all__ = [
    "Unsupported",
    "FormatTag",
    "DecodedTexture",
    "format_tag",
    "compute_block_size",
    "compute_mip_chain_size",
    "extract_pixel_data",
    "decode_texture",
    "largest_mip",
]


@dataclass(frozen=True, slots=True)
class Unsupported:
    """Tag for a pixel format this decoder cannot size reliably."""

    code: int

    @property
    def name(self) -> str:
        return f"UNSUPPORTED({self.code})"


FormatTag = Union[ImageFormat, Unsupported]


@dataclass(frozen=True, slots=True)
class DecodedTexture:
    header: TextureHeader
    thumbnail: bytes
    main: bytes
    format: FormatTag

    @property
    def supported(self) -> bool:
        return not isinstance(self.format, Unsupported)


def format_tag(code: int) -> FormatTag:
    try:
        fmt = ImageFormat(code)
    except ValueError:
        return Unsupported(int(code))
    if fmt in BLOCK_BYTES or fmt in BYTES_PER_PIXEL or fmt in ONE_BYTE_FORMATS:
        return fmt
    return Unsupported(int(code))


def compute_block_size(width: int, height: int, fmt: int) -> int:
    """Byte size of one image (one mip level of one frame)."""
    block_bytes = BLOCK_BYTES.get(fmt)  # type: ignore[call-overload]
    if block_bytes is not None:
        if 0 < width < BLOCK_EDGE:
            width = BLOCK_EDGE
        if 0 < height < BLOCK_EDGE:
            height = BLOCK_EDGE
        blocks_x = (width + BLOCK_EDGE - 1) // BLOCK_EDGE
        blocks_y = (height + BLOCK_EDGE - 1) // BLOCK_EDGE
        return blocks_x * blocks_y * block_bytes
    bpp = BYTES_PER_PIXEL.get(fmt, DEFAULT_BYTES_PER_PIXEL)  # type: ignore[call-overload]
    return width * height * bpp


def compute_mip_chain_size(
    width: int, height: int, mip_count: int, frame_count: int, fmt: int
) -> int:
    total = 0
    for _ in range(mip_count):
        total += compute_block_size(width, height, fmt)
        width = max(width >> 1, 1)
        height = max(height >> 1, 1)
    return total * frame_count


def _slice(data: bytes, offset: int, size: int, label: str) -> bytes:
    end = offset + size
    if end > len(data):
        raise truncated(label, offset, size, len(data))
    return bytes(data[offset:end])


def extract_pixel_data(data: bytes, header: TextureHeader) -> Tuple[bytes, bytes]:
    """Return ``(thumbnail, main)`` raw payloads."""
    thumb_size = compute_block_size(
        header.low_res_width, header.low_res_height, header.low_res_format
    )
    main_size = compute_mip_chain_size(
        header.width,
        header.height,
        header.mip_count,
        header.frame_count,
        header.high_res_format,
    )
    thumb_offset = header.header_size
    thumbnail = _slice(data, thumb_offset, thumb_size, "thumbnail")
    main = _slice(data, thumb_offset + thumb_size, main_size, "main image")
    return thumbnail, main


def decode_texture(data: bytes) -> DecodedTexture:
    header = decode_header(data)
    tag = format_tag(header.high_res_format)
    if isinstance(tag, Unsupported):
        get_logger().debug(
            "Unsupported high-res format %d; skipping main payload",
            header.high_res_format,
        )
        thumb_size = compute_block_size(
            header.low_res_width, header.low_res_height, header.low_res_format
        )
        thumbnail = _slice(data, header.header_size, thumb_size, "thumbnail")
        return DecodedTexture(header, thumbnail, b"", tag)
    thumbnail, main = extract_pixel_data(data, header)
    return DecodedTexture(header, thumbnail, main, tag)


def largest_mip(texture: DecodedTexture) -> bytes:
    """All frames of mip level 0, which the container stores last."""
    if not texture.supported:
        return b""
    h = texture.header
    size = compute_block_size(h.width, h.height, h.high_res_format) * h.frame_count
    if size == 0:
        return b""
    return texture.main[-size:]
