"""Texture container decoding (header + raw payload, no decompression)."""

from .constants import MAGIC, HEADER_FIXED_SIZE, ImageFormat
from .header import TextureHeader, decode_header, encode_header
from .payload import (
    DecodedTexture,
    FormatTag,
    Unsupported,
    compute_block_size,
    compute_mip_chain_size,
    decode_texture,
    extract_pixel_data,
    format_tag,
    largest_mip,
)
from .inspector import describe_texture, inspect_texture

__all__ = [
    "MAGIC",
    "HEADER_FIXED_SIZE",
    "ImageFormat",
    "TextureHeader",
    "decode_header",
    "encode_header",
    "DecodedTexture",
    "FormatTag",
    "Unsupported",
    "compute_block_size",
    "compute_mip_chain_size",
    "decode_texture",
    "extract_pixel_data",
    "format_tag",
    "largest_mip",
    "describe_texture",
    "inspect_texture",
]
