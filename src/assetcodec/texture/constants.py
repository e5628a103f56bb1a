"""Binary layout constants for the texture container."""

from __future__ import annotations

import struct
from enum import IntEnum

MAGIC = b"VTF\x00"

# signature, version[2], header_size, width, height, flags, frames,
# first_frame, pad(4), reflectivity[3], pad(4), bump_scale, high_res_format,
# mip_count, low_res_format, low_res_width, low_res_height, depth
HEADER_STRUCT = struct.Struct("<4s2II2HI2H4x3f4xfiBi2BH")
HEADER_FIXED_SIZE = HEADER_STRUCT.size  # 65

BLOCK_EDGE = 4


class ImageFormat(IntEnum):
    NONE = -1
    RGBA8888 = 0
    ABGR8888 = 1
    RGB888 = 2
    BGR888 = 3
    RGB565 = 4
    I8 = 5
    IA88 = 6
    P8 = 7
    A8 = 8
    RGB888_BLUESCREEN = 9
    BGR888_BLUESCREEN = 10
    ARGB8888 = 11
    BGRA8888 = 12
    DXT1 = 13
    DXT3 = 14
    DXT5 = 15
    BGRX8888 = 16
    BGR565 = 17
    BGRX5551 = 18
    BGRA4444 = 19
    DXT1_ONEBITALPHA = 20
    BGRA5551 = 21
    UV88 = 22
    UVWQ8888 = 23
    RGBA16161616F = 24
    RGBA16161616 = 25
    UVLX8888 = 26
    R32F = 27
    RGB323232F = 28
    RGBA32323232F = 29
    NV_DST16 = 30
    NV_DST24 = 31
    NV_INTZ = 32
    NV_RAWZ = 33
    ATI_DST16 = 34
    ATI_DST24 = 35
    NV_NULL = 36
    ATI2N = 37
    ATI1N = 38


# Bytes per 4x4 block.
BLOCK_BYTES = {
    ImageFormat.DXT1: 8,
    ImageFormat.DXT1_ONEBITALPHA: 8,
    ImageFormat.DXT3: 16,
    ImageFormat.DXT5: 16,
}

BYTES_PER_PIXEL = {
    ImageFormat.ABGR8888: 4,
    ImageFormat.ARGB8888: 4,
    ImageFormat.RGBA8888: 4,
    ImageFormat.BGRA8888: 4,
    ImageFormat.BGRX8888: 4,
    ImageFormat.UVWQ8888: 4,
    ImageFormat.UVLX8888: 4,
    ImageFormat.R32F: 4,
    ImageFormat.NV_INTZ: 4,
    ImageFormat.NV_RAWZ: 4,
    ImageFormat.NV_NULL: 4,
    ImageFormat.RGB888: 3,
    ImageFormat.BGR888: 3,
    ImageFormat.RGB888_BLUESCREEN: 3,
    ImageFormat.BGR888_BLUESCREEN: 3,
    ImageFormat.NV_DST24: 3,
    ImageFormat.RGB565: 2,
    ImageFormat.IA88: 2,
    ImageFormat.BGR565: 2,
    ImageFormat.BGRX5551: 2,
    ImageFormat.BGRA4444: 2,
    ImageFormat.BGRA5551: 2,
    ImageFormat.UV88: 2,
    ImageFormat.NV_DST16: 2,
    ImageFormat.ATI_DST16: 2,
}

# Single-channel 8 bpp formats: the 1-byte default is exact for these, so
# they count as recognized rather than falling into the unsupported bucket.
ONE_BYTE_FORMATS = frozenset({ImageFormat.I8, ImageFormat.P8, ImageFormat.A8})

DEFAULT_BYTES_PER_PIXEL = 1

__all__ = [
    "MAGIC",
    "HEADER_STRUCT",
    "HEADER_FIXED_SIZE",
    "BLOCK_EDGE",
    "ImageFormat",
    "BLOCK_BYTES",
    "BYTES_PER_PIXEL",
    "ONE_BYTE_FORMATS",
    "DEFAULT_BYTES_PER_PIXEL",
]
