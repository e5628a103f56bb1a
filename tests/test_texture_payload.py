from __future__ import annotations

from pathlib import Path

import pytest

from assetcodec.errors import E_TRUNCATED, TruncatedData
from assetcodec.texture import (
    ImageFormat,
    TextureHeader,
    Unsupported,
    decode_header,
    decode_texture,
    encode_header,
    extract_pixel_data,
    inspect_texture,
    largest_mip,
)

HEADER_SIZE = 80


def _header(**overrides) -> TextureHeader:
    fields = dict(
        signature=b"VTF\x00",
        version=(7, 2),
        header_size=HEADER_SIZE,
        width=16,
        height=16,
        flags=0,
        frame_count=1,
        first_frame=0,
        reflectivity=(0.0, 0.0, 0.0),
        bump_scale=1.0,
        high_res_format=int(ImageFormat.DXT1),
        mip_count=1,
        low_res_format=int(ImageFormat.DXT1),
        low_res_width=4,
        low_res_height=4,
        depth=1,
    )
    fields.update(overrides)
    return TextureHeader(**fields)


def _container(header: TextureHeader, payload: bytes) -> bytes:
    raw = encode_header(header)
    return raw + b"\x00" * (header.header_size - len(raw)) + payload


def test_extract_single_mip():
    h = _header()
    data = _container(h, b"T" * 8 + b"M" * 128)
    thumb, main = extract_pixel_data(data, decode_header(data))
    assert thumb == b"T" * 8
    assert main == b"M" * 128


def test_payload_starts_at_declared_header_size():
    h = _header(header_size=96)
    data = _container(h, b"T" * 8 + b"M" * 128)
    tex = decode_texture(data)
    assert tex.thumbnail == b"T" * 8
    assert tex.main == b"M" * 128
    assert tex.format is ImageFormat.DXT1
    assert tex.supported


def test_trailing_bytes_are_ignored():
    data = _container(_header(), b"T" * 8 + b"M" * 128 + b"extra")
    assert decode_texture(data).main == b"M" * 128


def test_no_thumbnail():
    h = _header(low_res_format=int(ImageFormat.NONE), low_res_width=0, low_res_height=0)
    data = _container(h, b"M" * 128)
    tex = decode_texture(data)
    assert tex.thumbnail == b""
    assert tex.main == b"M" * 128


def test_largest_mip_is_stored_last():
    h = _header(mip_count=5)
    # 1x1, 2x2, 4x4 levels are one block each, then 8x8, then 16x16.
    small = b"s" * (8 + 8 + 8 + 32)
    data = _container(h, b"T" * 8 + small + b"L" * 128)
    tex = decode_texture(data)
    assert len(tex.main) == 184
    assert largest_mip(tex) == b"L" * 128


def test_largest_mip_all_frames():
    h = _header(mip_count=2, frame_count=2, width=8, height=8)
    # per frame: 4x4 (8) + 8x8 (32)
    main = b"s" * 16 + b"L" * 64
    tex = decode_texture(_container(h, b"T" * 8 + main))
    assert largest_mip(tex) == b"L" * 64


def test_truncated_main_payload():
    data = _container(_header(), b"T" * 8 + b"M" * 100)
    with pytest.raises(TruncatedData) as exc:
        decode_texture(data)
    assert exc.value.code == E_TRUNCATED
    assert exc.value.context["label"] == "main image"


def test_truncated_thumbnail():
    data = _container(_header(), b"T" * 4)
    with pytest.raises(TruncatedData) as exc:
        decode_texture(data)
    assert exc.value.context["label"] == "thumbnail"


@pytest.mark.parametrize("code", [int(ImageFormat.RGBA16161616F), int(ImageFormat.ATI2N), 77])
def test_unsupported_format_skips_main(code):
    h = _header(high_res_format=code)
    tex = decode_texture(_container(h, b"T" * 8))
    assert tex.format == Unsupported(code)
    assert not tex.supported
    assert tex.thumbnail == b"T" * 8
    assert tex.main == b""
    assert largest_mip(tex) == b""


def test_inspect_texture_file(tmp_path: Path):
    path = tmp_path / "brick.vtf"
    data = _container(_header(), b"T" * 8 + b"M" * 128)
    path.write_bytes(data)
    info = inspect_texture(path)
    assert info["file"] == "brick.vtf"
    assert info["file_size"] == len(data)
    assert info["format_tag"] == "DXT1"
    assert info["low_res_format_name"] == "DXT1"
    assert info["main_bytes"] == 128
    assert info["largest_mip_bytes"] == 128
    assert info["supported"] is True
