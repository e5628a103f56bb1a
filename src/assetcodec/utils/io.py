"""IO helpers for reading asset files."""

from __future__ import annotations
from pathlib import Path

__all__ = ["DataError", "safe_read_file", "read_asset_text"]

MAX_ASSET_SIZE = 256 * 1024 * 1024


class DataError(RuntimeError):
    pass


def safe_read_file(path: Path, max_size: int = MAX_ASSET_SIZE) -> bytes:
    if not path.is_file():
        raise DataError(f"File not found: {path}")
    size = path.stat().st_size
    if size > max_size:
        raise DataError(f"File too large: {size}>{max_size}")
    return path.read_bytes()


def read_asset_text(path: Path, max_size: int = MAX_ASSET_SIZE) -> str:
    # Asset text is nominally ASCII; stray high bytes must not abort a parse.
    return safe_read_file(path, max_size).decode("utf-8-sig", errors="replace")
