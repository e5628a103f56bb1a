from .io import DataError, read_asset_text, safe_read_file

__all__ = ["DataError", "read_asset_text", "safe_read_file"]
