"""Error definitions for assetcodec.

Every codec failure is a ``CodecError`` carrying a stable ``code`` so that
callers (and the CLI) can branch on the failure kind without string matching.
Unsupported texture formats and unsupported brush variants are *not* errors;
they are reported through tags and log records instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_BAD_MAGIC = "E_BAD_MAGIC"
E_TRUNCATED = "E_TRUNCATED"
E_MISSING_INCLUDE = "E_MISSING_INCLUDE"
E_PATCH_NO_INCLUDE = "E_PATCH_NO_INCLUDE"
E_INCLUDE_CYCLE = "E_INCLUDE_CYCLE"
E_MODEL = "E_MODEL"


@dataclass
class CodecError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


# Malformed input -------------------------------------------------------------
class MalformedSignature(CodecError):
    pass


class TruncatedData(CodecError):
    pass


# Material resolution ---------------------------------------------------------
class MissingInclude(CodecError):
    pass


class PatchWithoutInclude(CodecError):
    pass


class IncludeCycle(CodecError):
    pass


class ModelError(CodecError):
    pass


def malformed_signature(found: bytes, expected: bytes) -> MalformedSignature:
    return MalformedSignature(
        code=E_BAD_MAGIC,
        message=f"Bad signature {found!r} (expecting {expected!r})",
        context={"found": found.hex(), "expected": expected.hex()},
    )


def truncated(label: str, offset: int, size: int, available: int) -> TruncatedData:
    return TruncatedData(
        code=E_TRUNCATED,
        message=f"Out of range read for {label}: {offset}+{size}>{available}",
        context={
            "label": label,
            "offset": offset,
            "size": size,
            "available": available,
        },
    )


def model_error(message: str, path: str) -> ModelError:
    return ModelError(code=E_MODEL, message=message, context={"path": path})


__all__ = [
    "CodecError",
    "MalformedSignature",
    "TruncatedData",
    "MissingInclude",
    "PatchWithoutInclude",
    "IncludeCycle",
    "ModelError",
    "malformed_signature",
    "truncated",
    "model_error",
    "E_BAD_MAGIC",
    "E_TRUNCATED",
    "E_MISSING_INCLUDE",
    "E_PATCH_NO_INCLUDE",
    "E_INCLUDE_CYCLE",
    "E_MODEL",
]
