from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .properties import MaterialProperties, extract_properties

__all__ = ["MaterialDefinition", "PATCH_SHADER", "OVERRIDE_BLOCKS"]

PATCH_SHADER = "patch"
OVERRIDE_BLOCKS = frozenset({"insert", "replace"})


@dataclass(slots=True)
class MaterialDefinition:
    """Resolved material: shader type, raw parameters and their typed view.

    ``source`` and ``include_chain`` are diagnostics only and take no part in
    equality, so a patch stub resolves to a value equal to its target.
    """

    shader: str
    parameters: Dict[str, str] = field(default_factory=dict)
    properties: MaterialProperties = field(default_factory=MaterialProperties)
    source: Optional[Path] = field(default=None, compare=False)
    include_chain: Tuple[Path, ...] = field(default=(), compare=False)

    @classmethod
    def build(
        cls,
        shader: str,
        parameters: Dict[str, str],
        source: Optional[Path] = None,
        include_chain: Tuple[Path, ...] = (),
    ) -> "MaterialDefinition":
        return cls(
            shader=shader,
            parameters=parameters,
            properties=extract_properties(parameters),
            source=source,
            include_chain=include_chain,
        )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        key = key.lower()
        if key in self.parameters:
            return self.parameters[key]
        alt = key[1:] if key.startswith("$") else f"${key}"
        return self.parameters.get(alt, default)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shader": self.shader,
            "source": str(self.source) if self.source else None,
            "include_chain": [str(p) for p in self.include_chain],
            "parameters": dict(self.parameters),
            "properties": self.properties.to_dict(),
        }
