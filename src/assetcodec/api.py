"""High-level API used by the CLI.

Each entry point wraps one codec in a reporter task and emits a summary line.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .logging import get_logger
from .reporting import get_reporter, task
from .mapfile import DEFAULT_FORMAT, MapFormat, iter_serialize, load_entities
from .material import MaterialDefinition, load_material
from .texture import decode_texture, describe_texture
from .utils.io import safe_read_file

__all__ = [
    "ConvertOptions",
    "ConvertResult",
    "convert_map",
    "inspect_texture_file",
    "load_material_file",
]


@dataclass(slots=True)
class ConvertOptions:
    model_path: Path
    output_path: Path
    config: MapFormat = DEFAULT_FORMAT


@dataclass(slots=True)
class ConvertResult:
    output_file: Path
    entities: int
    brushes: int
    dropped: int
    bytes_written: int


def convert_map(options: ConvertOptions) -> ConvertResult:
    rep = get_reporter()
    entities = load_entities(options.model_path)
    with task(
        "map.write", f"Write {options.output_path.name}", total=len(entities)
    ) as stats:
        chunks = []
        brushes = dropped = 0
        for block in iter_serialize(entities, options.config):
            chunks.append(block.text)
            brushes += block.written
            dropped += block.dropped
            rep.advance(
                "map.write",
                current_item=entities[block.index].properties.get(
                    "classname", "entity"
                ),
            )
        data = "".join(chunks).encode("utf-8")
        options.output_path.parent.mkdir(parents=True, exist_ok=True)
        # Bytes, not text mode: the line terminator must survive untouched.
        options.output_path.write_bytes(data)
        stats.update(
            entities=len(entities),
            brushes=brushes,
            dropped=dropped,
            bytes=len(data),
        )
    rep.summary(
        "Map",
        entities=len(entities),
        brushes=brushes,
        dropped=dropped,
        bytes=len(data),
    )
    return ConvertResult(
        output_file=options.output_path,
        entities=len(entities),
        brushes=brushes,
        dropped=dropped,
        bytes_written=len(data),
    )


def inspect_texture_file(
    path: str | Path, dump_dir: Path | None = None
) -> Dict[str, Any]:
    """Decode a texture container and optionally dump its raw payloads."""
    p = Path(path)
    with task("texture.decode", f"Decode {p.name}") as stats:
        data = safe_read_file(p)
        texture = decode_texture(data)
        info = describe_texture(texture)
        info["file"] = p.name
        info["file_size"] = len(data)
        stats["bytes"] = len(data)
    get_reporter().summary(
        "Texture",
        format=info["format_tag"],
        size=f"{info['header']['width']}x{info['header']['height']}",
        mips=info["header"]["mip_count"],
        main_bytes=info["main_bytes"],
    )
    if not info["supported"]:
        get_logger().warning(
            "%s: unsupported high-res format %s, main payload skipped",
            p.name,
            info["format_tag"],
        )
    if dump_dir is not None:
        dump_dir.mkdir(parents=True, exist_ok=True)
        (dump_dir / "thumbnail.bin").write_bytes(texture.thumbnail)
        (dump_dir / "main.bin").write_bytes(texture.main)
        get_reporter().verbose(f"Dumped payloads to {dump_dir}")
    return info


def load_material_file(path: str | Path) -> MaterialDefinition:
    p = Path(path)
    with task("material.load", f"Load {p.name}") as stats:
        material = load_material(p)
        stats["parameters"] = len(material.parameters)
    get_reporter().summary(
        "Material",
        shader=material.shader,
        parameters=len(material.parameters),
        includes=len(material.include_chain),
    )
    return material
