"""Command line interface for assetcodec."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .api import (
    ConvertOptions,
    convert_map,
    inspect_texture_file,
    load_material_file,
)
from .errors import CodecError
from .logging import configure_logging
from .reporting import (
    REPORTER_KINDS,
    create_reporter,
    get_reporter,
    set_reporter,
    set_verbosity,
)
from .utils.io import DataError


def _map_cmd(args: argparse.Namespace) -> int:
    convert_map(ConvertOptions(model_path=args.model, output_path=args.output))
    return 0


def _texture_cmd(args: argparse.Namespace) -> int:
    info = inspect_texture_file(args.file, dump_dir=args.dump_dir)
    get_reporter().flush()
    print(json.dumps(info, indent=2, sort_keys=True))
    return 0


def _material_cmd(args: argparse.Namespace) -> int:
    material = load_material_file(args.file)
    get_reporter().flush()
    print(json.dumps(material.to_dict(), indent=2, sort_keys=True))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="assetcodec",
        description="Level decompiler asset codecs (map, texture, material)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=REPORTER_KINDS,
        default="plain",
        help="Select reporter backend: plain (default), rich, silent",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    m = sub.add_parser("map", help="Write a .map file from an entity model")
    m.add_argument("model", type=Path, help="JSON or YAML entity document")
    m.add_argument("output", type=Path)
    m.set_defaults(func=_map_cmd)

    t = sub.add_parser("texture", help="Decode a texture container header")
    t.add_argument("file", type=Path)
    t.add_argument(
        "--dump-dir",
        dest="dump_dir",
        type=Path,
        help="Write thumbnail.bin and main.bin into this directory",
    )
    t.set_defaults(func=_texture_cmd)

    mt = sub.add_parser("material", help="Resolve a material definition")
    mt.add_argument("file", type=Path)
    mt.set_defaults(func=_material_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    set_reporter(create_reporter(args.reporter))
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except (CodecError, DataError, FileNotFoundError) as exc:
        get_reporter().error(str(exc))
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
