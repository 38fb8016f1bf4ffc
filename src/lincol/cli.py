"""Command-line lookup of a path's line and column in a YAML/JSON file."""

from __future__ import annotations

import argparse
import logging
import sys

from lincol import __version__
from lincol.errors import LincolError
from lincol.parser.loader import from_path
from lincol.settings import Settings

logger = logging.getLogger("lincol.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lincol",
        description="Print the line:col of a JSON Pointer path in a YAML or JSON file",
    )
    parser.add_argument("file", help="YAML or JSON file")
    parser.add_argument("field_path", nargs="?", help="Path to look up, e.g. /foo/0/boom")
    parser.add_argument(
        "--list", action="store_true", help="Print every known path with its position"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.field_path is None and not args.list:
        parser.error("a field path is required unless --list is given")

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("loading %s", args.file)

    try:
        positions = from_path(args.file, max_document_size=settings.max_document_size)
    except LincolError as exc:
        print(f"{args.file}: {exc}", file=sys.stderr)
        return 2

    if args.list:
        for path, position in positions:
            print(f"{path}\t{position}")
        return 0

    position = positions.get(args.field_path)
    if position is None:
        print(f"could not find path in {args.file}", file=sys.stderr)
        return 1
    print(position)
    return 0


if __name__ == "__main__":
    sys.exit(main())
