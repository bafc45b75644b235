"""Command line for compdocs.

Usage:
    compdocs parse [PATH | -] [--no-save] [--root DIR]
    compdocs serve [--host HOST] [--port PORT] [--root DIR]

``parse`` reads stdin when PATH is ``-`` or omitted, a single Markdown file,
or every ``.md`` file under a directory. Extracted records go to stdout as
JSON; everything else is logged to stderr so stdout stays machine-readable.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .config import Config
from .errors import CompdocsError
from .extractors import (
    classify_document,
    extract_components,
    extract_file,
    find_markdown_files,
    read_document_text,
)
from .models import ComponentDoc, MultiComponent
from .store import ComponentStore, dump_json

log = logging.getLogger("compdocs")


def _configure_logging() -> None:
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _parse_stdin() -> tuple[list[ComponentDoc], bool]:
    """Returns (components, multi) for the document on stdin."""
    lines = read_document_text(sys.stdin.read())
    shape = classify_document(lines)
    return extract_components(lines, shape), isinstance(shape, MultiComponent)


def _parse_directory(directory: Path) -> list[ComponentDoc]:
    files = find_markdown_files(directory)
    log.info(f"Found {len(files)} markdown files in directory")

    components: list[ComponentDoc] = []
    for path in files:
        log.info(f"Processing: {path}")
        try:
            components.extend(extract_file(path))
        except CompdocsError as e:
            log.error(f"Error processing {path}: {e.message}")
    return components


def cmd_parse(args: argparse.Namespace) -> int:
    payload: Any
    if args.path is None or args.path == "-":
        components, multi = _parse_stdin()
        payload = [c.to_dict() for c in components] if multi else components[0].to_dict()
    else:
        target = Path(args.path).resolve()
        if target.is_dir():
            components = _parse_directory(target)
        elif target.is_file():
            components = extract_file(target)
        else:
            log.error(f"Path is neither a file nor a directory: {target}")
            return 1
        payload = [c.to_dict() for c in components]

    if not args.no_save:
        ComponentStore(root=args.root).save_all(components)

    sys.stdout.write(dump_json(payload) + "\n")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from .api import create_app
    from .lookup import ComponentLookup

    app = create_app(ComponentLookup(root=args.root))
    app.run(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compdocs",
        description="Extract component API docs from Markdown tables.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Extract components to JSON")
    parse.add_argument("path", nargs="?", help="Markdown file, directory, or - for stdin")
    parse.add_argument(
        "--no-save", action="store_true", help="Print only, do not write the store"
    )
    parse.add_argument("--root", default=None, help="Store root (default: COMPDOCS_ROOT or cwd)")
    parse.set_defaults(func=cmd_parse)

    serve = subparsers.add_parser("serve", help="Serve stored components over HTTP")
    serve.add_argument("--host", default=Config.HOST)
    serve.add_argument("--port", type=int, default=Config.PORT)
    serve.add_argument("--root", default=None, help="Store root (default: COMPDOCS_ROOT or cwd)")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except CompdocsError as e:
        log.error(e.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
