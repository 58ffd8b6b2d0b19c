"""CLI entrypoint converting an HTML file into HTMLisp source."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional

from .console import Reporter
from .html_import import document_from_html
from .unparse import unparse
from .util_fs import ensure_parent_dir


def _parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert HTML into HTMLisp source.")
    parser.add_argument("--in", dest="input", type=Path, required=True, help="HTML file to convert")
    parser.add_argument("--out", dest="output", type=Path, required=True, help="HTMLisp file to write")
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Spaces per nesting level; use -1 to write everything on one line.",
    )
    parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Keep whitespace-only text between tags.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Optional[Iterable[str]] = None) -> None:
    args = _parse_args(argv)
    reporter = Reporter()

    try:
        markup = args.input.read_text(encoding="utf-8")
    except OSError as exc:
        reporter.error(f"Failed to read input file\n({exc})")
        raise SystemExit(1) from exc

    document = document_from_html(markup, keep_whitespace=args.keep_whitespace)
    try:
        source = unparse(document, indent=None if args.indent < 0 else args.indent)
    except ValueError as exc:
        reporter.error(f"Cannot express {args.input} as HTMLisp\n({exc})")
        raise SystemExit(1) from exc

    try:
        ensure_parent_dir(args.output).write_text(source, encoding="utf-8")
    except OSError as exc:
        reporter.error(f"Failed to write to output file:\n({exc})")
        raise SystemExit(1) from exc
    reporter.success(f"{args.input} -> {args.output}")


if __name__ == "__main__":
    main()
