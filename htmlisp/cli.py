"""Command-line interface for htmlisp."""

import argparse
from pathlib import Path
from typing import Iterable, Optional

from .compile_pipeline import compile_with_config
from .config import DEFAULT_CONFIG_NAME, CompilerConfig, ConfigError, build_config
from .console import Reporter
from .errors import CompileError
from .watcher import watch

DESCRIPTION = """\
This program takes in a file of HTMLisp,
parses it and outputs normal HTML."""

EPILOG = """\
-w/--watch makes -i/--input and -o/--output optional: every .htmlisp file
written under the watched directory is compiled to <output root>/, which
mirrors the input directory structure (default: ./output/).

If the output file already exists, it will be overwritten
and if it does not exist, it will be created.

Options may also be read from a YAML mapping given with --config
(or ./htmlisp.yaml when present); command-line flags take precedence."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlisp",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", dest="input_file", type=Path, help="HTMLisp input file.")
    parser.add_argument("-o", "--output", dest="output_file", type=Path, help="HTML output file.")
    parser.add_argument(
        "-p",
        "--prettify",
        action="store_true",
        default=None,
        help="Output prettified HTML.",
    )
    parser.add_argument(
        "-w",
        "--watch",
        type=Path,
        metavar="DIRECTORY",
        help="Watch a directory for changes and re-compile.",
    )
    parser.add_argument(
        "--output-root",
        dest="output_root",
        type=Path,
        help="Root directory for files compiled in watch mode (default: output).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        help="Spaces per nesting level for prettified output (default: 2).",
    )
    parser.add_argument("--config", type=Path, help="YAML file with default options.")
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Disable colored console output.",
    )
    return parser


def _resolve_config_path(explicit: Optional[Path]) -> Optional[Path]:
    if explicit is not None:
        return explicit
    default = Path(DEFAULT_CONFIG_NAME)
    return default if default.is_file() else None


def load_cli_config(args: argparse.Namespace) -> CompilerConfig:
    overrides = {
        "input_file": args.input_file,
        "output_file": args.output_file,
        "prettify": args.prettify,
        "watch": args.watch,
        "output_root": args.output_root,
        "indent": args.indent,
        "color": args.color,
    }
    return build_config(overrides, _resolve_config_path(args.config))


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = load_cli_config(args)
    except ConfigError as exc:
        Reporter(color=args.color is not False).error(str(exc))
        raise SystemExit(1) from exc

    reporter = Reporter(color=config.color)
    try:
        if config.watch is not None:
            watch(config, reporter)
            return
        result = compile_with_config(config)
    except CompileError as exc:
        reporter.error(str(exc))
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        return

    reporter.success(f"{result.input_file} -> {result.output_file}")


__all__ = ["build_parser", "load_cli_config", "main"]
