"""Compilation pipeline from HTMLisp files to HTML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import CompilerConfig
from .errors import (
    CreateOutputError,
    HtmlispSyntaxError,
    ParseInputError,
    ReadInputError,
    WriteOutputError,
)
from .parser import parse
from .render import render_compact, render_pretty
from .util_fs import ensure_parent_dir


def compile_source(source: str, *, prettify: bool = False, indent: str = "  ") -> str:
    """Parse HTMLisp text and render it as HTML."""

    document = parse(source)
    if prettify:
        return render_pretty(document, 0, indent)
    return render_compact(document)


@dataclass(frozen=True)
class CompileResult:
    input_file: Path
    output_file: Path
    html: str


def compile_file(
    input_file: Path,
    output_file: Path,
    *,
    prettify: bool = False,
    indent: str = "  ",
) -> CompileResult:
    """Read ``input_file``, compile it and write ``output_file``.

    Each stage maps its failure onto one CompileError subclass so callers can
    report what went wrong without inspecting OS errors.
    """

    try:
        source = Path(input_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadInputError(exc) from exc

    try:
        html = compile_source(source, prettify=prettify, indent=indent)
    except HtmlispSyntaxError as exc:
        raise ParseInputError(exc) from exc

    try:
        ensure_parent_dir(output_file)
        handle = Path(output_file).open("w", encoding="utf-8")
    except OSError as exc:
        raise CreateOutputError(exc) from exc

    with handle:
        try:
            handle.write(html)
        except OSError as exc:
            raise WriteOutputError(exc) from exc

    return CompileResult(Path(input_file), Path(output_file), html)


def compile_with_config(config: CompilerConfig) -> CompileResult:
    """Single-shot compile of ``config.input_file`` into ``config.output_file``."""

    if config.input_file is None or config.output_file is None:
        raise ValueError("input_file and output_file are required")
    return compile_file(
        config.input_file,
        config.output_file,
        prettify=config.prettify,
        indent=config.indent_unit,
    )


__all__ = ["CompileResult", "compile_file", "compile_source", "compile_with_config"]
