"""Exception types raised by the compiler and its I/O glue."""

from __future__ import annotations

from pathlib import Path


class HtmlispSyntaxError(ValueError):
    """Raised when HTMLisp source does not conform to the grammar."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.reason = message
        self.line = line
        self.column = column


class CompileError(Exception):
    """Base class for failures while turning a source file into an HTML file."""


class ReadInputError(CompileError):
    def __init__(self, cause: OSError) -> None:
        super().__init__(f"Failed to read input file\n({cause})")
        self.cause = cause


class ParseInputError(CompileError):
    def __init__(self, cause: HtmlispSyntaxError) -> None:
        super().__init__(f"Failed to parse input file\n({cause})")
        self.cause = cause


class CreateOutputError(CompileError):
    def __init__(self, cause: OSError) -> None:
        super().__init__(f"Failed to create output file\n({cause})")
        self.cause = cause


class WriteOutputError(CompileError):
    def __init__(self, cause: OSError) -> None:
        super().__init__(f"Failed to write to output file:\n({cause})")
        self.cause = cause


class WatchDirError(CompileError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f"'{path}' is not a directory")
        self.path = path


__all__ = [
    "CompileError",
    "CreateOutputError",
    "HtmlispSyntaxError",
    "ParseInputError",
    "ReadInputError",
    "WatchDirError",
    "WriteOutputError",
]
