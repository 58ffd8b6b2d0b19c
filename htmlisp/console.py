"""Colored status lines for the command-line tools."""

from __future__ import annotations

import os
import sys
from typing import TextIO

_STYLES = {
    "Info": "94;1",
    "Success": "32;1",
    "Error": "31;1",
}


class Reporter:
    """Prints ``Info:``/``Success:``/``Error:`` prefixed messages."""

    def __init__(
        self,
        *,
        color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.color = color and "NO_COLOR" not in os.environ
        self._out = out
        self._err = err

    def _label(self, label: str) -> str:
        if not self.color:
            return f"{label}:"
        return f"\x1b[{_STYLES[label]}m{label}:\x1b[0m"

    def info(self, message: str) -> None:
        print(f"{self._label('Info')} {message}", file=self._out or sys.stdout, flush=True)

    def success(self, message: str) -> None:
        print(f"{self._label('Success')} {message}", file=self._out or sys.stdout, flush=True)

    def error(self, message: str) -> None:
        print(f"{self._label('Error')} {message}", file=self._err or sys.stderr, flush=True)


__all__ = ["Reporter"]
