"""Recompile HTMLisp sources when they are written.

The watcher polls the directory tree and compares file signatures between
scans. A change is reported once the file has stayed unchanged for the
debounce window, so an editor's burst of writes produces a single compile.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from .compile_pipeline import compile_file
from .config import CompilerConfig
from .console import Reporter
from .errors import CompileError, WatchDirError
from .util_fs import mirrored_path

Signature = Tuple[int, int]


def _signature(path: Path) -> Signature:
    stat = path.stat()
    return stat.st_mtime_ns, stat.st_size


class DirectoryWatcher:
    """Detect write events for files with a given extension under ``root``."""

    def __init__(
        self,
        root: Path,
        extension: str = ".htmlisp",
        debounce: float = 0.25,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not root.is_dir():
            raise WatchDirError(root)
        self.root = root
        self.extension = extension
        self.debounce = debounce
        self._clock = clock
        self._known: Dict[Path, Signature] = self._scan()
        self._pending: Dict[Path, float] = {}

    def _scan(self) -> Dict[Path, Signature]:
        found: Dict[Path, Signature] = {}
        for path in sorted(self.root.rglob(f"*{self.extension}")):
            try:
                if path.is_file():
                    found[path] = _signature(path)
            except FileNotFoundError:
                # Removed between listing and stat.
                continue
        return found

    def poll(self) -> List[Path]:
        """Scan once and return files whose writes have settled."""

        now = self._clock()
        current = self._scan()
        for path, signature in current.items():
            if self._known.get(path) != signature:
                self._pending[path] = now
        for path in list(self._pending):
            if path not in current:
                del self._pending[path]
        self._known = current

        ready = [path for path, changed_at in self._pending.items() if now - changed_at >= self.debounce]
        for path in ready:
            del self._pending[path]
        return sorted(ready)


def output_path_for(source: Path, root: Path, output_root: Path) -> Path:
    return mirrored_path(source, root, output_root, ".html")


def compile_changed(source: Path, root: Path, config: CompilerConfig, reporter: Reporter) -> bool:
    """Compile one changed file, reporting the outcome instead of raising."""

    try:
        relative = source.resolve().relative_to(root.resolve())
    except ValueError:
        # Symlinks can point outside the watched tree; there is no mirrored path.
        reporter.error(f"'{source}' resolves outside '{root}', skipping")
        return False
    output = output_path_for(source, root, config.output_root)
    reporter.info("Compiling due to write event...")
    try:
        compile_file(source, output, prettify=config.prettify, indent=config.indent_unit)
    except CompileError as exc:
        reporter.error(f"{exc}: {relative}")
        return False
    reporter.success(f"{relative} -> {output}")
    return True


def watch(
    config: CompilerConfig,
    reporter: Reporter,
    *,
    sleep: Callable[[float], None] = time.sleep,
    keep_running: Callable[[], bool] = lambda: True,
) -> None:
    """Poll ``config.watch`` and compile settled writes until told to stop."""

    if config.watch is None:
        raise ValueError("watch directory is not configured")
    watcher = DirectoryWatcher(config.watch, config.extension, config.debounce)
    reporter.info(f"Watching for write events in {config.watch}...")
    while keep_running():
        for path in watcher.poll():
            compile_changed(path, config.watch, config, reporter)
        sleep(config.poll_interval)


__all__ = ["DirectoryWatcher", "compile_changed", "output_path_for", "watch"]
