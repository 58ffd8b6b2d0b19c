"""Filesystem utilities for htmlisp."""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def ensure_parent_dir(path: PathLike) -> Path:
    """Create the directory that will hold ``path`` and return the Path object."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def mirrored_path(source: Path, source_root: Path, output_root: Path, suffix: str) -> Path:
    """Map ``source`` under ``source_root`` to the same relative path under ``output_root``."""

    relative = source.resolve().relative_to(source_root.resolve())
    return (output_root / relative).with_suffix(suffix)


__all__ = ["ensure_parent_dir", "mirrored_path"]
