"""Pydantic models for compiler configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

DEFAULT_CONFIG_NAME = "htmlisp.yaml"


class CompilerConfig(BaseModel):
    """Options for a single compile run or a watch session."""

    input_file: Optional[Path] = Field(None, description="HTMLisp source to compile.")
    output_file: Optional[Path] = Field(None, description="Destination HTML file.")
    prettify: bool = Field(False, description="Emit indented HTML instead of a compact string.")
    watch: Optional[Path] = Field(
        None, description="Directory to watch; changed sources are recompiled."
    )
    output_root: Path = Field(
        Path("output"), description="Root directory for HTML written in watch mode."
    )
    indent: int = Field(2, ge=0, description="Spaces per nesting level when prettifying.")
    extension: str = Field(".htmlisp", description="Source file extension picked up by watch mode.")
    poll_interval: float = Field(0.1, gt=0, description="Seconds between directory scans.")
    debounce: float = Field(
        0.25, ge=0, description="Seconds a file must stay unchanged before it is compiled."
    )
    color: bool = Field(True, description="Use ANSI colors for console reports.")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _require_paths_without_watch(self) -> "CompilerConfig":
        if self.watch is None and (self.input_file is None or self.output_file is None):
            raise ValueError("an input file and an output file are required unless watching")
        if not self.extension.startswith("."):
            self.extension = "." + self.extension
        return self

    @property
    def indent_unit(self) -> str:
        return " " * self.indent


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or validated."""


def load_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML mapping of option names to values."""

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}\n({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of options.")
    return data


def build_config(
    overrides: Mapping[str, Any], config_path: Optional[Path] = None
) -> CompilerConfig:
    """Merge file options with command-line overrides and validate them.

    ``None`` values in ``overrides`` mean "not given" and leave the file's value
    (or the default) in place.
    """

    data: dict[str, Any] = {}
    if config_path is not None:
        data.update(load_config_file(config_path))
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return CompilerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = [
    "CompilerConfig",
    "ConfigError",
    "DEFAULT_CONFIG_NAME",
    "build_config",
    "load_config_file",
]
