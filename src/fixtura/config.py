"""Run configuration loaded from ``[tool.fixtura]`` in pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fixtura.errors import ConfigurationError


PYPROJECT = "pyproject.toml"
DEFAULT_ROOT_MARKER = "runtests.py"
DEFAULT_FILE_PATTERN = "test_*.py"


class FixturaConfig(BaseModel):
    """Settings for one run, built once at start and passed down explicitly.

    Parameters
    ----------
    test_paths:
        Files or directories to collect tests from.
    selectors:
        Substrings of qualified test names to run; empty runs everything.
    root_marker:
        File name marking the test root that qualified names are relative to.
    file_pattern:
        Glob matching test files inside directories.
    verbosity:
        Console reporter verbosity.
    addopts:
        Extra command line arguments prepended to the real ones.
    log_level:
        Level for the ``logging`` configuration done by the CLI.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    test_paths: list[str] = Field(default_factory=lambda: ["."])
    selectors: list[str] = Field(default_factory=list)
    root_marker: str = DEFAULT_ROOT_MARKER
    file_pattern: str = DEFAULT_FILE_PATTERN
    verbosity: int = 0
    addopts: list[str] = Field(default_factory=list)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"unknown log level {value!r}"
            raise ValueError(msg)
        return level


DEFAULT_CONFIG = FixturaConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    directory = (start or Path.cwd()).resolve()
    for candidate in (directory, *directory.parents):
        pyproject = candidate / PYPROJECT
        if pyproject.is_file():
            return pyproject
    return None


def load_config(start: Path | None = None) -> FixturaConfig:
    """Load settings from the nearest pyproject.toml, falling back to defaults."""
    pyproject = find_pyproject(start)
    if pyproject is None:
        return DEFAULT_CONFIG

    try:
        with pyproject.open("rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {pyproject}: {exc}"
        raise ConfigurationError(msg) from exc

    table = data.get("tool", {}).get("fixtura")
    if table is None:
        return DEFAULT_CONFIG

    try:
        return FixturaConfig.model_validate(table)
    except ValidationError as exc:
        msg = f"Invalid [tool.fixtura] settings in {pyproject}:\n{exc}"
        raise ConfigurationError(msg) from exc


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_FILE_PATTERN",
    "DEFAULT_ROOT_MARKER",
    "FixturaConfig",
    "find_pyproject",
    "load_config",
]
