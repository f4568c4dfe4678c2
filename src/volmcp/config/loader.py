"""Settings loading for ``volmcp``."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from volmcp.config.errors import ConfigValidationError
from volmcp.config.models import ServerSettings

if TYPE_CHECKING:
    from pathlib import Path


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ServerSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ServerSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing. An empty file
        yields the default settings.

        Raises:
            ConfigValidationError: On read errors, YAML parse errors or schema
                validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigValidationError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigValidationError("Settings YAML must be a mapping")

        try:
            return ServerSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigValidationError(str(exc)) from exc


def load_settings(
    path: Path | None = None,
    *,
    backend: str | None = None,
    step: int | None = None,
    log_level: str | None = None,
    telemetry: bool = False,
) -> ServerSettings:
    """Load settings from *path* (if given) and apply command-line overrides."""
    settings = SettingsLoader(path).load() if path is not None else ServerSettings()

    overrides: dict[str, Any] = {}
    if step is not None:
        overrides["volume_step"] = step
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if backend is not None:
        overrides["backend"] = {**settings.backend.model_dump(), "kind": backend}
    if telemetry:
        overrides["telemetry"] = {**settings.telemetry.model_dump(), "enabled": True}
    if not overrides:
        return settings

    try:
        return ServerSettings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
