"""Configuration — settings models and YAML loading."""

from volmcp.config.errors import ConfigValidationError
from volmcp.config.loader import SettingsLoader, load_settings
from volmcp.config.models import BackendSettings, ServerSettings, TelemetrySettings

__all__ = [
    "BackendSettings",
    "ConfigValidationError",
    "ServerSettings",
    "SettingsLoader",
    "TelemetrySettings",
    "load_settings",
]
