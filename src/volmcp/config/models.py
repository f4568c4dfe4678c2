"""Pydantic models for the optional YAML settings file consumed by ``volmcp``."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

BackendKind = Literal["auto", "memory", "amixer", "osascript"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class BackendSettings(BaseModel):
    """Which audio backend to drive and how."""

    kind: BackendKind = Field(default="auto", description="Backend name; 'auto' picks by platform.")
    timeout: float = Field(default=5.0, gt=0, description="Per-command timeout in seconds.")
    amixer_control: str = Field(default="Master", description="ALSA simple mixer control.")
    amixer_device: str | None = Field(default=None, description="ALSA device passed as -D.")
    initial_volume: int = Field(default=50, ge=0, le=100, description="Memory backend start volume.")
    initial_muted: bool = Field(default=False, description="Memory backend start mute state.")


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Top-level server configuration."""

    name: str = "computer-volume-control-mcp"
    version: str = "1.0.0"
    volume_step: int = Field(default=10, ge=1, le=100)
    log_level: LogLevel = "INFO"
    backend: BackendSettings = Field(default_factory=BackendSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
