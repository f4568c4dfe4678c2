"""Backend selection from settings."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from volmcp.audio.backend import MemoryBackend
from volmcp.audio.command import AmixerBackend, OsascriptBackend
from volmcp.audio.errors import BackendError

if TYPE_CHECKING:
    from volmcp.audio.backend import AudioBackend
    from volmcp.config.models import BackendSettings


def resolve_backend_kind(kind: str, platform: str | None = None) -> str:
    """Map ``auto`` to a concrete backend name for *platform*."""
    if kind != "auto":
        return kind
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return "amixer"
    if platform == "darwin":
        return "osascript"
    raise BackendError(f"No audio backend available for platform '{platform}'")


def create_backend(settings: BackendSettings, *, platform: str | None = None) -> AudioBackend:
    """Build the configured :class:`AudioBackend`."""
    kind = resolve_backend_kind(settings.kind, platform)
    if kind == "memory":
        return MemoryBackend(volume=settings.initial_volume, muted=settings.initial_muted)
    if kind == "amixer":
        return AmixerBackend(
            control=settings.amixer_control,
            device=settings.amixer_device,
            timeout=settings.timeout,
        )
    if kind == "osascript":
        return OsascriptBackend(timeout=settings.timeout)
    raise BackendError(f"Unknown audio backend '{kind}'")
