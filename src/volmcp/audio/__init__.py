"""Audio layer — backends and the controller used by the tools."""

from volmcp.audio.backend import AudioBackend, MemoryBackend, clamp_volume
from volmcp.audio.command import AmixerBackend, OsascriptBackend
from volmcp.audio.controller import AudioController
from volmcp.audio.errors import BackendError
from volmcp.audio.factory import create_backend

__all__ = [
    "AmixerBackend",
    "AudioBackend",
    "AudioController",
    "BackendError",
    "MemoryBackend",
    "OsascriptBackend",
    "clamp_volume",
    "create_backend",
]
