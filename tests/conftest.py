"""Shared fixtures: an in-memory audio backend wired into the dispatcher."""

from __future__ import annotations

import pytest

from volmcp.audio.backend import MemoryBackend
from volmcp.audio.controller import AudioController
from volmcp.protocols.mcp.dispatcher import Dispatcher


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend(volume=50, muted=False)


@pytest.fixture
def audio(backend: MemoryBackend) -> AudioController:
    return AudioController(backend)


@pytest.fixture
def dispatcher(audio: AudioController) -> Dispatcher:
    return Dispatcher(audio)
