"""AudioBackend protocol and the in-process implementation.

- ``AudioBackend`` — runtime-checkable protocol for volume/mute control.
- ``MemoryBackend`` — keeps state in memory (tests, dry runs).

Volumes are integer percentages in ``[0, 100]``. Callers clamp before
``set_volume``; backends may assume their input is in range.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

MIN_VOLUME = 0
MAX_VOLUME = 100


def clamp_volume(value: float) -> int:
    """Round *value* half up to an integer percentage within ``[0, 100]``."""
    return max(MIN_VOLUME, min(MAX_VOLUME, math.floor(value + 0.5)))


@runtime_checkable
class AudioBackend(Protocol):
    """Reads and changes the host's output volume and mute state.

    Every operation raises :class:`~volmcp.audio.errors.BackendError` when
    the underlying audio subsystem fails.
    """

    async def get_volume(self) -> int: ...
    async def set_volume(self, volume: int) -> None: ...
    async def get_muted(self) -> bool: ...
    async def set_muted(self, muted: bool) -> None: ...


class MemoryBackend:
    """Audio state held in memory.

    Satisfies the :class:`AudioBackend` protocol. Nothing outside the
    process is touched, which makes it suitable for tests and for running
    the server on hosts without a supported mixer.
    """

    def __init__(self, *, volume: int = 50, muted: bool = False) -> None:
        self.volume = clamp_volume(volume)
        self.muted = muted

    async def get_volume(self) -> int:
        return self.volume

    async def set_volume(self, volume: int) -> None:
        logger.debug("MemoryBackend: volume %d -> %d", self.volume, volume)
        self.volume = volume

    async def get_muted(self) -> bool:
        return self.muted

    async def set_muted(self, muted: bool) -> None:
        logger.debug("MemoryBackend: muted=%s", muted)
        self.muted = muted
