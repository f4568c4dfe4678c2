"""AudioController — volume and mute operations on top of an AudioBackend.

Nothing is cached: every read goes back to the backend so that changes
made outside this process are always observed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from volmcp.audio.backend import MAX_VOLUME, MIN_VOLUME, clamp_volume

if TYPE_CHECKING:
    from volmcp.audio.backend import AudioBackend

logger = logging.getLogger(__name__)

DEFAULT_STEP = 10


class AudioController:
    """High-level audio operations used by the tool handlers.

    Backend failures are logged and re-raised unchanged.
    """

    def __init__(self, backend: AudioBackend, *, step: int = DEFAULT_STEP) -> None:
        self._backend = backend
        self._step = step

    @property
    def backend(self) -> AudioBackend:
        return self._backend

    @property
    def step(self) -> int:
        return self._step

    async def get_volume(self) -> int:
        """Return the current volume as a percentage in ``[0, 100]``."""
        try:
            volume = await self._backend.get_volume()
        except Exception as exc:
            logger.error("Error getting volume level: %s", exc)
            raise
        if not MIN_VOLUME <= volume <= MAX_VOLUME:
            logger.warning("Backend reported out-of-range volume %s; clamping", volume)
        return clamp_volume(volume)

    async def set_volume(self, volume: float) -> int:
        """Clamp *volume* into range, apply it, and return the value written.

        Fractions round half up, so 42.5 is written as 43.
        """
        clamped = clamp_volume(volume)
        try:
            await self._backend.set_volume(clamped)
        except Exception as exc:
            logger.error("Error setting volume: %s", exc)
            raise
        return clamped

    async def get_muted(self) -> bool:
        try:
            return bool(await self._backend.get_muted())
        except Exception as exc:
            logger.error("Error getting mute status: %s", exc)
            raise

    async def mute(self) -> None:
        try:
            await self._backend.set_muted(True)
        except Exception as exc:
            logger.error("Error muting system: %s", exc)
            raise

    async def unmute(self) -> None:
        try:
            await self._backend.set_muted(False)
        except Exception as exc:
            logger.error("Error unmuting system: %s", exc)
            raise

    async def increase_volume(self) -> None:
        """Raise the volume by one step, capped at 100."""
        try:
            current = await self._backend.get_volume()
            await self._backend.set_volume(clamp_volume(current + self._step))
        except Exception as exc:
            logger.error("Error increasing volume: %s", exc)
            raise

    async def decrease_volume(self) -> None:
        """Lower the volume by one step, floored at 0."""
        try:
            current = await self._backend.get_volume()
            await self._backend.set_volume(clamp_volume(current - self._step))
        except Exception as exc:
            logger.error("Error decreasing volume: %s", exc)
            raise
