"""Tests for AudioController."""

from unittest.mock import AsyncMock

import pytest

from volmcp.audio.backend import MemoryBackend
from volmcp.audio.controller import AudioController
from volmcp.audio.errors import BackendError


class TestVolume:
    async def test_get_volume(self) -> None:
        assert await AudioController(MemoryBackend(volume=70)).get_volume() == 70

    async def test_out_of_range_read_is_clamped(self) -> None:
        backend = MemoryBackend()
        backend.get_volume = AsyncMock(return_value=130)  # type: ignore[method-assign]
        assert await AudioController(backend).get_volume() == 100

    async def test_set_volume_clamps_before_backend(self) -> None:
        backend = MemoryBackend()
        backend.set_volume = AsyncMock()  # type: ignore[method-assign]
        written = await AudioController(backend).set_volume(140)
        assert written == 100
        backend.set_volume.assert_awaited_once_with(100)

    async def test_set_volume_rounds_half_up(self) -> None:
        backend = MemoryBackend()
        audio = AudioController(backend)
        assert await audio.set_volume(42.5) == 43
        assert await audio.set_volume(43.5) == 44
        assert backend.volume == 44

    async def test_never_caches(self) -> None:
        backend = MemoryBackend(volume=10)
        audio = AudioController(backend)
        assert await audio.get_volume() == 10
        backend.volume = 90
        assert await audio.get_volume() == 90


class TestRelativeVolume:
    async def test_increase(self) -> None:
        backend = MemoryBackend(volume=50)
        await AudioController(backend).increase_volume()
        assert backend.volume == 60

    async def test_increase_caps_at_100(self) -> None:
        backend = MemoryBackend(volume=95)
        await AudioController(backend).increase_volume()
        assert backend.volume == 100

    async def test_decrease_floors_at_0(self) -> None:
        backend = MemoryBackend(volume=3)
        await AudioController(backend).decrease_volume()
        assert backend.volume == 0

    async def test_custom_step(self) -> None:
        backend = MemoryBackend(volume=50)
        audio = AudioController(backend, step=25)
        await audio.decrease_volume()
        assert backend.volume == 25
        assert audio.step == 25


class TestMute:
    async def test_mute_and_unmute(self) -> None:
        backend = MemoryBackend()
        audio = AudioController(backend)
        await audio.mute()
        assert await audio.get_muted() is True
        await audio.unmute()
        assert await audio.get_muted() is False


class TestErrors:
    async def test_backend_error_logged_and_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        backend = MemoryBackend()
        backend.get_volume = AsyncMock(side_effect=BackendError("no mixer"))  # type: ignore[method-assign]

        with caplog.at_level("ERROR"), pytest.raises(BackendError, match="no mixer"):
            await AudioController(backend).get_volume()

        assert "Error getting volume level: no mixer" in caplog.text

    async def test_increase_failure_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        backend = MemoryBackend()
        backend.set_volume = AsyncMock(side_effect=BackendError("read-only"))  # type: ignore[method-assign]

        with caplog.at_level("ERROR"), pytest.raises(BackendError):
            await AudioController(backend).increase_volume()

        assert "Error increasing volume" in caplog.text
