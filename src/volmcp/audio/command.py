"""Command-line mixer backends.

Each backend shells out to the platform's mixer utility as an asyncio
subprocess and parses its output:

- ``AmixerBackend`` — ALSA ``amixer`` (Linux).
- ``OsascriptBackend`` — AppleScript via ``osascript`` (macOS).
"""

from __future__ import annotations

import asyncio
import logging
import re

from volmcp.audio.backend import clamp_volume
from volmcp.audio.errors import BackendError

logger = logging.getLogger(__name__)

_PERCENT_RE = re.compile(r"\[(\d{1,3})%\]")
_SWITCH_RE = re.compile(r"\[(on|off)\]")


class CommandBackend:
    """Base class running one mixer command per operation."""

    def __init__(self, *, timeout: float = 5.0) -> None:
        self._timeout = timeout

    async def _run(self, *command: str) -> str:
        """Run *command* and return its stdout; raise ``BackendError`` on failure."""
        logger.debug("Running mixer command: %s", " ".join(command))
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise BackendError(f"Cannot run {command[0]}: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self._timeout)
        except TimeoutError:
            proc.kill()
            await proc.wait()
            raise BackendError(f"{command[0]} timed out after {self._timeout}s")

        if proc.returncode != 0:
            detail = stderr.decode(errors="replace").strip() if stderr else ""
            msg = f"{command[0]} exited with status {proc.returncode}"
            raise BackendError(f"{msg}: {detail}" if detail else msg)

        return stdout.decode(errors="replace") if stdout else ""


class AmixerBackend(CommandBackend):
    """ALSA mixer control through ``amixer``.

    Satisfies the :class:`~volmcp.audio.backend.AudioBackend` protocol.
    """

    def __init__(
        self,
        *,
        control: str = "Master",
        device: str | None = None,
        timeout: float = 5.0,
    ) -> None:
        super().__init__(timeout=timeout)
        self._control = control
        self._device = device

    def _amixer(self, *args: str) -> list[str]:
        command = ["amixer"]
        if self._device:
            command += ["-D", self._device]
        return [*command, "-M", *args]

    async def _get(self) -> str:
        return await self._run(*self._amixer("get", self._control))

    async def get_volume(self) -> int:
        output = await self._get()
        match = _PERCENT_RE.search(output)
        if match is None:
            raise BackendError(f"Unable to read volume of mixer control '{self._control}'")
        return clamp_volume(int(match.group(1)))

    async def set_volume(self, volume: int) -> None:
        await self._run(*self._amixer("-q", "set", self._control, f"{volume}%"))

    async def get_muted(self) -> bool:
        output = await self._get()
        match = _SWITCH_RE.search(output)
        if match is None:
            raise BackendError(f"Mixer control '{self._control}' has no mute switch")
        return match.group(1) == "off"

    async def set_muted(self, muted: bool) -> None:
        await self._run(*self._amixer("-q", "set", self._control, "mute" if muted else "unmute"))


class OsascriptBackend(CommandBackend):
    """macOS output volume through AppleScript.

    Satisfies the :class:`~volmcp.audio.backend.AudioBackend` protocol.
    """

    async def _script(self, script: str) -> str:
        return (await self._run("osascript", "-e", script)).strip()

    async def get_volume(self) -> int:
        output = await self._script("output volume of (get volume settings)")
        try:
            return clamp_volume(int(output))
        except ValueError:
            raise BackendError(f"Unexpected volume reported by osascript: {output!r}") from None

    async def set_volume(self, volume: int) -> None:
        await self._script(f"set volume output volume {volume}")

    async def get_muted(self) -> bool:
        output = await self._script("output muted of (get volume settings)")
        if output not in ("true", "false"):
            raise BackendError(f"Unexpected mute state reported by osascript: {output!r}")
        return output == "true"

    async def set_muted(self, muted: bool) -> None:
        await self._script(f"set volume output muted {'true' if muted else 'false'}")
