"""Tool handlers and the ToolRunner that invokes them.

Each handler validates its own arguments, calls the
:class:`~volmcp.audio.controller.AudioController`, and returns a
:class:`ToolSuccess`. :meth:`ToolRunner.invoke` is the single place where
failures (bad arguments, unknown tool, backend errors) are folded into a
:class:`ToolFailure`; :func:`to_call_result` turns either outcome into the
wire-level ``tools/call`` result.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel

from volmcp.audio.controller import AudioController  # noqa: TC001
from volmcp.audio.errors import BackendError
from volmcp.protocols.errors import INTERNAL_ERROR, ToolValidationError, UnknownToolError
from volmcp.protocols.mcp.catalog import ToolName
from volmcp.protocols.mcp.models import CallToolResult, ToolInvocation

logger = logging.getLogger(__name__)

UNIT = "percentage"
VOLUME_RANGE_MESSAGE = "Volume must be a number between 0 and 100"

# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


class FailureKind(str, Enum):
    """Why a tool invocation failed."""

    VALIDATION = "validation"
    UNKNOWN_TOOL = "unknown_tool"
    BACKEND = "backend"


class ToolSuccess(BaseModel):
    """A completed invocation: human-readable text plus structured data."""

    text: str
    data: dict[str, Any] = {}


class ToolFailure(BaseModel):
    """A failed invocation."""

    kind: FailureKind
    message: str
    code: int = INTERNAL_ERROR


ToolOutcome = ToolSuccess | ToolFailure


def to_call_result(outcome: ToolOutcome) -> CallToolResult:
    """Convert an outcome into the ``tools/call`` result payload."""
    if isinstance(outcome, ToolFailure):
        return CallToolResult.from_text(
            f"Error: {outcome.message}",
            {"error": outcome.message, "errorCode": outcome.code},
            is_error=True,
        )
    return CallToolResult.from_text(outcome.text, outcome.data)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

ToolHandler = Callable[[AudioController, dict[str, Any]], Awaitable[ToolSuccess]]


def _validate_volume(arguments: dict[str, Any]) -> float:
    volume = arguments.get("volume")
    # bool is an int subclass but never a valid volume
    if isinstance(volume, bool) or not isinstance(volume, int | float):
        raise ToolValidationError(VOLUME_RANGE_MESSAGE)
    if not 0 <= volume <= 100:
        raise ToolValidationError(VOLUME_RANGE_MESSAGE)
    return volume


async def _get_current_volume(audio: AudioController, arguments: dict[str, Any]) -> ToolSuccess:
    volume = await audio.get_volume()
    return ToolSuccess(
        text=f"Current system volume is {volume}%",
        data={"volume": volume, "unit": UNIT},
    )


async def _set_volume(audio: AudioController, arguments: dict[str, Any]) -> ToolSuccess:
    volume = await audio.set_volume(_validate_volume(arguments))
    return ToolSuccess(
        text=f"Volume set to {volume}%",
        data={"volume": volume, "unit": UNIT, "action": "set"},
    )


async def _get_mute_status(audio: AudioController, arguments: dict[str, Any]) -> ToolSuccess:
    muted = await audio.get_muted()
    return ToolSuccess(
        text=f"System is {'muted' if muted else 'not muted'}",
        data={"muted": muted},
    )


async def _mute_system(audio: AudioController, arguments: dict[str, Any]) -> ToolSuccess:
    await audio.mute()
    return ToolSuccess(text="System has been muted", data={"muted": True, "action": "mute"})


async def _unmute_system(audio: AudioController, arguments: dict[str, Any]) -> ToolSuccess:
    await audio.unmute()
    return ToolSuccess(text="System has been unmuted", data={"muted": False, "action": "unmute"})


async def _increase_volume(audio: AudioController, arguments: dict[str, Any]) -> ToolSuccess:
    # Read, adjust, re-read: not atomic if something else changes the volume meanwhile.
    previous = await audio.get_volume()
    await audio.increase_volume()
    current = await audio.get_volume()
    return ToolSuccess(
        text=f"Volume increased from {previous}% to {current}%",
        data={
            "previousVolume": previous,
            "newVolume": current,
            "change": current - previous,
            "action": "increase",
            "unit": UNIT,
        },
    )


async def _decrease_volume(audio: AudioController, arguments: dict[str, Any]) -> ToolSuccess:
    previous = await audio.get_volume()
    await audio.decrease_volume()
    current = await audio.get_volume()
    return ToolSuccess(
        text=f"Volume decreased from {previous}% to {current}%",
        data={
            "previousVolume": previous,
            "newVolume": current,
            "change": current - previous,
            "action": "decrease",
            "unit": UNIT,
        },
    )


TOOL_HANDLERS: dict[ToolName, ToolHandler] = {
    ToolName.GET_CURRENT_VOLUME: _get_current_volume,
    ToolName.SET_VOLUME: _set_volume,
    ToolName.GET_MUTE_STATUS: _get_mute_status,
    ToolName.MUTE_SYSTEM: _mute_system,
    ToolName.UNMUTE_SYSTEM: _unmute_system,
    ToolName.INCREASE_VOLUME: _increase_volume,
    ToolName.DECREASE_VOLUME: _decrease_volume,
}

_missing = set(ToolName) - set(TOOL_HANDLERS)
if _missing:
    raise RuntimeError(f"Tools without a handler: {sorted(t.value for t in _missing)}")


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


class ToolRunner:
    """Routes a :class:`ToolInvocation` to its handler and captures the outcome.

    Usage::

        runner = ToolRunner(AudioController(MemoryBackend()))
        outcome = await runner.invoke(ToolInvocation(name="get_current_volume"))
    """

    def __init__(self, audio: AudioController) -> None:
        self._audio = audio

    async def invoke(self, invocation: ToolInvocation) -> ToolOutcome:
        """Run the named tool; never raises."""
        tool = ToolName.lookup(invocation.name)
        if tool is None:
            error = UnknownToolError(invocation.name)
            logger.warning("%s", error)
            return ToolFailure(kind=FailureKind.UNKNOWN_TOOL, message=error.message)

        handler = TOOL_HANDLERS[tool]
        try:
            return await handler(self._audio, invocation.arguments)
        except ToolValidationError as exc:
            logger.warning("Invalid arguments for %s: %s", tool.value, exc.message)
            return ToolFailure(kind=FailureKind.VALIDATION, message=exc.message)
        except BackendError as exc:
            return ToolFailure(kind=FailureKind.BACKEND, message=str(exc))
        except Exception as exc:
            logger.exception("Tool %s failed unexpectedly", tool.value)
            return ToolFailure(kind=FailureKind.BACKEND, message=str(exc) or type(exc).__name__)
