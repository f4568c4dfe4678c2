"""Static tool catalog advertised by ``tools/list``."""

from __future__ import annotations

from enum import Enum
from typing import Any

from volmcp.audio.controller import DEFAULT_STEP
from volmcp.protocols.mcp.models import ToolDescriptor


class ToolName(str, Enum):
    """Every tool this server exposes, in catalog order."""

    GET_CURRENT_VOLUME = "get_current_volume"
    SET_VOLUME = "set_volume"
    GET_MUTE_STATUS = "get_mute_status"
    MUTE_SYSTEM = "mute_system"
    UNMUTE_SYSTEM = "unmute_system"
    INCREASE_VOLUME = "increase_volume"
    DECREASE_VOLUME = "decrease_volume"

    @classmethod
    def lookup(cls, name: object) -> ToolName | None:
        """Return the member named *name*, or ``None`` if there is none."""
        for member in cls:
            if member.value == name:
                return member
        return None


def _no_arguments() -> dict[str, Any]:
    return {"type": "object", "properties": {}, "required": []}


def build_catalog(step: int = DEFAULT_STEP) -> tuple[ToolDescriptor, ...]:
    """Build the catalog; *step* is the percentage used by the relative tools."""
    descriptions = {
        ToolName.GET_CURRENT_VOLUME: (
            "Get the current computer system volume level as a percentage between 0 and 100"
        ),
        ToolName.SET_VOLUME: (
            "Set the computer system volume level to a specific percentage between 0 and 100"
        ),
        ToolName.GET_MUTE_STATUS: "Check if the computer system is currently muted",
        ToolName.MUTE_SYSTEM: "Mute the computer system audio",
        ToolName.UNMUTE_SYSTEM: "Unmute the computer system audio",
        ToolName.INCREASE_VOLUME: f"Increase the computer system volume level by {step}%",
        ToolName.DECREASE_VOLUME: f"Decrease the computer system volume level by {step}%",
    }
    schemas = {
        ToolName.SET_VOLUME: {
            "type": "object",
            "properties": {
                "volume": {
                    "type": "number",
                    "description": "Volume level as a percentage (0-100)",
                    "minimum": 0,
                    "maximum": 100,
                }
            },
            "required": ["volume"],
        },
    }
    return tuple(
        ToolDescriptor(
            name=tool.value,
            description=descriptions[tool],
            input_schema=schemas.get(tool, _no_arguments()),
        )
        for tool in ToolName
    )
