"""Volume Control MCP — system volume and mute tools over line-delimited JSON-RPC."""

from __future__ import annotations

__version__ = "1.0.0"
