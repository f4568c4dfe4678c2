"""Protocol layer — the MCP tool server and its error types."""

from volmcp.protocols.errors import (
    ParseError,
    ProtocolError,
    ToolExecutionError,
    ToolValidationError,
    UnknownToolError,
)

__all__ = [
    "ParseError",
    "ProtocolError",
    "ToolExecutionError",
    "ToolValidationError",
    "UnknownToolError",
]
