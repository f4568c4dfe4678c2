"""Shared error types for the protocol layer."""

INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class ParseError(ProtocolError):
    """An inbound line is not a JSON object and cannot be answered."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail or "Malformed message")


class ToolExecutionError(ProtocolError):
    """A tool invocation failed; reported to the caller as an error result."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ToolValidationError(ToolExecutionError):
    """Tool arguments failed validation before reaching the audio backend."""


class UnknownToolError(ToolExecutionError):
    """Requested tool does not exist in the catalog."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
