"""MCP models — JSON-RPC 2.0 envelopes and tool payloads.

Implements the message shapes this server speaks: the ``initialize``
handshake, tool discovery (``tools/list``) and tool execution
(``tools/call``).
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field

PROTOCOL_VERSION = "2024-11-05"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message.

    ``id`` is kept exactly as received. ``has_id`` distinguishes a request
    that carried no ``id`` member from one whose ``id`` was ``null``.
    """

    jsonrpc: str = "2.0"
    method: str | None = None
    id: Any = None
    params: dict[str, Any] = {}
    has_id: bool = Field(default=False, exclude=True)

    @classmethod
    def from_message(cls, message: dict[str, Any]) -> JsonRpcRequest:
        """Build a request from a decoded JSON object, tolerating odd members."""
        method = message.get("method")
        params = message.get("params")
        return cls(
            jsonrpc=str(message.get("jsonrpc", "2.0")),
            method=method if isinstance(method, str) else None,
            id=message.get("id"),
            params=params if isinstance(params, dict) else {},
            has_id="id" in message,
        )

    def reply(self, result: dict[str, Any]) -> JsonRpcResponse:
        """Create the response correlated with this request."""
        if self.has_id:
            return JsonRpcResponse(id=self.id, result=result)
        return JsonRpcResponse(result=result)


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 success response."""

    jsonrpc: str = "2.0"
    id: Any = None
    result: dict[str, Any] = {}

    def to_line(self) -> str:
        """Serialize as a single compact JSON line (with trailing newline).

        Non-ASCII text is escaped, so lone surrogates echoed from the
        request still produce an encodable line.
        """
        data = self.model_dump()
        if "id" not in self.model_fields_set:
            data.pop("id")
        return json.dumps(data, separators=(",", ":"), allow_nan=False) + "\n"


# ---------------------------------------------------------------------------
# initialize
# ---------------------------------------------------------------------------


class ServerInfo(BaseModel):
    """Static server identity announced during ``initialize``."""

    name: str
    version: str


class ServerCapabilities(BaseModel):
    """Capability set; an empty ``tools`` object announces tool support."""

    tools: dict[str, Any] = Field(default_factory=dict)


class InitializeResult(BaseModel):
    """Result payload of the ``initialize`` handshake."""

    model_config = {"populate_by_name": True}

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: ServerInfo = Field(alias="serverInfo")


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A catalog entry as returned by ``tools/list``."""

    model_config = {"populate_by_name": True, "frozen": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class ToolInvocation(BaseModel):
    """The ``params`` of a ``tools/call`` request."""

    name: str | None = None
    arguments: dict[str, Any] = {}

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> ToolInvocation:
        name = params.get("name")
        arguments = params.get("arguments")
        return cls(
            name=name if isinstance(name, str) else None,
            arguments=arguments if isinstance(arguments, dict) else {},
        )


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """Result payload of a ``tools/call`` request."""

    model_config = {"populate_by_name": True}

    content: list[TextContent] = []
    structured_content: dict[str, Any] = Field(default_factory=dict, alias="structuredContent")
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(
        cls, text: str, structured: dict[str, Any], *, is_error: bool = False
    ) -> CallToolResult:
        """Create a result with a single text content part."""
        return cls(
            content=[TextContent(text=text)],
            structured_content=structured,
            is_error=is_error,
        )
