"""Dispatcher — turns one inbound line into at most one JSON-RPC response.

Routing is stateless: apart from the static tool catalog nothing survives
from one message to the next.

- ``initialize`` → protocol version, capabilities and server identity.
- ``tools/list`` → the full tool catalog.
- ``tools/call`` → run the tool; failures become ``isError`` results.
- anything else → an empty result, so every request gets a reply.

Lines that are not JSON objects produce no response at all; they are
reported on the diagnostic log only.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from volmcp.protocols.errors import ParseError
from volmcp.protocols.mcp.catalog import build_catalog
from volmcp.protocols.mcp.models import (
    PROTOCOL_VERSION,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolInvocation,
)
from volmcp.protocols.mcp.tools import ToolFailure, ToolRunner, to_call_result
from volmcp.utils.telemetry import (
    ATTR_FAILURE_KIND,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_TOOL_IS_ERROR,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from opentelemetry.trace import Span

    from volmcp.audio.controller import AudioController
    from volmcp.protocols.mcp.models import ToolDescriptor

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class Method(str, Enum):
    """Protocol-level methods; everything unrecognised is ``OTHER``."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    OTHER = ""

    @classmethod
    def from_wire(cls, method: str | None) -> Method:
        for member in (cls.INITIALIZE, cls.TOOLS_LIST, cls.TOOLS_CALL):
            if member.value == method:
                return member
        return cls.OTHER


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Non-standard JSON constant: {name}")


def parse_line(line: str) -> JsonRpcRequest:
    """Decode *line* into a request.

    Raises:
        ParseError: If the line is not strict JSON (``NaN`` and
            ``Infinity`` are rejected) or not a JSON object.
    """
    try:
        message: Any = json.loads(line, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc)) from exc
    if not isinstance(message, dict):
        raise ParseError(f"Expected a JSON object, got {type(message).__name__}")
    return JsonRpcRequest.from_message(message)


class Dispatcher:
    """Routes requests by method and shapes the responses.

    Usage::

        dispatcher = Dispatcher(AudioController(MemoryBackend()))
        response = await dispatcher.handle_line('{"jsonrpc":"2.0","id":1,"method":"tools/list"}')
        if response is not None:
            out.write(response.to_line())
    """

    def __init__(
        self,
        audio: AudioController,
        *,
        server_name: str = "computer-volume-control-mcp",
        server_version: str = "1.0.0",
    ) -> None:
        self._runner = ToolRunner(audio)
        self._catalog: tuple[ToolDescriptor, ...] = build_catalog(audio.step)
        self._server_info = ServerInfo(name=server_name, version=server_version)
        self._routes: dict[Method, Callable[[JsonRpcRequest, Span], Awaitable[dict[str, Any]]]] = {
            Method.INITIALIZE: self._initialize,
            Method.TOOLS_LIST: self._tools_list,
            Method.TOOLS_CALL: self._tools_call,
            Method.OTHER: self._other,
        }

    @property
    def catalog(self) -> tuple[ToolDescriptor, ...]:
        return self._catalog

    async def handle_line(self, line: str) -> JsonRpcResponse | None:
        """Handle one inbound line; ``None`` means nothing must be written."""
        if not line.strip():
            logger.debug("Ignoring blank line")
            return None
        try:
            request = parse_line(line)
        except ParseError as exc:
            logger.error("Error processing message: %s", exc)
            return None
        return await self.handle(request)

    async def handle(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Dispatch a decoded request and build its response."""
        method = Method.from_wire(request.method)
        with _tracer.start_as_current_span("mcp.request") as span:
            span.set_attribute(ATTR_METHOD, request.method or "")
            if request.has_id:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))
            logger.debug("Handling %s (id=%r)", request.method, request.id)
            result = await self._routes[method](request, span)
        return request.reply(result)

    # -- Method handlers ---------------------------------------------------

    async def _initialize(self, request: JsonRpcRequest, span: Span) -> dict[str, Any]:
        result = InitializeResult(protocol_version=PROTOCOL_VERSION, server_info=self._server_info)
        return result.model_dump(by_alias=True)

    async def _tools_list(self, request: JsonRpcRequest, span: Span) -> dict[str, Any]:
        return {"tools": [tool.model_dump(by_alias=True) for tool in self._catalog]}

    async def _tools_call(self, request: JsonRpcRequest, span: Span) -> dict[str, Any]:
        invocation = ToolInvocation.from_params(request.params)
        span.set_attribute(ATTR_TOOL_NAME, invocation.name or "")

        outcome = await self._runner.invoke(invocation)

        span.set_attribute(ATTR_TOOL_IS_ERROR, isinstance(outcome, ToolFailure))
        if isinstance(outcome, ToolFailure):
            span.set_attribute(ATTR_FAILURE_KIND, outcome.kind.value)
        return to_call_result(outcome).model_dump(by_alias=True)

    async def _other(self, request: JsonRpcRequest, span: Span) -> dict[str, Any]:
        return {}
