"""MCP protocol — line-delimited JSON-RPC tool server."""

from volmcp.protocols.mcp.catalog import ToolName, build_catalog
from volmcp.protocols.mcp.dispatcher import Dispatcher, Method
from volmcp.protocols.mcp.models import (
    PROTOCOL_VERSION,
    CallToolResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolDescriptor,
    ToolInvocation,
)
from volmcp.protocols.mcp.server import MCPServer, build_server
from volmcp.protocols.mcp.tools import ToolFailure, ToolRunner, ToolSuccess
from volmcp.protocols.mcp.transport import LineReader, LineWriter

__all__ = [
    "PROTOCOL_VERSION",
    "CallToolResult",
    "Dispatcher",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "LineReader",
    "LineWriter",
    "MCPServer",
    "Method",
    "ToolDescriptor",
    "ToolFailure",
    "ToolInvocation",
    "ToolName",
    "ToolRunner",
    "ToolSuccess",
    "build_catalog",
    "build_server",
]
