"""Tests for MCP JSON-RPC models."""

import json

import pytest

from volmcp.protocols.mcp.models import (
    CallToolResult,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolDescriptor,
    ToolInvocation,
)


class TestJsonRpcRequest:
    def test_from_message(self) -> None:
        req = JsonRpcRequest.from_message(
            {"jsonrpc": "2.0", "id": 42, "method": "tools/call", "params": {"name": "x"}}
        )
        assert req.method == "tools/call"
        assert req.id == 42
        assert req.params == {"name": "x"}
        assert req.has_id is True

    def test_missing_members(self) -> None:
        req = JsonRpcRequest.from_message({})
        assert req.method is None
        assert req.params == {}
        assert req.has_id is False

    def test_odd_member_types_tolerated(self) -> None:
        req = JsonRpcRequest.from_message({"id": [1], "method": 7, "params": "nope"})
        assert req.method is None
        assert req.params == {}
        assert req.id == [1]

    def test_has_id_not_serialized(self) -> None:
        req = JsonRpcRequest.from_message({"id": 1, "method": "initialize"})
        assert "has_id" not in req.model_dump()


class TestJsonRpcResponse:
    def test_reply_carries_id(self) -> None:
        req = JsonRpcRequest.from_message({"id": "abc", "method": "x"})
        line = req.reply({"ok": True}).to_line()
        assert json.loads(line) == {"jsonrpc": "2.0", "id": "abc", "result": {"ok": True}}

    def test_reply_keeps_null_id(self) -> None:
        req = JsonRpcRequest.from_message({"id": None, "method": "x"})
        assert json.loads(req.reply({}).to_line()) == {"jsonrpc": "2.0", "id": None, "result": {}}

    def test_reply_without_id_omits_member(self) -> None:
        req = JsonRpcRequest.from_message({"method": "x"})
        assert json.loads(req.reply({}).to_line()) == {"jsonrpc": "2.0", "result": {}}

    def test_to_line_is_single_line(self) -> None:
        line = JsonRpcResponse(id=1, result={"text": "a\nb"}).to_line()
        assert line.endswith("\n")
        assert line.count("\n") == 1

    def test_to_line_escapes_non_ascii(self) -> None:
        line = JsonRpcResponse(id=1, result={"text": "é"}).to_line()
        assert line.isascii()
        assert json.loads(line)["result"]["text"] == "é"

    def test_to_line_escapes_lone_surrogate(self) -> None:
        line = JsonRpcResponse(id="\ud800", result={}).to_line()
        line.encode("utf-8")
        assert json.loads(line)["id"] == "\ud800"

    def test_to_line_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            JsonRpcResponse(id=float("nan"), result={}).to_line()


class TestInitializeResult:
    def test_dump_uses_wire_names(self) -> None:
        result = InitializeResult(server_info=ServerInfo(name="srv", version="1.0.0"))
        assert result.model_dump(by_alias=True) == {
            "protocolVersion": "2024-11-05",
            "capabilities": {"tools": {}},
            "serverInfo": {"name": "srv", "version": "1.0.0"},
        }


class TestToolDescriptor:
    def test_alias(self) -> None:
        tool = ToolDescriptor(name="t", description="d", inputSchema={"type": "object"})
        assert tool.input_schema == {"type": "object"}
        assert tool.model_dump(by_alias=True)["inputSchema"] == {"type": "object"}


class TestToolInvocation:
    def test_from_params(self) -> None:
        inv = ToolInvocation.from_params({"name": "set_volume", "arguments": {"volume": 3}})
        assert inv.name == "set_volume"
        assert inv.arguments == {"volume": 3}

    def test_from_params_defaults(self) -> None:
        inv = ToolInvocation.from_params({"name": 5, "arguments": None})
        assert inv.name is None
        assert inv.arguments == {}


class TestCallToolResult:
    def test_from_text(self) -> None:
        result = CallToolResult.from_text("hi", {"k": 1})
        assert result.model_dump(by_alias=True) == {
            "content": [{"type": "text", "text": "hi"}],
            "structuredContent": {"k": 1},
            "isError": False,
        }

    def test_error_flag(self) -> None:
        result = CallToolResult.from_text("Error: x", {"error": "x"}, is_error=True)
        assert result.model_dump(by_alias=True)["isError"] is True
