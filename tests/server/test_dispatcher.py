"""Tests for method dispatch."""

import pytest

from nowserver.config import ServerSettings
from nowserver.protocol.models import JsonRpcRequest
from nowserver.server.dispatcher import Method, dispatch, handle_request


class TestInitialize:
    def test_fixed_result(self) -> None:
        resp = dispatch("initialize", 1)
        assert resp.to_wire() == {
            "jsonrpc": "2.0",
            "id": 1,
            "result": {
                "protocolVersion": "2024-11-05",
                "capabilities": {"tools": {}},
                "serverInfo": {"name": "now-server", "version": "1.0.0"},
            },
        }

    def test_params_ignored(self) -> None:
        params = {"protocolVersion": "1999-01-01", "clientInfo": {"name": "x"}}
        assert dispatch("initialize", 1, params) == dispatch("initialize", 1)

    def test_settings_override(self) -> None:
        settings = ServerSettings(server_name="other", server_version="9")
        resp = dispatch("initialize", 1, settings=settings)
        assert resp.result is not None
        assert resp.result["serverInfo"] == {"name": "other", "version": "9"}


class TestToolsList:
    def test_single_tool(self) -> None:
        resp = dispatch("tools/list", 2, {"cursor": "ignored"})
        assert resp.result is not None
        tools = resp.result["tools"]
        assert len(tools) == 1
        tool = tools[0]
        assert tool["name"] == "get_current_time"
        assert tool["description"]
        assert tool["inputSchema"]["additionalProperties"] is False
        assert tool["inputSchema"]["properties"]["format"]["default"] == "iso"


class TestToolsCall:
    def test_delegates(self) -> None:
        resp = dispatch("tools/call", 3, {"name": "get_current_time"})
        assert resp.error is None
        assert resp.result is not None
        assert resp.result["content"][0]["type"] == "text"

    def test_missing_params(self) -> None:
        resp = dispatch("tools/call", 3)
        assert resp.error is not None
        assert resp.error.code == -32602


class TestUnknownMethod:
    @pytest.mark.parametrize("method", ["resources/list", "prompts/list", "", "Initialize"])
    def test_method_not_found(self, method: str) -> None:
        resp = dispatch(method, 4)
        assert resp.error is not None
        assert resp.error.code == -32601
        assert resp.error.message == f"Method not found: {method}"
        assert resp.id == 4


class TestIdEcho:
    @pytest.mark.parametrize("request_id", [None, 0, 17, "abc", 2.5])
    @pytest.mark.parametrize("method", [m.value for m in Method] + ["nope"])
    def test_id_preserved(self, method: str, request_id: object) -> None:
        resp = dispatch(method, request_id, {"name": "get_current_time"})  # type: ignore[arg-type]
        assert resp.to_wire()["id"] == request_id


class TestHandleRequest:
    def test_uses_request_fields(self) -> None:
        req = JsonRpcRequest(id="r1", method="tools/list")
        resp = handle_request(req)
        assert resp.id == "r1"
        assert resp.result is not None
