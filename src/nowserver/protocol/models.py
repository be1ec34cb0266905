"""Protocol models — JSON-RPC 2.0 messages and MCP payloads.

Implements the message format used by the Model Context Protocol for the
handshake (``initialize``), tool discovery (``tools/list``) and execution
(``tools/call``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# A request id is opaque: any JSON scalar or null, echoed back verbatim.
# ``bool`` comes first so ``true`` is not coerced to ``1``.
RequestId = bool | int | float | str | None

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    jsonrpc: str = "2.0"
    id: RequestId
    method: str
    params: dict[str, Any] | None = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` and ``error`` is set.
    """

    jsonrpc: str = "2.0"
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _one_of_result_or_error(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, id: RequestId, result: BaseModel | dict[str, Any]) -> JsonRpcResponse:
        if isinstance(result, BaseModel):
            result = result.model_dump(by_alias=True, exclude_none=True)
        return cls(id=id, result=result)

    @classmethod
    def failure(cls, id: RequestId, error: JsonRpcError) -> JsonRpcResponse:
        return cls(id=id, error=error)

    def to_wire(self) -> dict[str, Any]:
        """Return the on-the-wire dict; ``id`` is always present, even when null."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ServerInfo(BaseModel):
    """Name and version announced during ``initialize``."""

    name: str
    version: str


class ToolsCapability(BaseModel):
    """Announces tool support. Serialises to ``{}`` unless ``listChanged`` is set."""

    model_config = ConfigDict(populate_by_name=True)

    list_changed: bool | None = Field(default=None, alias="listChanged")


class Capabilities(BaseModel):
    tools: ToolsCapability = Field(default_factory=ToolsCapability)


class InitializeResult(BaseModel):
    """Result payload of ``initialize``."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(alias="protocolVersion")
    capabilities: Capabilities = Field(default_factory=Capabilities)
    server_info: ServerInfo = Field(alias="serverInfo")


class ToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class ToolsListResult(BaseModel):
    """Result payload of ``tools/list``."""

    tools: list[ToolDef]


class TextContent(BaseModel):
    type: str = "text"
    text: str


class CallToolResult(BaseModel):
    """Result payload of ``tools/call``."""

    content: list[TextContent]

    @classmethod
    def from_text(cls, text: str) -> CallToolResult:
        return cls(content=[TextContent(text=text)])
