"""JSON-RPC protocol layer — wire models, error codes and the line codec."""

from nowserver.protocol.codec import decode_request, encode_response
from nowserver.protocol.errors import (
    ErrorCode,
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    NowServerError,
    RequestDecodeError,
    RpcError,
    ToolNotFoundError,
)
from nowserver.protocol.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse, ToolDef

__all__ = [
    "ErrorCode",
    "InternalError",
    "InvalidParamsError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodNotFoundError",
    "NowServerError",
    "RequestDecodeError",
    "RpcError",
    "ToolDef",
    "ToolNotFoundError",
    "decode_request",
    "encode_response",
]
