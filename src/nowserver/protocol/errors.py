"""Shared error types for the protocol layer."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nowserver.protocol.models import JsonRpcError


class ErrorCode(IntEnum):
    """Standard JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class NowServerError(Exception):
    """Base error for all server failures."""


class RequestDecodeError(NowServerError):
    """An input line could not be decoded into a request.

    Never reported to the peer; the line is dropped.
    """

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail or "Malformed request")


class RpcError(NowServerError):
    """A failure reported to the peer as a JSON-RPC error object."""

    def __init__(self, code: int, message: str) -> None:
        self.code = int(code)
        self.message = message
        super().__init__(message)

    def to_error(self) -> JsonRpcError:
        from nowserver.protocol.models import JsonRpcError

        return JsonRpcError(code=self.code, message=self.message)


class MethodNotFoundError(RpcError):
    """The requested method is not one the server implements."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(ErrorCode.METHOD_NOT_FOUND, f"Method not found: {method}")


class ToolNotFoundError(RpcError):
    """Requested tool does not exist. Shares the method-not-found code."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(ErrorCode.METHOD_NOT_FOUND, f"Tool not found: {name}")


class InvalidParamsError(RpcError):
    """Request params failed validation."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(ErrorCode.INVALID_PARAMS, f"Invalid params: {detail}")


class InternalError(RpcError):
    """An unexpected failure while executing a request."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(ErrorCode.INTERNAL_ERROR, detail)
