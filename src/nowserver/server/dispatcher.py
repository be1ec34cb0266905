"""Request dispatch — routes a decoded request to its handler by method name.

The method set is closed: ``initialize``, ``tools/list`` and ``tools/call``.
Anything else is answered with a method-not-found error.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from nowserver.config import DEFAULT_SETTINGS, ServerSettings
from nowserver.protocol.errors import MethodNotFoundError
from nowserver.protocol.models import (
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    RequestId,
    ServerInfo,
    ToolsListResult,
)
from nowserver.server.tools import call_tool, time_tool
from nowserver.utils.telemetry import ATTR_RPC_ERROR_CODE, ATTR_RPC_METHOD, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class Method(str, Enum):
    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


def handle_initialize(id: RequestId, settings: ServerSettings = DEFAULT_SETTINGS) -> JsonRpcResponse:
    result = InitializeResult(
        protocol_version=settings.protocol_version,
        server_info=ServerInfo(name=settings.server_name, version=settings.server_version),
    )
    return JsonRpcResponse.success(id, result)


def handle_tools_list(id: RequestId, settings: ServerSettings = DEFAULT_SETTINGS) -> JsonRpcResponse:
    return JsonRpcResponse.success(id, ToolsListResult(tools=[time_tool(settings)]))


def dispatch(
    method: str,
    id: RequestId,
    params: dict[str, Any] | None = None,
    settings: ServerSettings = DEFAULT_SETTINGS,
) -> JsonRpcResponse:
    """Produce the response for one request. Never raises for unknown methods."""
    with _tracer.start_as_current_span("now.rpc.dispatch") as span:
        span.set_attribute(ATTR_RPC_METHOD, method)
        logger.debug("Dispatching %s (id=%r)", method, id)

        if method == Method.INITIALIZE:
            response = handle_initialize(id, settings)
        elif method == Method.TOOLS_LIST:
            response = handle_tools_list(id, settings)
        elif method == Method.TOOLS_CALL:
            response = call_tool(id, params, settings)
        else:
            response = JsonRpcResponse.failure(id, MethodNotFoundError(method).to_error())

        if response.error is not None:
            span.set_attribute(ATTR_RPC_ERROR_CODE, response.error.code)
        return response


def handle_request(request: JsonRpcRequest, settings: ServerSettings = DEFAULT_SETTINGS) -> JsonRpcResponse:
    return dispatch(request.method, request.id, request.params, settings)
