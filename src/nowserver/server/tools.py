"""The ``get_current_time`` tool: its descriptor and the ``tools/call`` handler."""

from __future__ import annotations

import logging
from typing import Any

from nowserver.config import DEFAULT_SETTINGS, ServerSettings
from nowserver.protocol.errors import InternalError, InvalidParamsError, RpcError, ToolNotFoundError
from nowserver.protocol.models import CallToolResult, JsonRpcResponse, RequestId, ToolDef
from nowserver.server.clock import DEFAULT_FORMAT, format_now
from nowserver.utils.telemetry import ATTR_TIME_FORMAT, ATTR_TOOL_NAME, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_TIME_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "format": {
            "type": "string",
            "description": "Time format (iso, local, utc)",
            "default": DEFAULT_FORMAT.value,
        },
    },
    "additionalProperties": False,
}


def time_tool(settings: ServerSettings = DEFAULT_SETTINGS) -> ToolDef:
    """Return the descriptor of the one tool this server exposes."""
    return ToolDef(
        name=settings.tool_name,
        description="Get the current date and time",
        input_schema=_TIME_INPUT_SCHEMA,
    )


def call_tool(
    id: RequestId,
    params: dict[str, Any] | None,
    settings: ServerSettings = DEFAULT_SETTINGS,
) -> JsonRpcResponse:
    """Handle ``tools/call``; validation failures become error responses."""
    try:
        text = _run_tool(params or {}, settings)
    except RpcError as exc:
        logger.debug("tools/call rejected: %s", exc.message)
        return JsonRpcResponse.failure(id, exc.to_error())
    return JsonRpcResponse.success(id, CallToolResult.from_text(text))


def _run_tool(params: dict[str, Any], settings: ServerSettings) -> str:
    if "name" not in params or params["name"] is None:
        raise InvalidParamsError("'name' is required")
    name = params["name"]
    if not isinstance(name, str):
        raise InvalidParamsError("'name' must be a string")
    if not name.strip():
        raise InvalidParamsError("'name' cannot be empty")
    if name != settings.tool_name:
        raise ToolNotFoundError(name)

    arguments = params.get("arguments")
    if arguments is None:
        arguments = {}
    elif not isinstance(arguments, dict):
        raise InvalidParamsError("'arguments' must be an object")

    fmt = arguments.get("format")
    if not isinstance(fmt, str) or not fmt.strip():
        fmt = DEFAULT_FORMAT.value

    with _tracer.start_as_current_span("now.tool.call") as span:
        span.set_attribute(ATTR_TOOL_NAME, name)
        span.set_attribute(ATTR_TIME_FORMAT, fmt)
        try:
            return format_now(fmt)
        except Exception as exc:
            logger.exception("Failed to get current time")
            raise InternalError(f"Failed to get current time: {exc}") from exc
