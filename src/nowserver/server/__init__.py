"""Server side — dispatch, the time tool and the stdio loop."""

from nowserver.server.clock import TimeFormat, format_now
from nowserver.server.dispatcher import Method, dispatch, handle_request
from nowserver.server.tools import call_tool, time_tool
from nowserver.server.transport import StdioServer

__all__ = [
    "Method",
    "StdioServer",
    "TimeFormat",
    "call_tool",
    "dispatch",
    "format_now",
    "handle_request",
    "time_tool",
]
