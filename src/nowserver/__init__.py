"""now-server — a stdio MCP server exposing the current date and time."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "1.0.0"

if TYPE_CHECKING:
    from nowserver.server.transport import StdioServer as StdioServer

_LAZY_EXPORTS = {
    "StdioServer": "nowserver.server.transport",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'nowserver' has no attribute {name!r}")
