"""now-server CLI entrypoint."""

from __future__ import annotations

import sys

import click

from nowserver import __version__
from nowserver.utils.logs import LOG_LEVELS, configure_logging, stderr_console


@click.command()
@click.version_option(version=__version__, prog_name="now-server")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Verbosity of diagnostics written to stderr.",
)
@click.option("--telemetry", is_flag=True, help="Export OpenTelemetry spans to stderr.")
def main(log_level: str, telemetry: bool) -> None:
    """Serve MCP requests as newline-delimited JSON-RPC on stdin/stdout."""
    configure_logging(log_level)

    if telemetry:
        from nowserver.utils.telemetry import configure_telemetry

        try:
            configure_telemetry()
        except ImportError as exc:
            stderr_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    from nowserver.server.transport import StdioServer

    try:
        StdioServer().serve_forever()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
