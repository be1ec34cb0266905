"""Stdio transport — newline-delimited JSON-RPC over text streams.

Reads one line, writes zero or one line, repeats until end of input.
Lines that cannot be decoded are dropped: the peer never sees a parse
error, only a diagnostic is logged to stderr.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import TextIO

from nowserver.config import DEFAULT_SETTINGS, ServerSettings
from nowserver.protocol.codec import decode_request, encode_response, is_blank
from nowserver.protocol.errors import InternalError, RequestDecodeError
from nowserver.protocol.models import JsonRpcResponse
from nowserver.server.dispatcher import handle_request

logger = logging.getLogger(__name__)


class StdioServer:
    """Serves requests from *reader* and writes responses to *writer*.

    Defaults to ``sys.stdin`` / ``sys.stdout``, resolved at call time so the
    streams can be swapped out (e.g. by ``CliRunner``).
    """

    def __init__(
        self,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
        *,
        settings: ServerSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._settings = settings

    @property
    def settings(self) -> ServerSettings:
        return self._settings

    def serve_forever(self) -> int:
        """Process lines until end of input; return the number of responses written."""
        reader = self._reader or sys.stdin
        if isinstance(reader, io.TextIOWrapper):
            # Undecodable bytes become U+FFFD instead of ending the loop.
            reader.reconfigure(errors="replace")
        written = 0
        for line in reader:
            response = self.handle_line(line)
            if response is None:
                continue
            try:
                self.write(response)
            except ValueError:
                logger.exception("Failed to write response for id %r", response.id)
                continue
            written += 1
        logger.debug("Input closed after %d response(s)", written)
        return written

    def handle_line(self, line: str) -> JsonRpcResponse | None:
        """Turn one input line into its response, or ``None`` if nothing is owed."""
        if is_blank(line):
            return None
        try:
            request = decode_request(line)
        except RequestDecodeError as exc:
            logger.warning("Error processing request: %s", exc)
            return None

        try:
            return handle_request(request, self._settings)
        except Exception as exc:
            logger.exception("Unhandled error while dispatching %s", request.method)
            return JsonRpcResponse.failure(request.id, InternalError(str(exc)).to_error())

    def write(self, response: JsonRpcResponse) -> None:
        """Write *response* as one line and flush."""
        writer = self._writer or sys.stdout
        writer.write(encode_response(response) + "\n")
        writer.flush()
