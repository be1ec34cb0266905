"""Line codec — decode one input line into a request, encode one response.

Decoding is strict: non-standard literals (``NaN``, ``Infinity``) and
non-object documents are rejected, and the fields must have the types of
:class:`JsonRpcRequest`. Unknown fields are ignored.
"""

from __future__ import annotations

import json
from typing import NoReturn

from pydantic import ValidationError

from nowserver.protocol.errors import RequestDecodeError
from nowserver.protocol.models import JsonRpcRequest, JsonRpcResponse


def _reject_constant(token: str) -> NoReturn:
    msg = f"invalid JSON literal {token!r}"
    raise ValueError(msg)


def is_blank(line: str) -> bool:
    return not line.strip()


def decode_request(line: str) -> JsonRpcRequest:
    """Parse *line* into a :class:`JsonRpcRequest`.

    Raises :class:`RequestDecodeError` when the line is not valid JSON, is
    not an object, or does not have the shape of a request.
    """
    try:
        raw = json.loads(line, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise RequestDecodeError(str(exc)) from exc

    if not isinstance(raw, dict):
        raise RequestDecodeError(f"expected a JSON object, got {type(raw).__name__}")

    try:
        return JsonRpcRequest.model_validate(raw)
    except ValidationError as exc:
        raise RequestDecodeError(str(exc)) from exc


def encode_response(response: JsonRpcResponse) -> str:
    """Serialise *response* to a single line of JSON (without the newline)."""
    return json.dumps(response.to_wire(), ensure_ascii=True, separators=(",", ":"))
