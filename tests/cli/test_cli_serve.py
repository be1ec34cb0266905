"""Tests for the ``now-server`` CLI entrypoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import pytest
from click.testing import CliRunner, Result

from nowserver.cli import main


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _responses(result: Result) -> list[dict[str, Any]]:
    # Diagnostics may be mixed into the captured output; responses are the JSON lines.
    return [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]


class TestServe:
    def test_serves_stdin(self) -> None:
        lines = [
            '{"jsonrpc":"2.0","id":1,"method":"initialize","params":{}}',
            '{"jsonrpc":"2.0","id":2,"method":"tools/list"}',
        ]
        result = CliRunner().invoke(main, [], input="\n".join(lines) + "\n")

        assert result.exit_code == 0
        responses = _responses(result)
        assert [r["id"] for r in responses] == [1, 2]
        assert responses[0]["result"]["protocolVersion"] == "2024-11-05"

    def test_bad_line_skipped(self) -> None:
        stdin = 'garbage\n\n{"jsonrpc":"2.0","id":7,"method":"ping"}\n'
        result = CliRunner().invoke(main, ["--log-level", "error"], input=stdin)

        assert result.exit_code == 0
        (resp,) = _responses(result)
        assert resp["id"] == 7
        assert resp["error"]["code"] == -32601

    def test_empty_input(self) -> None:
        result = CliRunner().invoke(main, [], input="")
        assert result.exit_code == 0
        assert _responses(result) == []

    def test_log_level_choice(self) -> None:
        result = CliRunner().invoke(main, ["--log-level", "loud"], input="")
        assert result.exit_code != 0


class TestOptions:
    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_telemetry_configured(self) -> None:
        with patch("nowserver.utils.telemetry.configure_telemetry") as mock_configure:
            result = CliRunner().invoke(main, ["--telemetry"], input="")
        assert result.exit_code == 0
        mock_configure.assert_called_once_with()

    def test_telemetry_missing_sdk(self) -> None:
        with patch(
            "nowserver.utils.telemetry.configure_telemetry",
            side_effect=ImportError("opentelemetry-sdk is required"),
        ):
            result = CliRunner().invoke(main, ["--telemetry"], input="")
        assert result.exit_code == 1
