"""Tests for the dual-mode ErrorReporter (cli/reporter.py).

Coverage:
* JSON mode prints exactly one envelope line on stdout, nothing on stderr.
* ``details`` key present iff details are non-empty.
* Plain mode prints the message and raw details on stderr only.
* Every reportable error returns exit code 1.
"""

from __future__ import annotations

import io
import json

import pytest

from sforg_wrap.cli import exit_codes
from sforg_wrap.cli.reporter import ErrorReporter
from sforg_wrap.exceptions import (
    ErrorCode,
    InvalidJsonError,
    MissingArgumentsError,
    MissingDependencyError,
    NoJobIdError,
    OrgDisplayError,
    ScratchOrgCreationError,
    SforgWrapError,
)

ALL_ERRORS: list[SforgWrapError] = [
    MissingArgumentsError("Missing flags.", details="Use -o/--org and -f/--file"),
    MissingDependencyError("jq is required but not installed.", details="Install jq to continue."),
    ScratchOrgCreationError("Failed to start scratch org creation.", details='{"status":1}'),
    NoJobIdError("Could not extract job ID.", details="{}"),
    InvalidJsonError("Neither resume nor the creation output returned valid JSON."),
    OrgDisplayError("Failed to display org info."),
]


class TestJsonMode:
    @pytest.mark.parametrize("error", ALL_ERRORS, ids=lambda e: type(e).__name__)
    def test_single_valid_envelope(
        self, error: SforgWrapError, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = ErrorReporter(json_output=True).report(error)

        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert code == exit_codes.GENERAL_ERROR
        assert len(lines) == 1
        assert captured.err == ""

        payload = json.loads(lines[0])
        assert payload["success"] is False
        assert payload["error"]["code"] in {c.value for c in ErrorCode}
        assert payload["error"]["message"] == error.message
        assert ("details" in payload["error"]) == bool(error.details)

    def test_explicit_stream(self) -> None:
        stream = io.StringIO()
        ErrorReporter(json_output=True, stdout=stream).report(
            NoJobIdError("Could not extract job ID.", details='{"result": null}'),
        )
        payload = json.loads(stream.getvalue())
        assert payload["error"]["details"] == '{"result": null}'

    def test_multiline_details_stay_on_one_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        raw = '{\n  "status": 1,\n  "message": "Dev Hub not enabled"\n}'
        ErrorReporter(json_output=True).report(
            ScratchOrgCreationError("Failed to start scratch org creation.", details=raw),
        )
        out = capsys.readouterr().out
        assert out.count("\n") == 1
        assert json.loads(out)["error"]["details"] == raw


class TestPlainMode:
    def test_message_and_details_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = ErrorReporter(json_output=False).report(
            ScratchOrgCreationError(
                "Failed to start scratch org creation.",
                details='{"status":1,"name":"[NoDefaultDevHub]"}',
            ),
        )

        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert captured.out == ""
        assert "Error:" in captured.err
        assert "Failed to start scratch org creation." in captured.err
        assert '{"status":1,"name":"[NoDefaultDevHub]"}' in captured.err

    def test_no_details_line_when_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        ErrorReporter(json_output=False).report(OrgDisplayError("Failed to display org info."))
        err_lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        assert len(err_lines) == 1
