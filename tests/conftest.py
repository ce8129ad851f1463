"""Shared pytest fixtures and configuration for the sforg-wrap test suite.

Guidelines
----------
* No test invokes the real ``sf`` or ``jq`` executables.
* External commands are faked at the ``CommandRunner`` boundary.
* PATH probing is faked by patching :func:`shutil.which`.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence

import pytest

from sforg_wrap.core.models import CommandResult


def _fake_jq(argv: list[str], input_text: str | None) -> CommandResult:
    """Mimic ``jq -c .`` for a single document."""
    try:
        document = json.loads(input_text or "")
    except json.JSONDecodeError:
        return CommandResult(
            args=tuple(argv),
            returncode=5,
            stdout="",
            stderr="jq: error (at <stdin>:1): Cannot parse input",
        )
    return CommandResult(
        args=tuple(argv),
        returncode=0,
        stdout=json.dumps(document, separators=(",", ":"), ensure_ascii=False) + "\n",
        stderr="",
    )


class FakeRunner:
    """In-memory ``CommandRunner`` returning canned results.

    *results* maps a command prefix (``"sf org create scratch"``) to the
    result returned for any command starting with it.  ``jq`` calls are
    answered by a tiny ``jq -c .`` emulation unless a ``"jq"`` key is
    present.
    """

    def __init__(
        self,
        results: dict[str, CommandResult] | None = None,
        *,
        stream_code: int = 0,
    ) -> None:
        self.results: dict[str, CommandResult] = dict(results or {})
        self.stream_code: int = stream_code
        self.calls: list[list[str]] = []
        self.inputs: list[str | None] = []
        self.streamed: list[list[str]] = []

    def run(
        self,
        args: Sequence[str],
        *,
        input_text: str | None = None,
    ) -> CommandResult:
        argv = list(args)
        self.calls.append(argv)
        self.inputs.append(input_text)
        command = " ".join(argv)
        for prefix, result in self.results.items():
            if command.startswith(prefix):
                return result
        if argv[0] == "jq":
            return _fake_jq(argv, input_text)
        raise AssertionError(f"unexpected command: {command}")

    def stream(self, args: Sequence[str]) -> int:
        self.streamed.append(list(args))
        return self.stream_code

    def commands(self) -> list[str]:
        """Every recorded command (run and stream) joined into a string."""
        return [" ".join(argv) for argv in self.calls + self.streamed]


def make_result(returncode: int = 0, stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(args=(), returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def fake_runner() -> type[FakeRunner]:
    """The :class:`FakeRunner` class, for building per-test runners."""
    return FakeRunner


@pytest.fixture
def result() -> Callable[..., CommandResult]:
    """Factory for :class:`CommandResult` values."""
    return make_result


@pytest.fixture
def tools_on_path(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Pretend ``sf`` and ``jq`` are installed; return the probed names."""
    probed: list[str] = []

    def fake_which(name: str) -> str:
        probed.append(name)
        return f"/usr/local/bin/{name}"

    monkeypatch.setattr("sforg_wrap.infra.dependency_checker.shutil.which", fake_which)
    return probed
