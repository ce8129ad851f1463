"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from sforg_wrap.core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for executing external commands.

    Any object that implements :meth:`run` and :meth:`stream` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def run(
        self,
        args: Sequence[str],
        *,
        input_text: str | None = None,
    ) -> CommandResult:
        """Run *args* to completion, capturing stdout and stderr.

        Implementations must **not** raise on a non-zero exit status;
        the caller decides whether that constitutes a failure.

        Parameters
        ----------
        args:
            Executable followed by its arguments.
        input_text:
            Optional text fed to the command's stdin.
        """
        ...  # pragma: no cover

    def stream(self, args: Sequence[str]) -> int:
        """Run *args* with all output routed to the diagnostic stream.

        Returns the exit status.  Used for human-readable progress that
        must not pollute the primary output stream.
        """
        ...  # pragma: no cover


class JsonFormatter(Protocol):
    """Contract for reformatting a JSON document onto a single line."""

    def compact(self, document: str) -> str:
        """Return *document* as one line of JSON.

        Raises
        ------
        InvalidJsonError
            When *document* is not exactly one valid JSON value.
        """
        ...  # pragma: no cover
