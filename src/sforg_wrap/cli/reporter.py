"""Dual-mode error reporter.

Renders a :class:`~sforg_wrap.exceptions.SforgWrapError` either as
human-readable text on stderr or as a single-line JSON envelope on
stdout.  The mode is fixed when the reporter is created, so a single
invocation never mixes the two.
"""

from __future__ import annotations

import sys
from typing import TextIO

from sforg_wrap.cli import exit_codes
from sforg_wrap.cli.console import console
from sforg_wrap.core.models import ErrorEnvelope
from sforg_wrap.exceptions import SforgWrapError


class ErrorReporter:
    """Report failures in plain or JSON mode.

    Parameters
    ----------
    json_output:
        Emit JSON envelopes instead of plain text.
    stdout:
        Stream receiving JSON envelopes; defaults to :data:`sys.stdout`
        at report time.
    """

    def __init__(self, *, json_output: bool, stdout: TextIO | None = None) -> None:
        self.json_output: bool = json_output
        self._stdout: TextIO | None = stdout

    def report(self, error: SforgWrapError) -> int:
        """Render *error* once and return the process exit code."""
        if self.json_output and error.code is not None:
            envelope = ErrorEnvelope(
                code=error.code,
                message=error.message,
                details=error.details,
            )
            stream = self._stdout if self._stdout is not None else sys.stdout
            print(envelope.to_json(), file=stream, flush=True)
        else:
            console.print(
                f"[bold red]Error:[/bold red] {error.message}",
                soft_wrap=True,
            )
            if error.details:
                console.raw(error.details)
        return exit_codes.GENERAL_ERROR
