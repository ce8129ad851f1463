"""``subprocess`` backed implementation of :class:`~sforg_wrap.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns external
processes.  A command that exits non-zero is a normal result, not an
exception; a command that cannot be started at all is reported as a
result with exit status 127.  Captured output is decoded as UTF-8 with
undecodable bytes replaced, so odd bytes from ``sf`` never escape as
:class:`UnicodeDecodeError`.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

from sforg_wrap.core.models import CommandResult

COMMAND_NOT_STARTED: int = 127
"""Exit status used when the executable could not be launched."""


class SubprocessRunner:
    """Concrete :class:`CommandRunner` backed by :func:`subprocess.run`.

    This class satisfies the :class:`~sforg_wrap.core.protocols.CommandRunner`
    protocol structurally; no explicit inheritance required.
    """

    def run(
        self,
        args: Sequence[str],
        *,
        input_text: str | None = None,
    ) -> CommandResult:
        """Run *args* to completion and capture its output as text."""
        argv = tuple(args)
        try:
            proc = subprocess.run(
                list(argv),
                input=input_text,
                check=False,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
            )
        except OSError as exc:
            return CommandResult(
                args=argv,
                returncode=COMMAND_NOT_STARTED,
                stdout="",
                stderr=str(exc),
            )
        return CommandResult(
            args=argv,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )

    def stream(self, args: Sequence[str]) -> int:
        """Run *args* with stdout and stderr both routed to our stderr."""
        sys.stderr.flush()
        try:
            proc = subprocess.run(
                list(args),
                check=False,
                stdout=sys.stderr,
                stderr=sys.stderr,
            )
        except OSError:
            return COMMAND_NOT_STARTED
        return proc.returncode
