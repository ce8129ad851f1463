"""``jq`` backed implementation of :class:`~sforg_wrap.core.protocols.JsonFormatter`.

The document is piped through ``jq -c .`` so the persisted file keeps
the exact key order and values produced by ``sf``, only on one line.
"""

from __future__ import annotations

from sforg_wrap.core.protocols import CommandRunner
from sforg_wrap.exceptions import InvalidJsonError


class JqFormatter:
    """Compact JSON documents with ``jq``.

    Parameters
    ----------
    runner:
        Runner used to invoke ``jq``.
    jq_executable:
        Name or path of the ``jq`` executable.
    """

    def __init__(self, runner: CommandRunner, *, jq_executable: str = "jq") -> None:
        self._runner: CommandRunner = runner
        self._jq: str = jq_executable

    def compact(self, document: str) -> str:
        """Return *document* reformatted onto a single line.

        Raises
        ------
        InvalidJsonError
            When ``jq`` rejects the input, produces nothing, or the input
            holds more than one JSON value.
        """
        result = self._runner.run([self._jq, "-c", "."], input_text=document)
        if not result.ok:
            raise InvalidJsonError(
                "jq could not parse the JSON document.",
                details=result.stderr.strip() or document.strip() or None,
            )

        lines = [line for line in result.stdout.splitlines() if line.strip()]
        if len(lines) != 1:
            raise InvalidJsonError(
                "Expected exactly one JSON document.",
                details=document.strip() or None,
            )
        return lines[0]
