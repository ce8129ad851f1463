"""Core org display service: fetches auth/display info for an org.

Wraps ``sf org display --verbose --json`` and compacts the response to
a single line.  Any failure along the way surfaces as
:class:`~sforg_wrap.exceptions.OrgDisplayError`.
"""

from __future__ import annotations

from sforg_wrap.core.models import OrgDisplayConfig
from sforg_wrap.core.protocols import CommandRunner, JsonFormatter
from sforg_wrap.exceptions import InvalidJsonError, OrgDisplayError


class OrgDisplayService:
    """Stateless service returning the ``sf org display`` document.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    formatter:
        Any object satisfying the :class:`JsonFormatter` protocol.
    sf_executable:
        Name or path of the Salesforce CLI executable.
    """

    _FAILURE_MESSAGE = "Failed to display org info."

    def __init__(
        self,
        runner: CommandRunner,
        formatter: JsonFormatter,
        *,
        sf_executable: str = "sf",
    ) -> None:
        self._runner: CommandRunner = runner
        self._formatter: JsonFormatter = formatter
        self._sf: str = sf_executable

    def build_display_args(self, config: OrgDisplayConfig) -> list[str]:
        """Build the ``sf org display`` argument list."""
        return [
            self._sf,
            "org",
            "display",
            "--target-org",
            config.target_org,
            "--verbose",
            "--json",
        ]

    def fetch(self, config: OrgDisplayConfig) -> str:
        """Return the org's display document as one line of JSON.

        Raises
        ------
        OrgDisplayError
            When ``sf`` exits non-zero or its output is not valid JSON.
        """
        result = self._runner.run(self.build_display_args(config))
        if not result.ok:
            raise OrgDisplayError(self._FAILURE_MESSAGE, details=result.output or None)

        try:
            return self._formatter.compact(result.stdout)
        except InvalidJsonError as exc:
            raise OrgDisplayError(
                self._FAILURE_MESSAGE,
                details=exc.details or result.output or None,
            ) from exc
