"""Core scratch org service: orchestrates the ``create-scratch`` pipeline.

This service delegates process execution to a
:class:`~sforg_wrap.core.protocols.CommandRunner` and JSON compaction
to a :class:`~sforg_wrap.core.protocols.JsonFormatter`, both injected at
construction time.  It is responsible for:

* Building the ``sf org create scratch`` argument list.
* Starting the asynchronous creation job.
* Driving a :class:`~sforg_wrap.core.job_poller.JobPoller` to completion.
* Ensuring only :class:`~sforg_wrap.exceptions.SforgWrapError` subclasses
  escape.
"""

from __future__ import annotations

from collections.abc import Callable

from sforg_wrap.core.job_poller import JobPoller
from sforg_wrap.core.models import JobHandle, ScratchOrgConfig, ScratchOrgResult
from sforg_wrap.core.protocols import CommandRunner, JsonFormatter
from sforg_wrap.exceptions import ScratchOrgCreationError


class ScratchOrgService:
    """Stateless service that creates a scratch org and waits for it.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    formatter:
        Any object satisfying the :class:`JsonFormatter` protocol.
    sf_executable:
        Name or path of the Salesforce CLI executable.
    """

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

    # ------------------------------------------------------------------
    # Command construction (pure)
    # ------------------------------------------------------------------

    def build_create_args(self, config: ScratchOrgConfig) -> list[str]:
        """Build the ``sf org create scratch`` argument list.

        ``--no-namespace`` is included only when requested.  The job is
        always started with ``--async --json`` and made the default org.
        """
        args = [
            self._sf,
            "org",
            "create",
            "scratch",
            "--definition-file",
            str(config.definition_file),
            "--alias",
            config.alias,
            "--duration-days",
            str(config.duration_days),
            "--target-dev-hub",
            config.target_dev_hub,
        ]
        if config.no_namespace:
            args.append("--no-namespace")
        args.extend(["--set-default", "--async", "--json"])
        return args

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(self, config: ScratchOrgConfig) -> str:
        """Start the asynchronous creation job and return the raw response.

        Raises
        ------
        ScratchOrgCreationError
            When ``sf`` exits non-zero.  Its captured output is attached.
        """
        result = self._runner.run(self.build_create_args(config))
        if not result.ok:
            raise ScratchOrgCreationError(
                "Failed to start scratch org creation.",
                details=result.output or None,
            )
        return result.stdout

    def create(
        self,
        config: ScratchOrgConfig,
        *,
        on_job_started: Callable[[JobHandle], None] | None = None,
    ) -> ScratchOrgResult:
        """Create a scratch org and block until its final status is known.

        Parameters
        ----------
        config:
            Validated command options.
        on_job_started:
            Optional callable invoked with the job handle right before
            the blocking progress wait begins.

        Raises
        ------
        ScratchOrgCreationError
            When the creation job cannot be started.
        NoJobIdError
            When the creation response carries no usable job id.
        InvalidJsonError
            When no valid final JSON document is available.
        """
        initial_response = self.start(config)

        poller = JobPoller(self._runner, sf_executable=self._sf)
        job = poller.begin(initial_response)

        if on_job_started is not None:
            on_job_started(job)
        poller.wait()

        document, used_fallback = poller.resolve(initial_response)
        return ScratchOrgResult(
            job=job,
            final_json=self._formatter.compact(document),
            used_fallback=used_fallback,
        )
