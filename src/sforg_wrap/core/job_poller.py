"""Polling of an asynchronous scratch org creation job.

State machine
-------------
::

    STARTED ──begin()──▶ POLLING ──resolve()──▶ RESOLVED
       │                    │
       └──────────┬─────────┘
                  ▼
                FAILED

* ``begin`` extracts the job id from the initial ``--async`` response.
* ``wait`` blocks on ``sf org resume scratch`` with human-readable
  progress routed to the diagnostic stream.
* ``resolve`` repeats the resume call with ``--json`` to capture the
  final document.  When that call fails, the initial response is used
  instead, provided it is valid JSON.

Guarantees
----------
* No ``print()``; progress output is produced by the wrapped tool via
  :meth:`CommandRunner.stream`.
* Only :class:`~sforg_wrap.exceptions.SforgWrapError` subclasses escape.
"""

from __future__ import annotations

from sforg_wrap.core.models import JobHandle, JobState
from sforg_wrap.core.protocols import CommandRunner
from sforg_wrap.core.responses import is_valid_document, parse_job_handle
from sforg_wrap.exceptions import InvalidJsonError, NoJobIdError


class JobPoller:
    """Drives one creation job from its initial response to a final document.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    sf_executable:
        Name or path of the Salesforce CLI executable.
    """

    def __init__(self, runner: CommandRunner, *, sf_executable: str = "sf") -> None:
        self._runner: CommandRunner = runner
        self._sf: str = sf_executable
        self.state: JobState = JobState.STARTED
        self.job: JobHandle | None = None

    # ------------------------------------------------------------------
    # Command construction (pure)
    # ------------------------------------------------------------------

    def build_resume_args(self, job: JobHandle, *, json_output: bool) -> list[str]:
        """Build the ``sf org resume scratch`` argument list for *job*."""
        args = [self._sf, "org", "resume", "scratch", "--job-id", job.job_id]
        if json_output:
            args.append("--json")
        return args

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def begin(self, initial_response: str) -> JobHandle:
        """Move from ``STARTED`` to ``POLLING`` by extracting the job id.

        Raises
        ------
        NoJobIdError
            When no usable job id is present.  The poller is ``FAILED``.
        """
        self._expect(JobState.STARTED)
        try:
            job = parse_job_handle(initial_response)
        except NoJobIdError:
            self.state = JobState.FAILED
            raise
        self.job = job
        self.state = JobState.POLLING
        return job

    def wait(self) -> int:
        """Block until the job finishes, streaming progress to stderr.

        The exit status is returned for information only; :meth:`resolve`
        decides the outcome.
        """
        job = self._polling_job()
        return self._runner.stream(self.build_resume_args(job, json_output=False))

    def resolve(self, initial_response: str) -> tuple[str, bool]:
        """Fetch the final JSON document and move to ``RESOLVED``.

        Returns
        -------
        tuple[str, bool]
            The final document and whether the initial response was used
            as a fallback.

        Raises
        ------
        InvalidJsonError
            When the final poll fails and the initial response is not
            valid JSON either.  The poller is ``FAILED``.
        """
        job = self._polling_job()
        result = self._runner.run(self.build_resume_args(job, json_output=True))

        if result.ok and is_valid_document(result.stdout):
            self.state = JobState.RESOLVED
            return result.stdout.strip(), False

        # The initial response only says the job was accepted; it is not
        # re-checked for completion here.
        if is_valid_document(initial_response):
            self.state = JobState.RESOLVED
            return initial_response.strip(), True

        self.state = JobState.FAILED
        raise InvalidJsonError(
            "Neither resume nor the creation output returned valid JSON.",
            details=initial_response.strip() or None,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _expect(self, state: JobState) -> None:
        if self.state is not state:
            raise RuntimeError(
                f"Job poller is {self.state.value}, expected {state.value}.",
            )

    def _polling_job(self) -> JobHandle:
        self._expect(JobState.POLLING)
        if self.job is None:
            raise RuntimeError("Job poller is polling without a job id.")
        return self.job
