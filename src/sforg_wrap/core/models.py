"""Domain models for sforg-wrap.

All models are **frozen** dataclasses; immutable value objects with
little or no behaviour beyond data access.  They carry zero I/O and are
constructed once, then passed explicitly between layers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sforg_wrap.exceptions import ErrorCode


# ---------------------------------------------------------------------------
# Command configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScratchOrgConfig:
    """Validated options for ``create-scratch``."""

    definition_file: Path
    """Path to the scratch org definition JSON file."""

    alias: str
    """Alias assigned to the new scratch org."""

    duration_days: int
    """Lifetime of the scratch org in days."""

    target_dev_hub: str
    """Alias or username of the Dev Hub that provisions the org."""

    no_namespace: bool = False
    """Create the org without the project namespace."""

    output_file: Path | None = None
    """Destination for the final JSON, or ``None`` for stdout."""

    json_output: bool = False
    """Report errors as JSON envelopes instead of plain text."""


@dataclass(frozen=True, slots=True)
class OrgDisplayConfig:
    """Validated options for ``display-auth``."""

    target_org: str
    """Alias or username of the org to display."""

    output_file: Path
    """File receiving the compact ``sf org display`` JSON."""

    json_output: bool = False
    """Report errors as JSON envelopes instead of plain text."""


# ---------------------------------------------------------------------------
# External command result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one external command invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Captured stdout, or stderr when stdout is empty (stripped)."""
        return self.stdout.strip() or self.stderr.strip()


# ---------------------------------------------------------------------------
# Asynchronous provisioning job
# ---------------------------------------------------------------------------

class JobState(str, Enum):
    """Lifecycle of an asynchronous scratch org creation job."""

    STARTED = "started"
    POLLING = "polling"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class JobHandle:
    """Identifier correlating an async creation request with its completion."""

    job_id: str


@dataclass(frozen=True, slots=True)
class ScratchOrgResult:
    """Final outcome of ``create-scratch``."""

    job: JobHandle
    final_json: str
    """Single-line JSON document mirroring the ``sf`` response."""

    used_fallback: bool = False
    """``True`` when the initial creation response stood in for the final poll."""


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ErrorEnvelope:
    """Machine-readable failure report."""

    code: ErrorCode
    message: str
    details: str | None = None

    def to_dict(self) -> dict[str, object]:
        error: dict[str, object] = {"code": self.code.value, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"success": False, "error": error}

    def to_json(self) -> str:
        """Render the envelope as a single line of JSON.

        The ``details`` key is omitted entirely when there are no details.
        """
        return json.dumps(self.to_dict(), ensure_ascii=False)
