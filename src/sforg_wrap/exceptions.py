"""Custom exception hierarchy for sforg-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`SforgWrapError`.  Every reportable subclass carries a fixed
:class:`ErrorCode` so that the CLI error reporter can render it either
as plain text or as a machine-readable JSON envelope.

Hierarchy
---------
SforgWrapError
├── UsageError
├── MissingArgumentsError          MISSING_ARGUMENTS
├── MissingDependencyError         MISSING_DEPENDENCY
├── ScratchOrgCreationError        SCRATCH_ORG_CREATION_FAILED
├── NoJobIdError                   NO_JOB_ID
├── InvalidJsonError               INVALID_JSON
└── OrgDisplayError                ORG_DISPLAY_FAILED
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes emitted in JSON error envelopes."""

    MISSING_ARGUMENTS = "MISSING_ARGUMENTS"
    MISSING_DEPENDENCY = "MISSING_DEPENDENCY"
    SCRATCH_ORG_CREATION_FAILED = "SCRATCH_ORG_CREATION_FAILED"
    NO_JOB_ID = "NO_JOB_ID"
    INVALID_JSON = "INVALID_JSON"
    ORG_DISPLAY_FAILED = "ORG_DISPLAY_FAILED"


class SforgWrapError(Exception):
    """Base exception for all sforg-wrap errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    code: ErrorCode | None = None
    """Envelope code; ``None`` for errors that are not reported as envelopes."""

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.details: str | None = details
        """Optional free text (raw tool output or a remediation hint)."""


# --- Usage / arguments -----------------------------------------------------

class UsageError(SforgWrapError):
    """Raised when the command line cannot be parsed (unknown flag, bad value)."""


class MissingArgumentsError(SforgWrapError):
    """Raised when a required flag is absent or empty."""

    code = ErrorCode.MISSING_ARGUMENTS


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(SforgWrapError):
    """Raised when a required executable or library is not available."""

    code = ErrorCode.MISSING_DEPENDENCY


# --- Scratch org provisioning ----------------------------------------------

class ScratchOrgCreationError(SforgWrapError):
    """Raised when ``sf org create scratch`` fails to start the job."""

    code = ErrorCode.SCRATCH_ORG_CREATION_FAILED


class NoJobIdError(SforgWrapError):
    """Raised when no usable job id can be read from the creation response."""

    code = ErrorCode.NO_JOB_ID


class InvalidJsonError(SforgWrapError):
    """Raised when no valid JSON document is available as the final result."""

    code = ErrorCode.INVALID_JSON


# --- Org display -----------------------------------------------------------

class OrgDisplayError(SforgWrapError):
    """Raised when ``sf org display`` fails or returns unusable output."""

    code = ErrorCode.ORG_DISPLAY_FAILED
