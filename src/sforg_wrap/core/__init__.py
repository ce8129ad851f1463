"""Core / service layer: orchestration logic and domain models.

Rules
-----
* No ``print()`` calls.
* No direct process or filesystem I/O; external commands go through
  the :class:`~sforg_wrap.core.protocols.CommandRunner` protocol.
* No imports from ``cli`` or ``infra``.
"""

from sforg_wrap.core.job_poller import JobPoller
from sforg_wrap.core.models import (
    CommandResult,
    ErrorEnvelope,
    JobHandle,
    JobState,
    OrgDisplayConfig,
    ScratchOrgConfig,
    ScratchOrgResult,
)
from sforg_wrap.core.org_display_service import OrgDisplayService
from sforg_wrap.core.protocols import CommandRunner, JsonFormatter
from sforg_wrap.core.scratch_org_service import ScratchOrgService

__all__: list[str] = [
    "CommandResult",
    "CommandRunner",
    "ErrorEnvelope",
    "JobHandle",
    "JobPoller",
    "JobState",
    "JsonFormatter",
    "OrgDisplayConfig",
    "OrgDisplayService",
    "ScratchOrgConfig",
    "ScratchOrgResult",
    "ScratchOrgService",
]
