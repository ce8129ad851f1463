"""Infrastructure layer: external system integration.

This layer wraps all interaction with the operating system: spawning
``sf`` and ``jq``, probing PATH, and writing output files.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from sforg_wrap.infra.dependency_checker import (
    JQ,
    ORG_DISPLAY_DEPENDENCIES,
    SCRATCH_ORG_DEPENDENCIES,
    SF,
    Dependency,
    ExecutableStatus,
    detect_executable,
    require_dependencies,
)
from sforg_wrap.infra.jq_formatter import JqFormatter
from sforg_wrap.infra.output_writer import write_output
from sforg_wrap.infra.subprocess_runner import SubprocessRunner

__all__: list[str] = [
    "JQ",
    "ORG_DISPLAY_DEPENDENCIES",
    "SCRATCH_ORG_DEPENDENCIES",
    "SF",
    "Dependency",
    "ExecutableStatus",
    "JqFormatter",
    "SubprocessRunner",
    "detect_executable",
    "require_dependencies",
    "write_output",
]
