"""Infrastructure: required-executable detection and platform guidance.

This module is responsible for locating the wrapped executables
(``sf`` and ``jq``) on the system PATH and providing platform-specific
installation guidance when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only; no subprocess.
* No permanent PATH modification.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from sforg_wrap.exceptions import MissingDependencyError


# ---------------------------------------------------------------------------
# Declared dependencies
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dependency:
    """An external executable the wrappers shell out to."""

    executable: str
    """Name looked up on PATH."""

    label: str
    """Human-readable name shown by ``doctor``."""

    missing_message: str
    """Error message reported when the executable is absent."""

    remediation: str
    """Short hint attached as error details."""


SF = Dependency(
    executable="sf",
    label="Salesforce CLI",
    missing_message="Salesforce CLI (sf) is not installed.",
    remediation="Install Salesforce CLI to continue.",
)

JQ = Dependency(
    executable="jq",
    label="jq",
    missing_message="jq is required but not installed.",
    remediation="Install jq to continue.",
)

SCRATCH_ORG_DEPENDENCIES: tuple[Dependency, ...] = (SF, JQ)
ORG_DISPLAY_DEPENDENCIES: tuple[Dependency, ...] = (JQ, SF)


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutableStatus:
    """Result of a PATH probe for one dependency.

    Attributes
    ----------
    dependency : Dependency
        The dependency that was probed.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the executable on the
        current platform.  Empty when it is already present.
    """

    dependency: Dependency
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_executable(dependency: Dependency) -> ExecutableStatus:
    """Probe the system for *dependency*.

    Returns an :class:`ExecutableStatus` regardless of whether the
    executable is present; the caller decides whether to abort or
    merely report.
    """
    result = shutil.which(dependency.executable)

    if result is not None:
        return ExecutableStatus(
            dependency=dependency,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return ExecutableStatus(
        dependency=dependency,
        found=False,
        path=None,
        install_commands=_platform_install_commands(dependency),
    )


def require_dependencies(dependencies: Sequence[Dependency]) -> None:
    """Ensure every executable in *dependencies* is on PATH.

    Dependencies are checked in the given order and the first missing one
    raises; the rest are not probed.

    Raises
    ------
    MissingDependencyError
        For the first dependency that cannot be found.
    """
    for dependency in dependencies:
        if shutil.which(dependency.executable) is None:
            raise MissingDependencyError(
                dependency.missing_message,
                details=dependency.remediation,
            )


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands(dependency: Dependency) -> tuple[str, ...]:
    """Return install commands for *dependency* on the current OS."""
    system = platform.system().lower()

    if dependency.executable == "sf":
        return ("npm install --global @salesforce/cli",)

    if dependency.executable == "jq":
        if system == "windows":
            return ("winget install jqlang.jq", "choco install jq")
        if system == "linux":
            return (
                "sudo apt install jq",
                "sudo dnf install jq",
                "sudo pacman -S jq",
            )
        if system == "darwin":
            return ("brew install jq",)
        return ("Please install jq from https://jqlang.github.io/jq/download/",)

    return ()
