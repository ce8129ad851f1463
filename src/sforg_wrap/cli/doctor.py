"""``sforg-wrap doctor``: check that ``sf``, ``jq`` and Python are usable.

Each check yields a ``(component, value, status)`` row where *status* is
one of ``OK``, ``WARN`` or ``FAIL``.  Rows are styled only when rendered,
as a Rich table when Rich is importable and as aligned text otherwise.
Missing wrapped executables are followed by install commands for the
current platform.
"""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from sforg_wrap.cli import exit_codes
from sforg_wrap.cli.console import console
from sforg_wrap.infra.dependency_checker import (
    JQ,
    SF,
    ExecutableStatus,
    detect_executable,
)
from sforg_wrap.version import __version__

OK = "OK"
WARN = "WARN"
FAIL = "FAIL"

_STATUS_STYLE = {OK: "green", WARN: "yellow", FAIL: "red"}
_MIN_PYTHON = (3, 10)
_OS_NAMES = {"Darwin": "macOS"}

Check = tuple[str, str, str]


def _python_version_check() -> Check:
    supported = sys.version_info[:2] >= _MIN_PYTHON
    return "Python", platform.python_version(), OK if supported else FAIL


def _executable_check(status: ExecutableStatus) -> Check:
    """Row for ``sf`` or ``jq``; a missing executable fails the run."""
    name = status.dependency.executable
    if not status.found:
        return name, "not found", FAIL
    return name, str(status.path) if status.path else "found", OK


def _rich_check() -> Check:
    try:
        return "rich", version("rich"), OK
    except PackageNotFoundError:
        return "rich", "not installed (plain output)", WARN


def _os_check() -> Check:
    system = platform.system()
    name = _OS_NAMES.get(system, system)
    return "OS", f"{name} {platform.release()} ({platform.machine()})", OK


def _sforg_wrap_version_check() -> Check:
    return "sforg-wrap", __version__, OK


def _render_table(checks: list[Check]) -> None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        print("\nsforg-wrap doctor", file=sys.stderr)
        for component, value, status in checks:
            print(f"  {component:<11} {value:<40} {status}", file=sys.stderr)
        print(file=sys.stderr)
        return

    table = Table(title="sforg-wrap doctor", header_style="bold cyan", border_style="dim")
    table.add_column("Component", style="bold")
    table.add_column("Value")
    table.add_column("Status", justify="center")
    for component, value, status in checks:
        style = _STATUS_STYLE[status]
        table.add_row(component, value, f"[{style}]{status}[/{style}]")
    console.print()
    console.print(table)
    console.print()


def _print_install_guidance(status: ExecutableStatus) -> None:
    console.print(f"[yellow]{status.dependency.missing_message}[/yellow]")
    console.print(f"{status.dependency.remediation} For example:")
    for command in status.install_commands:
        console.print(f"  [bold]{command}[/bold]")
    console.print()


def run_doctor() -> int:
    """Run every check, print the results and return the exit status.

    Returns :data:`exit_codes.GENERAL_ERROR` when any row is ``FAIL``
    (an unsupported Python, or ``sf``/``jq`` missing from ``PATH``).
    """
    executables = [detect_executable(SF), detect_executable(JQ)]
    checks = [
        _sforg_wrap_version_check(),
        _python_version_check(),
        *(_executable_check(status) for status in executables),
        _rich_check(),
        _os_check(),
    ]
    _render_table(checks)

    for status in executables:
        if not status.found and status.install_commands:
            _print_install_guidance(status)

    if any(row[2] == FAIL for row in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
