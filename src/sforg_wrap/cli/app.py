"""CLI application entry point and command routing for sforg-wrap.

This module is the **process-level error boundary** for the entire
application.  Each command reports its own
:class:`~sforg_wrap.exceptions.SforgWrapError` failures in the mode
selected by ``--json``; anything that still escapes is caught here
together with ``KeyboardInterrupt`` and mapped to a well-defined exit
code.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the command
  modules, which in turn delegate to the core and infrastructure layers.
* This module is the only place that calls :func:`sys.exit`.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from sforg_wrap.cli import exit_codes
from sforg_wrap.cli.console import console
from sforg_wrap.exceptions import SforgWrapError
from sforg_wrap.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

_COMMAND_HELP: dict[str, str] = {
    "create-scratch": "Create a scratch org from a definition file and wait for it.",
    "display-auth": "Write an org's auth/display info as one line of JSON.",
    "doctor": "Run environment diagnostics.",
}


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only ``--version`` and ``--help`` are handled here; each command
    parses its own flags.
    """
    parser = argparse.ArgumentParser(
        prog="sforg-wrap",
        description="Salesforce CLI wrappers for scratch orgs and org auth info.",
        epilog="\n".join(f"  {name:<15} {text}" for name, text in _COMMAND_HELP.items()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=sorted(_COMMAND_HELP),
        help="Command to run; see below.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_create_scratch(argv: Sequence[str]) -> int:
    from sforg_wrap.cli.create_scratch import run

    return run(argv)


def _handle_display_auth(argv: Sequence[str]) -> int:
    from sforg_wrap.cli.display_auth import run

    return run(argv)


def _handle_doctor(argv: Sequence[str]) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from sforg_wrap.cli.doctor import run_doctor

    return run_doctor()


_HANDLERS: dict[str, Callable[[Sequence[str]], int]] = {
    "create-scratch": _handle_create_scratch,
    "display-auth": _handle_display_auth,
    "doctor": _handle_doctor,
}


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Route ``argv`` (default ``sys.argv[1:]``) to a command.

    The first token selects the command and everything after it is
    handed over unparsed, so each command owns its flags.  With no
    command, top-level help is printed and the result is
    :data:`exit_codes.SUCCESS`.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0] in _HANDLERS:
        return _HANDLERS[args[0]](args[1:])

    parser = _build_parser()
    parser.parse_args(args)
    parser.print_help()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Process boundary
# ---------------------------------------------------------------------------

def _guard(entry: Callable[[], int]) -> None:
    """Call *entry* and exit with its status; the only :func:`sys.exit` site."""
    try:
        code = entry()
    except SforgWrapError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}", soft_wrap=True)
        if exc.details:
            console.raw(exc.details)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted; the scratch org job may still be running.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] {type(exc).__name__}: {exc}", soft_wrap=True)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red]\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    sys.exit(code)


def cli() -> None:
    """Console-script entry point for ``sforg-wrap``."""
    _guard(main)


def create_scratch_cli() -> None:
    """Console-script entry point for ``sf-create-scratch``."""
    from sforg_wrap.cli.create_scratch import run

    _guard(lambda: run(sys.argv[1:], prog="sf-create-scratch"))


def display_auth_cli() -> None:
    """Console-script entry point for ``sf-display-auth``."""
    from sforg_wrap.cli.display_auth import run

    _guard(lambda: run(sys.argv[1:], prog="sf-display-auth"))
