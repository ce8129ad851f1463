"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and error reporting remain
functional even when Rich is not installed.

All human-facing diagnostics go to stderr.  Stdout is reserved for the
final JSON result and JSON error envelopes.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from sforg_wrap.exceptions import MissingDependencyError

_STYLE_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed.",
            details="Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, **options: Any) -> None:
        """Render with Rich when available, else plain stderr print.

        *options* are forwarded to :meth:`rich.console.Console.print`.
        The plain fallback strips style tags unless ``markup=False``.
        """
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            if options.get("markup", True):
                objects = tuple(
                    _STYLE_TAG.sub("", obj) if isinstance(obj, str) else obj
                    for obj in objects
                )
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, **options)

    def raw(self, text: str) -> None:
        """Print *text* verbatim: no markup, no highlighting, no wrapping."""
        self.print(text, markup=False, highlight=False, soft_wrap=True)


console = _ConsoleProxy()
