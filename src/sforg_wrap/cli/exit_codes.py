"""Process exit statuses returned by the sforg-wrap commands.

Every command function returns one of these; only the console-script
boundary in :mod:`sforg_wrap.cli.app` hands them to :func:`sys.exit`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The wrapped ``sf`` call succeeded and its JSON was written."""

GENERAL_ERROR: int = 1
"""Bad usage, or a failure reported once as plain text or a JSON envelope."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the sforg-wrap hierarchy, e.g. an unwritable output file."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted while waiting on ``sf`` (128 + SIGINT)."""
