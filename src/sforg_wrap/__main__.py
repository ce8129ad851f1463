"""Allow ``python -m sforg_wrap`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m sforg_wrap`` behaves identically to the ``sforg-wrap``
console script.
"""

from __future__ import annotations

from sforg_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
