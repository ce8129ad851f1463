"""Infrastructure: persisting the final JSON line.

Writes to a caller-specified file (creating its parent directories) or
to standard output.  Write errors are not caught here.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO


def write_output(
    content: str,
    path: Path | None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Write *content* as one line to *path*, or to *stream* when no path.

    Parameters
    ----------
    content:
        A single line of JSON (no trailing newline).
    path:
        Destination file.  Any existing content is overwritten.
    stream:
        Fallback text stream; defaults to :data:`sys.stdout`.
    """
    line = content.rstrip("\n") + "\n"

    if path is None:
        target = stream if stream is not None else sys.stdout
        target.write(line)
        target.flush()
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(line, encoding="utf-8")
