"""Shared argparse plumbing for the wrapper commands.

``argparse`` exits with status 2 on bad input; the wrappers promise
status 1 and must report through a single boundary, so parse errors are
raised as :class:`~sforg_wrap.exceptions.UsageError` instead.  Paired
flags take the next token verbatim, so values such as ``-a -tmp`` work.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from sforg_wrap.exceptions import UsageError


class WrapperArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting on bad input."""

    def __init__(self, *args: object, **kwargs: object) -> None:
        kwargs.setdefault("allow_abbrev", False)
        kwargs.setdefault("add_help", False)
        super().__init__(*args, **kwargs)  # type: ignore[arg-type]

    def parse_known_args(  # type: ignore[override]
        self,
        args: Sequence[str] | None = None,
        namespace: argparse.Namespace | None = None,
    ) -> tuple[argparse.Namespace, list[str]]:
        if args is not None:
            args = self._bind_option_values(args)
        return super().parse_known_args(args, namespace)

    def _bind_option_values(self, args: Sequence[str]) -> list[str]:
        """Attach the token after each value-taking flag to that flag.

        ``-a -tmp`` becomes ``--alias=-tmp``: a paired flag always consumes
        the next token, even one that starts with a dash.  A flag with
        nothing after it is left for argparse to reject.
        """
        takes_value = {
            option: action
            for action in self._actions
            if action.option_strings and action.nargs is None
            for option in action.option_strings
        }
        bound: list[str] = []
        tokens = iter(args)
        for token in tokens:
            action = takes_value.get(token)
            value = next(tokens, None) if action is not None else None
            if action is None or value is None:
                bound.append(token)
                continue
            bound.append(f"{action.option_strings[-1]}={value}")
        return bound

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)

    def print_usage_error(self, error: UsageError) -> None:
        """Print the full help text and *error* to stderr."""
        self.print_help(sys.stderr)
        print(f"\n{self.prog}: error: {error.message}", file=sys.stderr)


def non_empty(value: str | None) -> bool:
    """Return ``True`` when *value* holds something other than whitespace."""
    return value is not None and bool(value.strip())
