"""``sforg-wrap display-auth``: persist an org's auth/display info.

Runs ``sf org display --verbose --json`` for ``--org`` and writes the
response, compacted to one line, to ``--file``.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from sforg_wrap.cli import exit_codes
from sforg_wrap.cli.parsing import WrapperArgumentParser, non_empty
from sforg_wrap.cli.reporter import ErrorReporter
from sforg_wrap.core.models import OrgDisplayConfig
from sforg_wrap.core.org_display_service import OrgDisplayService
from sforg_wrap.core.protocols import CommandRunner
from sforg_wrap.exceptions import MissingArgumentsError, SforgWrapError, UsageError
from sforg_wrap.infra.dependency_checker import ORG_DISPLAY_DEPENDENCIES, require_dependencies
from sforg_wrap.infra.jq_formatter import JqFormatter
from sforg_wrap.infra.output_writer import write_output
from sforg_wrap.infra.subprocess_runner import SubprocessRunner

PROG = "sforg-wrap display-auth"


def build_parser(prog: str = PROG) -> WrapperArgumentParser:
    """Construct the ``display-auth`` parser."""
    parser = WrapperArgumentParser(
        prog=prog,
        description="Display Salesforce org authentication information in JSON format.",
    )
    parser.add_argument(
        "-o", "--org", dest="target_org", metavar="TARGET_ORG",
        help="The alias or username of the target Salesforce org.",
    )
    parser.add_argument(
        "-f", "--file", dest="output_file", metavar="OUTPUT_FILE",
        help="The path to the output file where JSON will be saved.",
    )
    parser.add_argument(
        "--json", dest="json_output", action="store_true",
        help="Output errors in JSON format.",
    )
    parser.add_argument(
        "-h", "--help", action="help",
        help="Show this help message and exit.",
    )
    return parser


def build_config(args: argparse.Namespace) -> OrgDisplayConfig:
    """Turn parsed flags into an :class:`OrgDisplayConfig`.

    Raises
    ------
    MissingArgumentsError
        When ``--org`` or ``--file`` is absent or empty.
    """
    if not (non_empty(args.target_org) and non_empty(args.output_file)):
        raise MissingArgumentsError(
            "Target org and output file must be specified with -o/--org and -f/--file.",
            details="Use -o/--org and -f/--file",
        )
    return OrgDisplayConfig(
        target_org=args.target_org,
        output_file=Path(args.output_file),
        json_output=args.json_output,
    )


def run(
    argv: Sequence[str],
    *,
    runner: CommandRunner | None = None,
    prog: str = PROG,
) -> int:
    """Execute ``display-auth`` and return the process exit code."""
    parser = build_parser(prog)
    try:
        args = parser.parse_args(list(argv))
    except UsageError as exc:
        parser.print_usage_error(exc)
        return exit_codes.GENERAL_ERROR

    reporter = ErrorReporter(json_output=args.json_output)
    try:
        config = build_config(args)
        require_dependencies(ORG_DISPLAY_DEPENDENCIES)

        command_runner = runner if runner is not None else SubprocessRunner()
        service = OrgDisplayService(command_runner, JqFormatter(command_runner))
        document = service.fetch(config)
    except SforgWrapError as exc:
        return reporter.report(exc)

    write_output(document, config.output_file)
    return exit_codes.SUCCESS
