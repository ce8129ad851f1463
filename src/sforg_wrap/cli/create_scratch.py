"""``sforg-wrap create-scratch``: create a scratch org from a definition file.

Flow:
1. Parse flags and validate required ones (``MISSING_ARGUMENTS``).
2. Check ``sf`` then ``jq`` are on PATH (``MISSING_DEPENDENCY``).
3. Start the job with ``sf org create scratch --async --json``.
4. Stream ``sf org resume scratch`` progress to stderr.
5. Fetch the final JSON and write it to ``--file`` or stdout.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from sforg_wrap.cli import exit_codes
from sforg_wrap.cli.console import console
from sforg_wrap.cli.parsing import WrapperArgumentParser, non_empty
from sforg_wrap.cli.reporter import ErrorReporter
from sforg_wrap.core.models import JobHandle, ScratchOrgConfig
from sforg_wrap.core.protocols import CommandRunner
from sforg_wrap.core.scratch_org_service import ScratchOrgService
from sforg_wrap.exceptions import MissingArgumentsError, SforgWrapError, UsageError
from sforg_wrap.infra.dependency_checker import SCRATCH_ORG_DEPENDENCIES, require_dependencies
from sforg_wrap.infra.jq_formatter import JqFormatter
from sforg_wrap.infra.output_writer import write_output
from sforg_wrap.infra.subprocess_runner import SubprocessRunner

PROG = "sforg-wrap create-scratch"


def build_parser(prog: str = PROG) -> WrapperArgumentParser:
    """Construct the ``create-scratch`` parser.

    ``-h`` selects the Dev Hub, so help is only available as ``--help``.
    """
    parser = WrapperArgumentParser(
        prog=prog,
        description="Create a Salesforce scratch org from a definition file.",
    )
    parser.add_argument(
        "-d", "--definition-file", dest="definition_file", metavar="FILE",
        help="Path to the scratch org definition file.",
    )
    parser.add_argument(
        "-a", "--alias", dest="alias",
        help="Alias for the new scratch org.",
    )
    parser.add_argument(
        "-t", "--duration-days", dest="duration_days", type=int, metavar="DAYS",
        help="Duration in days for the scratch org.",
    )
    parser.add_argument(
        "-h", "--target-dev-hub", dest="target_dev_hub", metavar="DEV_HUB",
        help="Alias for the Dev Hub org to use for scratch org creation.",
    )
    parser.add_argument(
        "-n", "--no-namespace", dest="no_namespace", action="store_true",
        help="Do not use a namespace.",
    )
    parser.add_argument(
        "-f", "--file", dest="output_file", metavar="OUTPUT_FILE",
        help="Path to output file for org info (JSON, single line).",
    )
    parser.add_argument(
        "--json", dest="json_output", action="store_true",
        help="Output errors in JSON format.",
    )
    parser.add_argument(
        "--help", action="help",
        help="Show this help message and exit.",
    )
    return parser


def build_config(args: argparse.Namespace) -> ScratchOrgConfig:
    """Turn parsed flags into a :class:`ScratchOrgConfig`.

    Raises
    ------
    MissingArgumentsError
        When any required flag is absent or empty.
    """
    if not (
        non_empty(args.definition_file)
        and non_empty(args.alias)
        and args.duration_days is not None
        and non_empty(args.target_dev_hub)
    ):
        raise MissingArgumentsError(
            "Definition file, alias, duration days, and dev hub alias must be specified.",
            details=(
                "Use -d/--definition-file, -a/--alias, -t/--duration-days, "
                "and -h/--target-dev-hub"
            ),
        )

    output_file = Path(args.output_file) if non_empty(args.output_file) else None
    return ScratchOrgConfig(
        definition_file=Path(args.definition_file),
        alias=args.alias,
        duration_days=args.duration_days,
        target_dev_hub=args.target_dev_hub,
        no_namespace=args.no_namespace,
        output_file=output_file,
        json_output=args.json_output,
    )


def _announce_job(job: JobHandle) -> None:
    console.print(f"Scratch org creation started. Job ID: [bold]{job.job_id}[/bold]")
    console.print("Showing progress (human readable):")


def run(
    argv: Sequence[str],
    *,
    runner: CommandRunner | None = None,
    prog: str = PROG,
) -> int:
    """Execute ``create-scratch`` and return the process exit code.

    Parameters
    ----------
    argv:
        Flags following the sub-command name.
    runner:
        Command runner override; a :class:`SubprocessRunner` by default.
    prog:
        Program name shown in usage text.
    """
    parser = build_parser(prog)
    try:
        args = parser.parse_args(list(argv))
    except UsageError as exc:
        parser.print_usage_error(exc)
        return exit_codes.GENERAL_ERROR

    reporter = ErrorReporter(json_output=args.json_output)
    try:
        config = build_config(args)
        require_dependencies(SCRATCH_ORG_DEPENDENCIES)

        command_runner = runner if runner is not None else SubprocessRunner()
        service = ScratchOrgService(command_runner, JqFormatter(command_runner))
        result = service.create(config, on_job_started=_announce_job)
    except SforgWrapError as exc:
        return reporter.report(exc)

    if result.used_fallback:
        console.print(
            "[yellow]Warning:[/yellow] final status unavailable; "
            "writing the initial creation response."
        )
    write_output(result.final_json, config.output_file)
    return exit_codes.SUCCESS
