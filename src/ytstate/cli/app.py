"""
CLI Application - Command line entry point for ytstate.

Usage:
    # Values from config.yml in the current directory
    ytstate --task 42 --ns Fixed

    # Explicit config file, with the project overridden
    ytstate --config ~/youtrack.yml --project PRJ --task 42 --ns "In Progress"

    # No config file at all
    ytstate --host https://tracker.example --token perm:xxx --task 42 --ns Fixed

    # Resolve only, show what would be changed
    ytstate --task 42 --ns Fixed --dry-run

Config file format:
    youtrack:
      host: https://tracker.example
      token: perm:xxx
      project: PRJ
      prefix: PRJ-

Environment Variables (override the file, overridden by flags):
    YOUTRACK_HOST, YOUTRACK_TOKEN, YOUTRACK_PROJECT, YOUTRACK_PREFIX,
    YOUTRACK_INSECURE, YOUTRACK_TIMEOUT
"""

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from ..adapters.config import YamlConfigProvider, DEFAULT_CONFIG_FILE
from ..adapters.youtrack import YouTrackAdapter
from ..application.commands import ChangeStateCommand, CommandResult
from ..core.exceptions import ConfigError, NotFoundError
from .exit_codes import ExitCode


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with ExitCode.ERROR on bad usage."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.ERROR, f"{self.prog}: error: {message}\n")


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="ytstate",
        description="Move a YouTrack issue to a new state",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--task", "-t",
        type=str,
        required=True,
        help="Task number to resolve (e.g., 42 or PRJ-42)"
    )

    parser.add_argument(
        "--ns", "-n",
        type=str,
        required=True,
        help="New state for the task (e.g., Fixed)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help=f"Config file (default: {DEFAULT_CONFIG_FILE})"
    )

    parser.add_argument(
        "--host",
        type=str,
        help="YouTrack URL (or set youtrack.host / YOUTRACK_HOST)"
    )

    parser.add_argument(
        "--token",
        type=str,
        help="YouTrack permanent token (or set youtrack.token / YOUTRACK_TOKEN)"
    )

    parser.add_argument(
        "--project", "-p",
        type=str,
        help="Project key used to scope the search"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 30)"
    )

    parser.add_argument(
        "--insecure",
        action="store_true",
        default=None,
        help="Skip TLS certificate verification"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve the issue but don't change its state"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def describe_failure(result: CommandResult) -> str:
    """Build the log message for a failed command."""
    message = result.error or "Unknown error"
    exc = result.exception

    if isinstance(exc, NotFoundError) and exc.match_count is not None:
        return f"{message} ({exc.match_count} matching issues)"

    cause = getattr(exc, "cause", None)
    if cause is not None:
        return f"{message} ({cause})"
    return message


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.task.strip() or not args.ns.strip():
        parser.error("--task and --ns must not be empty")

    setup_logging(args.verbose)
    logger = logging.getLogger("main")

    try:
        config = YamlConfigProvider(
            config_file=args.config,
            cli_overrides={
                "task": args.task,
                "ns": args.ns,
                "host": args.host,
                "token": args.token,
                "project": args.project,
                "timeout": args.timeout,
                "insecure": args.insecure,
                "dry_run": args.dry_run,
            },
        ).load()
    except ConfigError as e:
        logger.error(str(e))
        return ExitCode.ERROR

    logger.debug(f"Configuration from: {', '.join(config.sources)}")

    with YouTrackAdapter(config.tracker) as tracker:
        result = ChangeStateCommand(
            tracker,
            task=config.task,
            new_state=config.new_state,
            dry_run=config.dry_run,
        ).execute()

    if not result.success:
        logger.error(describe_failure(result))
        return ExitCode.ERROR

    logger.info("Success!")
    return ExitCode.SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
