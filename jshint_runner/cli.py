"""CLI entrypoint for jshint-runner."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .errors import RunnerError
from .logging import configure_logging
from .models import DEFAULT_CHARSET, RunConfig
from .runner import Runner

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_FATAL = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jshint-runner",
        description="Run JSHint over JavaScript files and directories.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="<log-file>",
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--charset",
        default=DEFAULT_CHARSET,
        metavar="<name>",
        help="Encoding used to read input files (defaults to UTF-8).",
    )
    parser.add_argument(
        "--custom",
        type=Path,
        metavar="<custom-jshint-file>",
        help="Use this JSHint build instead of the default jshint package.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="<config-file>",
        help="Properties or YAML file with JSHint options and a blackList of file names.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        metavar="<output-report-file>",
        help="Also write a report to this file (.html/.htm for HTML, plain text otherwise).",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="<input-file>",
        help="JavaScript files, or directories searched recursively for *.js files.",
    )
    return parser


def _to_run_config(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        input_paths=tuple(args.inputs),
        charset=args.charset,
        custom_engine=args.custom,
        config_file=args.config,
        output_file=args.output,
        verbose=bool(args.verbose),
    )


def main(argv: Optional[list[str]] = None, *, runner: Runner | None = None) -> int:
    """CLI entrypoint; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)
    config = _to_run_config(args)

    configure_logging(verbose=config.verbose, log_file=args.log_file)

    runner = runner or Runner()
    try:
        summary = runner.run(config)
    except RunnerError as exc:
        parser.exit(EXIT_FATAL, f"{exc}\n\n{parser.format_help()}")
    return EXIT_OK if summary.clean else EXIT_PROBLEMS


def run() -> None:
    """Console script wrapper that exits with the run status."""
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
