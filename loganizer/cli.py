"""Command-line interface for analysing log files."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from .analyzer import analyze_logs
from .config import ConfigError, load_config
from .reporter import (
    ExportError,
    LogResult,
    Status,
    export_results,
    generate_timestamped_filename,
    print_results,
)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def filter_results_by_status(
    results: Iterable[LogResult], status: str
) -> List[LogResult]:
    """Keep only results whose status equals ``status``."""
    return [result for result in results if result.status == status]


def print_summary(
    results: Sequence[LogResult], out: Optional[TextIO] = None
) -> None:
    """Print totals and the details of failed logs."""
    out = sys.stdout if out is None else out
    successful = sum(1 for r in results if r.status == Status.OK)
    failed = len(results) - successful

    print("\n=== Summary ===", file=out)
    print(f"Total logs analyzed: {len(results)}", file=out)
    print(f"Successful: {successful}", file=out)
    print(f"Failed: {failed}", file=out)

    if failed:
        print("\nFailed logs breakdown:", file=out)
        for result in results:
            if result.status == Status.FAILED:
                print(f"- {result.log_id}: {result.message}", file=out)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its ``analyze`` command."""
    parser = _Parser(
        prog="loganalyzer",
        description=(
            "LogAnalyzer is a command-line tool that helps system administrators "
            "analyze log files from various sources in parallel with robust "
            "error handling."
        ),
    )
    commands = parser.add_subparsers(dest="command", metavar="command")
    analyze = commands.add_parser(
        "analyze",
        help="Analyze log files based on configuration",
        description=(
            "Analyze multiple log files concurrently based on a JSON "
            "configuration file and generate a report. Supports filtering by "
            "status and timestamped output files."
        ),
    )
    analyze.add_argument(
        "-c", "--config", required=True,
        help="Path to configuration JSON file (required)",
    )
    analyze.add_argument(
        "-o", "--output", default="", help="Path to output JSON file (optional)"
    )
    analyze.add_argument(
        "--status", default="", help="Filter results by status (OK or FAILED)"
    )
    analyze.add_argument(
        "--timestamp", action="store_true",
        help="Add timestamp to output filename",
    )
    return parser


def _analyze(args: argparse.Namespace) -> int:
    if not args.config:
        print("Error: config file path is required")
        return 1

    try:
        configs = load_config(args.config)
    except ConfigError as exc:
        print(f"Error loading config: {exc}")
        return 1

    if not configs:
        print("No log configurations found")
        return 0

    print(f"Starting analysis of {len(configs)} log files...")
    results = analyze_logs(configs)

    if args.status:
        results = filter_results_by_status(results, args.status)

    print_results(results)

    if args.output:
        output = args.output
        if args.timestamp:
            output = generate_timestamped_filename(output)
        try:
            export_results(results, output)
        except ExportError as exc:
            print(f"Error exporting results: {exc}")
            return 1
        print(f"\nResults exported to: {output}")

    print_summary(results)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    return _analyze(args)


if __name__ == "__main__":
    raise SystemExit(main())