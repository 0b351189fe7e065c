"""CLI entry point for dynamsg."""

import argparse
import logging
import sys
from pathlib import Path

from dynamsg import __version__

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynamsg",
        description="Extract timing and run information from LS-DYNA message files",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="messag / mesXXXX files, or result folders containing them",
    )
    path_group = parser.add_mutually_exclusive_group()
    path_group.add_argument(
        "--abs",
        action="store_true",
        help="Show absolute file paths",
    )
    path_group.add_argument(
        "--relative",
        type=Path,
        default=None,
        metavar="DIR",
        help="Show file paths relative to DIR",
    )
    parser.add_argument(
        "-f", "--format",
        choices=["table", "json", "csv"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write json/csv output to file instead of stdout",
    )
    parser.add_argument(
        "--phases",
        action="store_true",
        help="Show the timing breakdown of each file (table format)",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=int,
        default=1,
        help="Number of files parsed in parallel",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed parsing progress",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored terminal output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    from dynamsg.logging_setup import setup_logging
    setup_logging("DEBUG" if args.verbose else "WARNING", no_color=args.no_color)

    from dynamsg.batch import parse_messag_files
    from dynamsg.parsers.messag import discover_messag_files
    from dynamsg.paths import PathOptions

    files = discover_messag_files(args.paths)
    if not files:
        print("Error: no message files found", file=sys.stderr)
        return 1
    logger.debug("Found %d message files", len(files))

    options = PathOptions(absolute=args.abs, relative_to=args.relative)
    result = parse_messag_files(files, path_options=options, jobs=args.jobs)

    if args.format == "json":
        from dynamsg.report.json_report import write_json_report
        write_json_report(result.records, args.output or sys.stdout)
    elif args.format == "csv":
        from dynamsg.report.csv_report import write_csv_report
        write_csv_report(result.records, args.output or sys.stdout)
    else:
        from dynamsg.report.terminal import render_records
        render_records(result.records, no_color=args.no_color, show_phases=args.phases)

    if args.output and args.format != "table":
        from rich.console import Console
        console = Console(stderr=True, force_terminal=not args.no_color)
        console.print(f"\n[dim]{args.format.upper()} report saved to: {args.output}[/dim]")

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
