#!/usr/bin/env python3
"""Tablesort - Hierarchical report table sorter.

Main entry point for the tablesort command-line tool.
"""

import argparse
import sys
import traceback
from pathlib import Path

import config
from config import ExitCode
from export import export_to_json, load_from_json
from logging_config import get_logger, setup_logging
from sorting import sort_table
from utils import describe_key, parse_column_key, sanitize_for_log


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace.

    Exits:
        Code 4 if invalid argument combinations.
    """
    parser = argparse.ArgumentParser(
        prog=config.TOOL_NAME,
        description="Sort a report table tree by a metric column",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tablesort report.json -c nb_visits             # Descending by visits
  tablesort report.json -c label -o asc          # Ascending natural order
  tablesort report.json -c 2 -r                  # Metric index 2, sub-tables too
  cat report.json | tablesort - -c revenue --output sorted.json

Exit codes:
  0 - Success
  1 - General error
  2 - Invalid input
  4 - Invalid arguments
        """,
    )

    parser.add_argument(
        "input",
        help="Table tree JSON file, or - for stdin",
    )

    parser.add_argument(
        "-c",
        "--column",
        required=True,
        metavar="KEY",
        help="Column to sort by (digits select a metric index)",
    )

    parser.add_argument(
        "-o",
        "--order",
        default=config.DEFAULT_SORT_ORDER,
        metavar="ORDER",
        help="asc or desc (anything other than asc sorts descending)",
    )

    parser.add_argument(
        "--no-natural",
        dest="natural_sort",
        action="store_false",
        help="Compare text values lexicographically instead of naturally",
    )

    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Sort every sub-table too",
    )

    parser.add_argument(
        "--output",
        type=Path,
        metavar="PATH",
        help="Write sorted JSON to file (default: stdout)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Write logs to file",
    )

    args = parser.parse_args(argv)

    if not args.column.strip():
        print("Error: --column must not be empty", file=sys.stderr)
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    return args


def read_input(source: str) -> str:
    """Read the input document from a file path or stdin ("-")."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> None:
    """Main execution flow.

    Exit codes:
        0: Success
        1: General error
        2: Invalid input
        4: Invalid arguments
    """
    args = parse_arguments(argv)

    # Setup logging (must be called before any logger usage)
    setup_logging(
        verbose=args.verbose,
        log_file=args.log_file,
        use_colors=True,
    )

    logger = get_logger(__name__)

    try:
        table = load_from_json(read_input(args.input))
    except (OSError, ValueError) as e:
        logger.error("Cannot read table from %s: %s", sanitize_for_log(args.input), sanitize_for_log(str(e)))
        sys.exit(ExitCode.INVALID_INPUT)

    try:
        column = parse_column_key(args.column)
        resolved = sort_table(
            table,
            column,
            order=args.order,
            natural_sort=args.natural_sort,
            recursive=args.recursive,
        )
        if resolved is None:
            logger.info("Table left unsorted")
        else:
            logger.info("Sorted %d rows by %s", table.get_row_count(), describe_key(resolved))

        json_data = export_to_json(table)
        if args.output:
            args.output.write_text(json_data, encoding="utf-8")
            logger.info("Exported to %s", sanitize_for_log(str(args.output)))
        else:
            print(json_data)

        sys.exit(ExitCode.SUCCESS)

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        sys.exit(ExitCode.GENERAL_ERROR)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Error during execution: %s", sanitize_for_log(str(e)))
        if args.verbose:
            traceback.print_exc()
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
