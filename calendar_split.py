#!/usr/bin/env python3
"""
Calendar Split - Split a course calendar into one calendar per class.

Events are grouped by the class code in brackets in their summary, e.g.
"Final Exam [2025FallC-X-CSE360-77646]". Everything without a class code
goes to the no_associated_class calendar.

This is the main entry point for the application.
"""

import sys
import argparse
from pathlib import Path

from calsplit.calendar_source import CalendarSource
from calsplit.config import Config
from calsplit.debug import set_debug
from calsplit.errors import CalendarSplitError
from calsplit.output_storage import create_calendar_writer
from calsplit.splitter import split_document


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="calendar-split",
        description="Calendar Split - Split a calendar into one calendar per class code"
    )
    parser.add_argument(
        "calendar",
        help="Path or URL of the calendar to split"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def report_written(identifier: str, path: Path):
    print(f"Calendar created: {path}")


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    set_debug(args.debug)

    try:
        config = Config.load(args.config)

        if args.debug:
            print(f"Loaded configuration from: {config.source_path or 'built-in defaults'}", file=sys.stderr)
            print(f"  Output directory: {config.output.directory}", file=sys.stderr)

        document = CalendarSource(args.calendar).parse()
        writer = create_calendar_writer(config.output.directory, config.output.extension)
        split_document(document, writer, config.header, on_written=report_written)
    except CalendarSplitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
