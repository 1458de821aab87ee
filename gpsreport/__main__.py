#!/usr/bin/env python3
"""gpsreport - GPS coordinate report for a directory of images.

Scans ./images recursively, reads GPS coordinates from EXIF metadata and
writes them to a CSV file plus an HTML page showing each image.

Usage:
    python -m gpsreport
    python -m gpsreport -csv report.csv
"""

import sys
import logging
import argparse
from typing import List, Optional

from .config import ConfigManager, ConfigError
from .exceptions import ReportWriteError, ScanError
from .processing import GpsReportProcessor
from .report import derive_html_path, write_csv, write_html

_console_handler: Optional[logging.Handler] = None


def setup_logging(config: Optional[ConfigManager] = None) -> None:
    """Configure logging for the application.

    Per-file progress and failure lines go to stderr.

    Args:
        config: Configuration providing ``logging.level``
    """
    global _console_handler

    level_name = config.get("logging.level", "INFO") if config else "INFO"
    level = logging.getLevelName(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace the handler from a previous run in the same process
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s - %(name)s - %(message)s')
    )
    root_logger.addHandler(console_handler)
    _console_handler = console_handler


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="gpsreport",
        description="Extract GPS coordinates from the images in ./images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write output.csv and output.html
  python -m gpsreport

  # Write trip.csv and trip.html
  python -m gpsreport -csv trip.csv
"""
    )

    parser.add_argument(
        "-csv", "--csv",
        dest="csv",
        metavar="PATH",
        default="output.csv",
        help="output CSV file (default: output.csv); the HTML file name is derived from it"
    )

    return parser.parse_args(argv)


def print_summary(stats) -> None:
    """Print processing summary.

    Args:
        stats: ProcessingStats object
    """
    print()
    print("=" * 60)
    print("Scan Summary")
    print("=" * 60)
    print(f"Directory:        {stats.root}")
    print(f"Images scanned:   {stats.total_files}")
    print(f"With GPS data:    {stats.collected}")

    if stats.skipped > 0:
        print(f"Skipped:          {stats.skipped}")
        for kind, count in sorted(stats.skipped_by_kind.items()):
            print(f"  {kind:<16}{count}")

    print(f"Processing time:  {stats.processing_time:.2f}s")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the gpsreport CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_arguments(argv)
    logger = logging.getLogger(__name__)

    try:
        config = ConfigManager.load({"output": {"csv": args.csv}})
    except ConfigError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        return 2

    setup_logging(config)
    csv_path = config.get("output.csv")

    try:
        # The root is validated before any output file is created
        processor = GpsReportProcessor(config)
        stats = processor.process_directory()
        print_summary(stats)

        write_csv(stats.records, csv_path)
        print(f"CSV file '{csv_path}' generated successfully.")

        html_path = derive_html_path(csv_path)
        try:
            write_html(stats.records, html_path)
            print(f"HTML file '{html_path}' generated successfully.")
        except ReportWriteError as e:
            logger.error(f"HTML report not generated: {e}")

    except ScanError as e:
        logger.error(f"failed to walk through dir & sub-dir: {e}")
        return 1

    except ReportWriteError as e:
        logger.error(f"Report error: {e}")
        return 1

    except KeyboardInterrupt:
        print()
        print("Processing interrupted by user")
        return 130

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
