#!/usr/bin/env python3
"""
finddupes CLI — Command line interface for duplicate file detection.
Reports duplicate groups and potential space savings; never modifies files.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
import logging
from pathlib import Path
from typing import List, Optional, NoReturn

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from finddupes import __version__
from finddupes.commands import ScanCommand
from finddupes.core.errors import ConfigurationError
from finddupes.core.interfaces import ReportSink
from finddupes.core.models import ScanParams, ScanReport, ScanConfig
from finddupes.services.report_sink import ConsoleReportSink
from finddupes.aliases import (
    ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    LOG_LAYOUT_CHOICES, LOG_LAYOUT_HELP_TEXT,
    EPILOG_TEXT
)

package_logger = logging.getLogger("finddupes")


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="finddupes",
            description="finddupes — find duplicate files and report reclaimable space",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--path", "-p",
            default=".",
            type=str,
            help="Directory which will be searched for duplicate files. Default: current directory"
        )
        parser.add_argument(
            "--filter", "-f",
            default=ScanConfig.DEFAULT_PATTERN,
            type=str,
            help="Filename pattern for target files, e.g. *.txt. Default: all files"
        )
        parser.add_argument(
            "--recurse", "-r",
            action="store_true",
            help="Search recursively through all subdirectories"
        )

        # Fingerprinting options
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default=ScanConfig.DEFAULT_ALGORITHM,
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--workers",
            type=int,
            default=None,
            metavar='N',
            help="Number of fingerprinting threads. Default: Python's thread pool default"
        )

        # Output options
        parser.add_argument(
            "--duplicate-log",
            default=None,
            type=str,
            metavar='FILE',
            dest="duplicate_log",
            help="Also write only the duplicate file paths to FILE (e.g. for a cleanup script)"
        )
        parser.add_argument(
            "--log-layout",
            choices=LOG_LAYOUT_CHOICES,
            default="grouped",
            type=str,
            dest="log_layout",
            help=LOG_LAYOUT_HELP_TEXT
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress the console report and non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress, stage statistics and timing"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        # Missing root: message on stderr, no report, exit 0
        root_path = Path(args.path)
        if not root_path.exists():
            self.error_exit(f"Target directory '{args.path}' does not exist.", code=0)
        if not root_path.is_dir():
            self.error_exit(f"Target path '{args.path}' is not a directory.", code=0)

        if args.workers is not None and args.workers < 1:
            self.error_exit("--workers must be at least 1")

        if args.duplicate_log:
            log_parent = Path(args.duplicate_log).resolve().parent
            if not log_parent.is_dir():
                self.error_exit(f"Directory for duplicate log not found: {log_parent}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=args.path,
                pattern=args.filter,
                recursive=args.recurse,
                algorithm=args.algorithm,
                workers=args.workers,
                duplicate_log=args.duplicate_log,
                log_layout=args.log_layout,
            )
        except ConfigurationError as e:
            self.error_exit(f"Parameter error: {e}")

    def create_sinks(self) -> List[ReportSink]:
        """Console listing unless --quiet; the duplicate log comes from ScanParams."""
        return [] if self.quiet else [ConsoleReportSink()]

    def configure_logging(self) -> None:
        """Per-file warnings by default, progress details with --verbose, errors only with --quiet."""
        if self.verbose:
            package_logger.setLevel(logging.INFO)
        elif self.quiet:
            package_logger.setLevel(logging.ERROR)
        else:
            package_logger.setLevel(logging.WARNING)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> ScanReport:
        """Execute the scan workflow."""
        command = ScanCommand(sinks=self.create_sinks())
        if not self.quiet:
            print(f"Compiling list of files in {Path(params.root_dir).resolve()} ...")

        try:
            report, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except ConfigurationError as e:
            self.error_exit(str(e), code=0)

        if self.verbose:
            sys.stderr.write("\n")
            print(f"\nTotal files: {report.files_scanned}")
            print(stats.print_summary())

        if report.unreadable:
            self.warning(f"{len(report.unreadable)} file(s) could not be read and were skipped")

        return report

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        self.configure_logging()
        params = self.create_params(args)

        self.run_scan(params)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
