"""
Unified command orchestrator for a duplicate scan.
This is the SINGLE source of truth for the scan workflow — the CLI and library
users go through the same code path.
"""
import time
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from finddupes.core.deduplicator import DeduplicatorImpl
from finddupes.core.grouper import FileGrouperImpl
from finddupes.core.hasher import FingerprinterImpl, get_algorithm
from finddupes.core.interfaces import ProgressCallback, ReportSink
from finddupes.core.models import FileRecord, ScanParams, ScanReport, ScanStats
from finddupes.core.scanner import FileScannerImpl
from finddupes.services.report_sink import DuplicateLogSink

logger = logging.getLogger(__name__)


class ScanCommand:
    """
    Orchestrates the entire scan workflow:
    1. Enumerate files under the root directory
    2. Group by size, then by full-content fingerprint
    3. Hand the finished report to every sink, including the duplicate log
       requested by params.duplicate_log

    Usage:
        params = ScanParams(root_dir="~/Downloads", recursive=True)
        command = ScanCommand(sinks=[ConsoleReportSink()])
        report, stats = command.execute(params, progress_callback=cli_progress_printer)
    """

    def __init__(self, sinks: Optional[Sequence[ReportSink]] = None):
        self.sinks: List[ReportSink] = list(sinks or [])
        self._files: List[FileRecord] = []

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[ScanReport, ScanStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (report, statistics)

        Raises:
            ConfigurationError: If the root directory does not exist; nothing is
                scanned and no sink is called
        """
        start_time = time.time()

        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            pattern=params.pattern,
            recursive=params.recursive
        )
        self._files = scanner.scan(progress_callback=progress_callback)
        logger.info(f"Total files: {len(self._files)}. Searching for duplicates ...")

        fingerprinter = FingerprinterImpl(get_algorithm(params.algorithm))
        deduplicator = DeduplicatorImpl(FileGrouperImpl(fingerprinter), workers=params.workers)
        report, stats = deduplicator.find_duplicates(
            self._files,
            progress_callback=progress_callback,
            root_dir=str(Path(params.root_dir).resolve())
        )
        report.elapsed = time.time() - start_time

        for sink in self.create_sinks(params):
            sink.emit(report)

        return report, stats

    def create_sinks(self, params: ScanParams) -> List[ReportSink]:
        """Injected sinks, plus the duplicate log when params ask for one."""
        sinks = list(self.sinks)
        if params.duplicate_log:
            sinks.append(DuplicateLogSink(params.duplicate_log, layout=params.log_layout))
        return sinks

    def get_files(self) -> List[FileRecord]:
        """Get scanned files after execution."""
        return self._files.copy()
