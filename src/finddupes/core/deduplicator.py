"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/deduplicator.py
Runs the two-stage pipeline (size → full-content fingerprint) over scanned
files and aggregates the result into a ScanReport.
"""
import time
from typing import List, Tuple, Optional

from finddupes.core.grouper import FileGrouperImpl
from finddupes.core.interfaces import Deduplicator, ProgressCallback
from finddupes.core.models import (
    FileRecord, SizeGroup, ScanReport, ScanStats
)
from finddupes.core.stages import SizeStageImpl, FingerprintStageImpl


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Finds duplicate files in two stages and collects statistics.
    Groups are reported in discovery order: size-group order first, then the
    order fingerprint groups were found within each size group.
    """
    def __init__(self, grouper: FileGrouperImpl = None, workers: Optional[int] = None):
        self.grouper = grouper or FileGrouperImpl()
        self.workers = workers

    def find_duplicates(
        self,
        files: List[FileRecord],
        progress_callback: Optional[ProgressCallback] = None,
        root_dir: str = ""
    ) -> Tuple[ScanReport, ScanStats]:
        """
        Main pipeline.
        Args:
            files: Scanned file records
            progress_callback: Reports progress per stage
            root_dir: Recorded on the report for display only
        Returns:
            Tuple[ScanReport, ScanStats]
        """
        stats = ScanStats()
        total_start_time = time.time()

        start_time = time.time()
        size_groups = SizeStageImpl(self.grouper).process(files, progress_callback=progress_callback)
        DeduplicatorImpl._update_stats(stats, "size", time.time() - start_time, size_groups)

        start_time = time.time()
        report = self.aggregate(size_groups, progress_callback=progress_callback)
        DeduplicatorImpl._update_stats(stats, "fingerprint", time.time() - start_time, report.groups)

        stats.total_time = time.time() - total_start_time
        report.root_dir = root_dir
        report.files_scanned = len(files)
        return report, stats

    def aggregate(
        self,
        size_groups: List[SizeGroup],
        progress_callback: Optional[ProgressCallback] = None
    ) -> ScanReport:
        """Applies the fingerprint stage to every size group and folds the result into a report."""
        stage = FingerprintStageImpl(self.grouper, workers=self.workers)
        groups, unreadable = stage.process(size_groups, progress_callback=progress_callback)
        return ScanReport(root_dir="", groups=groups, unreadable=unreadable)

    @staticmethod
    def _update_stats(stats: ScanStats, stage: str, duration: float, groups) -> None:
        stats.update_stage(
            stage_name=stage,
            groups_found=len(groups),
            files_processed=sum(len(g.files) for g in groups),
            duration=duration
        )
