"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_sink.py
Report sinks: everything that turns a finished ScanReport into output.
Sinks are passed to the command explicitly; none of them mutate the report.
"""
import sys
import logging
from pathlib import Path
from typing import TextIO, Optional

from finddupes.core.interfaces import ReportSink
from finddupes.core.models import ScanReport, ScanConfig
from finddupes.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


def _size(size_bytes: int) -> str:
    return f"{size_bytes} bytes ({ConvertUtils.bytes_to_human(size_bytes)})"


class ConsoleReportSink(ReportSink):
    """Human-readable listing of every duplicate group plus totals."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def emit(self, report: ScanReport) -> None:
        out = self.stream or sys.stdout

        if not report.groups:
            print("No duplicate groups found.", file=out)
        else:
            print(
                f"\nFound {len(report.groups)} duplicate groups "
                f"({report.total_duplicate_files} files)",
                file=out
            )

        for idx, group in enumerate(report.groups, 1):
            print(
                f"\n📁 Group {idx} | Individual File Size: {_size(group.size)}"
                f" | Total Space (Group): {_size(group.total_size)}"
                f" | Potential Space Savings: {_size(group.potential_savings)}",
                file=out
            )
            for path in group.paths:
                print(f"   {path}", file=out)

        print("", file=out)
        print("=" * 60, file=out)
        print(f"Total space occupied by duplicates: {_size(report.total_occupied_space)}", file=out)
        print(f"Total potential space savings: {_size(report.total_potential_savings)}", file=out)
        if report.unreadable:
            print(f"Skipped unreadable files: {len(report.unreadable)}", file=out)
        print(f"Execution Time: {ConvertUtils.seconds_to_human(report.elapsed)}", file=out)


class DuplicateLogSink(ReportSink):
    """
    Writes only the paths of duplicate files, one per line, for downstream
    tooling such as a cleanup script.

    Layouts:
        grouped : each group's paths form a block, blocks separated by a blank line
        flat    : all paths, no separators
    """

    def __init__(self, path: str, layout: str = "grouped"):
        if layout not in ScanConfig.LOG_LAYOUTS:
            raise ValueError(f"Unknown duplicate log layout: {layout}")
        self.path = Path(path)
        self.layout = layout

    def emit(self, report: ScanReport) -> None:
        lines = []
        for idx, group in enumerate(report.groups):
            if self.layout == "grouped" and idx > 0:
                lines.append("")
            lines.extend(group.paths)

        content = "\n".join(lines) + ("\n" if lines else "")
        self.path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {report.total_duplicate_files} duplicate paths to {self.path}")
