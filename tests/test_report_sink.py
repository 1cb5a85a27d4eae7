"""
Tests for the report sinks: console listing and the duplicate-path log.
"""
import io

import pytest

from finddupes.core.errors import PermissionDeniedError
from finddupes.core.models import DuplicateGroup, FileRecord, ScanReport, Unreadable
from finddupes.services.report_sink import ConsoleReportSink, DuplicateLogSink


@pytest.fixture
def report():
    group1 = DuplicateGroup(size=100, files=[
        FileRecord(path="/data/a.txt", size=100),
        FileRecord(path="/data/b.txt", size=100),
    ])
    group2 = DuplicateGroup(size=2048, files=[
        FileRecord(path="/data/x.bin", size=2048),
        FileRecord(path="/data/y.bin", size=2048),
        FileRecord(path="/data/sub/z.bin", size=2048),
    ])
    locked = FileRecord(path="/data/locked.txt", size=100)
    return ScanReport(
        root_dir="/data",
        groups=[group1, group2],
        unreadable=[Unreadable(locked, PermissionDeniedError(locked.path, PermissionError(13, "Permission denied")))],
        files_scanned=9,
        elapsed=1.5,
    )


class TestConsoleReportSink:

    def test_lists_groups_in_order_with_metrics(self, report):
        out = io.StringIO()
        ConsoleReportSink(out).emit(report)
        text = out.getvalue()

        assert "Found 2 duplicate groups (5 files)" in text
        assert (
            "Group 1 | Individual File Size: 100 bytes (100B)"
            " | Total Space (Group): 200 bytes (200B)"
            " | Potential Space Savings: 100 bytes (100B)"
        ) in text
        assert (
            "Group 2 | Individual File Size: 2048 bytes (2.00KB)"
            " | Total Space (Group): 6144 bytes (6.00KB)"
            " | Potential Space Savings: 4096 bytes (4.00KB)"
        ) in text
        assert text.index("/data/a.txt") < text.index("/data/b.txt") < text.index("/data/x.bin")
        assert text.index("Group 1") < text.index("Group 2")

    def test_footer_totals_and_time(self, report):
        out = io.StringIO()
        ConsoleReportSink(out).emit(report)
        text = out.getvalue()

        assert "Total space occupied by duplicates: 6344 bytes" in text
        assert "Total potential space savings: 4196 bytes" in text
        assert "Skipped unreadable files: 1" in text
        assert "Execution Time: 1.50s" in text

    def test_no_duplicates(self):
        out = io.StringIO()
        ConsoleReportSink(out).emit(ScanReport(root_dir="/empty", elapsed=0.01))
        text = out.getvalue()

        assert "No duplicate groups found." in text
        assert "Total potential space savings: 0 bytes" in text

    def test_defaults_to_stdout(self, report, capsys):
        ConsoleReportSink().emit(report)

        assert "/data/sub/z.bin" in capsys.readouterr().out

    def test_does_not_mutate_report(self, report):
        before = report.membership()
        ConsoleReportSink(io.StringIO()).emit(report)

        assert report.membership() == before


class TestDuplicateLogSink:

    def test_grouped_layout(self, report, tmp_path):
        log = tmp_path / "dupes.txt"
        DuplicateLogSink(str(log), layout="grouped").emit(report)

        assert log.read_text(encoding="utf-8") == (
            "/data/a.txt\n"
            "/data/b.txt\n"
            "\n"
            "/data/x.bin\n"
            "/data/y.bin\n"
            "/data/sub/z.bin\n"
        )

    def test_flat_layout(self, report, tmp_path):
        log = tmp_path / "dupes.txt"
        DuplicateLogSink(str(log), layout="flat").emit(report)

        assert log.read_text(encoding="utf-8").splitlines() == [
            "/data/a.txt", "/data/b.txt", "/data/x.bin", "/data/y.bin", "/data/sub/z.bin"
        ]

    def test_only_duplicate_paths_written(self, report, tmp_path):
        log = tmp_path / "dupes.txt"
        DuplicateLogSink(str(log)).emit(report)

        assert "locked.txt" not in log.read_text(encoding="utf-8")

    def test_empty_report_writes_empty_file(self, tmp_path):
        log = tmp_path / "dupes.txt"
        DuplicateLogSink(str(log)).emit(ScanReport(root_dir="/"))

        assert log.exists()
        assert log.read_text(encoding="utf-8") == ""

    def test_overwrites_existing_log(self, report, tmp_path):
        log = tmp_path / "dupes.txt"
        log.write_text("stale\n", encoding="utf-8")
        DuplicateLogSink(str(log), layout="flat").emit(report)

        assert "stale" not in log.read_text(encoding="utf-8")

    def test_unknown_layout_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            DuplicateLogSink(str(tmp_path / "x.txt"), layout="csv")
