from .report_sink import ConsoleReportSink, DuplicateLogSink

__all__ = ["ConsoleReportSink", "DuplicateLogSink"]
