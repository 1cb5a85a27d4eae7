"""
finddupes — duplicate file finder for storage cleanup audits.

Core features:
- Two-phase search: group by size, then by full-content fingerprint
- Concurrent fingerprinting with deterministic, reproducible report order
- Unreadable files are reported and skipped, never abort a scan
- Console report plus an optional plain duplicate-path log for scripts
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("finddupes")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Public API: only what users should import directly
from finddupes.commands import ScanCommand
from finddupes.core import (
    ScanParams, ScanReport, FileRecord, DuplicateGroup, ConfigurationError, FileAccessError
)
from finddupes.services import ConsoleReportSink, DuplicateLogSink
from finddupes.utils.convert_utils import ConvertUtils

__all__ = [
    "ScanCommand",
    "ScanParams",
    "ScanReport",
    "FileRecord",
    "DuplicateGroup",
    "ConfigurationError",
    "FileAccessError",
    "ConsoleReportSink",
    "DuplicateLogSink",
    "ConvertUtils",
    "__version__",
]
