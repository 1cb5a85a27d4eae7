"""
Core duplicate-detection engine — scanner, fingerprinter, grouper, and pipeline orchestrator.

This package contains the performance-critical foundation of finddupes:
- FileScannerImpl: directory enumeration with a filename filter and optional recursion
- FingerprinterImpl: full-content hashing (hashlib digests or xxHash64)
- FileGrouperImpl: size and fingerprint grouping with singleton filtering
- DeduplicatorImpl: two-stage pipeline (size → fingerprint) on a thread pool
- Models: FileRecord, SizeGroup, DuplicateGroup, ScanReport and configuration objects

All components are pure Python with no output side effects — suitable for CLI and library usage.
"""

from .errors import (
    FinddupesError, ConfigurationError, FileAccessError, PermissionDeniedError, FileReadError
)
from .models import (
    FileRecord, Fingerprint, Fingerprinted, Unreadable, FingerprintResult,
    SizeGroup, DuplicateGroup, ScanReport, ScanStats, ScanParams, ScanConfig)
from .scanner import FileScannerImpl
from .hasher import FingerprinterImpl, HashlibAlgorithmImpl, XXHashAlgorithmImpl, get_algorithm
from .grouper import FileGrouperImpl
from .stages import SizeStageImpl, FingerprintStageImpl
from .deduplicator import DeduplicatorImpl

__all__ = [
    "FinddupesError",
    "ConfigurationError",
    "FileAccessError",
    "PermissionDeniedError",
    "FileReadError",
    "FileRecord",
    "Fingerprint",
    "Fingerprinted",
    "Unreadable",
    "FingerprintResult",
    "SizeGroup",
    "DuplicateGroup",
    "ScanReport",
    "ScanStats",
    "ScanParams",
    "ScanConfig",
    "FileScannerImpl",
    "FingerprinterImpl",
    "HashlibAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "FileGrouperImpl",
    "SizeStageImpl",
    "FingerprintStageImpl",
    "DeduplicatorImpl",
]
