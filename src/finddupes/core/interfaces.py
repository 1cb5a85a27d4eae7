"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate search.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashAlgorithm: Standardized interface for streaming hash functions (MD5, SHA-256, xxHash).
- Fingerprinter: Interface for turning a file into a Fingerprinted or Unreadable result.
- FileScanner: Interface for scanning directories and returning file records.
- FileGrouper: Interface for grouping files by size or fingerprint.
- SizeStage / FingerprintStage: Interfaces for the two stages of the pipeline.
- Deduplicator: Interface for the engine coordinating both stages.
- ReportSink: Interface for anything that consumes a finished ScanReport.
"""

from typing import Protocol, List, Dict, Tuple, Optional, Callable
from finddupes.core.models import (
    FileRecord,
    FingerprintResult,
    Unreadable,
    SizeGroup,
    DuplicateGroup,
    ScanReport,
    ScanStats,
)

ProgressCallback = Callable[[str, int, Optional[int]], None]


# ===== Interfaces =====

class HashState(Protocol):
    """Incremental hash object (hashlib and xxhash objects both satisfy it)."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, MD5, or xxHash
    without affecting the rest of the pipeline.
    """
    name: str

    def new(self) -> HashState:
        """Returns a fresh incremental hash object."""
        ...


class Fingerprinter(Protocol):
    """Interface for computing the content fingerprint of one file."""
    def fingerprint(self, record: FileRecord) -> FingerprintResult: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting file metadata.
    """
    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[FileRecord]:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Records of all files matching the filters, in a reproducible order.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by size or by content fingerprint.
    """
    def group_by_size(self, files: List[FileRecord]) -> Dict[int, List[FileRecord]]:
        """Group non-empty files by their size in bytes (2+ members only)."""
        ...

    def group_by_fingerprint(self, group: SizeGroup) -> List[DuplicateGroup]:
        """Split one size group into groups of identical content (2+ members only)."""
        ...


# =============================
# Stage Interfaces
# =============================

class SizeStage(Protocol):
    """
    First stage of the pipeline: grouping files by size.
    """
    def process(
        self,
        files: List[FileRecord],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[SizeGroup]:
        """
        Group files by size to find initial duplicate candidates.

        Returns:
            List of groups where each contains 2+ non-empty files of the same size.
        """
        ...


class FingerprintStage(Protocol):
    """
    Second stage of the pipeline: splitting size groups by content fingerprint.
    """
    def process(
        self,
        groups: List[SizeGroup],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[DuplicateGroup], List[Unreadable]]:
        """
        Fingerprint every member of every size group.

        Returns:
            A tuple containing:
                - confirmed duplicate groups, in size-group order
                - Unreadable results for files that could not be fingerprinted
        """
        ...


class Deduplicator(Protocol):
    """
    Interface for the main engine coordinating size and fingerprint stages.
    """
    def find_duplicates(
        self,
        files: List[FileRecord],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[ScanReport, ScanStats]:
        """
        Run the full pipeline over the scanned files.

        Returns:
            A tuple containing:
                - the ScanReport with duplicate groups and unreadable files
                - statistics collected during processing
        """
        ...


class ReportSink(Protocol):
    """Consumes a finished ScanReport (console listing, duplicate log, ...)."""
    def emit(self, report: ScanReport) -> None: ...
