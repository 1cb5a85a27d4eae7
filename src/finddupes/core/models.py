"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union, Tuple
import os

from finddupes.core.errors import ConfigurationError, FileAccessError


# =============================
# Configuration
# =============================

class ScanConfig:
    READ_CHUNK_SIZE = 1024 * 1024  # Files are streamed through the hash in 1MB reads
    DEFAULT_ALGORITHM = "md5"
    DEFAULT_PATTERN = "*"
    ALGORITHMS = ("md5", "sha1", "sha256", "xxh64")
    LOG_LAYOUTS = ("grouped", "flat")


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single candidate file on the file system.
    Immutable once enumerated; the path is resolved and absolute.
    """
    path: str
    size: int  # in bytes

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class Fingerprint:
    """Opaque content digest. Only equality and the printable form matter."""
    digest: bytes
    algorithm: str = ScanConfig.DEFAULT_ALGORITHM

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()

    def __str__(self) -> str:
        return self.hexdigest


@dataclass(frozen=True)
class Fingerprinted:
    """Successful fingerprint result."""
    record: FileRecord
    fingerprint: Fingerprint

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Unreadable:
    """The file could not be read to completion; it is excluded from grouping."""
    record: FileRecord
    error: FileAccessError

    @property
    def ok(self) -> bool:
        return False

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def reason(self) -> str:
        return self.error.reason


FingerprintResult = Union[Fingerprinted, Unreadable]


@dataclass(frozen=True)
class SizeGroup:
    """Two or more non-empty files sharing an identical byte length."""
    size: int
    files: Tuple[FileRecord, ...]

    def __len__(self) -> int:
        return len(self.files)

    def __repr__(self):
        return f"<SizeGroup size={self.size}, count={len(self.files)}>"


@dataclass
class DuplicateGroup:
    """
    A group of files with identical fingerprints.
    All files in the group have the same size (guaranteed by the size stage).
    """
    size: int
    files: List[FileRecord]
    fingerprint: Optional[Fingerprint] = None

    @property
    def file_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def total_size(self) -> int:
        """Disk space occupied by every copy."""
        return self.size * self.file_count

    @property
    def potential_savings(self) -> int:
        """Space reclaimable by keeping exactly one copy."""
        return self.total_size - self.size

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.files)}>"


@dataclass
class ScanReport:
    """Complete output of one scan: duplicate groups plus aggregate metrics."""
    root_dir: str
    groups: List[DuplicateGroup] = field(default_factory=list)
    unreadable: List[Unreadable] = field(default_factory=list)
    files_scanned: int = 0
    elapsed: float = 0.0

    @property
    def total_duplicate_files(self) -> int:
        return sum(g.file_count for g in self.groups)

    @property
    def total_occupied_space(self) -> int:
        return sum(g.total_size for g in self.groups)

    @property
    def total_potential_savings(self) -> int:
        return sum(g.potential_savings for g in self.groups)

    def membership(self) -> List[List[str]]:
        """Group membership as plain paths, in report order."""
        return [g.paths for g in self.groups]


class ScanStats:
    """
    Statistics collected during the duplicate search.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration

    def print_summary(self) -> str:
        labels = {
            "size": "📁 Size Groups",
            "fingerprint": "🔍 Fingerprint Groups",
        }

        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage.lower(), stage.title())
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


# =============================
# Scan parameters (DTO)
# =============================

@dataclass
class ScanParams:
    """Parameters for one scan, validated on creation."""
    root_dir: str
    pattern: str = ScanConfig.DEFAULT_PATTERN
    recursive: bool = False
    algorithm: str = ScanConfig.DEFAULT_ALGORITHM
    workers: Optional[int] = None
    duplicate_log: Optional[str] = None
    log_layout: str = "grouped"

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ConfigurationError("Root directory cannot be empty")

        self.pattern = (self.pattern or "").strip() or ScanConfig.DEFAULT_PATTERN

        self.algorithm = self.algorithm.strip().lower()
        if self.algorithm not in ScanConfig.ALGORITHMS:
            raise ConfigurationError(
                f"Unknown algorithm '{self.algorithm}'. "
                f"Valid options: {', '.join(ScanConfig.ALGORITHMS)}"
            )

        if self.workers is not None and self.workers < 1:
            raise ConfigurationError("Worker count must be at least 1")

        if self.log_layout not in ScanConfig.LOG_LAYOUTS:
            raise ConfigurationError(
                f"Unknown log layout '{self.log_layout}'. "
                f"Valid options: {', '.join(ScanConfig.LOG_LAYOUTS)}"
            )
