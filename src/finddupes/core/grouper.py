"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements file grouping by size and by content fingerprint.
"""

import logging
from collections import defaultdict
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Dict, Tuple, Any, Callable, Optional, Sequence

from finddupes.core.hasher import FingerprinterImpl
from finddupes.core.interfaces import FileGrouper, Fingerprinter
from finddupes.core.models import (
    FileRecord, SizeGroup, DuplicateGroup, FingerprintResult, Unreadable
)

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper.
    Uses an injected Fingerprinter instance for flexibility and testability.
    """

    def __init__(self, fingerprinter: Fingerprinter = None):
        self.fingerprinter = fingerprinter or FingerprinterImpl()

    def group_by_size(self, files: List[FileRecord]) -> Dict[int, List[FileRecord]]:
        """Groups non-empty files by their size. Empty files never match anything."""
        return self._group_by(files, lambda f: f.size if f.size > 0 else None)

    def group_by_fingerprint(self, group: SizeGroup, executor: Optional[Executor] = None) -> List[DuplicateGroup]:
        """
        Fingerprints every member of a size group and returns the duplicate groups.
        Unreadable files are logged and dropped; use fingerprint_all() and
        partition() directly to keep them.
        """
        if executor is None:
            with ThreadPoolExecutor() as pool:
                results = self.fingerprint_all(group.files, pool)
        else:
            results = self.fingerprint_all(group.files, executor)
        duplicates, _ = self.partition(group.size, results)
        return duplicates

    def fingerprint_all(self, files: Sequence[FileRecord], executor: Executor) -> List[FingerprintResult]:
        """Fingerprints files concurrently; results keep the input order."""
        return list(executor.map(self.fingerprinter.fingerprint, files))

    def partition(
            self,
            size: int,
            results: List[FingerprintResult]
    ) -> Tuple[List[DuplicateGroup], List[Unreadable]]:
        """
        Splits fingerprint results into duplicate groups (2+ identical fingerprints)
        and the list of files that could not be read.
        """
        unreadable = []
        readable = []
        for result in results:
            if result.ok:
                readable.append(result)
            else:
                logger.warning(f"{result.error.label} >>> {result.path} ({result.reason})")
                unreadable.append(result)

        groups = self._group_by(readable, lambda r: r.fingerprint)
        duplicates = [
            DuplicateGroup(size=size, files=[r.record for r in members], fingerprint=fingerprint)
            for fingerprint, members in groups.items()
        ]
        return duplicates, unreadable

    @staticmethod
    def _group_by(items: List[Any], key_func: Callable[[Any], Any]) -> Dict[Any, List[Any]]:
        """
        Helper method to group items by any computed key.
        Args:
            items: List of items to group
            key_func: Function that computes a hashable key, or None to skip the item
        Returns:
            Dict[key, List] with groups of 2+ items, in first-seen key order
        """
        groups = defaultdict(list)
        for item in items:
            key = key_func(item)
            if key is not None:
                groups[key].append(item)

        return {key: group for key, group in groups.items() if len(group) >= 2}
