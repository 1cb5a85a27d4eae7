"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/stages.py
Pipeline stages for the two-phase duplicate search.

STAGES
------
SizeStageImpl       : Groups files by exact byte length. Zero-byte files and
                      singleton sizes are dropped here, so they are never hashed.
FingerprintStageImpl: Fingerprints every member of every size group on a thread
                      pool and splits each size group by fingerprint.

STAGE CONTRACTS
---------------
Each stage implements a `process()` method that:
  • Accepts the output of the previous stage
  • Returns refined groups for the next stage
  • Reports progress via callback (stage name, processed count, total count)

ORDERING
--------
Fingerprints are computed concurrently but collected in submission order, so
groups always come out in size-group order, then in first-seen fingerprint
order within each size group. Completion order never leaks into the result.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from finddupes.core.grouper import FileGrouperImpl
from finddupes.core.interfaces import SizeStage, FingerprintStage, ProgressCallback
from finddupes.core.models import FileRecord, SizeGroup, DuplicateGroup, Unreadable


class SizeStageImpl(SizeStage):
    stage_name = "Size grouping"

    def __init__(self, grouper: FileGrouperImpl):
        self.grouper = grouper

    def process(
            self,
            files: List[FileRecord],
            progress_callback: Optional[ProgressCallback] = None
    ) -> List[SizeGroup]:
        """
        Group by file size.
        Returns list of SizeGroups with 2+ non-empty files of same size.
        """
        size_groups = self.grouper.group_by_size(files)
        groups = [
            SizeGroup(size=size, files=tuple(files_list))
            for size, files_list in size_groups.items()
        ]

        if progress_callback:
            total_files = len(files)
            progress_callback(self.stage_name, total_files, total_files)

        return groups


class FingerprintStageImpl(FingerprintStage):
    stage_name = "Fingerprinting"

    def __init__(self, grouper: FileGrouperImpl, workers: Optional[int] = None):
        self.grouper = grouper
        self.workers = workers

    def process(
            self,
            groups: List[SizeGroup],
            progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[DuplicateGroup], List[Unreadable]]:
        confirmed_duplicates = []
        unreadable = []
        if not groups:
            return confirmed_duplicates, unreadable

        total_files = sum(len(g) for g in groups)
        processed_files = 0

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            # Submit every file of every group before collecting anything
            pending = [
                [executor.submit(self.grouper.fingerprinter.fingerprint, record) for record in group.files]
                for group in groups
            ]

            try:
                for group, futures in zip(groups, pending):
                    results = [future.result() for future in futures]
                    duplicates, failed = self.grouper.partition(group.size, results)
                    confirmed_duplicates.extend(duplicates)
                    unreadable.extend(failed)

                    processed_files += len(group)
                    if progress_callback:
                        progress_callback(self.stage_name, processed_files, total_files)
            except BaseException:
                # Queued fingerprints are cancelled; only the running ones finish
                executor.shutdown(wait=False, cancel_futures=True)
                raise

        return confirmed_duplicates, unreadable
