"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements file enumeration using pathlib and os.walk.
Features:
- Optionally recurses into subdirectories
- Applies a shell-style filename filter (e.g. "*.txt")
- Visits directories and files in sorted order, so results are reproducible
- Returns a List of FileRecord objects
"""

import os
import time
import logging
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional

from finddupes.core.errors import ConfigurationError
from finddupes.core.interfaces import FileScanner, ProgressCallback
from finddupes.core.models import FileRecord, ScanConfig

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans a directory (optionally recursively) and filters files by name pattern.

    Attributes:
        root_dir: Root directory to scan
        pattern: Shell-style filename pattern, "*" for all files
        recursive: Whether to descend into subdirectories
    """

    progress_interval = 5000  # Update every 5,000 files

    def __init__(self, root_dir: str, pattern: str = ScanConfig.DEFAULT_PATTERN, recursive: bool = False):
        self.root_dir = root_dir
        self.pattern = pattern or ScanConfig.DEFAULT_PATTERN
        self.recursive = recursive

    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[FileRecord]:
        """
        Returns a filtered list of files found under the root directory.

        Raises:
            ConfigurationError: if the root does not exist or is not a directory
        """
        root_path = Path(self.root_dir)
        if not root_path.exists():
            raise ConfigurationError(f"Target directory '{self.root_dir}' does not exist.")
        if not root_path.is_dir():
            raise ConfigurationError(f"Target path '{self.root_dir}' is not a directory.")

        root_path = root_path.resolve()
        logger.debug(f"Scanning {root_path} (pattern={self.pattern}, recursive={self.recursive})")

        found_files = []
        processed_files = 0
        progress_counter = 0
        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            if self.recursive:
                dirs[:] = sorted(d for d in dirs if self._prefilter_dirs(Path(root) / d))
            else:
                dirs[:] = []

            for filename in sorted(files):
                record = self._process_file(Path(root) / filename)
                if record:
                    found_files.append(record)
                processed_files += 1
                progress_counter += 1

                if progress_callback and progress_counter >= self.progress_interval:
                    progress_callback("Scanning", processed_files, None)
                    progress_counter = 0

        # Final update for small datasets
        if progress_callback and progress_counter > 0:
            progress_callback("Scanning", processed_files, None)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} matching files.")
        return found_files

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Skipping inaccessible directory: {error}")

    @staticmethod
    def _prefilter_dirs(path: Path) -> bool:
        """Skip symlinked directories to avoid loops and double counting."""
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symlinked directory: {path}")
                return False
            return True
        except OSError:
            logger.debug(f"Skipping inaccessible directory: {path}")
            return False

    def _process_file(self, path: Path) -> Optional[FileRecord]:
        """
        Process an individual file path and return a FileRecord if it passes the filter.
        Zero-byte files are kept here; the size stage discards them.
        """
        if not fnmatch(path.name, self.pattern):
            return None

        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            stat_result = path.stat()
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        if not path.is_file():
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        return FileRecord(path=str(path), size=stat_result.st_size)
