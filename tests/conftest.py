"""
Shared fixtures for duplicate-detection tests.
Creates isolated temporary directories with controlled test files.
"""
import builtins
import threading
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable
from unittest import mock

import pytest

from finddupes.core.hasher import FingerprinterImpl
from finddupes.core.models import FileRecord


@pytest.fixture
def temp_dir(tmp_path):
    """Isolated temporary directory, auto-cleanup after test."""
    return tmp_path


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical files of 1KB (duplicates)
    - 2 identical files of 2KB (duplicates)
    - 2 unique files
    - 2 empty files (never duplicates)
    - 1 .tmp file with the same content as the 1KB pair
    - 1 file in a subdirectory with the same content as the 1KB pair
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["empty1"] = temp_dir / "empty1.txt"
    files["empty1"].write_bytes(b"")
    files["empty2"] = temp_dir / "empty2.txt"
    files["empty2"].write_bytes(b"")

    files["tmp"] = temp_dir / "ignore.tmp"
    files["tmp"].write_bytes(content_a)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


def record_for(path: Path) -> FileRecord:
    """FileRecord for an existing file, as the scanner would build it."""
    resolved = path.resolve()
    return FileRecord(path=str(resolved), size=resolved.stat().st_size)


class CountingFingerprinter(FingerprinterImpl):
    """Real fingerprinter that counts calls per path (thread-safe)."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = Counter()
        self._lock = threading.Lock()

    def fingerprint(self, record):
        with self._lock:
            self.calls[record.path] += 1
        return super().fingerprint(record)

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


@pytest.fixture
def counting_fingerprinter():
    return CountingFingerprinter()


@pytest.fixture
def deny_access():
    """
    Makes selected paths fail with PermissionError when the hasher opens them.
    Works regardless of the user running the tests (root ignores chmod).
    """
    patches = []

    def _deny(paths: Iterable[Path]):
        denied = {str(Path(p).resolve()) for p in paths}
        real_open = builtins.open

        def fake_open(file, *args, **kwargs):
            if str(file) in denied:
                raise PermissionError(13, "Permission denied", str(file))
            return real_open(file, *args, **kwargs)

        patcher = mock.patch("finddupes.core.hasher.open", side_effect=fake_open, create=True)
        patches.append(patcher)
        return patcher.start()

    yield _deny

    for patcher in patches:
        patcher.stop()
