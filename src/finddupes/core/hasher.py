"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hasher.py
Implements content fingerprinting using FileRecord objects and pluggable hash algorithms.

FingerprinterImpl streams the entire file through the chosen algorithm and
returns a tagged result (Fingerprinted or Unreadable) instead of raising, so a
single unreadable file never aborts a scan.
"""

import hashlib
import logging

import xxhash

from finddupes.core.errors import FileReadError, PermissionDeniedError
from finddupes.core.interfaces import HashAlgorithm, HashState, Fingerprinter
from finddupes.core.models import (
    FileRecord, Fingerprint, Fingerprinted, Unreadable, FingerprintResult, ScanConfig
)

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class HashlibAlgorithmImpl(HashAlgorithm):
    """Any algorithm available in hashlib (md5, sha1, sha256, ...)."""

    def __init__(self, name: str = ScanConfig.DEFAULT_ALGORITHM):
        hashlib.new(name)  # fail fast on unknown names
        self.name = name

    def new(self) -> HashState:
        return hashlib.new(self.name)


class XXHashAlgorithmImpl(HashAlgorithm):
    """xxHash64: much faster than cryptographic digests, 8-byte output."""
    name = "xxh64"

    def new(self) -> HashState:
        return xxhash.xxh64()


def get_algorithm(name: str) -> HashAlgorithm:
    """Returns the algorithm implementation for a CLI/config name."""
    if name == XXHashAlgorithmImpl.name:
        return XXHashAlgorithmImpl()
    return HashlibAlgorithmImpl(name)


class FingerprinterImpl(Fingerprinter):
    """
    A fingerprinter that supports any algorithm via the HashAlgorithm interface.
    Reads every byte of the file; results are never cached on the record,
    callers are expected to fingerprint each file once per scan.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = ScanConfig.READ_CHUNK_SIZE):
        self.algorithm = algorithm or HashlibAlgorithmImpl()
        self.chunk_size = chunk_size

    def fingerprint(self, record: FileRecord) -> FingerprintResult:
        """
        Computes the fingerprint of the full file content.

        Args:
            record: File to fingerprint

        Returns:
            Fingerprinted on success, Unreadable if the file could not be opened
            or read to completion (permission denied, deleted mid-scan, I/O fault)
        """
        state = self.algorithm.new()
        try:
            with open(record.path, 'rb') as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    state.update(chunk)
        except PermissionError as e:
            return Unreadable(record, PermissionDeniedError(record.path, e))
        except OSError as e:
            return Unreadable(record, FileReadError(record.path, e))

        return Fingerprinted(record, Fingerprint(state.digest(), self.algorithm.name))
