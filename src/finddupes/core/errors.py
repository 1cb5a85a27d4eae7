"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for scanning and fingerprinting.
"""

from typing import Optional


class FinddupesError(Exception):
    """Base class for all finddupes errors."""


class ConfigurationError(FinddupesError):
    """Scan cannot start: missing root directory or invalid parameters."""


class FileAccessError(FinddupesError):
    """
    A single file could not be read to completion.
    Never raised across the pipeline: it is carried inside an Unreadable result
    so one bad file does not abort the whole scan.
    """
    label = "ERROR"

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        reason = str(cause) if cause is not None else "unknown error"
        super().__init__(f"{path}: {reason}")

    @property
    def reason(self) -> str:
        if self.cause is None:
            return "unknown error"
        return getattr(self.cause, "strerror", None) or str(self.cause)


class PermissionDeniedError(FileAccessError):
    label = "ACCESS DENIED"


class FileReadError(FileAccessError):
    label = "READ ERROR"
