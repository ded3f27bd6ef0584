"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception taxonomy for the scan → group → delete pipeline.
All core errors are terminal for the operation that raised them; nothing retries.
"""
from typing import Optional


class DupSweepError(Exception):
    """Base class for every error raised by dupsweep."""


class TraversalError(DupSweepError):
    """Root directory is inaccessible or a file could not be read mid-walk."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DeletionError(DupSweepError):
    """
    A selected file could not be removed.
    `freed_bytes` holds the space already freed by this call before the failure.
    """

    def __init__(self, message: str, path: str, freed_bytes: int = 0):
        super().__init__(message)
        self.path = path
        self.freed_bytes = freed_bytes


class StaleListingError(DupSweepError):
    """Duplicate listing was already used for deletion and must be rebuilt from a fresh scan."""


class InputFormatError(DupSweepError, ValueError):
    """Malformed interactive input. Boundary only: recovered by prompting again."""
