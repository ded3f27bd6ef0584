"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate sweep pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
any component can be swapped (e.g. a different hash algorithm in tests).

Key Components:
---------------
- HashState / HashAlgorithm: incremental hash function (xxHash3-128 by default).
- Hasher: streams a file or binary source through a HashAlgorithm.
- FileScanner: walks a directory tree and returns the file catalog.
- DuplicateGrouper: partitions the catalog into numbered duplicate sets.
"""

from typing import Protocol, List, Optional, Callable, BinaryIO
from dupsweep.core.models import FileRecord, DuplicateListing


# ===== Interfaces =====

class HashState(Protocol):
    """Incremental hash object, fed chunk by chunk."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic streaming hash algorithms.

    Allows plugging in different hashing functions like BLAKE2 or xxHash
    without affecting the rest of the pipeline. Output must be at least 128 bits wide.
    """

    digest_size: int

    def new(self) -> HashState:
        """Returns a fresh hash state."""
        ...


class Hasher(Protocol):
    """Interface for computing a fixed-length content digest."""
    def digest_stream(self, stream: BinaryIO) -> bytes: ...
    def digest_file(self, path: str) -> bytes: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting file metadata.

    Methods:
        scan: Scans and returns the unsorted catalog of files.
    """
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[FileRecord]:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            List of FileRecord for every matching regular file.

        Raises:
            TraversalError: root inaccessible or any file unreadable.
        """
        ...


class DuplicateGrouper(Protocol):
    """
    Interface for grouping byte-identical files.
    """
    def group(self, records: List[FileRecord]) -> DuplicateListing:
        """Return members of every set sharing (size, digest), numbered from 1."""
        ...
