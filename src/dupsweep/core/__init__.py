"""
Core pipeline — scanner, hasher, sorter, grouper and deletion executor.

- FileScannerImpl: recursive directory traversal with an optional extension filter
- HasherImpl + XXHashAlgorithmImpl: streamed xxHash3-128 content digests
- Sorter: total (size, digest, path) ordering of the catalog
- DuplicateGrouperImpl: (size, digest) grouping with numbered members
- DeletionExecutor: removal by number with freed-space accounting

All components are pure Python with no console I/O, usable from any front end.
"""

from .errors import DupSweepError, TraversalError, DeletionError, StaleListingError, InputFormatError
from .models import FileRecord, DuplicateEntry, DuplicateListing, SortOrder, ScanParams
from .hasher import HasherImpl, XXHashAlgorithmImpl
from .scanner import FileScannerImpl
from .sorter import Sorter
from .grouper import DuplicateGrouperImpl
from .deleter import DeletionExecutor

__all__ = [
    "DupSweepError",
    "TraversalError",
    "DeletionError",
    "StaleListingError",
    "InputFormatError",
    "FileRecord",
    "DuplicateEntry",
    "DuplicateListing",
    "SortOrder",
    "ScanParams",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "FileScannerImpl",
    "Sorter",
    "DuplicateGrouperImpl",
    "DeletionExecutor",
]
