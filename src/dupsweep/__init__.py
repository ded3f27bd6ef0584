"""
dupsweep — duplicate file finder for the console.

Core features:
- Streamed xxHash3-128 fingerprints of every file under a root directory
- Deterministic catalog ordering by size, digest and path
- Numbered duplicate sets and deletion by number with freed-space accounting
- Permanent deletion or safe deletion to system trash (via send2trash)
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dupsweep")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dupsweep.commands import DuplicateSweepCommand
from dupsweep.core import (
    ScanParams, SortOrder, FileRecord, DuplicateEntry, DuplicateListing,
    DupSweepError, TraversalError, DeletionError, StaleListingError, InputFormatError,
)
from dupsweep.services.file_service import FileService

__all__ = [
    "DuplicateSweepCommand",
    "ScanParams",
    "SortOrder",
    "FileRecord",
    "DuplicateEntry",
    "DuplicateListing",
    "DupSweepError",
    "TraversalError",
    "DeletionError",
    "StaleListingError",
    "InputFormatError",
    "FileService",
    "__version__",
]
