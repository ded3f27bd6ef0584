"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the tree walker.
Features:
- Recursively scans directories with os.walk
- Applies an optional, case-sensitive extension filter
- Hashes every accepted file through an injected Hasher
- All-or-nothing: any unreadable directory or file aborts the whole scan
"""

import os
import stat
from typing import List, Optional, Callable
from pathlib import Path
import time
import logging

logger = logging.getLogger(__name__)

# Local imports
from dupsweep.core.models import FileRecord
from dupsweep.core.errors import TraversalError
from dupsweep.core.interfaces import FileScanner, Hasher
from dupsweep.core.hasher import HasherImpl


class FileScannerImpl(FileScanner):
    """
    Scans a directory tree and produces one FileRecord per matching regular file.

    Attributes:
        root_dir: Root directory to scan
        extension: Extension to keep, without the leading dot (e.g. "txt"); "" keeps everything
        hasher: Content hasher used for each accepted file
    """

    # Progress throttling: report every N files
    PROGRESS_INTERVAL = 1000

    def __init__(self, root_dir: str, extension: str = "", hasher: Hasher = None):
        self.root_dir = root_dir
        self.extension = extension or ""
        self.hasher = hasher or HasherImpl()

    def scan(self,
             progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None) -> List[FileRecord]:
        """
        Walks the tree under root_dir and returns the unsorted catalog.
        Raises TraversalError if the root or any visited file cannot be read.
        """
        logger.debug("Starting scan operation")
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filter: extension={self.extension!r}")

        root_path = Path(self.root_dir)
        self._validate_root(root_path)

        found_files: List[FileRecord] = []
        processed_files = 0
        progress_counter = 0
        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path), onerror=self._raise_walk_error):
            for filename in files:
                path = Path(root) / filename
                record = self._process_file(path)
                if record is not None:
                    found_files.append(record)
                processed_files += 1
                progress_counter += 1

                if progress_callback and progress_counter >= self.PROGRESS_INTERVAL:
                    progress_callback('scanning', processed_files, None)
                    progress_counter = 0

        # Final update for small datasets
        if progress_callback and progress_counter > 0:
            progress_callback('scanning', processed_files, None)

        elapsed_time = time.time() - start_time
        logger.debug(f"Total scan time: {elapsed_time:.2f} seconds")
        logger.debug(f"Scan completed. {processed_files} files visited, {len(found_files)} matched.")
        return found_files

    def _validate_root(self, root_path: Path) -> None:
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise TraversalError(error_msg, path=self.root_dir)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise TraversalError(error_msg, path=self.root_dir)

    @staticmethod
    def _raise_walk_error(error: OSError) -> None:
        """os.walk swallows listing errors unless told otherwise."""
        logger.error(f"Cannot read directory {error.filename}: {error}")
        raise TraversalError(
            f"Cannot read directory {error.filename}: {error.strerror or error}",
            path=error.filename
        ) from error

    def _process_file(self, path: Path) -> Optional[FileRecord]:
        """
        Process an individual file path and return a FileRecord if it passes the filter.
        Args:
            path: Path object pointing to the file
        Returns:
            Optional[FileRecord]: record with size and digest, or None if skipped
        """
        if not self._extension_passes(path):
            logger.debug(f"Skipping {path} (extension not allowed)")
            return None

        try:
            stat_result = path.lstat()
        except OSError as e:
            raise TraversalError(f"Cannot stat {path}: {e}", path=str(path)) from e

        if stat.S_ISLNK(stat_result.st_mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return None
        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        size = stat_result.st_size
        try:
            digest = self.hasher.digest_file(str(path))
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            raise TraversalError(f"Cannot read {path}: {e}", path=str(path)) from e

        logger.debug(f"Accepted file: {path.name} ({size} bytes)")
        return FileRecord(path=str(path), size=size, digest=digest)

    def _extension_passes(self, path: Path) -> bool:
        """
        Check if the last-dot suffix of the name equals "." + extension (case-sensitive).
        A dot-only name such as ".txt" is its own suffix.
        Args:
            path: Path object pointing to the file
        Returns:
            True if no filter is set or the extension matches exactly
        """
        if not self.extension:
            return True
        name = path.name
        suffix = name[name.rfind("."):] if "." in name else ""
        return suffix == "." + self.extension
