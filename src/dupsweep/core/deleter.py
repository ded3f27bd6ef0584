"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/deleter.py
Removes selected duplicates from disk and accounts for the space freed.
Acts on the filesystem only; records and listings are never modified except
for marking the listing stale.
"""

from typing import Iterable, List
import logging

from dupsweep.core.models import DuplicateListing
from dupsweep.core.errors import DeletionError, StaleListingError
from dupsweep.services.file_service import FileService

logger = logging.getLogger(__name__)


class DeletionExecutor:
    """
    Deletes files by display id.

    Ids are processed in the given order. The first removal that fails raises
    DeletionError carrying the bytes freed so far; remaining ids are not attempted.
    """

    def __init__(self, file_service: FileService = None, use_trash: bool = False):
        self.file_service = file_service or FileService()
        self.use_trash = use_trash

    def delete(self, listing: DuplicateListing, selected_ids: Iterable[int]) -> int:
        """
        Args:
            listing: Result of the last grouping pass (must not be stale)
            selected_ids: Display ids to delete; unknown ids are ignored
        Returns:
            Total size in bytes of the removed files
        """
        if listing.stale:
            raise StaleListingError(
                "Duplicate listing was already used for deletion; rescan before deleting again"
            )
        listing.mark_stale()

        freed_bytes = 0
        for display_id in self._unique(selected_ids):
            entry = listing.find(display_id)
            if entry is None:
                logger.debug(f"No file with id {display_id}, ignoring")
                continue

            try:
                self._remove(entry.path)
            except (OSError, RuntimeError) as e:
                logger.warning(f"Failed to delete {entry.path}: {e}")
                raise DeletionError(
                    f"Failed to delete {entry.path}: {e}",
                    path=entry.path,
                    freed_bytes=freed_bytes
                ) from e

            freed_bytes += entry.size
            logger.debug(f"Deleted {entry.path} ({entry.size} bytes)")

        return freed_bytes

    def _remove(self, path: str) -> None:
        if self.use_trash:
            self.file_service.move_to_trash(path)
        else:
            self.file_service.remove_file(path)

    @staticmethod
    def _unique(ids: Iterable[int]) -> List[int]:
        seen = set()
        result = []
        for display_id in ids:
            if display_id not in seen:
                seen.add(display_id)
                result.append(display_id)
        return result
