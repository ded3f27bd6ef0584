"""
Unified command orchestrator for the scan → group → delete pipeline.
This is the SINGLE place that wires core components together; front ends only
gather parameters and render results.
"""
from typing import Iterable, List, Optional, Callable
import logging

from dupsweep.core.models import DuplicateListing, FileRecord, ScanParams, SortOrder
from dupsweep.core.interfaces import Hasher, DuplicateGrouper
from dupsweep.core.scanner import FileScannerImpl
from dupsweep.core.hasher import HasherImpl
from dupsweep.core.sorter import Sorter
from dupsweep.core.grouper import DuplicateGrouperImpl
from dupsweep.core.deleter import DeletionExecutor
from dupsweep.services.file_service import FileService

logger = logging.getLogger(__name__)


class DuplicateSweepCommand:
    """
    Orchestrates the workflow:
    1. Scan the root directory and sort the catalog
    2. Group byte-identical files into a numbered listing
    3. Delete the selected numbers and report freed bytes

    Usage:
        command = DuplicateSweepCommand()
        catalog = command.scan(params)
        listing = command.find_duplicates(catalog)
        freed = command.delete(listing, [2, 3], use_trash=params.use_trash)

    The command keeps no reference to the catalog or listing between calls;
    a listing is good for one deletion only.
    """

    def __init__(self,
                 hasher: Optional[Hasher] = None,
                 grouper: Optional[DuplicateGrouper] = None,
                 file_service: Optional[FileService] = None):
        self._hasher = hasher or HasherImpl()
        self._grouper = grouper or DuplicateGrouperImpl()
        self._file_service = file_service or FileService()

    def scan(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[FileRecord]:
        """
        Scan files and return the catalog sorted by params.sort_order.

        Raises:
            TraversalError: root inaccessible or a file unreadable (nothing partial is returned)
        """
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            extension=params.extension,
            hasher=self._hasher
        )
        catalog = scanner.scan(progress_callback=progress_callback)
        return self.sort(catalog, params.sort_order)

    @staticmethod
    def sort(catalog: List[FileRecord], sort_order: SortOrder) -> List[FileRecord]:
        return Sorter.sort_catalog(catalog, sort_order)

    def find_duplicates(self, catalog: List[FileRecord]) -> DuplicateListing:
        return self._grouper.group(catalog)

    def delete(self, listing: DuplicateListing, selected_ids: Iterable[int], use_trash: bool = False) -> int:
        """
        Remove the selected files.

        Raises:
            DeletionError: first failed removal; carries bytes freed before it
            StaleListingError: listing was already used for a deletion
        """
        executor = DeletionExecutor(self._file_service, use_trash=use_trash)
        freed = executor.delete(listing, selected_ids)
        logger.debug(f"Deletion finished, {freed} bytes freed")
        return freed
