"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Partitions the catalog into duplicate sets keyed by (size, digest)
and numbers every member for selection.
"""

from typing import List, Dict, Any, Callable
from collections import defaultdict
import itertools
import logging

from dupsweep.core.interfaces import DuplicateGrouper
from dupsweep.core.models import FileRecord, DuplicateEntry, DuplicateListing

logger = logging.getLogger(__name__)


class DuplicateGrouperImpl(DuplicateGrouper):
    """
    Groups files whose size and content digest both match.

    Sets are emitted in the order their first member appears in the input,
    members keep their input order, and display ids run 1..N across all sets.
    """

    def group(self, records: List[FileRecord]) -> DuplicateListing:
        groups = self._group_by(records, lambda r: r.content_key)

        counter = itertools.count(1)
        entries = [
            DuplicateEntry(record=record, display_id=next(counter))
            for members in groups.values()
            for record in members
        ]
        listing = DuplicateListing(entries=entries)
        logger.debug(f"Grouping finished: {listing.set_count} sets, {listing.duplicate_count} files")
        return listing

    @staticmethod
    def _group_by(records: List[FileRecord], key_func: Callable[[FileRecord], Any]) -> Dict[Any, List[FileRecord]]:
        """
        Helper method to group files by any computed key.
        A path seen twice counts once, so a file never matches itself.
        Args:
            records: List of files to group
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            Dict[key, List[FileRecord]] holding only keys shared by 2+ distinct paths
        """
        groups: Dict[Any, List[FileRecord]] = defaultdict(list)
        seen_paths = set()
        for record in records:
            if record.path in seen_paths:
                logger.debug(f"Ignoring repeated path: {record.path}")
                continue
            seen_paths.add(record.path)
            groups[key_func(record)].append(record)

        return {key: group for key, group in groups.items() if len(group) >= 2}

