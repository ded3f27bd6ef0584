"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure sorting logic for the file catalog.
"""
from typing import List
from dupsweep.core.models import FileRecord, SortOrder


class Sorter:
    """
    Sorts the catalog in-place according to specified order.
    Sorting priority (applied lexicographically, all keys in the same direction):
    1. size
    2. digest (byte-wise)
    3. path
    Paths are unique within a scan, so the order is total and repeatable.
    """

    @staticmethod
    def sort_key(record: FileRecord):
        return record.size, record.digest, record.path

    @staticmethod
    def sort_catalog(records: List[FileRecord], sort_order: SortOrder = None) -> List[FileRecord]:
        if not records:
            return records

        if sort_order is None:
            sort_order = SortOrder.DESCENDING

        records.sort(key=Sorter.sort_key, reverse=(sort_order == SortOrder.DESCENDING))
        return records
