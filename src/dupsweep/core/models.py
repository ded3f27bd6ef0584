"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple
from enum import Enum


# =============================
# Enums
# =============================

class SortOrder(Enum):
    """
    Catalog ordering. Size first, then digest, then path, all in one direction.
    """
    DESCENDING = "descending"
    ASCENDING = "ascending"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single regular file found during a scan.
    The path is the identity of the record within one scan.
    Size and digest together stand in for content equality; two different
    contents sharing a 128-bit digest is an accepted statistical risk.
    """
    path: str
    size: int  # in bytes
    digest: bytes

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")
        if not isinstance(self.digest, bytes):
            raise ValueError("Field 'digest' must be bytes")

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    @property
    def content_key(self) -> Tuple[int, bytes]:
        """Key shared by byte-identical files."""
        return self.size, self.digest

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class DuplicateEntry:
    """A file that belongs to a duplicate set, paired with its display number."""
    record: FileRecord
    display_id: int

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def size(self) -> int:
        return self.record.size


@dataclass
class DuplicateListing:
    """
    Result of one grouping pass: members of every duplicate set, set by set,
    numbered 1..N without gaps.
    Becomes stale after it has been handed to the deletion executor.
    """
    entries: List[DuplicateEntry] = field(default_factory=list)
    stale: bool = False

    @property
    def duplicate_count(self) -> int:
        """How many files are listed (across all sets)."""
        return len(self.entries)

    @property
    def sets(self) -> Dict[Tuple[int, bytes], List[DuplicateEntry]]:
        """Entries bucketed by content key, in listing order."""
        result: Dict[Tuple[int, bytes], List[DuplicateEntry]] = {}
        for entry in self.entries:
            result.setdefault(entry.record.content_key, []).append(entry)
        return result

    @property
    def set_count(self) -> int:
        return len(self.sets)

    @property
    def reclaimable_bytes(self) -> int:
        """Space freed by keeping exactly one file of every set."""
        return sum(
            members[0].size * (len(members) - 1)
            for members in self.sets.values()
        )

    def find(self, display_id: int):
        for entry in self.entries:
            if entry.display_id == display_id:
                return entry
        return None

    def mark_stale(self) -> None:
        self.stale = True

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f"<DuplicateListing sets={self.set_count}, files={self.duplicate_count}>"


# ======================
#  Configuration
# ======================

@dataclass
class ScanParams:
    """
    Unified parameters for one scan-and-sweep run.
    Built by the CLI from its arguments and interactive answers.
    """
    root_dir: str
    extension: str = ""  # bare word without the leading dot, "" = no filter
    sort_order: SortOrder = SortOrder.DESCENDING
    use_trash: bool = False

    def __post_init__(self):
        if not self.root_dir:
            raise ValueError("Root directory must be specified")
        if not isinstance(self.sort_order, SortOrder):
            raise ValueError(f"Invalid sort order: {self.sort_order!r}")
