"""
Plain-text rendering of the catalog, the duplicate listing and the summary.
Functions return lines; printing is left to the caller.
"""
from typing import List, Iterable

from dupsweep.core.models import FileRecord, DuplicateListing


def format_catalog(records: Iterable[FileRecord]) -> List[str]:
    """Size header whenever the size changes, then one path per line."""
    lines = []
    last_size = None
    for record in records:
        if record.size != last_size:
            lines.append(f"{record.size} bytes")
            last_size = record.size
        lines.append(record.path)
    return lines


def format_duplicates(listing: DuplicateListing) -> List[str]:
    """Size and hash headers whenever they change, then '<id>. <path>' per member."""
    lines = []
    last_size = None
    last_digest = None
    for entry in listing:
        record = entry.record
        if record.size != last_size:
            lines.append(f"{record.size} bytes")
            last_size = record.size
        if record.digest != last_digest:
            lines.append(f"Hash: {record.hex_digest}")
            last_digest = record.digest
        lines.append(f"{entry.display_id}. {record.path}")
    return lines


def format_freed(freed_bytes: int) -> str:
    return f"Total freed up space: {freed_bytes} bytes"
