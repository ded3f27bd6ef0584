"""
Parsers for interactive answers.

Each function turns one raw line into a value or raises InputFormatError.
They never prompt and never loop; the caller decides whether to ask again.
"""
import os
import re
from typing import List

from dupsweep.core.errors import InputFormatError
from dupsweep.core.models import SortOrder
from dupsweep.aliases import SORT_ALIASES, YES_NO_ALIASES

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_extension(raw: str) -> str:
    """
    'txt' -> 'txt', '.txt' -> 'txt', '' -> '' (no filter).
    Case is preserved: extension matching is case-sensitive.
    """
    value = raw.strip()
    if value.startswith("."):
        value = value[1:]
    if any(ch.isspace() for ch in value):
        raise InputFormatError(f"Extension must be a single word: '{raw.strip()}'")
    if "." in value or os.sep in value or (os.altsep and os.altsep in value):
        raise InputFormatError(f"Invalid extension: '{raw.strip()}'")
    return value


def parse_sort_choice(raw: str) -> SortOrder:
    try:
        return SORT_ALIASES[raw.strip()]
    except KeyError:
        raise InputFormatError("Wrong option") from None


def parse_yes_no(raw: str) -> bool:
    try:
        return YES_NO_ALIASES[raw.strip()]
    except KeyError:
        raise InputFormatError("Wrong option") from None


def parse_selection(raw: str, duplicate_count: int) -> List[int]:
    """
    Whitespace-separated 1-based ids, each within [1, duplicate_count].
    One bad token rejects the whole line.
    """
    tokens = raw.split()
    if not tokens:
        raise InputFormatError("Wrong format")

    selected = []
    for token in tokens:
        if not _INTEGER_RE.fullmatch(token):
            raise InputFormatError("Wrong format")
        number = int(token)
        if not 1 <= number <= duplicate_count:
            raise InputFormatError("Wrong format")
        selected.append(number)
    return selected
