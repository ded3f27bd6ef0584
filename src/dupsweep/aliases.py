from dupsweep.core.models import SortOrder

SORT_ALIASES = {
    "1": SortOrder.DESCENDING,
    "2": SortOrder.ASCENDING,
}

YES_NO_ALIASES = {
    "yes": True,
    "no": False,
}

FORMAT_PROMPT = "Enter file format:"

SORT_MENU_TEXT = (
    "Size sorting option:\n"
    "1. Descending\n"
    "2. Ascending"
)
SORT_PROMPT = "Enter a sorting option:"

DUPLICATES_PROMPT = "Check for duplicates?"
DELETE_PROMPT = "Delete files?"
SELECTION_PROMPT = "Enter file numbers to delete:"

EPILOG_TEXT = """
Examples:
  Scan Downloads, answer the prompts, delete picked duplicates permanently
  %(prog)s ~/Downloads

  Same as above but move deleted files to the system trash
  %(prog)s ~/Downloads --trash

  Show debug logging and scan statistics
  %(prog)s ~/Downloads --verbose

Interactive answers:
  file format   : bare extension such as txt (empty = all files, case-sensitive)
  sort option   : 1 = descending size, 2 = ascending size
  yes / no      : exactly 'yes' or 'no'
  file numbers  : space separated numbers from the duplicate listing, e.g. 2 3 5
"""
