#!/usr/bin/env python3
"""
dupsweep CLI — interactive console front end for the duplicate sweep pipeline.
Gathers parameters through prompts, renders listings, and reports freed space.
All decisions about what to delete are made by the user, one listing at a time.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import Callable, List, Optional, NoReturn, TypeVar
import logging

from dupsweep.core.models import ScanParams, SortOrder, FileRecord, DuplicateListing
from dupsweep.core.errors import TraversalError, DeletionError, InputFormatError
from dupsweep.commands import DuplicateSweepCommand
from dupsweep.utils.convert_utils import ConvertUtils
from dupsweep.input_parsers import parse_extension, parse_sort_choice, parse_yes_no, parse_selection
from dupsweep.presenters import format_catalog, format_duplicates, format_freed
from dupsweep.aliases import (
    FORMAT_PROMPT, SORT_MENU_TEXT, SORT_PROMPT,
    DUPLICATES_PROMPT, DELETE_PROMPT, SELECTION_PROMPT,
    EPILOG_TEXT
)

T = TypeVar("T")

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.command = DuplicateSweepCommand()

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupsweep",
            description="dupsweep — find byte-identical files and free disk space",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Checked in validate_args so a missing root gets the usual message
        parser.add_argument(
            "directory",
            nargs="?",
            help="Root directory to scan for duplicates"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move deleted files to the system trash instead of removing them permanently"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and scan statistics"
        )

        return parser.parse_args(args)

    def configure_logging(self) -> None:
        logging.basicConfig(format=LOG_FORMAT)
        logging.getLogger().setLevel(logging.DEBUG if self.verbose else logging.ERROR)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any prompt is shown."""
        if not args.directory:
            self.error_exit("Directory is not specified")

    @staticmethod
    def create_params(args: argparse.Namespace, extension: str, sort_order: SortOrder) -> ScanParams:
        """Create ScanParams from CLI arguments and interactive answers."""
        return ScanParams(
            root_dir=args.directory,
            extension=extension,
            sort_order=sort_order,
            use_trash=args.trash
        )

    @staticmethod
    def ask(prompt: Optional[str], parser: Callable[[str], T], repeat_prompt: bool = False) -> T:
        """
        Read lines until `parser` accepts one.
        Rejected input prints the parser's message and asks again.
        """
        if prompt and not repeat_prompt:
            print(prompt)
        while True:
            if prompt and repeat_prompt:
                print(prompt)
            raw = input()
            try:
                return parser(raw)
            except InputFormatError as e:
                print(e)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> List[FileRecord]:
        try:
            catalog = self.command.scan(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except TraversalError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            total = sum(record.size for record in catalog)
            print(f"Scanned {len(catalog)} files ({ConvertUtils.bytes_to_human(total)})")
        return catalog

    def output_catalog(self, catalog: List[FileRecord]) -> None:
        for line in format_catalog(catalog):
            print(line)

    def output_duplicates(self, listing: DuplicateListing) -> None:
        for line in format_duplicates(listing):
            print(line)

        if self.verbose:
            print(
                f"Found {listing.set_count} duplicate sets ({listing.duplicate_count} files), "
                f"{ConvertUtils.bytes_to_human(listing.reclaimable_bytes)} reclaimable"
            )

    def execute_delete(self, listing: DuplicateListing, selected_ids: List[int], use_trash: bool) -> None:
        """Delete picked files and always report what was freed, even after a failure."""
        try:
            freed = self.command.delete(listing, selected_ids, use_trash=use_trash)
        except DeletionError as e:
            print(f"❌ Failed to delete files: {e}", file=sys.stderr)
            print(format_freed(e.freed_bytes))
            sys.exit(1)

        print(format_freed(freed))

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point: prompts, scan, listings, optional deletion."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.configure_logging()
        self.validate_args(args)

        extension = self.ask(FORMAT_PROMPT, parse_extension)
        print(SORT_MENU_TEXT)
        sort_order = self.ask(SORT_PROMPT, parse_sort_choice, repeat_prompt=True)
        params = self.create_params(args, extension, sort_order)

        catalog = self.run_scan(params)
        self.output_catalog(catalog)

        if self.ask(DUPLICATES_PROMPT, parse_yes_no):
            listing = self.command.find_duplicates(catalog)
            if not listing.duplicate_count:
                print("No duplicate files found.")
            else:
                self.output_duplicates(listing)
                if self.ask(DELETE_PROMPT, parse_yes_no):
                    selected = self.ask(
                        SELECTION_PROMPT,
                        lambda raw: parse_selection(raw, listing.duplicate_count)
                    )
                    self.execute_delete(listing, selected, use_trash=params.use_trash)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except EOFError:
        CLIApplication.error_exit("Input closed")
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
