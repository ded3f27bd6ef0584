"""
Unit tests for FileScannerImpl.
Verifies file discovery with the extension filter, digests, error handling, and edge cases.
"""
import os
import sys
import pytest
from pathlib import Path
from unittest import mock
from dupsweep.core import FileScannerImpl, HasherImpl, TraversalError


def _names(records):
    return sorted(Path(r.path).name for r in records)


class TestFileScannerImpl:
    """Test file scanning with filters and error handling."""

    def test_scans_all_files_without_filter(self, test_files, temp_dir):
        """Empty filter keeps every regular file, including empty ones."""
        records = FileScannerImpl(root_dir=str(temp_dir)).scan()

        assert len(records) == len(test_files)
        assert _names(records) == sorted(p.name for p in test_files.values())

    def test_filters_by_extension(self, test_files, temp_dir):
        """Only '.txt' files are kept, recursively."""
        records = FileScannerImpl(root_dir=str(temp_dir), extension="txt").scan()

        assert len(records) == 8
        assert all(r.path.endswith(".txt") for r in records)
        assert not any(r.path.endswith("ignore.tmp") for r in records)

    def test_extension_filter_is_case_sensitive(self, test_files, temp_dir):
        records = FileScannerImpl(root_dir=str(temp_dir), extension="txt").scan()
        assert not any(r.path.endswith("upper.TXT") for r in records)

        upper = FileScannerImpl(root_dir=str(temp_dir), extension="TXT").scan()
        assert _names(upper) == ["upper.TXT"]

    def test_extension_must_match_whole_suffix(self, temp_dir):
        """'txt' must not match 'notes.atxt' or a file named 'txt'."""
        (temp_dir / "notes.atxt").write_bytes(b"1")
        (temp_dir / "txt").write_bytes(b"2")
        (temp_dir / "real.txt").write_bytes(b"3")

        records = FileScannerImpl(root_dir=str(temp_dir), extension="txt").scan()

        assert _names(records) == ["real.txt"]

    def test_dot_only_name_is_its_own_extension(self, temp_dir):
        """A file named ".txt" has extension ".txt" and passes the txt filter."""
        (temp_dir / ".txt").write_bytes(b"x")
        (temp_dir / "a.txt").write_bytes(b"x")
        (temp_dir / ".bashrc").write_bytes(b"x")

        records = FileScannerImpl(root_dir=str(temp_dir), extension="txt").scan()

        assert _names(records) == [".txt", "a.txt"]

    def test_scans_subdirectories_recursively(self, test_files, temp_dir):
        records = FileScannerImpl(root_dir=str(temp_dir), extension="txt").scan()

        subdir_files = [r for r in records if "subdir" in r.path]
        assert len(subdir_files) == 1
        assert subdir_files[0].path == str(test_files["sub_dup"])

    def test_records_size_and_digest(self, test_files, temp_dir):
        records = {r.path: r for r in FileScannerImpl(root_dir=str(temp_dir)).scan()}

        dup_a = records[str(test_files["dup1_a"])]
        dup_b = records[str(test_files["dup1_b"])]
        same_size = records[str(test_files["same_size"])]

        assert dup_a.size == 1024
        assert dup_a.digest == dup_b.digest
        assert dup_a.digest != same_size.digest
        assert len(dup_a.digest) == 16

    def test_includes_empty_files(self, test_files, temp_dir):
        """Zero-byte files are catalogued and share one digest."""
        records = {r.path: r for r in FileScannerImpl(root_dir=str(temp_dir)).scan()}

        empty1 = records[str(test_files["empty1"])]
        empty2 = records[str(test_files["empty2"])]
        assert empty1.size == 0
        assert empty1.digest == empty2.digest

    def test_empty_directory_returns_empty_catalog(self, temp_dir):
        assert FileScannerImpl(root_dir=str(temp_dir), extension="txt").scan() == []

    def test_uses_injected_hasher(self, abc_dir):
        hasher = mock.Mock()
        hasher.digest_file.return_value = b"\x00" * 16

        records = FileScannerImpl(root_dir=str(abc_dir), hasher=hasher).scan()

        assert hasher.digest_file.call_count == 3
        assert all(r.digest == b"\x00" * 16 for r in records)

    def test_progress_callback_reports_visited_files(self, abc_dir):
        calls = []
        FileScannerImpl(root_dir=str(abc_dir)).scan(
            progress_callback=lambda stage, current, total: calls.append((stage, current, total))
        )
        assert calls[-1] == ("scanning", 3, None)

    def test_scanner_skips_symlinks(self, temp_dir):
        """Symbolic links are not regular files and are never catalogued."""
        real_file = temp_dir / "real.txt"
        real_file.write_bytes(b"content")
        try:
            (temp_dir / "link.txt").symlink_to(real_file)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")

        records = FileScannerImpl(root_dir=str(temp_dir)).scan()

        assert _names(records) == ["real.txt"]


class TestFileScannerErrors:
    """All-or-nothing scanning: any failure aborts with TraversalError."""

    def test_missing_root_raises(self, temp_dir):
        with pytest.raises(TraversalError, match="does not exist"):
            FileScannerImpl(root_dir=str(temp_dir / "nope")).scan()

    def test_file_as_root_raises(self, temp_dir):
        target = temp_dir / "file.txt"
        target.write_bytes(b"x")

        with pytest.raises(TraversalError, match="Not a directory"):
            FileScannerImpl(root_dir=str(target)).scan()

    def test_unreadable_file_aborts_scan(self, abc_dir):
        """A file that fails to open aborts the whole scan, chained to the OSError."""
        hasher = HasherImpl()
        original = hasher.digest_file

        def failing_digest(path):
            if path.endswith("b.txt"):
                raise PermissionError(13, "Permission denied", path)
            return original(path)

        with mock.patch.object(hasher, "digest_file", side_effect=failing_digest):
            with pytest.raises(TraversalError) as exc_info:
                FileScannerImpl(root_dir=str(abc_dir), hasher=hasher).scan()

        assert exc_info.value.path.endswith("b.txt")
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_unlistable_directory_aborts_scan(self, abc_dir):
        """Directory listing errors from os.walk are not swallowed."""
        def failing_walk(top, onerror=None, **kwargs):
            onerror(PermissionError(13, "Permission denied", os.path.join(top, "locked")))
            return iter([])

        with mock.patch("dupsweep.core.scanner.os.walk", side_effect=failing_walk):
            with pytest.raises(TraversalError, match="locked"):
                FileScannerImpl(root_dir=str(abc_dir)).scan()

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="Permission bits are not enforced for root or on Windows"
    )
    def test_unreadable_file_on_disk_aborts_scan(self, abc_dir):
        locked = abc_dir / "c.txt"
        locked.chmod(0o000)
        try:
            with pytest.raises(TraversalError):
                FileScannerImpl(root_dir=str(abc_dir)).scan()
        finally:
            locked.chmod(0o644)
