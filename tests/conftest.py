"""
Shared fixtures for dupsweep tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical .txt files (1KB of 'A') plus a third copy in a subdirectory
    - 2 identical .txt files (2KB of 'B')
    - 1 unique .txt file with the same size as the 'A' files
    - 2 empty .txt files (duplicates of each other)
    - 1 .tmp file with 'A' content (excluded by a txt filter)
    - 1 .TXT file (excluded by a case-sensitive txt filter)
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size as dup1 files, different content
    files["same_size"] = temp_dir / "same_size.txt"
    files["same_size"].write_bytes(b"C" * 1024)

    files["empty1"] = temp_dir / "empty1.txt"
    files["empty2"] = temp_dir / "empty2.txt"
    files["empty1"].write_bytes(b"")
    files["empty2"].write_bytes(b"")

    files["other_ext"] = temp_dir / "ignore.tmp"
    files["other_ext"].write_bytes(content_a)

    files["upper_ext"] = temp_dir / "upper.TXT"
    files["upper_ext"].write_bytes(b"D" * 10)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


@pytest.fixture
def abc_dir(temp_dir) -> Path:
    """a.txt and b.txt share content 'x'; c.txt holds 'y'."""
    (temp_dir / "a.txt").write_bytes(b"x")
    (temp_dir / "b.txt").write_bytes(b"x")
    (temp_dir / "c.txt").write_bytes(b"y")
    return temp_dir
