"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Filesystem removal used by the deletion executor: permanent unlink or system trash.
"""
import os
from pathlib import Path
from send2trash import send2trash


class FileService:
    """
    Cross-platform file removal.
    Both methods raise on failure and leave error reporting to the caller.
    """

    @staticmethod
    def remove_file(file_path: str):
        """Permanently deletes a file. Raises OSError (e.g. FileNotFoundError, PermissionError)."""
        os.remove(file_path)

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e
