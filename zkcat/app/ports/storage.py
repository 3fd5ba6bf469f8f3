"""Storage port interface for filesystem operations."""

from pathlib import Path
from typing import Protocol


class StoragePort(Protocol):
    """Port interface for storage operations.

    Abstracts filesystem I/O to enable testing and alternative backends.

    Side effects: Reads/writes files (offline).
    """

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Args:
            path: File path

        Returns:
            File contents as string

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read a whole file as bytes."""
        ...

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Replace ``path`` with ``data`` in a single step.

        Readers never observe a partially written file.
        """
        ...

    def delete(self, path: Path) -> None:
        """Remove ``path``; a missing file is not an error."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write text file.

        Args:
            path: File path
            content: Content to write
        """
        ...
