"""Filesystem-backed storage port implementation."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from zkcat.app.ports import StoragePort


class FileSystemStorageAdapter(StoragePort):
    """Adapter that performs direct filesystem operations."""

    def read_text(self, path: Path) -> str:
        # newline="" keeps "\r\n" intact so the digest covers the exact bytes on disk.
        with Path(path).open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Write ``data`` via a temporary file followed by ``os.replace``.

        The temporary file is flushed and fsynced first, so a crash mid-write
        leaves either the previous file or nothing at ``path``.
        """
        destination = Path(path)
        destination.parent.mkdir(parents=True, exist_ok=True)

        fd: int | None = None
        tmp_path: str | None = None

        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=str(destination.parent),
                prefix=destination.name,
                suffix=".tmp",
            )

            with os.fdopen(fd, "wb") as handle:
                fd = None  # Ownership transferred to file object
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())

            os.replace(tmp_path, destination)
            tmp_path = None
        finally:
            if fd is not None:
                os.close(fd)
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except FileNotFoundError:
                    pass

    def delete(self, path: Path) -> None:
        Path(path).unlink(missing_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        self.write_bytes(path, content.encode("utf-8"))
