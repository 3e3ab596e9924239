"""PID file read/write/remove and the advisory lock around them."""

import fcntl
import os
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path


class PidFile:
    """A file holding the PID of the running service instance."""

    def __init__(self, path: Path):
        self.path = path

    @property
    def lock_path(self) -> Path:
        return self.path.with_name(self.path.name + ".lock")

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> int | None:
        """Return the recorded PID, or None if the file is absent or unreadable.

        A file that exists but does not hold a positive integer yields None;
        callers treat that the same as a dead PID (stale file).
        """
        try:
            text = self.path.read_text(encoding="utf-8").strip()
        except OSError:
            return None
        try:
            pid = int(text)
        except ValueError:
            return None
        return pid if pid > 0 else None

    def write(self, pid: int) -> None:
        """Record ``pid`` atomically (write to temp file, then rename)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            temp_path.write_text(f"{pid}\n", encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink()
            raise RuntimeError(f"Failed to write PID file {self.path}: {e}") from e

    def remove(self) -> None:
        with suppress(FileNotFoundError):
            self.path.unlink()

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold an exclusive ``flock`` on the sibling ``.lock`` file.

        Blocks until any other holder releases it.
        """
        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.lock_path, os.O_RDWR | os.O_CREAT, 0o644)
        try:
            fcntl.flock(fd, fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)
