"""POSIX supervisor implementation - subprocess launch and signal delivery."""

import os
import signal
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path

from ...service.errors import LaunchError
from ..ProcessSupervisor import ProcessSupervisor


class _Impl(ProcessSupervisor):
    """POSIX process supervision using fork/exec, kill(2) and waitpid(2)."""

    def spawn(self, path: Path, args: Sequence[str]) -> int:
        if not path.exists():
            raise LaunchError(f"Binary not found: {path}")
        if path.is_dir() or not os.access(path, os.X_OK):
            raise LaunchError(f"Binary is not executable: {path}")

        # Use subprocess.Popen for true process independence
        try:
            proc = subprocess.Popen(
                [str(path), *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                close_fds=True,
                start_new_session=True,  # Detach from parent process group
            )
        except OSError as e:
            raise LaunchError(f"Cannot execute {path}: {e.strerror or e}") from e
        return proc.pid

    def is_alive(self, pid: int) -> bool:
        # Reap our own exited children first; otherwise kill(pid, 0) reports zombies as alive
        try:
            reaped, _status = os.waitpid(pid, os.WNOHANG)
        except ChildProcessError:
            pass
        else:
            if reaped == pid:
                return False

        try:
            os.kill(pid, 0)  # Signal 0 checks existence without killing
        except ProcessLookupError:
            return False
        except PermissionError:
            return True  # Exists, owned by another user
        return True

    def terminate(self, pid: int, sig: int = signal.SIGTERM) -> bool:
        try:
            os.kill(pid, sig)
        except ProcessLookupError:
            return False
        return True

    def wait_exit(self, pid: int, timeout: float | None, poll_interval: float = 0.1) -> bool:
        deadline = None if timeout is None else time.monotonic() + timeout
        while self.is_alive(pid):
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                time.sleep(min(poll_interval, remaining))
            else:
                time.sleep(poll_interval)
        return True
