"""Abstract base class for process supervision backends."""

import signal
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class ProcessSupervisor(ABC):
    """Platform-specific process primitives used by the service controller.

    The controller decides *what* to do from the PID file; a supervisor only
    knows how to launch, check on and signal processes.
    """

    @abstractmethod
    def spawn(self, path: Path, args: Sequence[str]) -> int:
        """Launch ``path`` with ``args`` detached from the caller.

        Returns:
            PID of the launched process

        Raises:
            LaunchError: If the binary cannot be executed
        """
        pass

    @abstractmethod
    def is_alive(self, pid: int) -> bool:
        """Whether a process with ``pid`` currently exists."""
        pass

    @abstractmethod
    def terminate(self, pid: int, sig: int = signal.SIGTERM) -> bool:
        """Send ``sig`` to ``pid``.

        Returns:
            False if the process was already gone, True otherwise
        """
        pass

    @abstractmethod
    def wait_exit(self, pid: int, timeout: float | None, poll_interval: float = 0.1) -> bool:
        """Block until ``pid`` exits.

        Args:
            pid: Process to wait for
            timeout: Maximum seconds to wait; None waits indefinitely
            poll_interval: Seconds between liveness checks

        Returns:
            True if the process exited, False if the timeout expired
        """
        pass

    def kill(self, pid: int) -> bool:
        """Send SIGKILL to ``pid``."""
        return self.terminate(pid, signal.SIGKILL)
