"""Service controller error taxonomy.

Every error is terminal for the current invocation; none is retried.
"""


class ServiceError(Exception):
    """Base class for controller failures."""


class LaunchError(ServiceError):
    """The binary could not be started (missing, not executable, permission denied)."""


class NotRunningError(ServiceError):
    """Strict stop found no running process."""


class TerminationTimeout(ServiceError):
    """The process did not exit within the stop timeout."""

    def __init__(self, pid: int, timeout: float):
        super().__init__(f"Process {pid} did not exit within {timeout:g}s")
        self.pid = pid
        self.timeout = timeout


class UsageError(ServiceError):
    """Unrecognized command."""


class ServiceDisabledError(ServiceError):
    """Start was requested for a service whose ENABLED flag is off."""
