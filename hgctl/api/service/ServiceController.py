"""Service controller - start/stop/restart a daemon tracked by a PID file."""

import sys
import time
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from typing import Any

from ..config.ControllerConfig import ControllerConfig
from ..config.ServiceSpec import ServiceSpec
from ..log.DomainLogger import DomainLogger
from ..pidfile.PidFile import PidFile
from ..supervisor.get_supervisor import get_supervisor
from ..supervisor.ProcessSupervisor import ProcessSupervisor
from .Command import Command, usage_message
from .errors import (
    LaunchError,
    NotRunningError,
    ServiceDisabledError,
    ServiceError,
    TerminationTimeout,
    UsageError,
)

_VERBS = {
    Command.START: "Starting",
    Command.STOP: "Stopping",
    Command.RESTART: "Restarting",
}


class ServiceController:
    """Translate lifecycle commands into actions against one daemon process.

    The PID file is the source of truth for "is it running". Each public
    operation returns a result dict (``action``, ``pid``, ``running``) or
    raises a ``ServiceError``.
    """

    def __init__(
        self,
        spec: ServiceSpec,
        config: ControllerConfig | None = None,
        supervisor: ProcessSupervisor | None = None,
        sleep=time.sleep,
    ):
        self.spec = spec
        self.config = config if config is not None else ControllerConfig()
        self.supervisor = supervisor if supervisor is not None else get_supervisor()
        self.pid_file = PidFile(spec.pid_file)
        self.log = DomainLogger(self.config.log, "service")
        self._sleep = sleep

    @contextmanager
    def _locked(self) -> Iterator[None]:
        with ExitStack() as stack:
            if self.config.lock:
                try:
                    stack.enter_context(self.pid_file.locked())
                except OSError as e:
                    raise ServiceError(f"Cannot lock {self.pid_file.lock_path}: {e}") from e
            yield

    def running_pid(self) -> int | None:
        """PID recorded in the PID file if that process is alive, else None."""
        pid = self.pid_file.read()
        if pid is not None and self.supervisor.is_alive(pid):
            return pid
        return None

    def _clear_stale(self) -> bool:
        """Remove a PID file whose process is gone. Returns True if one was removed."""
        if not self.pid_file.exists():
            return False
        recorded = self.pid_file.read()
        self.log.warn(f"Removing stale PID file {self.pid_file.path} (pid: {recorded})")
        self.pid_file.remove()
        return True

    def start(self) -> dict[str, Any]:
        """Start the daemon unless it is already running.

        Raises:
            ServiceDisabledError: If the service is disabled
            LaunchError: If the binary cannot be executed
        """
        with self._locked():
            return self._start()

    def _start(self) -> dict[str, Any]:
        pid = self.running_pid()
        if pid is not None:
            self.log.info(f"{self.spec.name} already running (pid: {pid})")
            return {"action": "already_running", "pid": pid, "running": True}

        if not self.spec.enabled:
            self.log.warn(f"{self.spec.name} is disabled; not starting")
            raise ServiceDisabledError(f"{self.spec.name} is disabled (ENABLED=0)")

        self._clear_stale()
        self.log.debug(f"Launching {' '.join(self.spec.argv)}")
        try:
            pid = self.supervisor.spawn(self.spec.binary, self.spec.extra_args)
        except ServiceError as e:
            self.log.error(str(e))
            raise
        try:
            self.pid_file.write(pid)
        except RuntimeError as e:
            # Do not leave an untracked instance behind
            self.supervisor.terminate(pid)
            self.log.error(str(e))
            raise LaunchError(f"{self.spec.name} started but its PID could not be recorded: {e}") from e
        self.log.info(f"{self.spec.name} started (pid: {pid})")
        return {"action": "started", "pid": pid, "running": True}

    def stop(self, strict: bool | None = None) -> dict[str, Any]:
        """Stop the daemon if it is running.

        Args:
            strict: Raise NotRunningError when nothing runs; defaults to config.strict_stop

        Raises:
            NotRunningError: In strict mode when no live process is recorded
            TerminationTimeout: If the process outlives stop_timeout_secs without escalation
        """
        if strict is None:
            strict = self.config.strict_stop
        with self._locked():
            return self._stop(strict)

    def _stop(self, strict: bool) -> dict[str, Any]:
        pid = self.running_pid()
        if pid is None:
            stale = self._clear_stale()
            if strict:
                raise NotRunningError(f"{self.spec.name} is not running")
            self.log.info(f"{self.spec.name} not running")
            return {"action": "stale" if stale else "not_running", "pid": -1, "running": False}

        self.log.info(f"Sending SIGTERM to {self.spec.name} (pid: {pid})")
        try:
            self.supervisor.terminate(pid)
        except OSError as e:
            self.log.error(f"Cannot signal pid {pid}: {e}")
            raise ServiceError(f"Cannot signal {self.spec.name} (pid: {pid}): {e}") from e

        timeout = self.config.stop_timeout_secs
        if not self.supervisor.wait_exit(pid, timeout, self.config.poll_interval_secs):
            if timeout is None:
                # An unbounded wait only returns False if the supervisor gave up
                self.log.error(f"{self.spec.name} (pid: {pid}) did not exit")
                raise ServiceError(f"{self.spec.name} (pid: {pid}) did not exit")
            if not self.config.kill_after_timeout:
                self.log.error(f"{self.spec.name} (pid: {pid}) did not exit within {timeout:g}s")
                raise TerminationTimeout(pid, timeout)
            self.log.warn(f"{self.spec.name} (pid: {pid}) ignored SIGTERM; sending SIGKILL")
            self.supervisor.kill(pid)
            if not self.supervisor.wait_exit(pid, timeout, self.config.poll_interval_secs):
                raise TerminationTimeout(pid, timeout)

        self.pid_file.remove()
        self.log.info(f"{self.spec.name} stopped (pid: {pid})")
        return {"action": "stopped", "pid": pid, "running": False}

    def restart(self) -> dict[str, Any]:
        """Best-effort stop, quiescence pause, then start. Start failures propagate."""
        with self._locked():
            try:
                self._stop(strict=False)
            except ServiceError as e:
                self.log.warn(f"Ignoring stop failure during restart: {e}")
            self._sleep(self.config.restart_delay_secs)
            result = self._start()
        if result["action"] == "started":
            result["action"] = "restarted"
        return result

    def run(self, command: Command) -> dict[str, Any]:
        """Dispatch ``command`` to start, stop or restart.

        Raises:
            UsageError: For Command.UNKNOWN
        """
        if command is Command.START:
            return self.start()
        if command is Command.STOP:
            return self.stop()
        if command is Command.RESTART:
            return self.restart()
        raise UsageError(f"Unrecognized command: {command.value}")

    def execute(self, command: Command, prog: str | None = None) -> int:
        """Run one command and return its exit code.

        Unknown commands print the usage line to stderr and return 1.
        Any ServiceError is reported on stderr and returns 1.
        """
        prog = prog or sys.argv[0]
        verb = _VERBS.get(command)
        if verb is None:
            print(usage_message(prog), file=sys.stderr)
            return 1

        print(f"{verb} {self.spec.name}: ", end="", flush=True)
        try:
            self.run(command)
        except ServiceError as e:
            print("failed.")
            print(f"{self.spec.name}: {e}", file=sys.stderr)
            return 1
        print(f"{self.spec.name}.")
        return 0


def execute(
    command: Command,
    spec: ServiceSpec,
    config: ControllerConfig | None = None,
    prog: str | None = None,
) -> int:
    """Run ``command`` against ``spec`` and return the exit code."""
    return ServiceController(spec, config).execute(command, prog=prog)
