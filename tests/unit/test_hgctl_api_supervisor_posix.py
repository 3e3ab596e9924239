"""Tests for the POSIX process supervisor using real child processes."""

import os
import signal
from contextlib import suppress

import pytest

from hgctl.api.service.errors import LaunchError
from hgctl.api.supervisor.get_supervisor import detect_backend, get_supervisor
from hgctl.api.supervisor.ProcessSupervisor import ProcessSupervisor


@pytest.fixture
def supervisor() -> ProcessSupervisor:
    return get_supervisor("posix")


def _cleanup(pid: int) -> None:
    with suppress(ProcessLookupError):
        os.kill(pid, signal.SIGKILL)
    with suppress(ChildProcessError):
        os.waitpid(pid, 0)


def test_detect_backend_on_posix():
    assert detect_backend() == "posix"


def test_get_supervisor_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unsupported supervisor backend"):
        get_supervisor("vms")


@pytest.mark.daemon
@pytest.mark.timeout(20)
def test_spawn_terminate_wait(supervisor, daemon_binary):
    pid = supervisor.spawn(daemon_binary, ["--daemon", "server"])
    try:
        assert pid > 0
        assert supervisor.is_alive(pid) is True
        assert supervisor.terminate(pid) is True
        assert supervisor.wait_exit(pid, timeout=5.0, poll_interval=0.02) is True
        assert supervisor.is_alive(pid) is False
        # Already gone
        assert supervisor.terminate(pid) is False
    finally:
        _cleanup(pid)


@pytest.mark.daemon
@pytest.mark.timeout(20)
def test_wait_exit_times_out_then_kill(supervisor, stubborn_binary, tmp_path, wait_for_file):
    pid = supervisor.spawn(stubborn_binary, [])
    try:
        wait_for_file(tmp_path / "trap-installed")
        supervisor.terminate(pid)
        assert supervisor.wait_exit(pid, timeout=0.3, poll_interval=0.02) is False
        assert supervisor.is_alive(pid) is True
        assert supervisor.kill(pid) is True
        assert supervisor.wait_exit(pid, timeout=5.0, poll_interval=0.02) is True
    finally:
        _cleanup(pid)


def test_spawn_missing_binary(supervisor, tmp_path):
    with pytest.raises(LaunchError, match="Binary not found"):
        supervisor.spawn(tmp_path / "missing", [])


def test_spawn_not_executable(supervisor, tmp_path):
    path = tmp_path / "helium_gateway"
    path.write_text("#!/bin/sh\n")
    path.chmod(0o644)
    with pytest.raises(LaunchError, match="not executable"):
        supervisor.spawn(path, [])


def test_spawn_directory(supervisor, tmp_path):
    with pytest.raises(LaunchError, match="not executable"):
        supervisor.spawn(tmp_path, [])


def test_is_alive_for_unused_pid(supervisor):
    # PIDs above the kernel's pid_max are never assigned
    assert supervisor.is_alive(2**22 + 1) is False
