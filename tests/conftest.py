"""Shared pytest configuration and fixtures for all tests."""

import importlib
import os
import signal
import stat
import time
from collections.abc import Sequence
from contextlib import suppress
from pathlib import Path

import pytest

from hgctl.api.config.ControllerConfig import ControllerConfig
from hgctl.api.config.ServiceSpec import ServiceSpec
from hgctl.api.service.errors import LaunchError
from hgctl.api.supervisor.ProcessSupervisor import ProcessSupervisor


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "daemon: tests that launch real processes")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def hgctl_home(tmp_path: Path, monkeypatch) -> Path:
    """Point HGCTL_HOME and the override directory into tmp_path for every test."""
    home = tmp_path / ".hgctl"
    monkeypatch.setenv("HGCTL_HOME", str(home))
    default_dir = tmp_path / "etc-default"
    default_dir.mkdir()
    # The package re-exports the ServiceSpec class under the module's name
    monkeypatch.setattr(importlib.import_module("hgctl.api.config.ServiceSpec"), "ENV_OVERRIDE_DIR", str(default_dir))
    return home


# =============================================================================
# Fake daemon binaries
# =============================================================================


def _write_script(path: Path, body: str) -> Path:
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def daemon_binary(tmp_path: Path) -> Path:
    """Executable that sleeps until terminated; ignores its arguments."""
    return _write_script(tmp_path / "helium_gateway", "exec sleep 60")


@pytest.fixture
def stubborn_binary(tmp_path: Path) -> Path:
    """Executable that ignores SIGTERM; writes a marker once the trap is installed."""
    marker = tmp_path / "trap-installed"
    return _write_script(
        tmp_path / "stubborn_gateway",
        f"trap '' TERM\ntouch '{marker}'\nwhile :; do sleep 1; done",
    )


def wait_for_file(path: Path, timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while not path.exists():
        if time.monotonic() > deadline:
            raise TimeoutError(f"{path} did not appear within {timeout}s")
        time.sleep(0.01)


@pytest.fixture(name="wait_for_file")
def wait_for_file_fixture():
    return wait_for_file


# =============================================================================
# Configuration Helpers
# =============================================================================


def make_spec(tmp_path: Path, binary: Path, **overrides) -> ServiceSpec:
    values = {
        "name": "helium_gateway",
        "enabled": True,
        "pid_file": tmp_path / "run" / "helium_gateway.pid",
        "configuration_file": tmp_path / "settings.toml",
        "binary": binary,
        "extra_args": ("--daemon", "-c", str(tmp_path / "settings.toml"), "server"),
    }
    values.update(overrides)
    return ServiceSpec(**values)


@pytest.fixture(name="make_spec")
def make_spec_fixture(tmp_path: Path):
    """Factory for ServiceSpec objects; kills any instance they recorded afterwards."""
    created: list[ServiceSpec] = []

    def factory(binary: Path, **overrides) -> ServiceSpec:
        service_spec = make_spec(tmp_path, binary, **overrides)
        created.append(service_spec)
        return service_spec

    yield factory
    for service_spec in created:
        _kill_recorded(service_spec.pid_file)


@pytest.fixture
def spec(make_spec, daemon_binary: Path) -> ServiceSpec:
    """ServiceSpec for the sleeping fake daemon."""
    return make_spec(daemon_binary)


@pytest.fixture
def controller_config() -> ControllerConfig:
    return ControllerConfig(stop_timeout_secs=10.0, poll_interval_secs=0.02, restart_delay_secs=0.0)


def _kill_recorded(pid_file: Path) -> None:
    with suppress(OSError, ValueError):
        pid = int(pid_file.read_text().strip())
        os.kill(pid, signal.SIGKILL)
        with suppress(ChildProcessError):
            os.waitpid(pid, 0)


# =============================================================================
# Fake supervisor
# =============================================================================


class FakeSupervisor(ProcessSupervisor):
    """In-memory supervisor recording every call; processes never really run."""

    def __init__(self, exit_on_term: bool = True):
        self.exit_on_term = exit_on_term
        self.alive: set[int] = set()
        self.spawned: list[tuple[Path, tuple[str, ...]]] = []
        self.signals: list[tuple[int, int]] = []
        self.launch_error: str | None = None
        self._next_pid = 4000

    def spawn(self, path: Path, args: Sequence[str]) -> int:
        if self.launch_error:
            raise LaunchError(self.launch_error)
        self._next_pid += 1
        self.alive.add(self._next_pid)
        self.spawned.append((path, tuple(args)))
        return self._next_pid

    def is_alive(self, pid: int) -> bool:
        return pid in self.alive

    def terminate(self, pid: int, sig: int = signal.SIGTERM) -> bool:
        self.signals.append((pid, sig))
        if pid not in self.alive:
            return False
        if self.exit_on_term or sig == signal.SIGKILL:
            self.alive.discard(pid)
        return True

    def wait_exit(self, pid: int, timeout: float | None, poll_interval: float = 0.1) -> bool:
        return pid not in self.alive


@pytest.fixture
def fake_supervisor() -> FakeSupervisor:
    return FakeSupervisor()


@pytest.fixture
def stubborn_fake_supervisor() -> FakeSupervisor:
    """FakeSupervisor whose processes survive SIGTERM."""
    return FakeSupervisor(exit_on_term=False)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    result.drain()
    return result


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd
