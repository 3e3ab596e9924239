"""Unit tests for hgctl.api.config.ServiceSpec."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hgctl.api.config.ServiceSpec import ServiceSpec, parse_flag


def test_load_defaults_match_init_script():
    spec = ServiceSpec.load()
    assert spec.name == "helium_gateway"
    assert spec.enabled is True
    assert spec.pid_file == Path("/var/run/helium_gateway.pid")
    assert spec.configuration_file == Path("/etc/helium_gateway/settings.toml")
    assert spec.binary == Path("/usr/bin/helium_gateway")
    assert spec.extra_args == ("--daemon", "-c", "/etc/helium_gateway/settings.toml", "server")
    assert spec.argv == [
        "/usr/bin/helium_gateway",
        "--daemon",
        "-c",
        "/etc/helium_gateway/settings.toml",
        "server",
    ]


def test_load_reads_default_override_file(tmp_path):
    (tmp_path / "etc-default" / "helium_gateway").write_text(
        "PID_FILE=/run/hg.pid\nCONFIGURATION_FILE=/srv/hg/settings.toml\n", encoding="utf-8"
    )
    spec = ServiceSpec.load()
    assert spec.pid_file == Path("/run/hg.pid")
    # OPTS is not overridden, so it follows the resolved configuration file
    assert spec.extra_args == ("--daemon", "-c", "/srv/hg/settings.toml", "server")


def test_load_override_file_follows_name_override(tmp_path):
    (tmp_path / "etc-default" / "gw2").write_text("BINARY=/opt/gw2\n", encoding="utf-8")
    spec = ServiceSpec.load(name="gw2")
    assert spec.name == "gw2"
    assert spec.binary == Path("/opt/gw2")


def test_load_opts_override_replaces_default(tmp_path):
    env = tmp_path / "env"
    env.write_text("OPTS=\"--daemon -c '/etc/my gw/settings.toml' server --verbose\"\n", encoding="utf-8")
    spec = ServiceSpec.load(env)
    assert spec.extra_args == ("--daemon", "-c", "/etc/my gw/settings.toml", "server", "--verbose")


def test_load_command_line_wins_over_file(tmp_path):
    env = tmp_path / "env"
    env.write_text("PID_FILE=/run/from-file.pid\nENABLED=0\n", encoding="utf-8")
    spec = ServiceSpec.load(
        env,
        pid_file=tmp_path / "cli.pid",
        enabled=True,
        configuration_file=tmp_path / "cli.toml",
    )
    assert spec.pid_file == tmp_path / "cli.pid"
    assert spec.enabled is True
    assert spec.extra_args == ("--daemon", "-c", str(tmp_path / "cli.toml"), "server")


def test_load_disabled_from_file(tmp_path):
    env = tmp_path / "env"
    env.write_text("ENABLED=no\n", encoding="utf-8")
    assert ServiceSpec.load(env).enabled is False


def test_load_explicit_missing_env_file_raises(tmp_path):
    with pytest.raises(ValueError, match="Environment file not found"):
        ServiceSpec.load(tmp_path / "missing")


def test_load_invalid_enabled_raises(tmp_path):
    env = tmp_path / "env"
    env.write_text("ENABLED=maybe\n", encoding="utf-8")
    with pytest.raises(ValueError, match="ENABLED"):
        ServiceSpec.load(env)


def test_load_validation_error_names_field():
    with pytest.raises(ValueError, match="Service specification error: name"):
        ServiceSpec.load(name="bad/name")


def test_load_invalid_opts_quoting_raises():
    with pytest.raises(ValueError, match="Invalid OPTS"):
        ServiceSpec.load(opts="--daemon 'unterminated")


def test_spec_is_immutable(tmp_path):
    spec = ServiceSpec(
        name="gw",
        enabled=True,
        pid_file=tmp_path / "gw.pid",
        configuration_file=tmp_path / "settings.toml",
        binary=tmp_path / "gw",
    )
    with pytest.raises(ValidationError):
        spec.name = "other"  # type: ignore[misc]
    assert spec.extra_args == ()


def test_relative_paths_become_absolute():
    spec = ServiceSpec(
        name="gw",
        enabled=True,
        pid_file="run/gw.pid",
        configuration_file="settings.toml",
        binary="bin/gw",
    )
    assert spec.pid_file.is_absolute()
    assert spec.binary == Path.cwd() / "bin" / "gw"


def test_empty_path_rejected():
    with pytest.raises(ValidationError):
        ServiceSpec(name="gw", enabled=True, pid_file="", configuration_file="c", binary="b")


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", True), ("yes", True), ("ON", True), ("true", True), ("0", False), ("no", False), ("", False)],
)
def test_parse_flag(value, expected):
    assert parse_flag(value) is expected


def test_default_env_file_follows_override_dir(tmp_path):
    assert ServiceSpec.default_env_file() == tmp_path / "etc-default" / "helium_gateway"
    assert ServiceSpec.default_env_file("gw2") == tmp_path / "etc-default" / "gw2"
