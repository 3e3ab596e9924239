"""Immutable description of the managed service."""

import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import (
    DEFAULT_BINARY,
    DEFAULT_CONFIGURATION_FILE,
    DEFAULT_ENABLED,
    DEFAULT_NAME,
    DEFAULT_OPTS,
    DEFAULT_PID_FILE,
    ENV_OVERRIDE_DIR,
)
from .read_env_file import expand_vars, read_env_file

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_flag(value: str) -> bool:
    """Parse a shell-style boolean (1/0, true/false, yes/no, on/off)."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"ENABLED must be one of 1/0, true/false, yes/no, on/off, got {value!r}")


class ServiceSpec(BaseModel):
    """Service description resolved once per invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Service name used in messages")
    enabled: bool = Field(..., description="Whether start is allowed")
    pid_file: Path = Field(..., description="Where the running PID is recorded")
    configuration_file: Path = Field(..., description="Configuration file handed to the binary")
    binary: Path = Field(..., description="Executable to launch")
    extra_args: tuple[str, ...] = Field((), description="Arguments appended to the invocation")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if "/" in v or v.strip() != v:
            raise ValueError(f"name must not contain '/' or surrounding whitespace, got: {v!r}")
        return v

    @field_validator("pid_file", "configuration_file", "binary", mode="before")
    @classmethod
    def make_absolute(cls, v: Any) -> Path:
        if isinstance(v, str) and not v.strip():
            raise ValueError("path must not be empty")
        return Path(v).expanduser().absolute()

    @property
    def argv(self) -> list[str]:
        """Full invocation: binary followed by the extra arguments."""
        return [str(self.binary), *self.extra_args]

    @classmethod
    def default_variables(cls) -> dict[str, str]:
        """Built-in defaults, keyed by the override file variable names."""
        return {
            "NAME": DEFAULT_NAME,
            "ENABLED": DEFAULT_ENABLED,
            "PID_FILE": DEFAULT_PID_FILE,
            "CONFIGURATION_FILE": DEFAULT_CONFIGURATION_FILE,
            "BINARY": DEFAULT_BINARY,
        }

    @classmethod
    def default_env_file(cls, name: str = DEFAULT_NAME) -> Path:
        """Default environment override file for a service name."""
        return Path(ENV_OVERRIDE_DIR) / name

    @classmethod
    def load(
        cls,
        env_file: Path | None = None,
        *,
        name: str | None = None,
        enabled: bool | None = None,
        pid_file: Path | None = None,
        configuration_file: Path | None = None,
        binary: Path | None = None,
        opts: str | None = None,
    ) -> "ServiceSpec":
        """Resolve the service description from defaults, the override file and explicit overrides.

        The default override file (``/etc/default/<name>``) is optional; an
        explicitly given ``env_file`` must exist. When OPTS is not assigned
        anywhere it is built from the resolved configuration file.

        Raises:
            ValueError: If the override file is missing/invalid or validation fails
        """
        variables = cls.default_variables()

        if env_file is not None:
            if not env_file.exists():
                raise ValueError(f"Environment file not found at {env_file}")
            variables = read_env_file(env_file, variables)
        else:
            default_file = cls.default_env_file(name or DEFAULT_NAME)
            if default_file.is_file():
                variables = read_env_file(default_file, variables)

        raw: dict[str, Any] = {
            "name": name if name is not None else variables["NAME"],
            "enabled": enabled if enabled is not None else parse_flag(variables["ENABLED"]),
            "pid_file": pid_file if pid_file is not None else variables["PID_FILE"],
            "configuration_file": (
                configuration_file if configuration_file is not None else variables["CONFIGURATION_FILE"]
            ),
            "binary": binary if binary is not None else variables["BINARY"],
        }

        if opts is None:
            if "OPTS" in variables:
                opts = variables["OPTS"]
            else:
                opts = expand_vars(DEFAULT_OPTS, {**variables, "CONFIGURATION_FILE": str(raw["configuration_file"])})
        try:
            raw["extra_args"] = tuple(shlex.split(opts))
        except ValueError as e:
            raise ValueError(f"Invalid OPTS {opts!r}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Service specification error: {detail}") from e
