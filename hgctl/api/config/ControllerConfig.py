"""Controller configuration (timeouts, restart delay, logging)."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class ControllerConfig(BaseModel):
    """Tunables for the service controller.

    Every field has a default; the config file is optional.
    """

    model_config = ConfigDict(extra="forbid")

    stop_timeout_secs: float | None = Field(
        None, gt=0, description="Bound on waiting for exit after SIGTERM; null waits indefinitely"
    )
    kill_after_timeout: bool = Field(False, description="Send SIGKILL once stop_timeout_secs expires")
    restart_delay_secs: float = Field(1.0, ge=0, description="Pause between stop and start during restart")
    poll_interval_secs: float = Field(0.1, gt=0, description="Liveness polling period while waiting for exit")
    strict_stop: bool = Field(False, description="Fail stop when no process is running")
    lock: bool = Field(True, description="Hold an advisory lock on <pid_file>.lock during each command")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on HGCTL_HOME or default to ~/.hgctl."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "ControllerConfig":
        """Load and validate config from file, falling back to defaults when absent.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
