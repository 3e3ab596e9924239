"""Output models for the start, stop and restart commands."""

from pydantic import BaseModel, ConfigDict, Field

from ._registry import output_schema


class _ServiceOutput(BaseModel):
    """Fields every service command reports, success or failure."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages, empty on success")
    warnings: list[str] = Field(default_factory=list, description="Warnings such as a removed stale PID file")
    name: str = Field(..., description="Service name")
    pid: int = Field(..., description="Process ID of the service, -1 if not running")
    pid_file: str = Field(..., description="PID file path")
    action: str = Field(..., description="Action taken (e.g., 'started', 'already_running'), empty string on error")
    running: bool = Field(..., description="Whether the service runs after the command")


@output_schema("service", "start")
class ServiceStartOutput(_ServiceOutput):
    """Output of ``cmd_start``."""


@output_schema("service", "stop")
class ServiceStopOutput(_ServiceOutput):
    """Output of ``cmd_stop``."""


@output_schema("service", "restart")
class ServiceRestartOutput(_ServiceOutput):
    """Output of ``cmd_restart``."""
