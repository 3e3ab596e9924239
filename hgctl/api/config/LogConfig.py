"""Log configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .get_home_dir import get_home_dir

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


class LogConfig(BaseModel):
    """Controller log file configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Lowest level written to the log")
    file: Path | None = Field(None, description="Log file path, defaults to <home>/logs/hgctl.log")

    def get_log_path(self) -> Path:
        """Resolve the log file path."""
        if self.file is not None:
            return self.file.expanduser()
        return get_home_dir("logs", "hgctl.log")

    def enabled_for(self, level: str) -> bool:
        """Whether an entry at ``level`` passes the configured threshold."""
        return LOG_LEVELS.index(level) >= LOG_LEVELS.index(self.level)
