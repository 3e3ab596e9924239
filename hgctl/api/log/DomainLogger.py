"""Level-filtered writer bound to one log domain."""

from ..config.LogConfig import LogConfig
from .append_log import append_log


class DomainLogger:
    """Writes unified log entries for a single domain, honoring the configured level."""

    def __init__(self, log_config: LogConfig, domain: str):
        self.log_config = log_config
        self.domain = domain
        self.log_path = log_config.get_log_path()

    def log(self, level: str, message: str) -> None:
        if self.log_config.enabled_for(level):
            append_log(self.log_path, self.domain, level, message)

    def debug(self, message: str) -> None:
        self.log("DEBUG", message)

    def info(self, message: str) -> None:
        self.log("INFO", message)

    def warn(self, message: str) -> None:
        self.log("WARN", message)

    def error(self, message: str) -> None:
        self.log("ERROR", message)
