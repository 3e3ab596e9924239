"""Log module - unified controller log file."""

from .append_log import append_log
from .DomainLogger import DomainLogger
from .LOG_PATTERN import LOG_PATTERN

__all__ = [
    "LOG_PATTERN",
    "DomainLogger",
    "append_log",
]
