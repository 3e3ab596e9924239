"""Service module - command dispatch and process lifecycle."""

from .Command import Command, usage_message
from .errors import (
    LaunchError,
    NotRunningError,
    ServiceDisabledError,
    ServiceError,
    TerminationTimeout,
    UsageError,
)

__all__ = [
    "Command",
    "LaunchError",
    "NotRunningError",
    "ServiceDisabledError",
    "ServiceError",
    "TerminationTimeout",
    "UsageError",
    "usage_message",
]
