"""Commands accepted by the service controller."""

from enum import Enum

from ...constants import USAGE_COMMANDS


class Command(str, Enum):
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "Command":
        """Map a command-line word to a Command; ``force-reload`` is an alias of restart."""
        if value == "force-reload":
            return cls.RESTART
        if value in ("start", "stop", "restart"):
            return cls(value)
        return cls.UNKNOWN


def usage_message(prog: str) -> str:
    """The usage line printed for unrecognized commands."""
    return f"Usage: {prog} {USAGE_COMMANDS}"
