"""PID file module."""

from .PidFile import PidFile

__all__ = ["PidFile"]
