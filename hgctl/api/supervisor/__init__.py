"""Supervisor module - process launch, liveness and signalling."""

from .get_supervisor import detect_backend, get_supervisor
from .ProcessSupervisor import ProcessSupervisor

__all__ = [
    "ProcessSupervisor",
    "detect_backend",
    "get_supervisor",
]
