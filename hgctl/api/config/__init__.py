"""Config module - service description and controller settings."""

from .ControllerConfig import ControllerConfig
from .LogConfig import LogConfig
from .ServiceSpec import ServiceSpec

__all__ = [
    "ControllerConfig",
    "LogConfig",
    "ServiceSpec",
]
