"""Output schemas for API commands - importing registers them."""

from ._registry import get_output_schema, output_schema, register_output_schema
from .service import ServiceRestartOutput, ServiceStartOutput, ServiceStopOutput

__all__ = [
    "ServiceRestartOutput",
    "ServiceStartOutput",
    "ServiceStopOutput",
    "get_output_schema",
    "output_schema",
    "register_output_schema",
]
