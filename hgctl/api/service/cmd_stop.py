"""Service stop command."""

from ..config.ControllerConfig import ControllerConfig
from ..config.ServiceSpec import ServiceSpec
from .._output_schemas.service import ServiceStopOutput
from ..StageResult import StageResult
from ._operation_stage import _operation_stage
from .Command import Command


def cmd_stop(spec: ServiceSpec | None = None, config: ControllerConfig | None = None) -> StageResult:
    """Stop the service process.

    Best-effort: stopping a service that is not running reports success
    unless strict_stop is configured.
    """
    return _operation_stage("Stopping", Command.STOP, ServiceStopOutput, spec, config)
