"""Service restart command."""

from ..config.ControllerConfig import ControllerConfig
from ..config.ServiceSpec import ServiceSpec
from .._output_schemas.service import ServiceRestartOutput
from ..StageResult import StageResult
from ._operation_stage import _operation_stage
from .Command import Command


def cmd_restart(spec: ServiceSpec | None = None, config: ControllerConfig | None = None) -> StageResult:
    """Restart the service: best-effort stop, pause, then start.

    Stop failures are logged and ignored; start failures are reported.
    """
    return _operation_stage("Restarting", Command.RESTART, ServiceRestartOutput, spec, config)
