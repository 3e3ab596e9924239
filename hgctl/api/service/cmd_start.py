"""Service start command."""

from ..config.ControllerConfig import ControllerConfig
from ..config.ServiceSpec import ServiceSpec
from .._output_schemas.service import ServiceStartOutput
from ..StageResult import StageResult
from ._operation_stage import _operation_stage
from .Command import Command


def cmd_start(spec: ServiceSpec | None = None, config: ControllerConfig | None = None) -> StageResult:
    """Start the service unless it is already running.

    Behavior:
    - **Already running** (PID file names a live process): no-op, reports success
    - **Stale PID file**: the file is removed and the binary is launched
    - **Disabled service**: refused with an error
    - **Binary missing or not executable**: fails, no PID file is written

    This command is idempotent - safe to run multiple times.
    """
    return _operation_stage("Starting", Command.START, ServiceStartOutput, spec, config)
