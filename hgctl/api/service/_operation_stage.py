"""Shared 4-stage wrapper around a ServiceController operation."""

from collections.abc import Iterator

from pydantic import BaseModel

from ...constants import DEFAULT_NAME
from ..config.ControllerConfig import ControllerConfig
from ..config.ServiceSpec import ServiceSpec
from ..StageResult import StageResult
from .Command import Command
from .errors import ServiceError
from .ServiceController import ServiceController

_WARNINGS = {
    "already_running": "{name} was already running",
    "not_running": "{name} was not running",
    "stale": "Removed stale PID file {pid_file}",
}


def _operation_stage(
    verb: str,
    command: Command,
    output_class: type[BaseModel],
    spec: ServiceSpec | None,
    config: ControllerConfig | None,
) -> StageResult:
    name = spec.name if spec is not None else DEFAULT_NAME

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            resolved_spec = spec if spec is not None else ServiceSpec.load()
            resolved_config = config if config is not None else ControllerConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = output_class(
                errors=[str(e)],
                warnings=[],
                name=name,
                pid=-1,
                pid_file="",
                action="",
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.3, "Initializing supervisor...")
        controller = ServiceController(resolved_spec, resolved_config)

        yield (0.5, f"{verb} {resolved_spec.name}...")
        try:
            outcome = controller.run(command)
        except ServiceError as e:
            yield (1.0, "Complete")
            pid = controller.running_pid()
            result_obj.result = f"Error {verb.lower()} {resolved_spec.name}: {e}"
            result_obj.output = output_class(
                errors=[str(e)],
                warnings=[],
                name=resolved_spec.name,
                pid=pid if pid is not None else -1,
                pid_file=str(resolved_spec.pid_file),
                action="",
                running=pid is not None,
            ).model_dump(mode="python")
            result_obj.success = False
            return
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error {verb.lower()} {resolved_spec.name}: {e}"
            result_obj.output = output_class(
                errors=[str(e)],
                warnings=[],
                name=resolved_spec.name,
                pid=-1,
                pid_file=str(resolved_spec.pid_file),
                action="",
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = []
        if outcome["action"] in _WARNINGS:
            warnings.append(_WARNINGS[outcome["action"]].format(name=resolved_spec.name, pid_file=resolved_spec.pid_file))
        result_obj.result = f"{resolved_spec.name}."
        result_obj.output = output_class(
            errors=[],
            warnings=warnings,
            name=resolved_spec.name,
            pid=outcome["pid"],
            pid_file=str(resolved_spec.pid_file),
            action=outcome["action"],
            running=outcome["running"],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"{verb} {name}: ",
        progress_callback=do_work,
    )
