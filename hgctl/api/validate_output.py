"""Check a command's output dict against the schema registered for it."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` of ``func`` and return it normalized.

    The schema is found from the function itself: ``hgctl.api.<domain>.cmd_<name>``
    maps to the schema registered for ``(domain, name)``. Functions outside
    ``hgctl.api`` or without a registered schema pass through unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    parts = func.__module__.split(".")
    if parts[:2] != ["hgctl", "api"] or len(parts) < 3 or not func.__name__.startswith("cmd_"):
        return output

    domain = parts[2]
    command_name = func.__name__.removeprefix("cmd_")
    schema_class = get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}\nGot output: {output}") from e
