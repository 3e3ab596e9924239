"""Lookup table from (domain, command) to the model describing its output."""

from collections.abc import Callable

from pydantic import BaseModel

_SCHEMA_REGISTRY: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Record ``schema_class`` as the output of ``cmd_<command_name>`` in ``domain``.

    Raises:
        ValueError: If the command already has a schema
    """
    key = (domain, command_name)
    if key in _SCHEMA_REGISTRY:
        raise ValueError(f"Schema already registered for {domain}.{command_name}")
    _SCHEMA_REGISTRY[key] = schema_class


def output_schema(domain: str, command_name: str) -> Callable[[type[BaseModel]], type[BaseModel]]:
    """Class decorator form of ``register_output_schema``."""

    def decorator(schema_class: type[BaseModel]) -> type[BaseModel]:
        register_output_schema(domain, command_name, schema_class)
        return schema_class

    return decorator


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMA_REGISTRY.get((domain, command_name))
