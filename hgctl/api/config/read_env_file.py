"""Read a shell-style environment override file (``/etc/default/<name>``)."""

import re
from pathlib import Path

from dotenv.parser import Binding, parse_stream

_VAR_REF = re.compile(r"\$(?:\{([A-Za-z_][A-Za-z0-9_]*)\}|([A-Za-z_][A-Za-z0-9_]*))")


def expand_vars(text: str, variables: dict[str, str]) -> str:
    """Expand ``$VAR`` and ``${VAR}`` references; unknown names expand to ''."""
    return _VAR_REF.sub(lambda m: variables.get(m.group(1) or m.group(2), ""), text)


def _line_number(binding: Binding) -> int:
    # The binding's text starts with any blank lines that preceded it
    text = binding.original.string
    return binding.original.line + text[: len(text) - len(text.lstrip())].count("\n")


def _is_single_quoted(binding: Binding) -> bool:
    _key, _sep, raw_value = binding.original.string.partition("=")
    return raw_value.lstrip().startswith("'")


def read_env_file(path: Path, variables: dict[str, str] | None = None) -> dict[str, str]:
    """Apply the assignments in ``path`` on top of ``variables``.

    Lines are parsed with python-dotenv: ``KEY=VALUE`` with optional
    ``export``, ``#`` comments, and single or double quotes with backslash
    escapes. Unquoted and double-quoted values are then expanded against the
    variables assigned so far; single-quoted values stay literal.

    Args:
        path: Override file to read
        variables: Starting variables (usually the built-in defaults)

    Returns:
        New dict holding the starting variables plus every assignment

    Raises:
        ValueError: If a line is not an assignment or cannot be parsed
    """
    result = dict(variables or {})
    try:
        with path.open(encoding="utf-8") as fh:
            bindings = list(parse_stream(fh))
    except OSError as e:
        raise ValueError(f"Cannot read environment file {path}: {e}") from e

    for binding in bindings:
        if binding.error or (binding.key is not None and binding.value is None):
            raise ValueError(
                f"{path}:{_line_number(binding)}: expected KEY=VALUE, got {binding.original.string.strip()!r}"
            )
        if binding.key is None:
            continue
        value = binding.value if _is_single_quoted(binding) else expand_vars(binding.value, result)
        result[binding.key] = value
    return result
