"""Check command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .. import _output_schemas  # noqa: F401
from ..schema_registry import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` of command ``func`` and return it with defaults filled in.

    The schema is looked up from the command's location: ``cmd_<command>`` in
    ``larc.api.<domain>``. Commands without a registered schema pass through.

    Raises:
        ValueError: If the output does not match the schema
    """
    parts = func.__module__.split(".")
    if parts[:2] != ["larc", "api"] or len(parts) < 3 or not func.__name__.startswith("cmd_"):
        return output
    domain, command = parts[2], func.__name__.removeprefix("cmd_")
    schema = get_output_schema(domain, command)
    if schema is None:
        return output
    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output of {domain}.{command} does not match {schema.__name__}: {e}") from e
