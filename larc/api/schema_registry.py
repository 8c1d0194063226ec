"""Output schemas keyed by ``(domain, command)``."""

from collections.abc import Callable

from pydantic import BaseModel

_SCHEMAS: dict[tuple[str, str], type[BaseModel]] = {}


def output_schema(domain: str, command: str) -> Callable[[type[BaseModel]], type[BaseModel]]:
    """Class decorator registering the output schema of ``larc.api.<domain>.cmd_<command>``."""

    def register(schema: type[BaseModel]) -> type[BaseModel]:
        if (domain, command) in _SCHEMAS:
            raise ValueError(f"Output schema for {domain}.{command} registered twice")
        _SCHEMAS[(domain, command)] = schema
        return schema

    return register


def get_output_schema(domain: str, command: str) -> type[BaseModel] | None:
    return _SCHEMAS.get((domain, command))
