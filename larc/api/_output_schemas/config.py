"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import output_schema
from ._base import BaseOutputSchema


@output_schema("config", "show")
class ConfigShowOutput(BaseOutputSchema):
    section: str = Field(..., description="Requested section, empty for the section list")
    content: dict[str, Any] = Field(..., description="Section content or the list of sections")
    config_path: str = Field(..., description="Config file the values came from")
