"""Output schemas for log commands."""

from pydantic import Field

from ..schema_registry import output_schema
from ._base import BaseOutputSchema


@output_schema("log", "status")
class LogStatusOutput(BaseOutputSchema):
    log_path: str = Field(..., description="Path to the logfile")
    size_bytes: int = Field(..., description="Logfile size after dropping expired entries")
    levels: dict[str, int] = Field(..., description="Entries per level")
    domains: dict[str, int] = Field(..., description="Entries per domain (archive, queue, ...)")
    last_error: str | None = Field(..., description="Most recent ERROR entry")


@output_schema("log", "prune")
class LogPruneOutput(BaseOutputSchema):
    pruned: dict[str, int] = Field(..., description="Removed entries per level")
    kept: int = Field(..., description="Entries left in the logfile")

