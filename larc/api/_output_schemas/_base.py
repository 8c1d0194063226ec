"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    errors: list[str] = Field(default_factory=list, description="Error messages of this run")
    warnings: list[str] = Field(default_factory=list, description="Warning messages of this run")
