"""Output schemas for archive commands."""

from pydantic import Field

from ..schema_registry import output_schema
from ._base import BaseOutputSchema


@output_schema("archive", "fetch")
@output_schema("archive", "run")
@output_schema("archive", "capture")
@output_schema("archive", "revert")
class ArchivePipelineOutput(BaseOutputSchema):
    """Output schema for commands that run queued operations on a document."""

    path: str = Field(..., description="Document path")
    region: list[int] = Field(..., description="Region start and end offsets when queued")
    opcodes: list[str] = Field(..., description="Operations queued for the region")
    titles: int = Field(..., description="Links rewritten with a fetched title")
    clusters: int = Field(..., description="Link clusters rewritten by archiving")
    downloads: int = Field(..., description="Download jobs queued")
    reverted: int = Field(..., description="Clusters reverted because a file was missing")
    saved: bool = Field(..., description="Whether the document was written back")


@output_schema("archive", "reset")
class ArchiveResetOutput(BaseOutputSchema):
    """Output schema for archive reset command."""

    path: str = Field(..., description="Document path")
    region: list[int] = Field(..., description="Region start and end offsets")
    reset: int = Field(..., description="Clusters reset to a single link")
    deleted: list[str] = Field(..., description="Files deleted")
    saved: bool = Field(..., description="Whether the document was written back")
