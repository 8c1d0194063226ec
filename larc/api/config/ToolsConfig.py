"""External tool configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolsConfig(BaseModel):
    """Commands spawned for archiving pages and extracting titles.

    Arguments may use ``{url}``, ``{output}`` and ``{python}`` (the running
    interpreter).
    """

    model_config = ConfigDict(extra="forbid")

    archiver: list[str] = Field(
        default_factory=lambda: ["{python}", "-m", "larc.api.archive._archive_page", "{url}", "{output}"],
        description="Command writing a single-file snapshot of {url} to {output}",
    )
    title_extractor: list[str] = Field(
        default_factory=lambda: ["{python}", "-m", "larc.api.archive._extract_title", "{url}"],
        description="Command printing the title of {url} on stdout",
    )

    @field_validator("archiver")
    @classmethod
    def _check_archiver(cls, value: list[str]) -> list[str]:
        joined = " ".join(value)
        if not value or "{url}" not in joined or "{output}" not in joined:
            raise ValueError("archiver command must use {url} and {output}")
        return value

    @field_validator("title_extractor")
    @classmethod
    def _check_title_extractor(cls, value: list[str]) -> list[str]:
        if not value or "{url}" not in " ".join(value):
            raise ValueError("title_extractor command must use {url}")
        return value
