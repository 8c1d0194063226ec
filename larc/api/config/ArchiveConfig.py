"""Archive configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..link.LinkKind import LinkKind
from .LabelSpec import LabelSpec


def _default_labels() -> dict[LinkKind, LabelSpec]:
    return {
        LinkKind.URL: LabelSpec.literal("link"),
        LinkKind.ARTIFACT: LabelSpec.literal("archive"),
        LinkKind.COMPANION: LabelSpec.literal("notes"),
    }


class ArchiveConfig(BaseModel):
    """Where artifacts live and how archived links are written."""

    model_config = ConfigDict(extra="forbid")

    artifact_dir: Path = Field(..., description="Directory holding archived artifacts")
    companion_dir: Path = Field(..., description="Directory holding companion documents")
    order: list[LinkKind] = Field(..., description="Archive-order template: link kinds of a canonical cluster")
    separator: str = Field(" | ", description="Text between the links of one cluster")
    artifact_extension: str = Field(".html", description="Extension of archived artifacts")
    labels: dict[LinkKind, LabelSpec] = Field(default_factory=_default_labels, description="Default label per kind")
    url_override: LinkKind | None = Field(None, description="Kind whose label is the literal URL")
    title_override: LinkKind | None = Field(LinkKind.URL, description="Kind whose label is the resolved title")
    domain_map: dict[str, str] = Field(default_factory=dict, description="Original origin to mirror origin")
    hash_placement: Literal["prefix", "suffix"] = Field("prefix", description="Hash before or after the title")
    slow_title_domains: list[str] = Field(default_factory=list, description="Domains that always use the archival title fetch")
    delete_on_reset: bool = Field(True, description="Delete artifact and companion files on reset")
    region_start_offset: int = Field(0, ge=0, description="Characters to move a computed region start backwards")

    @field_validator("artifact_dir", "companion_dir")
    @classmethod
    def _expand(cls, value: Path) -> Path:
        return Path(value).expanduser()

    @field_validator("order")
    @classmethod
    def _check_order(cls, value: list[LinkKind]) -> list[LinkKind]:
        if not value:
            raise ValueError("order must name at least one link kind")
        if LinkKind.UNTYPED in value:
            raise ValueError("order cannot contain 'untyped'")
        if len(set(value)) != len(value):
            raise ValueError("order cannot repeat a link kind")
        return value

    @model_validator(mode="after")
    def _fill_labels(self) -> "ArchiveConfig":
        for kind, spec in _default_labels().items():
            self.labels.setdefault(kind, spec)
        return self

    def label_for(self, kind: LinkKind, fields: dict[str, str]) -> str:
        """Visible label of a leg of ``kind``."""
        if kind == self.url_override:
            return fields["url"]
        if kind == self.title_override:
            return fields["title"]
        return self.labels[kind].resolve(fields)
