"""Default label of a link kind."""

from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

# Fields available to computed labels
LABEL_FIELDS = ("title", "url", "domain", "date")


class LabelSpec(BaseModel):
    """Either a literal label or one computed when the link is written.

    Computed labels come from config as a ``str.format`` template over
    ``title``, ``url``, ``domain`` and ``date``, or from code as a callable
    receiving the same fields as a dict.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["literal", "computed"] = Field(..., description="Label variant")
    value: str = Field("", description="Literal text, or the template of a computed label")
    _func: Callable[[dict[str, str]], str] | None = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _check_template(self) -> "LabelSpec":
        if self.type == "computed":
            try:
                self.value.format(**{name: "" for name in LABEL_FIELDS})
            except (KeyError, IndexError, ValueError) as e:
                raise ValueError(f"Invalid label template {self.value!r}: {e}") from e
        return self

    @classmethod
    def literal(cls, value: str) -> "LabelSpec":
        return cls(type="literal", value=value)

    @classmethod
    def computed(cls, source: str | Callable[[dict[str, str]], str]) -> "LabelSpec":
        if isinstance(source, str):
            return cls(type="computed", value=source)
        spec = cls(type="computed")
        spec._func = source
        return spec

    def resolve(self, fields: dict[str, str]) -> str:
        if self.type == "literal":
            return self.value
        if self._func is not None:
            return self._func(dict(fields))
        return self.value.format(**{name: fields.get(name, "") for name in LABEL_FIELDS})
