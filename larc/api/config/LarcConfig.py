"""Top-level larc configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ArchiveConfig import ArchiveConfig
from .LogConfig import LogConfig
from .ToolsConfig import ToolsConfig


class LarcConfig(BaseModel):
    """Contents of ``config.json`` in the larc home directory.

    The home directory is ``$LARC_HOME`` when set, ``~/.larc`` otherwise; it
    also holds the unified logfile.
    """

    model_config = ConfigDict(extra="forbid")

    archive: ArchiveConfig
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @staticmethod
    def get_home_dir() -> Path:
        home = os.environ.get("LARC_HOME")
        return Path(home).expanduser().resolve() if home else Path.home() / ".larc"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def get_logfile_path(cls) -> Path:
        return cls.get_home_dir() / "logfile"

    @classmethod
    def load(cls) -> "LarcConfig":
        """Read and validate the config file.

        Raises:
            ValueError: If the file is missing, is not JSON, or fails
                validation; the message names the first invalid field
        """
        path = cls.get_config_path()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ValueError(f"Configuration file not found at {path}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            where = ".".join(str(part) for part in first["loc"])
            raise ValueError(f"Configuration validation error in {path}: {where}: {first['msg']}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Write the config file through a temporary file so readers never see a partial one."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(path.name + ".tmp")
        temp_path.write_text(json.dumps(self.to_dict(), indent=4), encoding="utf-8")
        temp_path.replace(path)
