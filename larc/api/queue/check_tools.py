"""Verify that configured external tools exist."""

import shutil

from ..config.ToolsConfig import ToolsConfig
from .expand_command import expand_command
from .MissingToolError import MissingToolError


def check_tools(tools: ToolsConfig) -> None:
    """Raise ``MissingToolError`` unless every configured executable is found."""
    for name, template in (("archiver", tools.archiver), ("title_extractor", tools.title_extractor)):
        executable = expand_command(template)[0]
        if shutil.which(executable) is None:
            raise MissingToolError(f"{name} executable not found: {executable}. Install it or change tools.{name} in config.")
