"""Expand a configured command template."""

import sys


def expand_command(template: list[str], url: str = "", output: str = "") -> list[str]:
    """Substitute ``{python}``, ``{url}`` and ``{output}`` in every argument.

    Plain ``str.replace`` keeps braces inside URLs intact.
    """
    return [arg.replace("{python}", sys.executable).replace("{url}", url).replace("{output}", output) for arg in template]
