"""Render the four stages of one command run."""

import sys
from collections.abc import Callable

from rich.markup import escape

from larc.api.config.validate_output import validate_output

from .display.Display import Display


def _run_single_execution(func: Callable, args: tuple, kwargs: dict, display: Display, display_format: str) -> None:
    """Announce, stream progress, report the result, then print the output.

    Exits with status 0 on success and 1 otherwise. Output that does not
    match the command's registered schema is a programming error and raises.
    """
    stage = func(*args, **kwargs)
    display.status(stage.announce)

    for fraction, message in stage.progress_callback(stage):
        display.info(f"[dim]{fraction:>4.0%}[/dim] {escape(message)}")

    if not stage.result or not stage.output:
        raise ValueError(f"{func.__name__} finished without setting result and output")
    stage.output = validate_output(func, stage.output)

    (display.success if stage.success else display.error)(stage.result)
    for warning in stage.output.get("warnings", []):
        display.warning(warning)
    display.json_output(stage.output, format=display_format)

    sys.exit(0 if stage.success else 1)
