"""Bridge from API commands to the terminal."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from .display.CLIDisplay import CLIDisplay
from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Display format chosen on the root command, ``yaml`` without a context."""
    obj = ctx.find_root().obj if ctx is not None else None
    if isinstance(obj, dict):
        return obj.get("display_format", "yaml")
    return "yaml"


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Run a ``StageResult`` command and render its stages with ``CLIDisplay``."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
