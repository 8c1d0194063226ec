"""Archive command group."""

from pathlib import Path

import typer

from larc.api.archive.cmd_capture import cmd_capture
from larc.api.archive.cmd_fetch import cmd_fetch
from larc.api.archive.cmd_reset import cmd_reset
from larc.api.archive.cmd_revert import cmd_revert
from larc.api.archive.cmd_run import cmd_run
from larc.cli._handle_stage_result import _handle_stage_result
from larc.cli._sub_app import _sub_app

_PATH = typer.Argument(..., help="Markdown or Org document")
_CURSOR = typer.Option(None, "--cursor", "-c", help="Offset inside the section to work on")
_START = typer.Option(None, "--start", help="Region start offset")
_END = typer.Option(None, "--end", help="Region end offset")


def archive() -> typer.Typer:
    app = _sub_app("archive", "Fetch titles, archive links and maintain archived links")

    @app.command(name="fetch")
    def fetch_cmd(
        ctx: typer.Context,
        path: Path = _PATH,
        cursor: int | None = _CURSOR,
        start: int | None = _START,
        end: int | None = _END,
    ) -> None:
        """Replace bare URLs with links labelled by the page title."""
        _handle_stage_result(cmd_fetch, ctx)(path, cursor, start, end)

    @app.command(name="run")
    def run_cmd(
        ctx: typer.Context,
        path: Path = _PATH,
        cursor: int | None = _CURSOR,
        start: int | None = _START,
        end: int | None = _END,
    ) -> None:
        """Archive links into the configured link order."""
        _handle_stage_result(cmd_run, ctx)(path, cursor, start, end)

    @app.command(name="capture")
    def capture_cmd(
        ctx: typer.Context,
        path: Path = _PATH,
        cursor: int | None = _CURSOR,
        start: int | None = _START,
        end: int | None = _END,
    ) -> None:
        """Fetch titles, then archive."""
        _handle_stage_result(cmd_capture, ctx)(path, cursor, start, end)

    @app.command(name="revert")
    def revert_cmd(
        ctx: typer.Context,
        path: Path = _PATH,
        cursor: int | None = _CURSOR,
        start: int | None = _START,
        end: int | None = _END,
    ) -> None:
        """Collapse archived links whose artifact or companion is missing."""
        _handle_stage_result(cmd_revert, ctx)(path, cursor, start, end)

    @app.command(name="reset")
    def reset_cmd(
        ctx: typer.Context,
        path: Path = _PATH,
        cursor: int | None = _CURSOR,
        start: int | None = _START,
        end: int | None = _END,
    ) -> None:
        """Collapse archived links to a single link and delete their files."""
        _handle_stage_result(cmd_reset, ctx)(path, cursor, start, end)

    return app
