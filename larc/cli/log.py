"""Log command group."""

import typer

from larc.api.log.cmd_prune import cmd_prune
from larc.api.log.cmd_status import cmd_status
from larc.cli._handle_stage_result import _handle_stage_result
from larc.cli._sub_app import _sub_app


def log() -> typer.Typer:
    app = _sub_app("log", "Inspect and prune the unified logfile")

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Count entries per level and domain after dropping expired ones."""
        _handle_stage_result(cmd_status, ctx)()

    @app.command(name="prune")
    def prune_cmd(
        ctx: typer.Context,
        level: list[str] = typer.Option(["DEBUG", "INFO"], "--level", "-l", help="Level to remove (repeatable)"),
        domain: str | None = typer.Option(None, "--domain", help="Only remove entries of this domain, e.g. archive"),
    ) -> None:
        """Remove log entries by level."""
        _handle_stage_result(cmd_prune, ctx)(level, domain)

    return app
