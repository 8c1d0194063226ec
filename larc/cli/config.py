"""Config command group."""

import typer

from larc.api.config.cmd_show import cmd_show
from larc.cli._handle_stage_result import _handle_stage_result
from larc.cli._sub_app import _sub_app


def config() -> typer.Typer:
    app = _sub_app("config", "Inspect the larc configuration")

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        section: str = typer.Argument("", help="archive, tools or log; omit to list the sections"),
    ) -> None:
        """Show one configuration section."""
        _handle_stage_result(cmd_show, ctx)(section)

    return app
