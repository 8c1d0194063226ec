"""Root Typer app."""

import typer

from larc.cli._sub_app import _CONTEXT
from larc.cli.archive import archive
from larc.cli.config import config
from larc.cli.log import log

DISPLAY_FORMATS = ("yaml", "json")


def _create_app() -> typer.Typer:
    app = typer.Typer(
        help="larc: archive the links of Markdown and Org documents",
        pretty_exceptions_enable=False,
        context_settings=_CONTEXT,
        invoke_without_command=True,
    )
    for factory in (archive, config, log):
        app.add_typer(factory(), name=factory.__name__)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Structured output format: yaml or json"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            raise typer.BadParameter(f"expected one of {', '.join(DISPLAY_FORMATS)}", param_hint="--display")
        ctx.obj = {"display_format": display}
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
