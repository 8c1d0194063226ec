"""Factory for command group apps."""

import typer

_CONTEXT = {"help_option_names": ["-h", "--help"]}


def _sub_app(name: str, help: str) -> typer.Typer:
    """Typer group that prints its help to stderr when run without a command."""
    app = typer.Typer(
        name=name,
        help=help,
        pretty_exceptions_enable=False,
        context_settings=_CONTEXT,
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    return app
