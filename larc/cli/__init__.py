"""larc command line."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status instead of exiting."""
    import click
    import typer

    from larc.cli._create_app import _create_app

    try:
        status = _create_app()(sys.argv[1:] if argv is None else argv, standalone_mode=False)
    except click.exceptions.Exit as e:
        return e.exit_code
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1 if e.code else 0
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted", err=True)
        return 130
    return status if isinstance(status, int) else 0
