"""Create the main Typer CLI app."""

import typer

from marker.cli.check import check
from marker.cli.config import config


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Check the links in a tree of markdown documents",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    check(app)
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
