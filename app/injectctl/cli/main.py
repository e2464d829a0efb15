"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from injectctl import __version__
from injectctl.cli.commands import check, inject, profiles, remove
from injectctl.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="injectctl",
    help="Register entries in ordered configuration lists.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"injectctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """injectctl - Register entries in ordered configuration lists.

    Inserts and removes modules, components and config providers in
    configuration files while keeping dependencies ahead of dependents.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# Register commands
app.command(name="check")(check.check)
app.command(name="inject")(inject.inject)
app.command(name="remove")(remove.remove)
app.add_typer(profiles.app, name="profiles")


if __name__ == "__main__":
    app()
