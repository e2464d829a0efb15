"""Check command implementation.

Shows whether an entry is registered in each configuration file of a
project.
"""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from injectctl.cli.types import (
    EntryArgument,
    ProfileOption,
    ProfilesFileOption,
    RootOption,
    build_chain,
)
from injectctl.core.errors import InjectorError
from injectctl.core.injector import Injector
from injectctl.utils.formatting import console, format_registered, print_error, print_warning


def check(
    entry: EntryArgument,
    root: RootOption = Path("."),
    profile: ProfileOption = None,
    profiles_file: ProfilesFileOption = None,
) -> None:
    """Check whether an entry is registered.

    Exits with code 0 if the entry is registered in at least one
    configuration file, 1 otherwise.

    Examples:
        injectctl check Zend\\Router
        injectctl check Blog --root ./my-app --profile modules
    """
    chain = build_chain(root, profile, profiles_file)
    if not len(chain):
        print_warning(f"No known configuration files found under {escape(str(root))}")
        raise typer.Exit(code=1)

    table = Table(
        title=f"Registration of {escape(entry)}",
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Profile", no_wrap=True)
    table.add_column("Config File", style="info")
    table.add_column("Status")

    found = False
    for injector in chain:
        if not isinstance(injector, Injector):
            continue
        try:
            registered = injector.is_registered(entry)
        except InjectorError as e:
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e
        found = found or registered
        table.add_row(
            injector.profile.name,
            escape(str(injector.config_path)),
            format_registered(registered),
        )

    console.print(table)
    if not found:
        raise typer.Exit(code=1)
