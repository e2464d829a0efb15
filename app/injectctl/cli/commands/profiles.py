"""Profiles command implementation.

Lists the available injector profiles and exports the built-in ones to
the user profiles file for customization.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from injectctl.core.paths import get_profiles_path
from injectctl.core.profiles import BUILTIN_PROFILES, ProfileError, load_profiles, save_profiles
from injectctl.utils.formatting import (
    console,
    create_profile_table,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Manage injector profiles.",
    no_args_is_help=True,
)


@app.command("list")
def list_profiles(
    profiles_file: Annotated[
        Path | None,
        typer.Option(
            "--profiles-file",
            help="Profiles TOML file (default: ~/.config/injectctl/profiles.toml).",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """List built-in and user-defined profiles."""
    try:
        profiles = load_profiles(profiles_file)
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    table = create_profile_table()
    for name, profile in sorted(profiles.items()):
        source = "" if BUILTIN_PROFILES.get(name) == profile else " [muted](user)[/]"
        table.add_row(
            f"{escape(name)}{source}",
            escape(profile.config_file),
            ", ".join(t.value for t in profile.allowed_types),
            escape(profile.description or "-"),
        )
    console.print(table)


@app.command()
def export(
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            help="Destination file (default: ~/.config/injectctl/profiles.toml).",
            dir_okay=False,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing profiles file.",
        ),
    ] = False,
) -> None:
    """Write the built-in profiles to a TOML file for editing."""
    target = path or get_profiles_path()
    if target.exists() and not force:
        print_error(f"Profiles file already exists: {escape(str(target))}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_profiles(BUILTIN_PROFILES, path)
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Exported {len(BUILTIN_PROFILES)} profiles to {escape(str(saved))}")
