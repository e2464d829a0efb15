"""Shared options and helpers for CLI commands.

This module provides the options common to the entry commands and the
logic turning them into an injector chain.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from injectctl.core.chain import InjectorChain
from injectctl.core.discovery import discover_injectors
from injectctl.core.injector import Injector
from injectctl.core.profiles import ProfileError, get_profile, load_profiles
from injectctl.models.injection import InjectionType
from injectctl.utils.formatting import print_error

EntryArgument = Annotated[
    str,
    typer.Argument(help="Entry to operate on (e.g. a module or provider class name)."),
]

RootOption = Annotated[
    Path,
    typer.Option(
        "--root",
        "-r",
        help="Project root the configuration files are relative to.",
        file_okay=False,
    ),
]

ProfileOption = Annotated[
    list[str] | None,
    typer.Option(
        "--profile",
        "-p",
        help="Profile to use (repeatable). Default: discover from the project.",
    ),
]

ProfilesFileOption = Annotated[
    Path | None,
    typer.Option(
        "--profiles-file",
        help="Profiles TOML file (default: ~/.config/injectctl/profiles.toml).",
        dir_okay=False,
    ),
]


def build_chain(
    root: Path,
    profile_names: list[str] | None,
    profiles_file: Path | None,
    *,
    injection_type: InjectionType | None = None,
    dependencies: Sequence[str] = (),
    application_modules: Sequence[str] = (),
) -> InjectorChain:
    """Build the injector chain selected by the CLI options.

    Explicitly named profiles are used as given; otherwise the profiles
    whose configuration exists under the project root are discovered.

    Args:
        root: Project root directory.
        profile_names: Profiles named with --profile, if any.
        profiles_file: Custom profiles file, if any.
        injection_type: If given, only keep profiles registering this type.
        dependencies: Entries a component must be inserted after.
        application_modules: Entries a module must be inserted before.

    Returns:
        InjectorChain for the selected configuration files.

    Raises:
        typer.Exit: If the profiles cannot be loaded or a name is unknown.
    """
    try:
        profiles = load_profiles(profiles_file)
        if not profile_names:
            return discover_injectors(
                root,
                profiles.values(),
                injection_type=injection_type,
                dependencies=dependencies,
                application_modules=application_modules,
            )
        selected = [get_profile(name, profiles) for name in profile_names]
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    return InjectorChain(
        Injector(
            profile,
            root,
            dependencies=dependencies,
            application_modules=application_modules,
        )
        for profile in selected
        if injection_type is None or injection_type in profile.allowed_types
    )
