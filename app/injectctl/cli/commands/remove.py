"""Remove command implementation.

Unregisters an entry from the configuration files of a project.
"""

from pathlib import Path

import typer
from rich.markup import escape

from injectctl.cli.types import (
    EntryArgument,
    ProfileOption,
    ProfilesFileOption,
    RootOption,
    build_chain,
)
from injectctl.core.errors import InjectorError
from injectctl.core.notifier import ConsoleNotifier
from injectctl.utils.formatting import print_error, print_info, print_warning


def remove(
    entry: EntryArgument,
    root: RootOption = Path("."),
    profile: ProfileOption = None,
    profiles_file: ProfilesFileOption = None,
) -> None:
    """Unregister an entry from the project configuration.

    Configuration files that do not contain the entry are left untouched.
    Files are processed one at a time: if one fails, the files reported as
    removed before the error keep their changes.

    Examples:
        injectctl remove Blog
        injectctl remove Zend\\Router --profile application
    """
    chain = build_chain(root, profile, profiles_file)
    if not len(chain):
        print_warning(f"No known configuration files found under {escape(str(root))}")
        raise typer.Exit(code=1)

    notifier = ConsoleNotifier()
    try:
        if not chain.is_registered(entry):
            print_info(f"{escape(entry)} is not registered; nothing to remove")
            return
        chain.remove(entry, notifier)
    except InjectorError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
