"""Inject command implementation.

Registers an entry in the configuration files of a project, keeping it
after its dependencies and before the application modules.
"""

from pathlib import Path
from typing import Annotated

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
from injectctl.models.injection import InjectionType
from injectctl.utils.formatting import print_error, print_info, print_success, print_warning


def inject(
    entry: EntryArgument,
    injection_type: Annotated[
        InjectionType,
        typer.Option(
            "--type",
            "-t",
            help="Role of the entry, selecting where it is inserted.",
            case_sensitive=False,
        ),
    ] = InjectionType.MODULE,
    after: Annotated[
        list[str] | None,
        typer.Option(
            "--after",
            "-a",
            help="Dependency the entry must follow (repeatable, components only).",
        ),
    ] = None,
    app_module: Annotated[
        list[str] | None,
        typer.Option(
            "--app-module",
            help="Application module the entry must precede (repeatable, modules only).",
        ),
    ] = None,
    root: RootOption = Path("."),
    profile: ProfileOption = None,
    profiles_file: ProfilesFileOption = None,
) -> None:
    """Register an entry in the project configuration.

    Examples:
        injectctl inject Zend\\Router --type component
        injectctl inject Blog --app-module Application
        injectctl inject Zend\\Db --type component --after Zend\\Hydrator
        injectctl inject App\\ConfigProvider --type config-provider
    """
    chain = build_chain(
        root,
        profile,
        profiles_file,
        injection_type=injection_type,
        dependencies=after or (),
        application_modules=app_module or (),
    )
    if not len(chain):
        print_warning(
            f"No configuration under {escape(str(root))} accepts "
            f"{injection_type.value} entries"
        )
        raise typer.Exit(code=1)

    notifier = ConsoleNotifier()
    print_info(f"Registering {escape(entry)} as {injection_type.value}")
    try:
        chain.inject(entry, injection_type, notifier)
    except InjectorError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if notifier.error_count:
        raise typer.Exit(code=1)

    print_success("Done.")
