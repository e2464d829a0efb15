"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "registered": "#03b971",
        "unregistered": "#b2bec3",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_profile_table(title: str = "Injector Profiles") -> Table:
    """Create a pre-configured table for displaying profiles.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for profile display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Profile", no_wrap=True)
    table.add_column("Config File", style="info")
    table.add_column("Types", style="muted")
    table.add_column("Description", style="text", overflow="ellipsis")
    return table


def format_registered(registered: bool) -> str:
    """Format a registration state with color markup.

    Args:
        registered: True if the entry is registered.

    Returns:
        Rich markup string for status display.
    """
    if registered:
        return "[registered]● registered[/]"
    return "[unregistered]○ not registered[/]"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
