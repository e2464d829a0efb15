"""Notification channel for injector operations.

Injectors report skipped, blocked and completed operations through a
Notifier instead of raising, so callers decide how messages are shown.
"""

from typing import Protocol

from rich.markup import escape

from injectctl.utils.formatting import print_error, print_info


class Notifier(Protocol):
    """Receives leveled messages from injectors."""

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...

    def error(self, message: str) -> None:
        """Report an error message."""
        ...


class ConsoleNotifier:
    """Notifier printing to the Rich console.

    Attributes:
        error_count: Number of error messages reported so far.
    """

    def __init__(self) -> None:
        self.error_count = 0

    def info(self, message: str) -> None:
        print_info(escape(message))

    def error(self, message: str) -> None:
        self.error_count += 1
        print_error(escape(message))
