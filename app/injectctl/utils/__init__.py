"""Utility modules for injectctl.

This module exports commonly used utility functions.
"""

from injectctl.utils.formatting import (
    console,
    create_profile_table,
    err_console,
    format_registered,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_profile_table",
    "err_console",
    "format_registered",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
