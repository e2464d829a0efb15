"""Core registration engine for injectctl.

This module exports the injectors, profile helpers and errors.
"""

from injectctl.core.base import ConfigInjector
from injectctl.core.chain import InjectorChain, NoopInjector
from injectctl.core.discovery import discover_injectors, discover_profiles, profile_applies
from injectctl.core.errors import (
    InjectorError,
    PatternMismatchError,
    StorageError,
    UnsupportedTypeError,
)
from injectctl.core.injector import Injector
from injectctl.core.notifier import ConsoleNotifier, Notifier
from injectctl.core.profiles import (
    BUILTIN_PROFILES,
    ProfileError,
    ProfileNotFoundError,
    ProfileParseError,
    ProfileValidationError,
    get_profile,
    load_profiles,
    save_profiles,
)

__all__ = [
    "BUILTIN_PROFILES",
    "ConfigInjector",
    "ConsoleNotifier",
    "Injector",
    "InjectorChain",
    "InjectorError",
    "Notifier",
    "NoopInjector",
    "PatternMismatchError",
    "ProfileError",
    "ProfileNotFoundError",
    "ProfileParseError",
    "ProfileValidationError",
    "StorageError",
    "UnsupportedTypeError",
    "discover_injectors",
    "discover_profiles",
    "get_profile",
    "load_profiles",
    "profile_applies",
    "save_profiles",
]
