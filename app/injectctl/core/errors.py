"""Exception hierarchy for injectctl.

Conditions that are part of normal operation (an entry already being
registered, a missing dependency, no application module to anchor on)
are reported through a Notifier. Only failures raise.
"""


class InjectorError(Exception):
    """Base exception for injectctl errors."""


class StorageError(InjectorError):
    """Raised when a configuration file cannot be read or written."""


class PatternMismatchError(InjectorError):
    """Raised when an insertion or removal pattern matches nothing."""


class UnsupportedTypeError(InjectorError):
    """Raised when an injection type is not registered by an injector."""
