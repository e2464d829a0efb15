"""Abstract base class for configuration injectors.

This module defines the interface shared by the pattern-driven injector,
the injector chain and the no-op injector.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Self

from injectctl.core.notifier import Notifier
from injectctl.models.injection import InjectionType


class ConfigInjector(ABC):
    """Abstract base class for all configuration injectors.

    Injectors register and unregister named entries in a configuration
    list. Routine outcomes (already registered, missing dependency,
    removed) are reported through a Notifier; failures raise
    InjectorError subclasses.

    Example:
        >>> injector = Injector(get_profile("modules"), project_root)
        >>> if injector.registers_type(InjectionType.MODULE):
        ...     injector.inject("Blog", InjectionType.MODULE, ConsoleNotifier())
    """

    @property
    @abstractmethod
    def allowed_types(self) -> frozenset[InjectionType]:
        """Return the injection types this injector can register."""

    def registers_type(self, injection_type: InjectionType) -> bool:
        """Check whether this injector can register the given type.

        Args:
            injection_type: Injection type to check.

        Returns:
            True if entries of this type can be injected.
        """
        return injection_type in self.allowed_types

    @abstractmethod
    def is_registered(self, entry: str) -> bool:
        """Check whether an entry is present in the configuration.

        Args:
            entry: Entry name to look for.

        Returns:
            True if the entry is registered.

        Raises:
            StorageError: If the configuration cannot be read.
        """

    @abstractmethod
    def inject(self, entry: str, injection_type: InjectionType, notifier: Notifier) -> None:
        """Register an entry in the configuration.

        Args:
            entry: Entry name to register.
            injection_type: Role of the entry, selecting the insertion pattern.
            notifier: Channel receiving skip and error messages.

        Raises:
            StorageError: If the configuration cannot be read or written.
            PatternMismatchError: If the insertion pattern matches nothing.
            UnsupportedTypeError: If the injection type is not registered.
        """

    @abstractmethod
    def remove(self, entry: str, notifier: Notifier) -> None:
        """Unregister an entry from the configuration.

        Args:
            entry: Entry name to remove.
            notifier: Channel receiving the removal message.

        Raises:
            StorageError: If the configuration cannot be read or written.
            PatternMismatchError: If the removal pattern matches nothing.
        """

    @abstractmethod
    def with_dependencies(self, dependencies: Sequence[str]) -> Self:
        """Return an injector that places components after these dependencies."""

    @abstractmethod
    def with_application_modules(self, modules: Sequence[str]) -> Self:
        """Return an injector that places modules before these application modules."""
