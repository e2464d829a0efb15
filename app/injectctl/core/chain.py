"""Composite and no-op injectors.

An InjectorChain fans operations out to several injectors, typically one
per configuration file discovered in a project. A NoopInjector stands in
when no configuration applies.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence

from injectctl.core.base import ConfigInjector
from injectctl.core.errors import InjectorError
from injectctl.core.notifier import Notifier
from injectctl.models.injection import InjectionType

logger = logging.getLogger(__name__)


class InjectorChain(ConfigInjector):
    """Applies injector operations to every injector in the chain.

    Inserts only reach injectors that register the requested type;
    removals reach all of them.
    """

    def __init__(self, injectors: Iterable[ConfigInjector] = ()) -> None:
        self._injectors = tuple(injectors)

    def __iter__(self) -> Iterator[ConfigInjector]:
        return iter(self._injectors)

    def __len__(self) -> int:
        return len(self._injectors)

    @property
    def injectors(self) -> tuple[ConfigInjector, ...]:
        return self._injectors

    @property
    def allowed_types(self) -> frozenset[InjectionType]:
        types: set[InjectionType] = set()
        for injector in self._injectors:
            types |= injector.allowed_types
        return frozenset(types)

    def is_registered(self, entry: str) -> bool:
        return any(injector.is_registered(entry) for injector in self._injectors)

    def inject(self, entry: str, injection_type: InjectionType, notifier: Notifier) -> None:
        for injector in self._injectors:
            if not injector.registers_type(injection_type):
                logger.debug("Skipping %r: does not register %s", injector, injection_type.value)
                continue
            injector.inject(entry, injection_type, notifier)

    def remove(self, entry: str, notifier: Notifier) -> None:
        """Remove an entry from every injector in the chain.

        Stops at the first failing injector. Files handled by earlier
        injectors keep their changes; they are logged before re-raising.
        """
        processed: list[ConfigInjector] = []
        for injector in self._injectors:
            try:
                injector.remove(entry, notifier)
            except InjectorError:
                if processed:
                    logger.warning(
                        "Removing %s failed at %r; already processed: %s",
                        entry,
                        injector,
                        ", ".join(repr(i) for i in processed),
                    )
                raise
            processed.append(injector)

    def with_dependencies(self, dependencies: Sequence[str]) -> "InjectorChain":
        return InjectorChain(i.with_dependencies(dependencies) for i in self._injectors)

    def with_application_modules(self, modules: Sequence[str]) -> "InjectorChain":
        return InjectorChain(i.with_application_modules(modules) for i in self._injectors)


class NoopInjector(ConfigInjector):
    """Injector that registers nothing."""

    @property
    def allowed_types(self) -> frozenset[InjectionType]:
        return frozenset()

    def is_registered(self, entry: str) -> bool:
        return False

    def inject(self, entry: str, injection_type: InjectionType, notifier: Notifier) -> None:
        return

    def remove(self, entry: str, notifier: Notifier) -> None:
        return

    def with_dependencies(self, dependencies: Sequence[str]) -> "NoopInjector":
        return self

    def with_application_modules(self, modules: Sequence[str]) -> "NoopInjector":
        return self
