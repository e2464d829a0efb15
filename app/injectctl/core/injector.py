"""Pattern-driven injector for ordered configuration lists.

The injector never parses the configuration language. It edits the raw
text with the regular expressions of an InjectorProfile, and keeps two
ordering rules while doing so:

- a component with dependencies is inserted directly after the last of
  its registered dependencies;
- a module is inserted directly before the first registered application
  module, when there is one.

"Last" and "first" are decided by the length of the detection match.
Detection patterns match from the opening of the list up to the entry,
so a longer match means an entry further down the list.
"""

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from injectctl.core.base import ConfigInjector
from injectctl.core.errors import PatternMismatchError, UnsupportedTypeError
from injectctl.core.notifier import Notifier
from injectctl.core.storage import read_config, write_config
from injectctl.models.injection import (
    InjectionType,
    InjectorProfile,
    PatternPair,
    fill_pattern,
    fill_replacement,
)

logger = logging.getLogger(__name__)


class Injector(ConfigInjector):
    """Registers entries in the configuration file described by a profile.

    Every public operation reads the configuration fresh, transforms it in
    memory and writes it back atomically only when it changed something.

    Attributes:
        profile: Profile describing the configuration kind.
        config_path: Resolved path of the configuration file.
        dependencies: Entries a component must follow.
        application_modules: Entries a module must precede.
    """

    def __init__(
        self,
        profile: InjectorProfile,
        project_root: Path | str | None = None,
        *,
        dependencies: Sequence[str] = (),
        application_modules: Sequence[str] = (),
    ) -> None:
        """Initialize the injector.

        Args:
            profile: Profile describing the configuration kind.
            project_root: Directory the profile's config file is relative to.
                If None or empty, the path is used relative to the working directory.
            dependencies: Entries a component must be inserted after.
            application_modules: Entries a module must be inserted before.
        """
        self._profile = profile
        self._project_root = Path(project_root) if project_root else None
        self._dependencies = tuple(dependencies)
        self._application_modules = tuple(application_modules)

    def __repr__(self) -> str:
        return f"Injector(profile={self._profile.name!r}, config_path={str(self.config_path)!r})"

    @property
    def profile(self) -> InjectorProfile:
        return self._profile

    @property
    def config_path(self) -> Path:
        if self._project_root is None:
            return Path(self._profile.config_file)
        return self._project_root / self._profile.config_file

    @property
    def dependencies(self) -> tuple[str, ...]:
        return self._dependencies

    @property
    def application_modules(self) -> tuple[str, ...]:
        return self._application_modules

    @property
    def allowed_types(self) -> frozenset[InjectionType]:
        return frozenset(self._profile.allowed_types)

    def with_dependencies(self, dependencies: Sequence[str]) -> "Injector":
        return Injector(
            self._profile,
            self._project_root,
            dependencies=dependencies,
            application_modules=self._application_modules,
        )

    def with_application_modules(self, modules: Sequence[str]) -> "Injector":
        return Injector(
            self._profile,
            self._project_root,
            dependencies=self._dependencies,
            application_modules=modules,
        )

    def is_registered(self, entry: str) -> bool:
        return self._is_registered_in(entry, read_config(self.config_path))

    def inject(self, entry: str, injection_type: InjectionType, notifier: Notifier) -> None:
        pair = self._injection_pattern(injection_type)
        config = read_config(self.config_path)

        if self._is_registered_in(entry, config):
            notifier.info(f"{entry} is already registered in {self.config_path}; skipping")
            return

        if (
            injection_type == InjectionType.COMPONENT
            and self._dependencies
            and self._inject_after_dependencies(entry, config, notifier)
        ):
            return

        if injection_type == InjectionType.MODULE and self._inject_before_application_modules(
            entry, config
        ):
            return

        config = self._apply(pair.pattern, pair.replacement, entry, config)
        write_config(self.config_path, config)
        logger.info("Injected %s as %s into %s", entry, injection_type.value, self.config_path)

    def remove(self, entry: str, notifier: Notifier) -> None:
        config = read_config(self.config_path)

        if not self._is_registered_in(entry, config):
            logger.debug("%s is not registered in %s; nothing to remove", entry, self.config_path)
            return

        removal = self._profile.removal_pattern
        pattern = fill_pattern(removal.pattern, entry)
        config = self._apply(pattern, removal.replacement, "", config)

        # Collapse the blank line left where the entry was
        cleanup = self._profile.cleanup_pattern
        config = re.sub(cleanup.pattern, cleanup.replacement, config)

        write_config(self.config_path, config)
        notifier.info(f"Removed {entry} from {self.config_path}")

    def _inject_after_dependencies(self, entry: str, config: str, notifier: Notifier) -> bool:
        """Inject a component after all of its dependencies.

        A missing dependency is reported and still counts as handled, so the
        component is not injected anywhere else.

        Returns:
            False if the profile has no dependency pattern and the generic
            pattern should be used, True otherwise.
        """
        pair = self._ordering_pattern(InjectionType.DEPENDENCY)
        if pair is None:
            logger.debug("%s has no dependency pattern; ignoring dependencies", self._profile.name)
            return False

        for dependency in self._dependencies:
            if not self._is_registered_in(dependency, config):
                notifier.error(
                    f"Dependency {dependency} is not registered in the configuration"
                )
                return True

        last_dependency = self._find_last_dependency(config)
        logger.debug("Injecting %s after dependency %s", entry, last_dependency)

        pattern = fill_pattern(pair.pattern, last_dependency)
        config = self._apply(pattern, pair.replacement, entry, config)
        write_config(self.config_path, config)
        return True

    def _find_last_dependency(self, config: str) -> str:
        """Find which dependency is the last one in the list."""
        if len(self._dependencies) == 1:
            return self._dependencies[0]

        longest = 0
        last = self._dependencies[0]
        for dependency in self._dependencies:
            length = self._match_length(dependency, config)
            if length > longest:
                longest = length
                last = dependency
        return last

    def _inject_before_application_modules(self, entry: str, config: str) -> bool:
        """Inject a module before the first enabled application module.

        Returns:
            True if the module was injected, False when the profile has no
            before-application pattern or no application module is
            registered, and the generic pattern should be used.
        """
        pair = self._ordering_pattern(InjectionType.BEFORE_APPLICATION)
        if pair is None:
            return False

        first_module = self._find_first_enabled_application_module(config)
        if first_module is None:
            if self._application_modules:
                logger.debug("No application module registered; appending %s", entry)
            return False

        logger.debug("Injecting %s before application module %s", entry, first_module)
        pattern = fill_pattern(pair.pattern, first_module)
        config = self._apply(pattern, pair.replacement, entry, config)
        write_config(self.config_path, config)
        return True

    def _find_first_enabled_application_module(self, config: str) -> str | None:
        shortest = len(config)
        first: str | None = None
        for module in self._application_modules:
            if not self._is_registered_in(module, config):
                continue
            length = self._match_length(module, config)
            if length < shortest:
                shortest = length
                first = module
        return first

    def _injection_pattern(self, injection_type: InjectionType) -> PatternPair:
        pair = self._profile.injection_patterns.get(injection_type)
        if pair is None or not self.registers_type(injection_type):
            msg = (
                f"Profile '{self._profile.name}' does not register "
                f"{injection_type.value} entries"
            )
            raise UnsupportedTypeError(msg)
        return pair

    def _ordering_pattern(self, injection_type: InjectionType) -> PatternPair | None:
        return self._profile.injection_patterns.get(injection_type)

    def _search(self, entry: str, config: str) -> re.Match[str] | None:
        return re.search(fill_pattern(self._profile.is_registered_pattern, entry), config)

    def _is_registered_in(self, entry: str, config: str) -> bool:
        return self._search(entry, config) is not None

    def _match_length(self, entry: str, config: str) -> int:
        match = self._search(entry, config)
        return len(match.group(0)) if match else 0

    def _apply(self, pattern: str, replacement: str, entry: str, config: str) -> str:
        """Replace every match of pattern, filling the replacement with entry.

        Raises:
            PatternMismatchError: If the pattern matches nothing.
        """
        result, count = re.subn(pattern, fill_replacement(replacement, entry), config)
        if count == 0:
            msg = f"Pattern {pattern!r} did not match anything in {self.config_path}"
            raise PatternMismatchError(msg)
        return result
