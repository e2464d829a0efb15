"""Injection models for configuration-list registration.

This module defines the categories an entry can be registered as and the
Pydantic models describing an injector profile: the configuration file a
profile edits and the regular expressions used to detect, insert and
remove entries in it.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Placeholder substituted with an entry name in patterns and replacements
PLACEHOLDER = "%s"

# Sample value used to check that templated patterns compile
_SAMPLE_ENTRY = "Sample\\Entry"


class InjectionType(str, Enum):
    """Role of an entry in a configuration list.

    The type selects which injection pattern is applied.

    Attributes:
        COMPONENT: Library component, registered at the top of the list.
        MODULE: Application module, appended to the end of the list.
        DEPENDENCY: Entry placed directly after its last registered dependency.
        BEFORE_APPLICATION: Entry placed directly before the first application module.
        CONFIG_PROVIDER: Configuration provider class in an aggregator list.
    """

    COMPONENT = "component"
    MODULE = "module"
    DEPENDENCY = "dependency"
    BEFORE_APPLICATION = "before-application"
    CONFIG_PROVIDER = "config-provider"


def fill_pattern(template: str, entry: str) -> str:
    """Substitute an entry into a pattern template, escaped as a literal.

    Args:
        template: Regular expression containing the ``%s`` placeholder.
        entry: Entry name to match literally.

    Returns:
        Regular expression source with the placeholder replaced.
    """
    return template.replace(PLACEHOLDER, re.escape(entry))


def fill_replacement(template: str, entry: str) -> str:
    """Substitute an entry into a ``re.sub`` replacement template.

    Backslashes in the entry (e.g. PHP namespace separators) are doubled
    so ``re.sub`` emits them literally instead of treating them as escapes.

    Args:
        template: Replacement template containing the ``%s`` placeholder.
        entry: Entry name to insert.

    Returns:
        Replacement string ready for ``re.sub``.
    """
    return template.replace(PLACEHOLDER, entry.replace("\\", "\\\\"))


def _check_compiles(template: str) -> str:
    try:
        re.compile(fill_pattern(template, _SAMPLE_ENTRY))
    except re.error as e:
        msg = f"invalid regular expression {template!r}: {e}"
        raise ValueError(msg) from e
    return template


class PatternPair(BaseModel):
    """A regular expression and the replacement applied where it matches.

    Attributes:
        pattern: Regular expression; inline flags like ``(?m)`` set the mode.
        replacement: ``re.sub`` replacement template.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: Annotated[str, Field(min_length=1, description="Regular expression")]
    replacement: Annotated[str, Field(description="re.sub replacement template")] = ""

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Validate that the pattern compiles once the placeholder is filled."""
        return _check_compiles(v)


DEFAULT_CLEANUP = PatternPair(pattern=r"(array\(|\[|,)(\r?\n)\r?\n", replacement=r"\g<1>\g<2>")

# Types used only to order other entries; without a pattern the ordering
# step is skipped
ORDERING_TYPES = frozenset({InjectionType.DEPENDENCY, InjectionType.BEFORE_APPLICATION})


class InjectorProfile(BaseModel):
    """Describes one kind of configuration list and how to edit it.

    A profile is pure data: the same injector engine edits any kind of
    configuration once given the matching profile.

    Attributes:
        name: Unique profile identifier (e.g. "application").
        description: Human-readable summary shown by the CLI.
        config_file: Path of the configuration file, relative to the project root.
        allowed_types: Injection types this profile can register.
        injection_patterns: Pattern pair per injection type.
        is_registered_pattern: Pattern detecting a registered entry.
        removal_pattern: Pattern pair removing a registered entry.
        cleanup_pattern: Pattern pair applied after every removal.
        discovery_pattern: Optional pattern the config file must contain for
            the profile to apply to a project.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1, description="Profile identifier")]
    description: Annotated[str | None, Field(description="Profile summary")] = None
    config_file: Annotated[str, Field(min_length=1, description="Relative config file path")]
    allowed_types: Annotated[
        tuple[InjectionType, ...],
        Field(min_length=1, description="Injection types this profile registers"),
    ]
    injection_patterns: Annotated[
        dict[InjectionType, PatternPair],
        Field(description="Insertion pattern pair per injection type"),
    ]
    is_registered_pattern: Annotated[str, Field(min_length=1, description="Detection pattern")]
    removal_pattern: Annotated[PatternPair, Field(description="Removal pattern pair")]
    cleanup_pattern: Annotated[
        PatternPair, Field(description="Clean-up pattern pair applied after removal")
    ] = DEFAULT_CLEANUP
    discovery_pattern: Annotated[
        str | None, Field(description="Pattern the config file must contain")
    ] = None

    @field_validator("is_registered_pattern", "discovery_pattern")
    @classmethod
    def validate_patterns(cls, v: str | None) -> str | None:
        """Validate that detection patterns compile."""
        if v is None:
            return v
        return _check_compiles(v)

    @model_validator(mode="after")
    def validate_injection_patterns(self) -> InjectorProfile:
        """Validate that every allowed type has an injection pattern.

        Ordering types are exempt: without their pattern the injector falls
        back to the generic pattern of the entry's own type.
        """
        missing = [
            t.value
            for t in self.allowed_types
            if t not in self.injection_patterns and t not in ORDERING_TYPES
        ]
        if missing:
            msg = f"Profile '{self.name}' has no injection pattern for: {', '.join(missing)}"
            raise ValueError(msg)
        return self
