r"""Injector profiles: built-in configuration kinds and user overrides.

Built-in profiles cover the PHP configuration lists injectctl knows out of
the box. Additional or replacement profiles are read from
~/.config/injectctl/profiles.toml, one table per profile:

    [profiles.bundles]
    config_file = "config/bundles.php"
    allowed_types = ["module"]
    is_registered_pattern = "return\\s+\\[[^\\]]*'%s'"

    [profiles.bundles.injection_patterns.module]
    pattern = "(?s)(return\\s+\\[.*?)\\n(\\])"
    replacement = "\\g<1>\\n    '%s',\\n\\g<2>"

    [profiles.bundles.removal_pattern]
    pattern = "(?m)^\\s+'%s',\\s*$"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from injectctl.core.errors import InjectorError
from injectctl.core.paths import ensure_config_dir, get_profiles_path
from injectctl.models.injection import (
    DEFAULT_CLEANUP,
    InjectionType,
    InjectorProfile,
    PatternPair,
)

logger = logging.getLogger(__name__)


class ProfileError(InjectorError):
    """Base exception for profile-related errors."""


class ProfileNotFoundError(ProfileError):
    """Raised when a profile or profiles file is not found."""


class ProfileParseError(ProfileError):
    """Raised when a profiles file cannot be parsed."""


class ProfileValidationError(ProfileError):
    """Raised when profile content is invalid."""


# =============================================================================
# Built-in profiles
# =============================================================================

# Opening of a PHP array literal: array( or [
_OPEN = r"(?:array\s*\(|\[)"

# Captures the carriage return ending the current line, if any, so inserted
# lines reuse the file's line ending
_EOL = r"(?=[^\r\n]*(\r?)$)"

_ENTRY_REMOVAL = PatternPair(pattern=r"(?m)^\s+'%s',\s*$", replacement="")

APPLICATION_PROFILE = InjectorProfile(
    name="application",
    description="'modules' list of config/application.config.php",
    config_file="config/application.config.php",
    allowed_types=(
        InjectionType.COMPONENT,
        InjectionType.MODULE,
        InjectionType.DEPENDENCY,
        InjectionType.BEFORE_APPLICATION,
    ),
    injection_patterns={
        InjectionType.COMPONENT: PatternPair(
            pattern=rf"(?m)^([ \t]+)('modules'\s*=>\s*{_OPEN})[ \t]*(\r?\n)",
            replacement=r"\g<1>\g<2>\g<3>\g<1>    '%s',\g<3>",
        ),
        InjectionType.MODULE: PatternPair(
            pattern=rf"(?s)('modules'\s*=>\s*{_OPEN}.*?)(\r?\n)([ \t]*)(\)|\])",
            replacement=r"\g<1>\g<2>\g<3>    '%s',\g<2>\g<3>\g<4>",
        ),
        InjectionType.DEPENDENCY: PatternPair(
            pattern=rf"(?m)^([ \t]+)('modules'\s*=>\s*{_OPEN}[^)\]]*'%s'){_EOL}",
            replacement=r"\g<1>\g<2>,\g<3>\n\g<1>    '%s'",
        ),
        InjectionType.BEFORE_APPLICATION: PatternPair(
            pattern=rf"(?m)^([ \t]+)('modules'\s*=>\s*{_OPEN}[^)\]]*)('%s'){_EOL}",
            replacement=r"\g<1>\g<2>'%s',\g<4>\n\g<1>    \g<3>",
        ),
    },
    is_registered_pattern=rf"'modules'\s*=>\s*{_OPEN}[^)\]]*'%s'",
    removal_pattern=_ENTRY_REMOVAL,
    discovery_pattern=rf"'modules'\s*=>\s*{_OPEN}",
)

DEVELOPMENT_PROFILE = APPLICATION_PROFILE.model_copy(
    update={
        "name": "development",
        "description": "'modules' list of config/development.config.php.dist",
        "config_file": "config/development.config.php.dist",
    }
)

MODULES_PROFILE = InjectorProfile(
    name="modules",
    description="Module list returned by config/modules.config.php",
    config_file="config/modules.config.php",
    allowed_types=(
        InjectionType.COMPONENT,
        InjectionType.MODULE,
        InjectionType.DEPENDENCY,
        InjectionType.BEFORE_APPLICATION,
    ),
    injection_patterns={
        InjectionType.COMPONENT: PatternPair(
            pattern=rf"(?m)^(return\s+{_OPEN})[ \t]*(\r?\n)",
            replacement=r"\g<1>\g<2>    '%s',\g<2>",
        ),
        InjectionType.MODULE: PatternPair(
            pattern=rf"(?s)(return\s+{_OPEN}.*?)(\r?\n)([ \t]*)(\)|\])",
            replacement=r"\g<1>\g<2>\g<3>    '%s',\g<2>\g<3>\g<4>",
        ),
        InjectionType.DEPENDENCY: PatternPair(
            pattern=rf"(?m)^(return\s+{_OPEN}[^)\]]*'%s'){_EOL}",
            replacement=r"\g<1>,\g<2>\n    '%s'",
        ),
        InjectionType.BEFORE_APPLICATION: PatternPair(
            pattern=rf"(?m)^(return\s+{_OPEN}[^)\]]*)('%s'){_EOL}",
            replacement=r"\g<1>'%s',\g<3>\n    \g<2>",
        ),
    },
    is_registered_pattern=rf"return\s+{_OPEN}[^)\]]*'%s'",
    removal_pattern=_ENTRY_REMOVAL,
    discovery_pattern=rf"return\s+{_OPEN}",
)

CONFIG_AGGREGATOR_PROFILE = InjectorProfile(
    name="config-aggregator",
    description="ConfigAggregator provider list of config/config.php",
    config_file="config/config.php",
    allowed_types=(InjectionType.CONFIG_PROVIDER,),
    injection_patterns={
        InjectionType.CONFIG_PROVIDER: PatternPair(
            pattern=rf"(new\s+[\w\\]*ConfigAggregator\(\s*{_OPEN})[ \t]*(\r?\n)([ \t]*)",
            replacement=r"\g<1>\g<2>\g<3>\\%s::class,\g<2>\g<3>",
        ),
    },
    is_registered_pattern=rf"(?s)new\s+[\w\\]*ConfigAggregator\(\s*{_OPEN}.*?\s\\?%s::class",
    removal_pattern=PatternPair(pattern=r"(?m)^\s+\\?%s::class,\s*$", replacement=""),
    discovery_pattern=r"new\s+[\w\\]*ConfigAggregator\(",
)

BUILTIN_PROFILES: dict[str, InjectorProfile] = {
    profile.name: profile
    for profile in (
        APPLICATION_PROFILE,
        DEVELOPMENT_PROFILE,
        MODULES_PROFILE,
        CONFIG_AGGREGATOR_PROFILE,
    )
}


# =============================================================================
# Profile file I/O
# =============================================================================


def load_user_profiles(path: Path | None = None) -> dict[str, InjectorProfile]:
    """Load and validate profiles from a TOML file.

    Args:
        path: Path to the profiles file. If None, uses the default profiles path.

    Returns:
        Mapping of profile name to validated profile.

    Raises:
        ProfileNotFoundError: If the profiles file doesn't exist.
        ProfileParseError: If the TOML syntax is invalid.
        ProfileValidationError: If the content doesn't match the schema.
    """
    profiles_path = path or get_profiles_path()

    if not profiles_path.exists():
        raise ProfileNotFoundError(f"Profiles file not found: {profiles_path}")

    try:
        with open(profiles_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ProfileParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ProfileError(f"Failed to read profiles: {e}") from e

    unknown = set(data) - {"profiles"}
    if unknown:
        raise ProfileValidationError(f"Unknown top-level keys: {', '.join(sorted(unknown))}")

    tables = data.get("profiles", {})
    if not isinstance(tables, dict):
        raise ProfileValidationError("'profiles' must be a table")

    profiles: dict[str, InjectorProfile] = {}
    for name, body in tables.items():
        if not isinstance(body, dict):
            raise ProfileValidationError(f"Profile '{name}' must be a table")
        try:
            profiles[name] = InjectorProfile.model_validate({**body, "name": name})
        except ValidationError as e:
            raise ProfileValidationError(f"Invalid profile '{name}': {e}") from e

    logger.debug("Loaded %d profile(s) from %s", len(profiles), profiles_path)
    return profiles


def load_profiles(path: Path | None = None) -> dict[str, InjectorProfile]:
    """Load built-in profiles overlaid with user profiles.

    A missing file at the default location is not an error; a missing file
    at an explicitly given path is.

    Args:
        path: Path to the profiles file. If None, uses the default profiles path.

    Returns:
        Mapping of profile name to profile, user profiles taking precedence.

    Raises:
        ProfileError: If the profiles file cannot be loaded.
    """
    profiles = dict(BUILTIN_PROFILES)
    profiles_path = path or get_profiles_path()
    if path is None and not profiles_path.exists():
        return profiles

    profiles.update(load_user_profiles(profiles_path))
    return profiles


def get_profile(name: str, profiles: dict[str, InjectorProfile] | None = None) -> InjectorProfile:
    """Look up a profile by name.

    Args:
        name: Profile name.
        profiles: Profiles to search. If None, searches the built-in profiles.

    Returns:
        The matching profile.

    Raises:
        ProfileNotFoundError: If no profile has this name.
    """
    available = BUILTIN_PROFILES if profiles is None else profiles
    try:
        return available[name]
    except KeyError:
        known = ", ".join(sorted(available)) or "none"
        raise ProfileNotFoundError(f"Unknown profile '{name}' (available: {known})") from None


def save_profiles(profiles: dict[str, InjectorProfile], path: Path | None = None) -> Path:
    """Save profiles to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        profiles: Profiles to save, keyed by name.
        path: Path to save the profiles. If None, uses the default profiles path.

    Returns:
        Path where the profiles were saved.

    Raises:
        ProfileError: If the file cannot be written.
    """
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            raise ProfileError(str(e)) from e
        profiles_path = get_profiles_path()
    else:
        profiles_path = path
        profiles_path.parent.mkdir(parents=True, exist_ok=True)

    data = {"profiles": {name: _profile_to_dict(p) for name, p in profiles.items()}}

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=profiles_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(profiles_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ProfileError(f"Failed to write profiles: {e}") from e

    return profiles_path


def _profile_to_dict(profile: InjectorProfile) -> dict[str, Any]:
    """Convert a profile to a dictionary for TOML serialization.

    The name becomes the table key and defaults are left out.

    Args:
        profile: The profile to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result = profile.model_dump(mode="json", exclude={"name"}, exclude_none=True)
    if profile.cleanup_pattern == DEFAULT_CLEANUP:
        result.pop("cleanup_pattern")
    return result
