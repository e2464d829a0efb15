"""Discovery of the configuration files present in a project.

A profile applies to a project when its configuration file exists and,
if the profile defines a discovery pattern, the file content matches it.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from injectctl.core.chain import InjectorChain
from injectctl.core.errors import StorageError
from injectctl.core.injector import Injector
from injectctl.core.storage import read_config
from injectctl.models.injection import InjectionType, InjectorProfile

logger = logging.getLogger(__name__)


def profile_applies(profile: InjectorProfile, project_root: Path) -> bool:
    """Check whether a profile's configuration is present in a project.

    Args:
        profile: Profile to check.
        project_root: Root directory of the project.

    Returns:
        True if the config file exists and matches the discovery pattern.
    """
    config_path = project_root / profile.config_file
    if not config_path.is_file():
        return False

    if profile.discovery_pattern is None:
        return True

    try:
        content = read_config(config_path)
    except StorageError as e:
        logger.warning("Skipping profile %s: %s", profile.name, e)
        return False

    return re.search(profile.discovery_pattern, content) is not None


def discover_profiles(
    project_root: Path,
    profiles: Iterable[InjectorProfile],
    injection_type: InjectionType | None = None,
) -> list[InjectorProfile]:
    """Find the profiles that apply to a project.

    Args:
        project_root: Root directory of the project.
        profiles: Candidate profiles.
        injection_type: If given, only keep profiles registering this type.

    Returns:
        Applicable profiles, in candidate order.
    """
    found: list[InjectorProfile] = []
    for profile in profiles:
        if injection_type is not None and injection_type not in profile.allowed_types:
            continue
        if profile_applies(profile, project_root):
            logger.debug("Discovered %s in %s", profile.config_file, project_root)
            found.append(profile)
    return found


def discover_injectors(
    project_root: Path,
    profiles: Iterable[InjectorProfile],
    *,
    injection_type: InjectionType | None = None,
    dependencies: Sequence[str] = (),
    application_modules: Sequence[str] = (),
) -> InjectorChain:
    """Build an injector chain for the profiles that apply to a project.

    An empty chain registers nothing, like a NoopInjector.

    Args:
        project_root: Root directory of the project.
        profiles: Candidate profiles.
        injection_type: If given, only keep profiles registering this type.
        dependencies: Entries a component must be inserted after.
        application_modules: Entries a module must be inserted before.

    Returns:
        InjectorChain with one Injector per applicable profile.
    """
    return InjectorChain(
        Injector(
            profile,
            project_root,
            dependencies=dependencies,
            application_modules=application_modules,
        )
        for profile in discover_profiles(project_root, profiles, injection_type)
    )
