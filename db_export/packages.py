"""
Package registry and content directory resolution.

A package is a directory with a ``Resources/`` folder. Dumps for a package
live in ``<package>/Resources/Private/Content/``.
"""

import logging
import os
from typing import Any

from .exceptions import ConfigurationError, PackageNotActiveError, UnknownPackageError
from .models import PackageInfo

CONTENT_DIRECTORY = os.path.join('Private', 'Content')

TRUE_VALUES = {'true', 'yes', 'on', '1'}
FALSE_VALUES = {'false', 'no', 'off', '0', ''}


def _parse_active(package_key: str, value: Any) -> bool:
    """Parse the active flag, which may be a string after env var resolution."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        flag = value.strip().lower()
        if flag in TRUE_VALUES:
            return True
        if flag in FALSE_VALUES:
            return False
    raise ConfigurationError(f"Package '{package_key}' has an invalid active flag: {value!r}")


class PackageRegistry:
    """Looks up packages by key."""

    def __init__(self, packages: dict[str, PackageInfo]):
        self.packages = packages

    @classmethod
    def from_config(cls, packages_config: dict[str, Any]) -> "PackageRegistry":
        """
        Create a registry from the 'packages' config section.

        Entries are either ``key: path`` or ``key: {path: ..., active: ...}``.
        """
        packages = {}
        for key, entry in packages_config.items():
            if isinstance(entry, str):
                entry = {'path': entry}
            if not isinstance(entry, dict) or not entry.get('path'):
                raise ConfigurationError(f"Package '{key}' has no path configured")
            packages[key] = PackageInfo(
                key=key,
                path=str(entry['path']),
                active=_parse_active(key, entry.get('active')),
            )
        return cls(packages)

    def get_package(self, package_key: str) -> PackageInfo:
        if package_key not in self.packages:
            raise UnknownPackageError(f'Error: Package "{package_key}" is not available.')
        return self.packages[package_key]

    def is_package_active(self, package_key: str) -> bool:
        return self.get_package(package_key).active

    def assert_package_is_active(self, package_key: str) -> None:
        """Make sure the package is available and active."""
        if not self.is_package_active(package_key):
            raise PackageNotActiveError(f'Error: Package "{package_key}" is not active.')


def get_content_directory(
    registry: PackageRegistry,
    package_key: str,
    root_path: str,
    create: bool = False
) -> str:
    """
    Get the directory for a package where the .sql file is stored.

    The returned path is normalized and ends with a path separator.
    """
    resources_path = registry.get_package(package_key).resources_path
    if not os.path.isabs(resources_path):
        resources_path = os.path.join(root_path, resources_path)
    directory = os.path.normpath(os.path.join(resources_path, CONTENT_DIRECTORY))

    if create:
        os.makedirs(directory, exist_ok=True)
        logging.debug(f"Ensured content directory '{directory}'")

    return directory + os.sep


def strip_root_path(path: str, root_path: str) -> str:
    """Make path relative to root_path; paths outside the root are returned unchanged."""
    root = os.path.join(os.path.normpath(root_path), '')
    if path.startswith(root):
        return path[len(root):]
    return path
