"""Installed package versions.

This module is generated by package-versions, specifically by
``package_versions.emitter.render_versions_module``.

It is overwritten at every run of the package manager install or update step.
"""

from __future__ import annotations

from types import MappingProxyType

__all__ = ["VERSIONS", "get_composer_version", "get_version"]

VERSIONS = MappingProxyType({})


def get_version(package_name: str) -> str:
    """Return ``<version>@<reference>`` for an installed package.

    Raises LookupError if the package is not installed.
    """
    try:
        return VERSIONS[package_name]
    except (KeyError, TypeError):
        raise LookupError(
            f'Required package "{package_name}" is not installed: cannot detect its version'
        ) from None


def get_composer_version(package_name: str) -> str:
    """Return the declared version of an installed package, without its reference.

    Raises LookupError if the package is not installed.
    """
    return get_version(package_name).split("@", 1)[0]
