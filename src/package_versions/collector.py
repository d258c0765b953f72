"""Collect ``(package name, version identifier)`` pairs from lock data."""

from __future__ import annotations

from collections.abc import Iterator

from package_versions.lockfile.model import LockData
from package_versions.models import AnyRootPackage, resolve_root_alias, version_identifier


def collect_versions(
    lock_data: LockData,
    root_package: AnyRootPackage,
) -> Iterator[tuple[str, str]]:
    """Yield production packages, then development packages, then the root.

    Duplicate names are yielded as-is; folding into a mapping decides which
    entry wins.
    """
    for package in lock_data.all_packages():
        yield package.name, version_identifier(package.version, package.source_reference)

    root = resolve_root_alias(root_package)
    yield root.name, version_identifier(root.version, root.source_reference)
