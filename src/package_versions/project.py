"""Project inputs for a single generation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from package_versions.config import Config
from package_versions.lockfile import (
    LockData,
    detect_source_reference,
    load_root_package,
    read_lock_data,
    read_manifest,
)
from package_versions.models import AnyRootPackage

DEFAULT_MANIFEST_FILE = "composer.json"


@dataclass(frozen=True, slots=True)
class Project:
    lock_data: LockData
    root_package: AnyRootPackage
    config: Config


def load_project(
    project_dir: str | Path,
    *,
    manifest_path: str | Path | None = None,
    lock_path: str | Path | None = None,
    root_version: str | None = None,
    root_reference: str | None = None,
    detect_reference: bool = False,
) -> Project:
    """Read the manifest and lock file of ``project_dir``.

    The root source reference comes from ``root_reference`` when given, from
    ``git rev-parse HEAD`` when ``detect_reference`` is set, and is empty
    otherwise.
    """
    root_dir = Path(project_dir)
    manifest = read_manifest(manifest_path or root_dir / DEFAULT_MANIFEST_FILE)
    config = Config.from_manifest(manifest, root_dir)

    if root_reference is None:
        root_reference = detect_source_reference(root_dir) if detect_reference else ""

    return Project(
        lock_data=read_lock_data(lock_path or config.lock_file),
        root_package=load_root_package(
            manifest,
            version=root_version,
            source_reference=root_reference,
        ),
        config=config,
    )
