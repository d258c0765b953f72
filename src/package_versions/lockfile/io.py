"""Lock data and project manifest readers."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from package_versions.errors import LockfileError, ValidationError
from package_versions.lockfile.model import LockData
from package_versions.models import AnyRootPackage, RootAliasPackage, RootPackage

DEFAULT_ROOT_VERSION = "1.0.0+no-version-set"


def parse_lock_data(raw: str) -> LockData:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LockfileError("Invalid lock file JSON.", hint=str(exc)) from exc

    if not isinstance(payload, dict):
        raise LockfileError("Invalid lock file payload type.")
    return LockData.from_payload(payload)


def read_lock_data(path: str | Path) -> LockData:
    lock_path = Path(path)
    try:
        raw = lock_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise LockfileError(
            "Lock file does not exist.",
            hint="Run the package manager install or update step first.",
            context={"path": str(lock_path)},
        ) from exc
    try:
        return parse_lock_data(raw)
    except LockfileError as exc:
        raise LockfileError(
            exc.message,
            hint=exc.hint,
            context={**exc.context, "path": str(lock_path)},
        ) from exc


def read_manifest(path: str | Path) -> dict[str, Any]:
    manifest_path = Path(path)
    try:
        payload = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValidationError(
            "Project manifest does not exist.",
            context={"path": str(manifest_path)},
        ) from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(
            "Project manifest is not valid JSON.",
            hint=str(exc),
            context={"path": str(manifest_path)},
        ) from exc
    if not isinstance(payload, dict):
        raise ValidationError(
            "Project manifest has invalid structure.",
            context={"path": str(manifest_path)},
        )
    return payload


def load_root_package(
    manifest: Mapping[str, Any],
    *,
    version: str | None = None,
    source_reference: str = "",
) -> AnyRootPackage:
    """Build the root package descriptor from a project manifest.

    ``version`` overrides the manifest's ``version`` key. A branch alias
    declared under ``extra.branch-alias`` for the resolved version wraps the
    root package in a :class:`RootAliasPackage`.
    """
    name = manifest.get("name")
    if not isinstance(name, str) or not name:
        raise ValidationError(
            "Project manifest does not declare a `name`.",
            hint="Add a `name` key such as `vendor/project`.",
        )
    manifest_version = manifest.get("version", DEFAULT_ROOT_VERSION)
    if not isinstance(manifest_version, str):
        raise ValidationError("Invalid manifest `version` value.", context={"package": name})
    root_version = manifest_version if version is None else version

    root: AnyRootPackage = RootPackage(
        name=name,
        version=root_version,
        source_reference=source_reference,
    )
    alias_version = _branch_alias(manifest, root_version)
    if alias_version is not None:
        root = RootAliasPackage(name=name, version=alias_version, alias_of=root)
    return root


def detect_source_reference(project_dir: str | Path) -> str:
    """Return the commit checked out in ``project_dir``."""
    command = ["git", "rev-parse", "HEAD"]
    try:
        completed = subprocess.run(
            command,
            cwd=Path(project_dir),
            check=False,
            text=True,
            capture_output=True,
        )
    except FileNotFoundError as exc:
        raise ValidationError(
            "Git executable is not available.",
            hint="Install git or pass the root reference explicitly.",
            context={"operation": "detect_source_reference", "argv": " ".join(command)},
        ) from exc
    if completed.returncode != 0:
        raise ValidationError(
            "Git command failed.",
            hint="Pass the root reference explicitly when the project is not a git checkout.",
            context={
                "operation": "detect_source_reference",
                "argv": " ".join(command),
                "stderr": completed.stderr.strip(),
            },
        )
    return completed.stdout.strip()


def _branch_alias(manifest: Mapping[str, Any], version: str) -> str | None:
    extra = manifest.get("extra")
    if not isinstance(extra, Mapping):
        return None
    aliases = extra.get("branch-alias")
    if not isinstance(aliases, Mapping):
        return None
    alias = aliases.get(version)
    if alias is None:
        return None
    if not isinstance(alias, str):
        raise ValidationError(
            "Invalid `extra.branch-alias` value.",
            context={"version": version},
        )
    return alias
