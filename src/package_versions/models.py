"""Package descriptors shared by the collector and the host plugin."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from package_versions.errors import LockfileError


@dataclass(frozen=True, slots=True)
class LockedPackage:
    name: str
    version: str
    source_reference: str = ""

    @classmethod
    def from_record(cls, record: Any) -> LockedPackage:
        """Build a package from one lock-file record.

        The reference prefers ``source.reference`` and falls back to
        ``dist.reference``; a record carrying neither gets ``""``.
        """
        if not isinstance(record, Mapping):
            raise LockfileError("Invalid package entry in lock data.")
        name = record.get("name")
        version = record.get("version")
        if not isinstance(name, str) or not name:
            raise LockfileError("Lock data package entry is missing a `name`.")
        if not isinstance(version, str):
            raise LockfileError(
                "Lock data package entry is missing a `version`.",
                context={"package": name},
            )
        return cls(
            name=name,
            version=version,
            source_reference=_reference_of(record),
        )


@dataclass(frozen=True, slots=True)
class RootPackage:
    name: str
    version: str
    source_reference: str = ""


@dataclass(frozen=True, slots=True)
class RootAliasPackage:
    """A root package exposed under another version, wrapping the real one."""

    name: str
    version: str
    alias_of: RootPackage | RootAliasPackage

    @property
    def source_reference(self) -> str:
        return self.alias_of.source_reference


AnyRootPackage = RootPackage | RootAliasPackage


def resolve_root_alias(root: AnyRootPackage) -> RootPackage:
    """Follow alias layers down to the first non-alias package."""
    package = root
    while isinstance(package, RootAliasPackage):
        package = package.alias_of
    return package


def version_identifier(version: str, reference: str) -> str:
    return f"{version}@{reference}"


def _reference_of(record: Mapping[str, Any]) -> str:
    for key in ("source", "dist"):
        section = record.get(key)
        if isinstance(section, Mapping) and isinstance(section.get("reference"), str):
            return section["reference"]
    return ""


__all__ = [
    "AnyRootPackage",
    "LockedPackage",
    "RootAliasPackage",
    "RootPackage",
    "resolve_root_alias",
    "version_identifier",
]
