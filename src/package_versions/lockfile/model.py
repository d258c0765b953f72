"""Lock data typed model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from package_versions.errors import LockfileError
from package_versions.models import LockedPackage

PRODUCTION_KEY = "packages"
DEVELOPMENT_KEY = "packages-dev"


@dataclass(frozen=True, slots=True)
class LockData:
    packages: tuple[LockedPackage, ...] = ()
    packages_dev: tuple[LockedPackage, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> LockData:
        """Parse a decoded lock document; absent package lists count as empty."""
        return cls(
            packages=_package_list(payload, PRODUCTION_KEY),
            packages_dev=_package_list(payload, DEVELOPMENT_KEY),
        )

    def all_packages(self) -> tuple[LockedPackage, ...]:
        return self.packages + self.packages_dev


def _package_list(payload: Mapping[str, Any], key: str) -> tuple[LockedPackage, ...]:
    records = payload.get(key)
    if records is None:
        return ()
    if not isinstance(records, list):
        raise LockfileError(
            f"Invalid lock data `{key}` value.",
            hint="Package lists must be JSON arrays of package objects.",
        )
    return tuple(LockedPackage.from_record(record) for record in records)
