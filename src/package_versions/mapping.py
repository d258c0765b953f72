"""Immutable package-name to version-identifier mapping."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import cbor2

from package_versions.errors import PackageNotFoundError


@dataclass(frozen=True, slots=True)
class VersionMapping:
    versions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    schema_version: int = 1

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> VersionMapping:
        """Fold pairs into a mapping; the last pair for a name wins."""
        folded: dict[str, str] = {}
        for name, identifier in pairs:
            folded[name] = identifier
        return cls(versions=MappingProxyType(folded))

    def __len__(self) -> int:
        return len(self.versions)

    def __contains__(self, package_name: object) -> bool:
        return package_name in self.versions

    def items(self) -> Iterable[tuple[str, str]]:
        return self.versions.items()

    def get_version(self, package_name: str) -> str:
        try:
            return self.versions[package_name]
        except (KeyError, TypeError):
            raise PackageNotFoundError(package_name) from None

    def get_composer_version(self, package_name: str) -> str:
        return self.get_version(package_name).split("@", 1)[0]

    def to_json(self, path: str | Path | None = None) -> str:
        encoded = json.dumps(self._payload(), indent=2) + "\n"
        if path is not None:
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        encoded = cbor2.dumps(self._payload(), canonical=True)
        if path is not None:
            Path(path).write_bytes(encoded)
        return encoded

    def _payload(self) -> dict[str, object]:
        return {
            "schema_version": self.schema_version,
            "versions": dict(self.versions),
        }
