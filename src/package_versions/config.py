"""Project configuration read from the manifest."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, cast

from package_versions.errors import ValidationError

ManifestFormat = Literal["json", "cbor"]

DEFAULT_VENDOR_DIR = "vendor"
DEFAULT_LOCK_FILE = "composer.lock"
MANIFEST_FORMATS: tuple[ManifestFormat, ...] = ("json", "cbor")


@dataclass(frozen=True, slots=True)
class Config:
    vendor_dir: Path
    lock_file: Path
    manifest_format: ManifestFormat | None = None

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any], project_dir: str | Path) -> Config:
        root = Path(project_dir)
        settings = _section(manifest, "config")
        extra = _section(_section(manifest, "extra"), "package-versions")

        vendor_dir = settings.get("vendor-dir", DEFAULT_VENDOR_DIR)
        if not isinstance(vendor_dir, str) or not vendor_dir:
            raise ValidationError("Invalid `config.vendor-dir` value.")

        manifest_format = extra.get("manifest-format")
        if manifest_format is not None and manifest_format not in MANIFEST_FORMATS:
            raise ValidationError(
                f"Unsupported manifest format: {manifest_format}",
                hint="Use one of: " + ", ".join(MANIFEST_FORMATS),
            )

        return cls(
            vendor_dir=root / vendor_dir,
            lock_file=root / DEFAULT_LOCK_FILE,
            manifest_format=cast(ManifestFormat | None, manifest_format),
        )


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key, {})
    if not isinstance(value, Mapping):
        raise ValidationError(f"Invalid manifest `{key}` section.")
    return value
