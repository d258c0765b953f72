"""Render the generated versions module and hand it to a file sink."""

from __future__ import annotations

import os
import tempfile
import textwrap
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from package_versions.config import ManifestFormat
from package_versions.errors import EmissionError
from package_versions.mapping import VersionMapping

GENERATED_FILE_MODE = 0o664

MODULE_HEADER = textwrap.dedent('''\
    """Installed package versions.

    This module is generated by package-versions, specifically by
    ``package_versions.emitter.render_versions_module``.

    It is overwritten at every run of the package manager install or update step.
    """

    from __future__ import annotations

    from types import MappingProxyType

    __all__ = ["VERSIONS", "get_composer_version", "get_version"]
''')

MODULE_ACCESSORS = textwrap.dedent('''\


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
''')


class ModuleSink(Protocol):
    def write(self, *, outputs: Mapping[Path, bytes]) -> tuple[Path, ...]:
        """Persist every output in one step and return the written paths."""


@dataclass(frozen=True, slots=True)
class FileSink:
    """Write files atomically through temporary sibling files.

    All destinations are checked and staged before any of them is replaced,
    so a failure leaves no new output behind.
    """

    mode: int = GENERATED_FILE_MODE

    def write(self, *, outputs: Mapping[Path, bytes]) -> tuple[Path, ...]:
        for destination in outputs:
            if destination.is_dir():
                raise _write_error(destination, hint="A directory occupies the output path.")

        staged: dict[Path, str] = {}
        try:
            for destination, data in outputs.items():
                try:
                    staged[destination] = self._stage(destination, data)
                except OSError as exc:
                    raise _write_error(destination) from exc
            for destination, tmp_name in staged.items():
                try:
                    os.replace(tmp_name, destination)
                except OSError as exc:
                    raise _write_error(destination) from exc
        finally:
            for tmp_name in staged.values():
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
        return tuple(outputs)

    def _stage(self, destination: Path, data: bytes) -> str:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=destination.parent,
            prefix=f".{destination.name}.",
            delete=False,
        ) as handle:
            handle.write(data)
        os.chmod(handle.name, self.mode)
        return handle.name


def render_versions_module(mapping: VersionMapping) -> str:
    """Render ``mapping`` as module source, entries in insertion order."""
    lines = [MODULE_HEADER, _render_versions_literal(mapping), MODULE_ACCESSORS]
    return "\n".join(lines)


def render_outputs(
    mapping: VersionMapping,
    destination: Path,
    manifest_format: ManifestFormat | None = None,
) -> dict[Path, bytes]:
    """Render the module and its optional manifest sidecar; the module comes last."""
    outputs: dict[Path, bytes] = {}
    if manifest_format == "json":
        outputs[destination.with_suffix(".json")] = mapping.to_json().encode("utf-8")
    elif manifest_format == "cbor":
        outputs[destination.with_suffix(".cbor")] = mapping.to_cbor()
    outputs[destination] = render_versions_module(mapping).encode("utf-8")
    return outputs


def emit_versions_module(
    mapping: VersionMapping,
    destination: Path,
    sink: ModuleSink | None = None,
    *,
    manifest_format: ManifestFormat | None = None,
) -> Path:
    if sink is None:
        sink = FileSink()
    sink.write(outputs=render_outputs(mapping, destination, manifest_format))
    return destination


def _write_error(destination: Path, *, hint: str | None = None) -> EmissionError:
    return EmissionError(
        "Unable to write generated versions module.",
        hint=hint or "Check that the install path exists and is writable.",
        context={"operation": "emit_versions_module", "path": str(destination)},
    )


def _render_versions_literal(mapping: VersionMapping) -> str:
    if not mapping.versions:
        return "VERSIONS = MappingProxyType({})"
    lines = ["VERSIONS = MappingProxyType(", "    {"]
    for name, identifier in mapping.items():
        lines.append(f"        {name!r}: {identifier!r},")
    lines.extend(["    }", ")"])
    return "\n".join(lines)
