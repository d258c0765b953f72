"""Typed error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import ClassVar


class ErrorCode(StrEnum):
    """Stable error identifiers used across the plugin and CLI."""

    VALIDATION = "E_VALIDATION"
    LOCKFILE = "E_LOCKFILE"
    EMISSION = "E_EMISSION"
    NOT_FOUND = "E_NOT_FOUND"


class PackageVersionsError(Exception):
    """Base error; subclasses pick their code through ``error_code``."""

    error_code: ClassVar[ErrorCode]

    code: str
    hint: str | None
    context: dict[str, str]

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = self.error_code.value
        self.hint = hint
        self.context = dict(context or {})

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __str__(self) -> str:
        lines = [self.message]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        lines.extend(f"  {key}: {value}" for key, value in self.context.items() if value)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class ValidationError(PackageVersionsError):
    error_code = ErrorCode.VALIDATION


class LockfileError(PackageVersionsError):
    error_code = ErrorCode.LOCKFILE


class EmissionError(PackageVersionsError):
    error_code = ErrorCode.EMISSION


class PackageNotFoundError(PackageVersionsError, LookupError):
    """Raised when a package name is absent from a version mapping."""

    error_code = ErrorCode.NOT_FOUND

    def __init__(self, package_name: str) -> None:
        super().__init__(
            f'Required package "{package_name}" is not installed: cannot detect its version',
            context={"package": package_name},
        )
        self.package_name = package_name


__all__ = [
    "EmissionError",
    "ErrorCode",
    "LockfileError",
    "PackageNotFoundError",
    "PackageVersionsError",
    "ValidationError",
]
