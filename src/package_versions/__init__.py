"""Generate a module exposing installed package versions at runtime."""

from .collector import collect_versions
from .config import Config
from .emitter import FileSink, ModuleSink, emit_versions_module, render_versions_module
from .errors import (
    EmissionError,
    ErrorCode,
    LockfileError,
    PackageNotFoundError,
    PackageVersionsError,
    ValidationError,
)
from .lockfile import LockData, read_lock_data
from .mapping import VersionMapping
from .models import LockedPackage, RootAliasPackage, RootPackage, resolve_root_alias
from .plugin import (
    POST_INSTALL_CMD,
    POST_UPDATE_CMD,
    SELF_PACKAGE_NAME,
    Event,
    EventDispatcher,
    PackageVersionsPlugin,
)
from .project import Project, load_project

__all__ = [
    "Config",
    "EmissionError",
    "ErrorCode",
    "Event",
    "EventDispatcher",
    "FileSink",
    "LockData",
    "LockedPackage",
    "LockfileError",
    "ModuleSink",
    "POST_INSTALL_CMD",
    "POST_UPDATE_CMD",
    "PackageNotFoundError",
    "PackageVersionsError",
    "PackageVersionsPlugin",
    "Project",
    "RootAliasPackage",
    "RootPackage",
    "SELF_PACKAGE_NAME",
    "ValidationError",
    "VersionMapping",
    "collect_versions",
    "emit_versions_module",
    "load_project",
    "read_lock_data",
    "render_versions_module",
    "resolve_root_alias",
]
