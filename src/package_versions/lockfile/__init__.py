"""Lock data parsing and root package loading."""

from .io import (
    DEFAULT_ROOT_VERSION,
    detect_source_reference,
    load_root_package,
    parse_lock_data,
    read_lock_data,
    read_manifest,
)
from .model import DEVELOPMENT_KEY, PRODUCTION_KEY, LockData

__all__ = [
    "DEFAULT_ROOT_VERSION",
    "DEVELOPMENT_KEY",
    "LockData",
    "PRODUCTION_KEY",
    "detect_source_reference",
    "load_root_package",
    "parse_lock_data",
    "read_lock_data",
    "read_manifest",
]
