"""Host plugin: subscribe to lifecycle events and dump the versions module."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from package_versions.collector import collect_versions
from package_versions.config import Config
from package_versions.emitter import ModuleSink, emit_versions_module
from package_versions.mapping import VersionMapping
from package_versions.models import AnyRootPackage, resolve_root_alias
from package_versions.observability import StructuredLogger
from package_versions.project import Project

SELF_PACKAGE_NAME = "package-versions/package-versions"
VERSIONS_MODULE_PATH = Path("src", "package_versions", "versions.py")

POST_INSTALL_CMD = "post-install-cmd"
POST_UPDATE_CMD = "post-update-cmd"


@dataclass(frozen=True, slots=True)
class Event:
    name: str
    project: Project
    logger: StructuredLogger = field(default_factory=StructuredLogger)


Listener = Callable[[Event], object]


class EventSubscriber(Protocol):
    def subscribed_events(self) -> Mapping[str, str]:
        """Map event names to the name of the handling method."""


class EventDispatcher:
    """Route lifecycle events to subscriber methods, in subscription order."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_name, method_name in subscriber.subscribed_events().items():
            self._listeners.setdefault(event_name, []).append(getattr(subscriber, method_name))

    def listeners(self, event_name: str) -> tuple[Listener, ...]:
        return tuple(self._listeners.get(event_name, ()))

    def dispatch(self, event: Event) -> list[object]:
        return [listener(event) for listener in self.listeners(event.name)]


class PackageVersionsPlugin:
    def __init__(self, sink: ModuleSink | None = None) -> None:
        self.sink = sink

    def activate(self, dispatcher: EventDispatcher) -> None:
        dispatcher.add_subscriber(self)

    def subscribed_events(self) -> Mapping[str, str]:
        return {
            POST_INSTALL_CMD: "dump_versions_module",
            POST_UPDATE_CMD: "dump_versions_module",
        }

    def dump_versions_module(self, event: Event) -> Path:
        project = event.project
        event.logger.log(
            operation="dump_versions_module",
            message="Generating version module...",
            extra={"event": event.name},
        )

        mapping = VersionMapping.from_pairs(
            collect_versions(project.lock_data, project.root_package),
        )
        destination = versions_module_path(project.config, project.root_package)
        written = emit_versions_module(
            mapping,
            destination,
            self.sink,
            manifest_format=project.config.manifest_format,
        )

        event.logger.log(
            operation="dump_versions_module",
            message="...done generating version module",
            extra={"path": str(written), "packages": len(mapping)},
        )
        return written


def locate_install_path(config: Config, root_package: AnyRootPackage) -> Path:
    """Return the directory this plugin is installed in for the given project."""
    if resolve_root_alias(root_package).name == SELF_PACKAGE_NAME:
        return config.vendor_dir.parent
    return config.vendor_dir / SELF_PACKAGE_NAME


def versions_module_path(config: Config, root_package: AnyRootPackage) -> Path:
    return locate_install_path(config, root_package) / VERSIONS_MODULE_PATH
