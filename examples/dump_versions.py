"""Generate the versions module for the bundled sample project.

Run from the repository root:

    python examples/dump_versions.py
"""

from __future__ import annotations

from pathlib import Path

from package_versions import (
    POST_INSTALL_CMD,
    Event,
    EventDispatcher,
    PackageVersionsPlugin,
    load_project,
)
from package_versions.observability import StructuredLogger

PROJECT_DIR = Path(__file__).parent / "sample-project"


def main() -> None:
    project = load_project(PROJECT_DIR, root_reference="0123456789abcdef0123456789abcdef01234567")
    dispatcher = EventDispatcher()
    PackageVersionsPlugin().activate(dispatcher)

    logger = StructuredLogger()
    for path in dispatcher.dispatch(Event(name=POST_INSTALL_CMD, project=project, logger=logger)):
        print(f"wrote {path}")
    for record in logger.records:
        print(f"[{record['level']}] {record['message']}")


if __name__ == "__main__":
    main()
