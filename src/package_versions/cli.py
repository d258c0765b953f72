"""Command-line entry point for running the plugin outside a host build tool."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from package_versions.collector import collect_versions
from package_versions.errors import PackageVersionsError
from package_versions.observability import StructuredLogger
from package_versions.plugin import (
    POST_INSTALL_CMD,
    POST_UPDATE_CMD,
    Event,
    EventDispatcher,
    PackageVersionsPlugin,
)
from package_versions.project import Project, load_project


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="package-versions",
        description="Generate a module exposing installed package versions.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dump = subparsers.add_parser("dump", help="write the generated versions module")
    _add_project_arguments(dump)
    dump.add_argument(
        "--event",
        choices=(POST_INSTALL_CMD, POST_UPDATE_CMD),
        default=POST_INSTALL_CMD,
    )
    dump.add_argument("--log-json", help="write structured log records to this file")
    dump.set_defaults(handler=cmd_dump)

    show = subparsers.add_parser("show", help="print collected versions without writing")
    _add_project_arguments(show)
    show.set_defaults(handler=cmd_show)
    return parser


def cmd_dump(args: argparse.Namespace) -> int:
    project = _load(args)
    logger = StructuredLogger(stream=sys.stderr)
    dispatcher = EventDispatcher()
    PackageVersionsPlugin().activate(dispatcher)
    try:
        results = dispatcher.dispatch(Event(name=args.event, project=project, logger=logger))
    finally:
        if args.log_json:
            logger.to_json_lines(args.log_json)
    for path in results:
        print(path)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    project = _load(args)
    for name, identifier in collect_versions(project.lock_data, project.root_package):
        print(f"{name} => {identifier}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.handler(args))
    except PackageVersionsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _add_project_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--project", default=".", help="project directory")
    parser.add_argument("--manifest", help="project manifest (default: <project>/composer.json)")
    parser.add_argument("--lock", help="lock file (default: <project>/composer.lock)")
    parser.add_argument("--root-version", help="override the root package version")
    reference = parser.add_mutually_exclusive_group()
    reference.add_argument("--root-reference", help="root package source reference")
    reference.add_argument(
        "--git-reference",
        action="store_true",
        help="read the root source reference from git HEAD",
    )


def _load(args: argparse.Namespace) -> Project:
    return load_project(
        args.project,
        manifest_path=args.manifest,
        lock_path=args.lock,
        root_version=args.root_version,
        root_reference=args.root_reference,
        detect_reference=args.git_reference,
    )


if __name__ == "__main__":
    raise SystemExit(main())
