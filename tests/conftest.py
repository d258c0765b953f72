"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def lock_payload() -> dict[str, Any]:
    """A lock document with two production and one development package."""
    return {
        "packages": [
            {
                "name": "acme/http",
                "version": "2.1.0",
                "source": {"type": "git", "reference": "aaa111"},
                "dist": {"type": "zip", "reference": "zzz999"},
            },
            {
                "name": "acme/log",
                "version": "1.0.0",
                "dist": {"type": "zip", "reference": "bbb222"},
            },
        ],
        "packages-dev": [
            {"name": "acme/testing", "version": "dev-main"},
        ],
    }


@pytest.fixture
def project_dir(tmp_path: Path, lock_payload: dict[str, Any]) -> Path:
    """A project directory holding a manifest and a lock file."""
    root = tmp_path / "project"
    root.mkdir()
    manifest = {"name": "acme/app", "version": "3.0.0"}
    (root / "composer.json").write_text(json.dumps(manifest), encoding="utf-8")
    (root / "composer.lock").write_text(json.dumps(lock_payload), encoding="utf-8")
    return root
