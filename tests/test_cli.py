import json
from pathlib import Path

import pytest

from package_versions import SELF_PACKAGE_NAME
from package_versions.cli import main


def test_show_prints_collected_pairs(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["show", "--project", str(project_dir), "--root-reference", "f00d"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "acme/http => 2.1.0@aaa111",
        "acme/log => 1.0.0@bbb222",
        "acme/testing => dev-main@",
        "acme/app => 3.0.0@f00d",
    ]


def test_dump_writes_module_and_log(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_path = project_dir / "logs.jsonl"

    exit_code = main(
        [
            "dump",
            "--project",
            str(project_dir),
            "--event",
            "post-update-cmd",
            "--root-version",
            "3.1.0",
            "--log-json",
            str(log_path),
        ],
    )

    captured = capsys.readouterr()
    expected = project_dir / "vendor" / SELF_PACKAGE_NAME / "src" / "package_versions" / "versions.py"
    assert exit_code == 0
    assert captured.out.strip() == str(expected)
    assert "package-versions: Generating version module..." in captured.err
    assert "'acme/app': '3.1.0@'" in expected.read_text(encoding="utf-8")
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert records[0]["extra"] == {"event": "post-update-cmd"}


def test_errors_exit_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["show", "--project", str(tmp_path)])

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("error: Project manifest does not exist.")
