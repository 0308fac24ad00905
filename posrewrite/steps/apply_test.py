"""Unit tests for posrewrite.steps.apply."""

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import json
from pathlib import Path
from unittest import mock

import pytest
from click.testing import CliRunner, Result

from posrewrite import __version__
from posrewrite.__main__ import entry_point


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.v").write_bytes(b"input wire foo;")
    (src / "sub" / "b.v").write_bytes(b"wire [3:0] bar;")
    return src


def _invoke(*args: str) -> Result:
    with mock.patch("posrewrite.__main__.setup_logging") as setup_logging_mock:
        result = CliRunner().invoke(entry_point, ["-v", *args])
    setup_logging_mock.assert_called_once()
    return result


def _write_script(path: Path, files: list[dict]) -> str:
    path.write_text(json.dumps({"files": files}), encoding="utf-8")
    return str(path)


def test_apply_rewrites_files(tmp_path: Path, src_dir: Path) -> None:
    script = _write_script(
        tmp_path / "edits.json",
        [
            {
                "path": "a.v",
                "edits": [{"kind": "replace", "start": 0, "end": 5, "text": "output"}],
            },
            {
                "path": "sub/b.v",
                "base": 16,
                "edits": [
                    {"kind": "insert", "pos": 30, "text": " = 1"},
                    {"kind": "append", "text": "\n"},
                ],
            },
        ],
    )
    out_dir = tmp_path / "out"

    result = _invoke("apply", "-e", script, "-r", str(src_dir), "-o", str(out_dir))

    assert result.exit_code == 0, result.output
    assert (out_dir / "a.v").read_bytes() == b"output wire foo;"
    assert (out_dir / "sub" / "b.v").read_bytes() == b"wire [3:0] bar = 1;\n"
    assert (src_dir / "a.v").read_bytes() == b"input wire foo;"


def test_apply_overlapping_edits_fails(tmp_path: Path, src_dir: Path) -> None:
    script = _write_script(
        tmp_path / "edits.json",
        [
            {
                "path": "a.v",
                "edits": [
                    {"kind": "delete", "start": 0, "end": 6},
                    {"kind": "insert", "pos": 3, "text": "x"},
                ],
            },
        ],
    )
    out_dir = tmp_path / "out"

    result = _invoke("apply", "-e", script, "-r", str(src_dir), "-o", str(out_dir))

    assert result.exit_code == 1
    assert "cannot rewrite" in result.output
    assert "insertion at 3 is inside replaced range [0, 6)" in result.output
    assert not (out_dir / "a.v").exists()


def test_apply_out_of_range_position_fails(tmp_path: Path, src_dir: Path) -> None:
    script = _write_script(
        tmp_path / "edits.json",
        [{"path": "a.v", "base": 100, "edits": [{"kind": "delete", "start": 0, "end": 1}]}],
    )

    result = _invoke(
        "apply", "-e", script, "-r", str(src_dir), "-o", str(tmp_path / "out")
    )

    assert result.exit_code == 1
    assert "position 0 is out of [100, 115]" in result.output


def test_apply_missing_input_fails(tmp_path: Path, src_dir: Path) -> None:
    script = _write_script(tmp_path / "edits.json", [{"path": "missing.v"}])

    result = _invoke(
        "apply", "-e", script, "-r", str(src_dir), "-o", str(tmp_path / "out")
    )

    assert result.exit_code == 2
    assert "missing.v does not exist" in result.output


def test_version_prints_versions() -> None:
    with mock.patch(
        "posrewrite.steps.version.get_distribution_version",
        return_value="9.1",
    ):
        result = _invoke("version")
    assert result.exit_code == 0
    assert result.output == f"posrewrite {__version__}\npyslang 9.1\n"


def test_version_short_prints_package_version() -> None:
    result = _invoke("version", "--short")
    assert result.exit_code == 0
    assert result.output == f"{__version__}\n"
