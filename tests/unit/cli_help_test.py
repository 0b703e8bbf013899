"""Tests for the command-line surface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from isucon_restruct.cli.app import app
from isucon_restruct.fs import InMemoryFileSystem

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["plan"],
    ],
    ids=["root", "plan"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_path_is_required() -> None:
    result = runner.invoke(app, ["--verbose"])
    assert result.exit_code == 2


def test_missing_entry_file_is_a_successful_no_op(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--path", str(tmp_path)])

    assert result.exit_code == 0
    assert list(tmp_path.iterdir()) == []


def test_restructure_uses_local_filesystem() -> None:
    fs = InMemoryFileSystem({Path("/crate/src/main.rs"): "const A: u8 = 1;\nfn main() {}\n"})

    with patch("isucon_restruct.cli.restructure.LocalFileSystem", return_value=fs):
        result = runner.invoke(app, ["-p", "/crate"])

    assert result.exit_code == 0
    assert fs.files[Path("/crate/src/consts.rs")] == "use crate::*;\npub const A: u8 = 1;"


def test_markers_are_passed_through() -> None:
    fs = InMemoryFileSystem({Path("/crate/src/main.rs"): "fn list() -> Json<u8> { todo!() }\nfn main() {}\n"})

    with patch("isucon_restruct.cli.restructure.LocalFileSystem", return_value=fs):
        result = runner.invoke(app, ["-p", "/crate", "--marker", "Json<"])

    assert result.exit_code == 0
    assert Path("/crate/src/resources/list.rs") in fs.files


def test_parse_error_exits_non_zero() -> None:
    fs = InMemoryFileSystem({Path("/crate/src/main.rs"): "fn main( {\n"})

    with patch("isucon_restruct.cli.restructure.LocalFileSystem", return_value=fs):
        result = runner.invoke(app, ["-p", "/crate"])

    assert result.exit_code == 1
    assert fs.writes == []


def test_plan_lists_files_without_writing() -> None:
    fs = InMemoryFileSystem({Path("/crate/src/main.rs"): "struct User;\nfn main() {}\n"})

    with patch("isucon_restruct.cli.plan.LocalFileSystem", return_value=fs):
        result = runner.invoke(app, ["plan", "-p", "/crate"])

    assert result.exit_code == 0
    assert "user.rs" in result.output
    assert "main.rs" in result.output
    assert fs.writes == []
