"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from debom.cli import cli as cli_module
from debom.constants import COPY_DIRECTORY_NAME, UTF8_BOM

runner = CliRunner()


def test_help_lists_options() -> None:
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    for flag in ("--copy", "--recursive", "--pattern", "--debug"):
        assert flag in result.output


def test_overwrite_run_prints_lines_and_summary(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_bytes(UTF8_BOM + b"Hello")
    (tmp_path / "b.txt").write_bytes(b"Hello")
    (tmp_path / "c.txt").write_bytes(b"")

    result = runner.invoke(cli_module.app, [str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert f"{tmp_path / 'a.txt'}...Done!" in result.output
    assert f"{tmp_path / 'b.txt'}...Skipped: UTF-8 BOM not found" in result.output
    assert f"{tmp_path / 'c.txt'}...Skipped: File is empty" in result.output
    assert result.output.rstrip().endswith("Processed: 1, Skipped: 2, Failed: 0")
    assert (tmp_path / "a.txt").read_bytes() == b"Hello"


def test_copy_run_reports_destination(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "a.txt").write_bytes(UTF8_BOM + b"Hello")

    result = runner.invoke(cli_module.app, [str(tmp_path), "-c", "-r", "-p", "*.txt"])

    destination = tmp_path / COPY_DIRECTORY_NAME
    assert result.exit_code == 0, result.output
    assert f"Wrote files to {destination}" in result.output
    assert (destination / "sub" / "a.txt").read_bytes() == b"Hello"
    assert (tmp_path / "sub" / "a.txt").read_bytes() == UTF8_BOM + b"Hello"


@pytest.mark.parametrize("path", ["", "/definitely/missing/debom-root"])
def test_invalid_path_exits_non_zero(path: str) -> None:
    result = runner.invoke(cli_module.app, [path])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_debug_prints_traceback(tmp_path: Path) -> None:
    result = runner.invoke(cli_module.app, [str(tmp_path), "--pattern", " ", "--debug"])
    assert result.exit_code == 1
    assert "Traceback" in result.output


def test_per_file_failures_keep_exit_zero(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "a.txt").write_bytes(UTF8_BOM + b"Hello")

    from debom.infrastructure import file_system

    def deny(_: Path) -> object:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(file_system, "_open_read_write", deny)

    result = runner.invoke(cli_module.app, [str(tmp_path)])

    assert result.exit_code == 0
    assert "Failed: Access to the file is denied" in result.output
    assert "Processed: 0, Skipped: 0, Failed: 1" in result.output


def test_absolute_pattern_exits_non_zero(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_bytes(UTF8_BOM + b"Hello")

    result = runner.invoke(cli_module.app, [str(tmp_path), "-p", str(tmp_path / "*.txt")])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert (tmp_path / "a.txt").read_bytes() == UTF8_BOM + b"Hello"


def test_discovery_errors_during_run_exit_non_zero(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from debom.application import use_cases

    def unsupported(_: object) -> list[Path]:
        raise NotImplementedError("Non-relative patterns are unsupported")

    monkeypatch.setattr(use_cases, "discover_files", unsupported)

    result = runner.invoke(cli_module.app, [str(tmp_path)])

    assert result.exit_code == 1
    assert "Error: Invalid pattern '*'" in result.output
