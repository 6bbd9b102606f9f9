"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import subprocess
from pathlib import Path

import debom
from debom.constants import UTF8_BOM


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert debom.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["debom", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "--copy" in result.stdout


def test_cli_strips_directory(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_bytes(UTF8_BOM + b"Hello")
    (tmp_path / "b.txt").write_bytes(b"Hello")

    result = subprocess.run(
        ["debom", str(tmp_path)],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Processed: 1, Skipped: 1, Failed: 0" in result.stdout
    assert (tmp_path / "a.txt").read_bytes() == b"Hello"


def test_cli_missing_path_fails_cleanly() -> None:
    """Ensure CLI exits non-zero before touching files for a missing path."""
    result = subprocess.run(
        ["debom", "/tmp/definitely-missing-debom-root"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode != 0
    assert "does not exist" in result.stderr.lower()
