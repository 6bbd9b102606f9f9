"""Unit tests for the console reporter."""

from __future__ import annotations

import io
import threading
from pathlib import Path

import pytest

from debom.application.results import Continue, Failed, Skipped, Summary
from debom.infrastructure.reporting import ConsoleReporter


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (Continue(io.BytesIO()), "a.txt...Done!"),
        (Skipped("File is empty"), "a.txt...Skipped: File is empty"),
        (Failed("boom"), "a.txt...Failed: boom"),
    ],
)
def test_report_prints_one_line(
    result: Continue | Skipped | Failed,
    expected: str,
    capsys: pytest.CaptureFixture[str],
) -> None:
    ConsoleReporter().report(Path("a.txt"), result)
    assert capsys.readouterr().out == expected + "\n"


def test_report_summary_overwrite(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleReporter().report_summary(Summary(1, 2, 3), None)
    assert capsys.readouterr().out == "\nProcessed: 1, Skipped: 2, Failed: 3\n"


def test_report_summary_copy_mentions_destination(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleReporter().report_summary(Summary(1, 0, 0), Path("out"))
    out = capsys.readouterr().out
    assert out.endswith("\nWrote files to out\n")


def test_reporter_waits_for_shared_lock(capsys: pytest.CaptureFixture[str]) -> None:
    """Output is blocked while another holder owns the lock."""
    lock = threading.Lock()
    reporter = ConsoleReporter(lock)
    lock.acquire()
    thread = threading.Thread(target=reporter.report, args=(Path("a"), Skipped("x")))
    thread.start()
    thread.join(timeout=0.2)
    assert thread.is_alive()
    lock.release()
    thread.join(timeout=5)
    assert capsys.readouterr().out == "a...Skipped: x\n"
