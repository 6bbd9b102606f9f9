"""Application-layer result objects.

Every pipeline stage returns exactly one :data:`FileOpResult`. Only
:class:`Continue` carries the open handle forward; :class:`Skipped` and
:class:`Failed` are terminal and pass through :func:`bind` untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from debom.types import FileHandle, Stage


@dataclass(frozen=True)
class Continue:
    """Stage succeeded; hand ``handle`` to the next stage."""

    handle: FileHandle


@dataclass(frozen=True)
class Skipped:
    """File needs no processing."""

    reason: str


@dataclass(frozen=True)
class Failed:
    """File could not be processed."""

    message: str


type FileOpResult = Continue | Skipped | Failed


def bind(result: FileOpResult, stage: Stage) -> FileOpResult:
    """Run ``stage`` on the carried handle only when ``result`` is ``Continue``."""
    match result:
        case Continue(handle=handle):
            return stage(handle)
        case _:
            return result


def chain(*stages: Stage) -> Stage:
    """Compose stages into one, short-circuiting on the first terminal result."""
    if not stages:
        raise ValueError("chain requires at least one stage.")

    def _run(handle: FileHandle) -> FileOpResult:
        result: FileOpResult = Continue(handle)
        for stage in stages:
            result = bind(result, stage)
        return result

    return _run


def describe(result: FileOpResult) -> str:
    """Return the outcome text shown after a file name."""
    match result:
        case Continue():
            return "Done!"
        case Skipped(reason=reason):
            return f"Skipped: {reason}"
        case Failed(message=message):
            return f"Failed: {message}"
    raise TypeError(f"Unknown result type: {type(result).__name__}")


@dataclass(frozen=True)
class Summary:
    """Outcome counts for a completed run."""

    processed: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.skipped + self.failed

    @classmethod
    def from_results(cls, results: Iterable[FileOpResult]) -> Summary:
        """Fold per-file results into a summary."""
        processed = skipped = failed = 0
        for result in results:
            match result:
                case Continue():
                    processed += 1
                case Skipped():
                    skipped += 1
                case Failed():
                    failed += 1
        return cls(processed=processed, skipped=skipped, failed=failed)

    def __str__(self) -> str:
        return (
            f"Processed: {self.processed}, "
            f"Skipped: {self.skipped}, "
            f"Failed: {self.failed}"
        )
