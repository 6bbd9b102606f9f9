"""Typed option objects shared across processing use-cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from debom.constants import COPY_DIRECTORY_NAME, DEFAULT_PATTERN


@dataclass(frozen=True)
class Overwrite:
    """Strip the BOM from each file in place."""


@dataclass(frozen=True)
class Copy:
    """Write BOM-stripped copies under ``destination``."""

    destination: Path


type OutputMode = Overwrite | Copy


def copy_directory_for(path: Path) -> Path:
    """Return the default copy destination for a file or directory root.

    Parameters
    ----------
    path : Path
        Root passed on the command line.

    Returns
    -------
    Path
        ``<path>/DeBOM Copied`` for directories, or
        ``<parent>/DeBOM Copied`` when ``path`` is a file.
    """
    base = path.parent if path.is_file() else path
    return base / COPY_DIRECTORY_NAME


@dataclass(frozen=True)
class Options:
    """Immutable run options passed to every file-processing task."""

    path: Path
    output_mode: OutputMode = field(default_factory=Overwrite)
    recursive: bool = False
    pattern: str = DEFAULT_PATTERN

    @property
    def root_directory(self) -> Path:
        """Directory that relative mirror paths are computed against."""
        return self.path.parent if self.path.is_file() else self.path
