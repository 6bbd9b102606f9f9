"""Shared type aliases for debom modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, BinaryIO

if TYPE_CHECKING:
    from debom.application.results import FileOpResult

type FileHandle = BinaryIO
type Stage = Callable[[FileHandle], "FileOpResult"]
