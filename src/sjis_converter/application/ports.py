"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from sjis_converter.application.options import DetectOptions, ScanOptions
from sjis_converter.application.results import CandidateFile
from sjis_converter.types import ShiftJisCodec


class FileEnumerator(Protocol):
    """List candidate files below a root directory."""

    def iter_candidates(self, root: Path, options: ScanOptions) -> Iterator[CandidateFile]:
        """Yield candidate files; raise EnumerationError if root is unlistable."""


class EncodingDetector(Protocol):
    """Decide whether a file already holds UTF-8 bytes."""

    def is_utf8(self, path: Path, options: DetectOptions) -> bool:
        """Return ``True`` when the sampled bytes are valid UTF-8."""


class FileTranscoder(Protocol):
    """Rewrite a Shift-JIS file as UTF-8 in place."""

    def transcode(self, path: Path, codec: ShiftJisCodec) -> int:
        """Convert file content and return the number of bytes written."""
