"""Top-level API for converting Shift-JIS text files to UTF-8."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from sjis_converter.types import (
    DEFAULT_CODEC,
    DEFAULT_EXTENSIONS,
    DEFAULT_SAMPLE_SIZE,
    ShiftJisCodec,
)

if TYPE_CHECKING:
    from sjis_converter.application.results import ConversionSummary
    from sjis_converter.application.use_cases import OutcomeCallback

__version__ = "0.1.0"


def convert_directory_to_utf8(
    root: Path,
    max_depth: int = 0,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    sample_size: int | None = DEFAULT_SAMPLE_SIZE,
    codec: ShiftJisCodec = DEFAULT_CODEC,
    on_outcome: OutcomeCallback | None = None,
) -> ConversionSummary:
    """Convert Shift-JIS ``.csv``/``.txt`` files below a directory to UTF-8.

    Parameters
    ----------
    root : Path
        Directory to scan.
    max_depth : int, default=0
        Directory levels to descend below ``root``; 0 scans only ``root``.
    extensions : Iterable[str], default=(".csv", ".txt")
        Case-sensitive, dot-prefixed suffixes of files to consider.
    sample_size : int | None, default=4096
        Bytes sampled by the UTF-8 pre-check; ``None`` checks whole files.
    codec : {"shift_jis", "cp932", "shift_jis_2004"}, default="shift_jis"
        Shift-JIS variant used for decoding.
    on_outcome : Callable[[FileOutcome], None] | None, default=None
        Called with each per-file outcome as soon as it is known.

    Returns
    -------
    ConversionSummary
        Per-file outcomes and counts.

    Raises
    ------
    ConfigError
        If the options are invalid.
    EnumerationError
        If ``root`` cannot be listed.
    """
    from sjis_converter.api import convert_directory_to_utf8 as _impl

    return _impl(
        root=root,
        max_depth=max_depth,
        extensions=extensions,
        sample_size=sample_size,
        codec=codec,
        on_outcome=on_outcome,
    )


def is_utf8_file(path: Path, sample_size: int | None = DEFAULT_SAMPLE_SIZE) -> bool:
    """Check whether a file's leading bytes are valid UTF-8.

    A multi-byte sequence cut off at the sample boundary does not count as
    invalid.

    Raises
    ------
    FileOpenError
        If the file cannot be read.
    """
    from sjis_converter.api import is_utf8_file as _impl

    return _impl(path, sample_size=sample_size)


def transcode_file(path: Path, codec: ShiftJisCodec = DEFAULT_CODEC) -> int:
    """Decode a file as Shift-JIS and overwrite it as UTF-8 (mode 0644).

    Returns
    -------
    int
        Number of bytes written.

    Raises
    ------
    FileOpenError, DecodeError, FileWriteError
        Depending on which step failed.
    """
    from sjis_converter.api import transcode_file as _impl

    return _impl(path, codec=codec)


__all__ = [
    "__version__",
    "convert_directory_to_utf8",
    "is_utf8_file",
    "transcode_file",
]
