"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from sjis_converter.adapters.detectors import Utf8PrefixDetector
from sjis_converter.adapters.transcoders import ShiftJisTranscoder
from sjis_converter.application.options import DetectOptions
from sjis_converter.application.results import ConversionSummary
from sjis_converter.application.use_cases import (
    OutcomeCallback,
    build_conversion_options,
    convert_directory,
)
from sjis_converter.types import (
    DEFAULT_CODEC,
    DEFAULT_EXTENSIONS,
    DEFAULT_SAMPLE_SIZE,
    ShiftJisCodec,
)


def convert_directory_to_utf8(
    root: Path,
    max_depth: int = 0,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    sample_size: int | None = DEFAULT_SAMPLE_SIZE,
    codec: ShiftJisCodec = DEFAULT_CODEC,
    on_outcome: OutcomeCallback | None = None,
) -> ConversionSummary:
    """Convert Shift-JIS candidate files below ``root`` to UTF-8 in place."""
    options = build_conversion_options(
        max_depth=max_depth,
        extensions=tuple(extensions),
        sample_size=sample_size,
        codec=codec,
    )
    return convert_directory(
        root=Path(root),
        options=options,
        on_outcome=on_outcome,
    )


def is_utf8_file(path: Path, sample_size: int | None = DEFAULT_SAMPLE_SIZE) -> bool:
    """Return whether the sampled prefix of ``path`` is valid UTF-8."""
    return Utf8PrefixDetector().is_utf8(Path(path), DetectOptions(sample_size=sample_size))


def transcode_file(path: Path, codec: ShiftJisCodec = DEFAULT_CODEC) -> int:
    """Rewrite a single Shift-JIS file as UTF-8 without the pre-check."""
    return ShiftJisTranscoder().transcode(Path(path), codec)
