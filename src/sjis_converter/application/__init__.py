"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from sjis_converter.application.options import (
    ConversionOptions,
    DetectOptions,
    ScanOptions,
)
from sjis_converter.application.ports import (
    EncodingDetector,
    FileEnumerator,
    FileTranscoder,
)
from sjis_converter.application.results import (
    CandidateFile,
    ConversionSummary,
    FileOutcome,
)
from sjis_converter.types import (
    DEFAULT_CODEC,
    DEFAULT_EXTENSIONS,
    DEFAULT_SAMPLE_SIZE,
    ShiftJisCodec,
)


def build_conversion_options(
    *,
    max_depth: int = 0,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    sample_size: int | None = DEFAULT_SAMPLE_SIZE,
    codec: ShiftJisCodec = DEFAULT_CODEC,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from sjis_converter.application.use_cases import build_conversion_options as _impl

    return _impl(
        max_depth=max_depth,
        extensions=extensions,
        sample_size=sample_size,
        codec=codec,
    )


def convert_directory(
    *,
    root: Path,
    options: ConversionOptions,
    enumerator: FileEnumerator | None = None,
    detector: EncodingDetector | None = None,
    transcoder: FileTranscoder | None = None,
    on_outcome: Callable[[FileOutcome], None] | None = None,
) -> ConversionSummary:
    """Convert a directory tree via lazy use-case import."""
    from sjis_converter.application.use_cases import convert_directory as _impl

    return _impl(
        root=root,
        options=options,
        enumerator=enumerator,
        detector=detector,
        transcoder=transcoder,
        on_outcome=on_outcome,
    )


__all__ = [
    "CandidateFile",
    "ConversionOptions",
    "ConversionSummary",
    "DetectOptions",
    "FileOutcome",
    "ScanOptions",
    "build_conversion_options",
    "convert_directory",
]
