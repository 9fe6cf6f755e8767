"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from sjis_converter.types import (
    DEFAULT_CODEC,
    DEFAULT_EXTENSIONS,
    DEFAULT_SAMPLE_SIZE,
    ShiftJisCodec,
)


@dataclass(frozen=True)
class ScanOptions:
    """Directory enumeration configuration."""

    max_depth: int = 0
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS


@dataclass(frozen=True)
class DetectOptions:
    """UTF-8 validity pre-check configuration.

    ``sample_size=None`` validates the whole file instead of a prefix.
    """

    sample_size: int | None = DEFAULT_SAMPLE_SIZE


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    codec: ShiftJisCodec = DEFAULT_CODEC
    scan: ScanOptions = ScanOptions()
    detect: DetectOptions = DetectOptions()
