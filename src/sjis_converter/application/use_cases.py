"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from sjis_converter.adapters.detectors import Utf8PrefixDetector
from sjis_converter.adapters.enumerators import DirectoryEnumerator
from sjis_converter.adapters.transcoders import ShiftJisTranscoder
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
from sjis_converter.application.results import ConversionSummary, FileOutcome
from sjis_converter.errors import ConfigError, TranscodeError
from sjis_converter.schemas import ConversionConfig
from sjis_converter.types import (
    DEFAULT_CODEC,
    DEFAULT_EXTENSIONS,
    DEFAULT_SAMPLE_SIZE,
    ShiftJisCodec,
)

logger = logging.getLogger(__name__)

type OutcomeCallback = Callable[[FileOutcome], None]


def convert_file(
    *,
    path: Path,
    codec: ShiftJisCodec,
    detect: DetectOptions,
    detector: EncodingDetector | None = None,
    transcoder: FileTranscoder | None = None,
) -> FileOutcome:
    """Use-case: check one file and convert it unless it is already UTF-8.

    Per-file failures are logged and returned as a ``failed`` outcome rather
    than raised.
    """
    detector = detector or Utf8PrefixDetector()
    transcoder = transcoder or ShiftJisTranscoder()

    try:
        if detector.is_utf8(path, detect):
            logger.info("already UTF-8, skipping %s", path)
            return FileOutcome(path=path, status="already_utf8")
        written = transcoder.transcode(path, codec)
    except TranscodeError as exc:
        logger.warning("conversion failed for %s: %s", path, exc.reason)
        return FileOutcome(path=path, status="failed", reason=exc.reason)

    logger.info("converted %s (%d bytes written)", path, written)
    return FileOutcome(path=path, status="converted")


def convert_directory(
    *,
    root: Path,
    options: ConversionOptions,
    enumerator: FileEnumerator | None = None,
    detector: EncodingDetector | None = None,
    transcoder: FileTranscoder | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> ConversionSummary:
    """Use-case: convert every Shift-JIS candidate file below ``root``.

    Raises
    ------
    ConfigError
        If the options fail validation.
    EnumerationError
        If ``root`` cannot be listed.
    """
    try:
        config = ConversionConfig(
            root=root,
            max_depth=options.scan.max_depth,
            extensions=options.scan.extensions,
            sample_size=options.detect.sample_size,
            codec=options.codec,
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid conversion parameters: {exc}") from exc

    enumerator = enumerator or DirectoryEnumerator()
    detector = detector or Utf8PrefixDetector()
    transcoder = transcoder or ShiftJisTranscoder()

    scan = ScanOptions(max_depth=config.max_depth, extensions=config.extensions)
    detect = DetectOptions(sample_size=config.sample_size)
    summary = ConversionSummary(root=config.root)

    for candidate in enumerator.iter_candidates(config.root, scan):
        outcome = convert_file(
            path=candidate.path,
            codec=config.codec,
            detect=detect,
            detector=detector,
            transcoder=transcoder,
        )
        summary.record(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    logger.info(
        "finished %s: %d converted, %d already UTF-8, %d failed",
        config.root,
        summary.converted_count,
        summary.skipped_count,
        summary.failed_count,
    )
    return summary


def build_conversion_options(
    *,
    max_depth: int = 0,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    sample_size: int | None = DEFAULT_SAMPLE_SIZE,
    codec: ShiftJisCodec = DEFAULT_CODEC,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    return ConversionOptions(
        codec=codec,
        scan=ScanOptions(max_depth=max_depth, extensions=tuple(extensions)),
        detect=DetectOptions(sample_size=sample_size),
    )
