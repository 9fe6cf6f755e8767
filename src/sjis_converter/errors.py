"""Exception hierarchy for Shift-JIS to UTF-8 conversion."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base error for conversion failures."""

    exit_code: int = 1


class ConfigError(ConversionError):
    """Raised when conversion options fail validation."""

    exit_code = 2


class EnumerationError(ConversionError):
    """Raised when the target directory itself cannot be listed."""


class TranscodeError(ConversionError):
    """Per-file failure; the run continues with the next file.

    Parameters
    ----------
    path : Path
        File the failure applies to.
    cause : BaseException | None, default=None
        Underlying exception, if any.
    """

    stage = "transcode"

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{self.stage} failed for {path}{detail}")

    @property
    def reason(self) -> str:
        """Short human-readable reason without the path."""
        if self.cause is None:
            return f"{self.stage} failed"
        return f"{self.stage} failed: {self.cause}"


class FileOpenError(TranscodeError):
    """Raised when a candidate file cannot be opened or read."""

    stage = "open"


class DecodeError(TranscodeError):
    """Raised when file bytes have no valid Shift-JIS mapping."""

    stage = "decode"


class FileWriteError(TranscodeError):
    """Raised when writing the UTF-8 content back fails."""

    stage = "write"
