"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sjis_converter.types import OutcomeStatus


@dataclass(frozen=True)
class CandidateFile:
    """File produced by directory enumeration.

    ``depth`` counts directory segments between the root and the file's
    parent directory, so files directly under the root have depth 0.
    """

    path: Path
    is_dir: bool
    extension: str
    depth: int = 0


@dataclass(frozen=True)
class FileOutcome:
    """Structured per-file conversion outcome."""

    path: Path
    status: OutcomeStatus
    reason: str | None = None


@dataclass
class ConversionSummary:
    """Outcomes accumulated over one directory run."""

    root: Path
    outcomes: list[FileOutcome] = field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        """Append a per-file outcome."""
        self.outcomes.append(outcome)

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def converted_count(self) -> int:
        """Number of files rewritten as UTF-8."""
        return self._count("converted")

    @property
    def skipped_count(self) -> int:
        """Number of files left alone because they were already UTF-8."""
        return self._count("already_utf8")

    @property
    def failed_count(self) -> int:
        """Number of files that could not be converted."""
        return self._count("failed")
