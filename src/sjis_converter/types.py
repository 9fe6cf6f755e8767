"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal

type OutcomeStatus = Literal["already_utf8", "converted", "failed"]
type ShiftJisCodec = Literal["shift_jis", "cp932", "shift_jis_2004"]

DEFAULT_EXTENSIONS: tuple[str, ...] = (".csv", ".txt")
DEFAULT_SAMPLE_SIZE = 4096
DEFAULT_CODEC: ShiftJisCodec = "shift_jis"
