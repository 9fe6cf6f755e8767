"""Unit tests for the UTF-8 validity heuristic."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sjis_converter.adapters.detectors import Utf8PrefixDetector, is_valid_utf8_prefix
from sjis_converter.application.options import DetectOptions
from sjis_converter.errors import FileOpenError


def test_valid_utf8_file(tmp_path: Path, utf8_bytes: bytes) -> None:
    """UTF-8 content is reported as UTF-8."""
    path = tmp_path / "u.csv"
    path.write_bytes(utf8_bytes)

    assert Utf8PrefixDetector().is_utf8(path, DetectOptions()) is True


def test_shift_jis_file(tmp_path: Path, sjis_bytes: bytes) -> None:
    """Shift-JIS content with multi-byte characters is not UTF-8."""
    path = tmp_path / "s.csv"
    path.write_bytes(sjis_bytes)

    assert Utf8PrefixDetector().is_utf8(path, DetectOptions()) is False


def test_empty_file_is_utf8(tmp_path: Path) -> None:
    """An empty file is trivially valid UTF-8."""
    path = tmp_path / "empty.csv"
    path.write_bytes(b"")

    assert Utf8PrefixDetector().is_utf8(path, DetectOptions()) is True


def test_sequence_truncated_at_sample_boundary_is_tolerated(tmp_path: Path) -> None:
    """A code point split by the sample boundary does not count as invalid."""
    path = tmp_path / "boundary.csv"
    # 4095 ASCII bytes followed by a 3-byte character straddling byte 4096.
    path.write_bytes(b"a" * 4095 + "あ".encode("utf-8") + b"tail")

    assert Utf8PrefixDetector().is_utf8(path, DetectOptions(sample_size=4096)) is True


def test_truncated_sequence_at_end_of_file_is_invalid(tmp_path: Path) -> None:
    """When the whole file was read, a dangling lead byte is invalid."""
    path = tmp_path / "cut.csv"
    path.write_bytes(b"abc" + "あ".encode("utf-8")[:2])

    assert Utf8PrefixDetector().is_utf8(path, DetectOptions(sample_size=4096)) is False


def test_prefix_heuristic_misses_late_shift_jis(tmp_path: Path, sjis_bytes: bytes) -> None:
    """Only the sampled prefix is inspected unless a full check is requested."""
    path = tmp_path / "late.csv"
    path.write_bytes(b"id,name\n" * 600 + sjis_bytes)
    detector = Utf8PrefixDetector()

    assert detector.is_utf8(path, DetectOptions(sample_size=4096)) is True
    assert detector.is_utf8(path, DetectOptions(sample_size=None)) is False


def test_unreadable_file_raises(tmp_path: Path) -> None:
    """I/O failures surface as FileOpenError instead of a silent False."""
    with pytest.raises(FileOpenError) as excinfo:
        Utf8PrefixDetector().is_utf8(tmp_path / "missing.csv", DetectOptions())

    assert excinfo.value.path == tmp_path / "missing.csv"
    assert excinfo.value.reason.startswith("open failed")


@given(st.text(min_size=1, max_size=200))
def test_any_cut_of_utf8_text_is_a_valid_prefix(text: str) -> None:
    """Every truncation of valid UTF-8 passes the non-final check."""
    data = text.encode("utf-8")
    for cut in range(len(data) + 1):
        assert is_valid_utf8_prefix(data[:cut], complete=False)


def test_invalid_bytes_before_boundary_are_rejected() -> None:
    """Malformed sequences are rejected even when the sample is partial."""
    assert is_valid_utf8_prefix(b"ok\x80", complete=False) is False
    assert is_valid_utf8_prefix(b"\xe3\x41", complete=False) is False


def test_file_of_exactly_sample_size_is_checked_strictly(tmp_path: Path) -> None:
    """A file that fits the sample exactly cannot end in a cut-off code point."""
    path = tmp_path / "exact.csv"
    data = ("a" * 4094 + "凜").encode("shift_jis")
    assert len(data) == 4096
    path.write_bytes(data)
    detector = Utf8PrefixDetector()

    assert detector.is_utf8(path, DetectOptions(sample_size=4096)) is False
    assert detector.is_utf8(path, DetectOptions(sample_size=None)) is False


def test_sequence_cut_one_byte_before_eof_is_still_tolerated(tmp_path: Path) -> None:
    """A boundary cut is tolerated when more bytes follow the sample."""
    path = tmp_path / "longer.csv"
    path.write_bytes(b"a" * 4095 + "あ".encode("utf-8"))

    assert Utf8PrefixDetector().is_utf8(path, DetectOptions(sample_size=4096)) is True
