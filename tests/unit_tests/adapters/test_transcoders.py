"""Unit tests for the Shift-JIS transcoder adapter."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from sjis_converter.adapters.transcoders import ShiftJisTranscoder, decode_shift_jis
from sjis_converter.errors import DecodeError, FileOpenError, FileWriteError


def test_transcode_rewrites_file_as_utf8(
    tmp_path: Path, sjis_bytes: bytes, utf8_bytes: bytes
) -> None:
    """Shift-JIS bytes become the UTF-8 encoding of the same text."""
    path = tmp_path / "data.csv"
    path.write_bytes(sjis_bytes)

    written = ShiftJisTranscoder().transcode(path)

    assert path.read_bytes() == utf8_bytes
    assert written == len(utf8_bytes)


def test_transcode_sets_mode_0644(tmp_path: Path, sjis_bytes: bytes) -> None:
    """The rewritten file gets rw-r--r-- regardless of its original mode."""
    path = tmp_path / "data.csv"
    path.write_bytes(sjis_bytes)
    os.chmod(path, 0o600)

    ShiftJisTranscoder().transcode(path)

    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_transcode_halfwidth_katakana(tmp_path: Path) -> None:
    """Single-byte half-width katakana decode correctly."""
    path = tmp_path / "kana.txt"
    path.write_bytes("ｱｲｳｴｵ".encode("shift_jis"))

    ShiftJisTranscoder().transcode(path)

    assert path.read_text(encoding="utf-8") == "ｱｲｳｴｵ"


def test_undecodable_bytes_leave_file_unchanged(tmp_path: Path) -> None:
    """A byte with no Shift-JIS mapping raises and leaves the file intact."""
    path = tmp_path / "bad.csv"
    original = b"\x80abc"
    path.write_bytes(original)

    with pytest.raises(DecodeError) as excinfo:
        ShiftJisTranscoder().transcode(path)

    assert path.read_bytes() == original
    assert excinfo.value.path == path
    assert "decode failed" in excinfo.value.reason


def test_cp932_decodes_nec_special_characters(tmp_path: Path) -> None:
    """The cp932 variant maps Windows extension characters."""
    path = tmp_path / "circled.txt"
    path.write_bytes("①②③".encode("cp932"))

    with pytest.raises(DecodeError):
        ShiftJisTranscoder().transcode(path, "shift_jis")
    ShiftJisTranscoder().transcode(path, "cp932")

    assert path.read_text(encoding="utf-8") == "①②③"


def test_missing_file_raises_open_error(tmp_path: Path) -> None:
    """Missing files surface as FileOpenError."""
    with pytest.raises(FileOpenError):
        ShiftJisTranscoder().transcode(tmp_path / "missing.csv")


def test_write_failure_is_reported(
    tmp_path: Path, sjis_bytes: bytes, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A failed write raises FileWriteError instead of reporting success."""
    path = tmp_path / "data.csv"
    path.write_bytes(sjis_bytes)
    real_open = Path.open

    def read_only_open(self: Path, mode: str = "r", *args: object, **kwargs: object):
        if "w" in mode:
            raise PermissionError(13, "Permission denied", str(self))
        return real_open(self, mode, *args, **kwargs)

    monkeypatch.setattr(Path, "open", read_only_open)

    with pytest.raises(FileWriteError) as excinfo:
        ShiftJisTranscoder().transcode(path)

    assert "Permission denied" in excinfo.value.reason
    monkeypatch.undo()
    assert path.read_bytes() == sjis_bytes


def test_decode_shift_jis_is_strict() -> None:
    """Decoding never substitutes replacement characters."""
    with pytest.raises(UnicodeDecodeError):
        decode_shift_jis(b"\xa0")
    assert decode_shift_jis("東京".encode("shift_jis")) == "東京"
