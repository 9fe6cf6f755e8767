"""Shift-JIS to UTF-8 transcoder implementing the FileTranscoder port."""

from __future__ import annotations

import os
from pathlib import Path

from sjis_converter.errors import DecodeError, FileOpenError, FileWriteError
from sjis_converter.types import DEFAULT_CODEC, ShiftJisCodec

# rw-r--r-- regardless of the original file's mode.
OUTPUT_FILE_MODE = 0o644


def decode_shift_jis(raw: bytes, codec: ShiftJisCodec = DEFAULT_CODEC) -> str:
    """Decode Shift-JIS bytes strictly; unmapped sequences raise."""
    return raw.decode(codec, errors="strict")


class ShiftJisTranscoder:
    """Rewrite a Shift-JIS encoded file as UTF-8 at the same path.

    The write is not atomic: if it is interrupted the file may be left
    truncated. A decode failure leaves the file untouched because it is only
    opened for writing after decoding succeeded.
    """

    def transcode(self, path: Path, codec: ShiftJisCodec = DEFAULT_CODEC) -> int:
        """Convert ``path`` in place and return the number of bytes written.

        Parameters
        ----------
        path : Path
            File holding Shift-JIS text.
        codec : ShiftJisCodec, default="shift_jis"
            Shift-JIS family codec used for decoding.

        Returns
        -------
        int
            Size of the UTF-8 payload written.

        Raises
        ------
        FileOpenError
            If the file cannot be read.
        DecodeError
            If the content has no valid mapping in ``codec``.
        FileWriteError
            If the UTF-8 content cannot be written back.
        """
        try:
            with path.open("rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise FileOpenError(path, exc) from exc

        try:
            text = decode_shift_jis(raw, codec)
        except UnicodeDecodeError as exc:
            raise DecodeError(path, exc) from exc

        payload = text.encode("utf-8")
        try:
            with path.open("wb") as handle:
                handle.write(payload)
            os.chmod(path, OUTPUT_FILE_MODE)
        except OSError as exc:
            raise FileWriteError(path, exc) from exc
        return len(payload)
