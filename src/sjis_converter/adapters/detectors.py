"""UTF-8 validity heuristic implementing the EncodingDetector port."""

from __future__ import annotations

import codecs
from pathlib import Path

from sjis_converter.application.options import DetectOptions
from sjis_converter.errors import FileOpenError


def is_valid_utf8_prefix(data: bytes, *, complete: bool) -> bool:
    """Check whether ``data`` is structurally valid UTF-8.

    Parameters
    ----------
    data : bytes
        Sampled bytes.
    complete : bool
        ``True`` when ``data`` is the whole file. Otherwise a multi-byte
        sequence cut off at the end of the sample is not treated as invalid.

    Returns
    -------
    bool
        ``True`` if no invalid byte sequence was found.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    try:
        decoder.decode(data, final=complete)
    except UnicodeDecodeError:
        return False
    return True


class Utf8PrefixDetector:
    """Sample the head of a file and test it for UTF-8 validity.

    This is a heuristic: Shift-JIS content whose sampled prefix happens to be
    valid UTF-8 (for example pure ASCII headers longer than the sample) is
    reported as UTF-8. Pass ``DetectOptions(sample_size=None)`` to validate the
    entire file.
    """

    def is_utf8(self, path: Path, options: DetectOptions) -> bool:
        """Return ``True`` when the sampled bytes of ``path`` are valid UTF-8.

        Raises
        ------
        FileOpenError
            If the file cannot be opened or read.
        """
        size = options.sample_size
        try:
            with path.open("rb") as handle:
                # One byte past the sample tells whether the file ends inside it.
                sample = handle.read() if size is None else handle.read(size + 1)
        except OSError as exc:
            raise FileOpenError(path, exc) from exc
        if size is None or len(sample) <= size:
            return is_valid_utf8_prefix(sample, complete=True)
        return is_valid_utf8_prefix(sample[:size], complete=False)
