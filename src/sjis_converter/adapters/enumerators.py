"""Directory enumeration implementing the FileEnumerator port."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from sjis_converter.application.options import ScanOptions
from sjis_converter.application.results import CandidateFile
from sjis_converter.errors import EnumerationError

logger = logging.getLogger(__name__)


def _list_dir(directory: Path) -> list[os.DirEntry[str]]:
    """Return directory entries sorted by name.

    Raises
    ------
    OSError
        If the directory cannot be opened or listed.
    """
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


class DirectoryEnumerator:
    """List candidate files below a root, pruning directories beyond max depth."""

    def iter_candidates(self, root: Path, options: ScanOptions) -> Iterator[CandidateFile]:
        """Return a lazy iterator of candidate files under ``root``.

        The root is listed eagerly so a missing or unreadable root fails here
        rather than on first iteration.

        Parameters
        ----------
        root : Path
            Directory to scan.
        options : ScanOptions
            Depth bound and accepted extensions.

        Returns
        -------
        Iterator[CandidateFile]
            Regular files whose suffix is in ``options.extensions``.

        Raises
        ------
        EnumerationError
            If ``root`` cannot be listed.
        """
        try:
            entries = _list_dir(root)
        except OSError as exc:
            raise EnumerationError(f"Cannot list directory {root}: {exc}") from exc
        return self._walk(root, entries, 0, options)

    def _walk(
        self,
        directory: Path,
        entries: list[os.DirEntry[str]],
        depth: int,
        options: ScanOptions,
    ) -> Iterator[CandidateFile]:
        subdirs: list[Path] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
                    continue
                if entry.is_file():
                    suffix = Path(entry.name).suffix
                    if suffix in options.extensions:
                        yield CandidateFile(
                            path=Path(entry.path),
                            is_dir=False,
                            extension=suffix,
                            depth=depth,
                        )
                    continue
                if entry.is_symlink():
                    if entry.is_dir():
                        logger.debug("not following directory symlink %s", entry.path)
                    else:
                        logger.warning("skipping broken symlink %s", entry.path)
            except OSError as exc:
                logger.warning("skipping %s: %s", entry.path, exc)

        if depth >= options.max_depth:
            if subdirs:
                logger.debug(
                    "not descending below %s (max depth %d)", directory, options.max_depth
                )
            return

        for subdir in subdirs:
            try:
                children = _list_dir(subdir)
            except OSError as exc:
                logger.warning("skipping directory %s: %s", subdir, exc)
                continue
            yield from self._walk(subdir, children, depth + 1, options)
