"""Depth-first traversal of a source tree.

The walker yields leaves only: every entry that is not a real directory.
Directories are descended into (symlinked directories are not followed and
surface as leaves). Each leaf carries whether it is a regular file, so callers
can tell source files apart from dangling links, sockets and similar nodes.
"""

import os
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple

from ..models import DEFAULT_IGNORED_NAMES


class WalkEntry(NamedTuple):
    """A leaf produced during traversal."""

    path: Path
    is_file: bool


class TreeWalker:
    """Produce a lazy, depth-first sequence of leaves under a directory.

    Entries inside a directory are visited in name order so that discovery
    order is stable across runs and platforms. Subtrees that cannot be read
    (permission denied, removed mid-walk) are skipped without aborting.
    """

    def __init__(self, ignored_names: Iterable[str] = DEFAULT_IGNORED_NAMES):
        self.ignored_names = frozenset(ignored_names)

    def walk(self, root: str | Path) -> Iterator[WalkEntry]:
        """Walk ``root`` recursively.

        Args:
            root: Directory to walk

        Yields:
            WalkEntry for every leaf below ``root``. Nothing when ``root`` is not a directory.
        """
        root = Path(root)
        if not root.is_dir():
            return
        yield from self._walk_directory(root)

    def files(self, root: str | Path) -> Iterator[Path]:
        """Walk ``root`` and yield regular files only."""
        for entry in self.walk(root):
            if entry.is_file:
                yield entry.path

    def _walk_directory(self, directory: Path) -> Iterator[WalkEntry]:
        try:
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda item: item.name)
        except OSError:
            return

        for entry in entries:
            if entry.name in self.ignored_names:
                continue

            path = directory / entry.name
            if _is_real_directory(entry):
                yield from self._walk_directory(path)
                continue

            yield WalkEntry(path, _is_regular_file(entry))

    def __repr__(self) -> str:
        return f"TreeWalker(ignored={sorted(self.ignored_names)})"


def _is_real_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _is_regular_file(entry: os.DirEntry) -> bool:
    # Follows symlinks: a link to a source file counts as that file
    try:
        return entry.is_file()
    except OSError:
        return False
