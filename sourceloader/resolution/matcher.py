"""Suffix matching for resolved candidates.

Matching is plain substring containment on the full path string, not a
path-segment comparison: ``Foo.py`` matches ``/src/Foo.py`` and also
``/src/MyFoo.py``. Callers rely on this looseness, so it is kept as is.
"""

from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from .walker import WalkEntry


def matches(path: str | Path, suffix: str) -> bool:
    """Return True when ``suffix`` occurs anywhere in ``path``."""
    return suffix in str(path)


def match_entries(entries: Iterable[WalkEntry], suffix: str) -> Iterator[Path]:
    """Yield the paths of regular-file entries whose path contains ``suffix``.

    Args:
        entries: Leaves produced by a TreeWalker
        suffix: Relative path suffix built from a logical name

    Yields:
        Matching file paths, in traversal order
    """
    for entry in entries:
        if entry.is_file and matches(entry.path, suffix):
            yield entry.path
