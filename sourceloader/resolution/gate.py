"""Admission rule for activating a discovered file."""

from collections.abc import Callable
from pathlib import Path

from ..models import DEFAULT_EXTENSION

PathPredicate = Callable[[Path], bool]


class ImportGate:
    """Decide whether a single file qualifies for activation.

    A file is admitted when it is a regular file, its extension equals the
    configured source extension (case-sensitive), and the optional predicate
    accepts its path.
    """

    def __init__(self, extension: str = DEFAULT_EXTENSION):
        self.extension = extension.lstrip(".")

    def has_source_extension(self, path: Path) -> bool:
        return path.suffix == f".{self.extension}"

    def admits(self, path: str | Path, predicate: PathPredicate | None = None) -> bool:
        """Check a file against the admission rule.

        Args:
            path: Candidate file
            predicate: Optional callable receiving the path; a falsy result rejects it

        Returns:
            True if the file should be activated
        """
        path = Path(path)
        if not path.is_file():
            return False
        if not self.has_source_extension(path):
            return False
        return predicate is None or bool(predicate(path))

    def __repr__(self) -> str:
        return f"ImportGate(.{self.extension})"
