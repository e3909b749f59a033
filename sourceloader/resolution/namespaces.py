"""Extraction of namespace declarations from source files."""

import re
from pathlib import Path
from typing import Any

from ..models import DEFAULT_NAMESPACE_PATTERN
from ..utils.safe_logger import SafeLogger
from .walker import TreeWalker


class NamespaceScanner:
    """Collect ``namespace X;`` declarations from files with a given name.

    Every call re-walks the tree; nothing is cached between calls. Duplicate
    namespaces are kept, in file-discovery order then line order.
    """

    def __init__(
        self,
        walker: TreeWalker | None = None,
        pattern: str | re.Pattern[str] = DEFAULT_NAMESPACE_PATTERN,
        logger: Any = None,
    ):
        self.walker = walker or TreeWalker()
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.logger = SafeLogger(logger)

    def namespaces_of(self, root: str | Path, file_name: str) -> list[str]:
        """Return namespaces declared in every file named ``file_name`` under ``root``.

        Args:
            root: Directory to walk
            file_name: Exact base name to match (e.g. "Foo.php")

        Returns:
            Captured namespace values; empty if no file matches
        """
        namespaces: list[str] = []
        for path in self.walker.files(root):
            if path.name != file_name:
                continue
            namespaces.extend(self.scan_file(path))
        return namespaces

    def scan_file(self, path: Path) -> list[str]:
        """Read ``path`` line by line and return the captured namespace values.

        Reading stops at the first line that cannot be decoded; values found
        before it are kept. The file is always closed before returning.
        """
        found: list[str] = []
        try:
            with path.open(encoding="utf-8") as handle:
                for line in handle:
                    match = self.pattern.match(line.rstrip("\r\n"))
                    if match:
                        found.append(match.group(1))
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"[loader:namespaces] Stopped reading {path}: {e}")
        return found

    def __repr__(self) -> str:
        return f"NamespaceScanner({self.pattern.pattern!r})"
