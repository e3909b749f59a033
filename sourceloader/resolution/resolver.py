"""Name-to-path resolution with ordered fallback sub-roots.

Resolution order (first non-empty result wins):
1. The root, matching the fully qualified name as a relative path suffix
2. Each fallback path under the root, in declared order, matching only the
   unqualified (last) segment of the name
"""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..activation import Activator
from ..exceptions import InvalidSettingsError
from ..models import DEFAULT_EXTENSION
from ..models import DEFAULT_NAMESPACE_SEPARATOR
from ..models import check_fallback_path
from ..utils.safe_logger import SafeLogger
from .matcher import match_entries
from .walker import TreeWalker


class Resolver:
    """Resolve logical names to source files and activate every match."""

    def __init__(
        self,
        root: str | Path,
        fallback_paths: Iterable[str | Path] = (),
        *,
        activator: Activator,
        extension: str = DEFAULT_EXTENSION,
        namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR,
        walker: TreeWalker | None = None,
        logger: Any = None,
    ):
        """Initialize resolver.

        Args:
            root: Directory anchoring all resolution
            fallback_paths: Sub-roots (relative to root) consulted in order when the root has no match
            activator: Callable invoked once per matched file
            extension: Source file extension, without the dot
            namespace_separator: Separator used inside logical names
            walker: TreeWalker to use (default: one with the standard ignore list)
            logger: Logger receiving debug/error messages

        Raises:
            InvalidSettingsError: A fallback path is absolute or leaves the root
        """
        self.root = Path(root).absolute()
        try:
            self.fallback_paths = tuple(check_fallback_path(path) for path in fallback_paths)
        except ValueError as e:
            raise InvalidSettingsError(str(e)) from e
        self.activator = activator
        self.extension = extension.lstrip(".")
        self.namespace_separator = namespace_separator
        self.walker = walker or TreeWalker()
        self.logger = SafeLogger(logger)

    def resolve(self, name: str) -> list[Path]:
        """Resolve one logical name and activate every matching file.

        Fallback paths are only consulted when the root itself is a directory
        that produced no match; an invalid root yields an empty result.

        Args:
            name: Logical name, e.g. "app.models.User" or "User"

        Returns:
            Activated paths in discovery order (empty when nothing matched
            or the name is blank)
        """
        if not name.strip():
            self.logger.debug("[loader:resolve] blank name ignored")
            return []

        found = self.search(self.root, self.to_suffix(name))
        if found or not self.root.is_dir():
            return found

        bare_suffix = f"{self.bare_name(name)}.{self.extension}"
        for fallback in self.fallback_paths:
            found = self.search(self.root / fallback, bare_suffix)
            if found:
                self.logger.debug(f"[loader:resolve] {name} -> fallback {fallback}")
                return found

        self.logger.debug(f"[loader:resolve] {name} -> not found")
        return []

    def resolve_all(self, names: Iterable[str]) -> list[Path]:
        """Resolve names one by one, concatenating results in input order."""
        loaded: list[Path] = []
        for name in names:
            loaded.extend(self.resolve(name))
        return loaded

    def search(self, directory: str | Path, suffix: str) -> list[Path]:
        """Walk ``directory`` and activate every file whose path contains ``suffix``.

        Args:
            directory: Search root
            suffix: Relative path suffix (e.g. "app/models/User.py")

        Returns:
            Activated paths; empty if ``directory`` is not a directory
        """
        directory = Path(directory)
        if not directory.is_dir():
            self.logger.error(f"Invalid search directory path: {directory}")
            return []

        loaded: list[Path] = []
        for path in match_entries(self.walker.walk(directory), suffix):
            self.activator(path)
            loaded.append(path)
            self.logger.debug(f"[loader:resolve] {path} load success. (search from {directory})")
        return loaded

    def to_suffix(self, name: str) -> str:
        """Turn a logical name into the relative path suffix searched for."""
        return name.replace(self.namespace_separator, os.sep) + f".{self.extension}"

    def bare_name(self, name: str) -> str:
        """Strip any namespace prefix from a logical name."""
        return name.rsplit(self.namespace_separator, 1)[-1]

    def __repr__(self) -> str:
        return f"Resolver({self.root}, fallbacks={list(self.fallback_paths)})"
