"""Public facade composing resolution, admission and namespace scanning.

Usage:
    loader = SourceLoader("/srv/app", fallback_paths=["vendor", "lib"])
    loader.load("app.models.User")          # resolve one name
    loader.load(["User", "Group"])          # resolve several names
    loader.activate("bootstrap.py")         # one file, relative to the root
    loader.activate_all("plugins", lambda p: not p.name.startswith("_"))
    loader.namespaces_of("Controller.php")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .activation import Activator
from .activation import ModuleActivator
from .models import DEFAULT_EXTENSION
from .models import DEFAULT_IGNORED_NAMES
from .models import DEFAULT_NAMESPACE_PATTERN
from .models import DEFAULT_NAMESPACE_SEPARATOR
from .models import ActivationReport
from .models import LoaderConfig
from .resolution import ImportGate
from .resolution import NamespaceScanner
from .resolution import PathPredicate
from .resolution import Resolver
from .resolution import TreeWalker
from .utils.safe_logger import SafeLogger


class SourceLoader:
    """Locate source files under one root and hand them to an activator.

    Results are never deduplicated: a path discovered twice is reported
    twice. Whether re-activating a path has an effect is up to the activator
    (ModuleActivator loads each path once).
    """

    def __init__(
        self,
        root: str | Path,
        fallback_paths: Iterable[str | Path] = (),
        *,
        activator: Activator | None = None,
        logger: Any = None,
        extension: str = DEFAULT_EXTENSION,
        namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR,
        ignored_names: Iterable[str] = DEFAULT_IGNORED_NAMES,
        namespace_pattern: str = DEFAULT_NAMESPACE_PATTERN,
    ):
        """Initialize loader.

        Args:
            root: Directory anchoring all resolution
            fallback_paths: Sub-roots (relative to root) searched in order when the root has no match
            activator: Callable invoked once per admitted file (default: ModuleActivator)
            logger: Logger for debug/warning/error messages (default: the module logger)
            extension: Source file extension, without the dot
            namespace_separator: Separator used inside logical names
            ignored_names: Entry names skipped while walking
            namespace_pattern: Regex with one group capturing a namespace declaration

        Raises:
            InvalidSettingsError: A fallback path is absolute or leaves the root
        """
        self.root = Path(root).absolute()
        self.activator = activator if activator is not None else ModuleActivator()
        self.logger = SafeLogger(logger or logging.getLogger(__name__))
        self.walker = TreeWalker(ignored_names)
        self.gate = ImportGate(extension)
        self.resolver = Resolver(
            self.root,
            fallback_paths,
            activator=self.activator,
            extension=extension,
            namespace_separator=namespace_separator,
            walker=self.walker,
            logger=self.logger,
        )
        self.scanner = NamespaceScanner(self.walker, namespace_pattern, logger=self.logger)

    @classmethod
    def from_config(
        cls, config: LoaderConfig, *, activator: Activator | None = None, logger: Any = None
    ) -> SourceLoader:
        """Build a loader from a validated LoaderConfig."""
        return cls(
            config.root,
            config.fallback_paths,
            activator=activator,
            logger=logger,
            extension=config.extension,
            namespace_separator=config.namespace_separator,
            ignored_names=config.ignored_names,
            namespace_pattern=config.namespace_pattern,
        )

    @property
    def fallback_paths(self) -> tuple[str, ...]:
        return self.resolver.fallback_paths

    # ----- Resolution -----

    def load(self, target: str | list[str] | tuple[str, ...]) -> list[Path]:
        """Resolve a single logical name or a list of names."""
        if isinstance(target, (list, tuple)):
            return self.resolve_all(target)
        return self.resolve(target)

    def resolve(self, name: str) -> list[Path]:
        """Resolve one logical name, activating every match.

        Returns:
            Activated paths; empty when nothing matched (not an error)
        """
        return self.resolver.resolve(name)

    def resolve_all(self, names: Iterable[str]) -> list[Path]:
        """Resolve each name in order and concatenate the activated paths."""
        return self.resolver.resolve_all(names)

    # ----- Activation -----

    def activate(self, file_path: str | Path, predicate: PathPredicate | None = None) -> bool:
        """Activate a single file given relative to the root.

        A file with another extension, or one rejected by ``predicate``, is
        skipped silently and still counts as success.

        Args:
            file_path: File path relative to the root
            predicate: Optional callable receiving the path; a falsy result skips activation

        Returns:
            True if the path is a regular file, False otherwise
        """
        path = self._within_root(file_path)
        if path is None or not path.is_file():
            return False

        if self.gate.admits(path, predicate):
            self.activator(path)
            self.logger.debug(f"[loader:activate] {path} import success.")
        return True

    def activate_all(self, directory: str | Path, predicate: PathPredicate | None = None) -> bool:
        """Activate every qualifying file below a directory relative to the root.

        Returns:
            False if any non-file leaf was met, True otherwise (including when
            the directory does not exist and there was nothing to do)
        """
        return self.activate_all_report(directory, predicate).success

    def activate_all_report(
        self, directory: str | Path, predicate: PathPredicate | None = None
    ) -> ActivationReport:
        """Like activate_all, but return what happened to every leaf.

        Non-file leaves are logged as warnings and recorded as failures; the
        walk continues past them. Files the gate declines are not failures.
        """
        path = self._within_root(directory)
        report = ActivationReport(directory=path if path is not None else self.root / directory)
        if path is None or not path.is_dir():
            return report

        for entry in self.walker.walk(path):
            if not entry.is_file:
                self.logger.warning(f"[loader:activate_all] {entry.path} import failure.")
                report.failures.append(entry.path)
                continue

            if self.gate.admits(entry.path, predicate):
                self.activator(entry.path)
                report.activated.append(entry.path)
                self.logger.debug(f"[loader:activate_all] {entry.path} import success.")
            else:
                report.declined.append(entry.path)

        return report

    # ----- Namespaces -----

    def namespaces_of(self, file_name: str) -> list[str]:
        """Return namespaces declared in every file named ``file_name`` under the root."""
        return self.scanner.namespaces_of(self.root, file_name)

    def _within_root(self, relative: str | Path) -> Path | None:
        """Join ``relative`` onto the root, refusing paths that leave it."""
        path = self.root / relative
        normalized = os.path.normpath(path)
        root = os.path.normpath(self.root)
        if normalized != root and not normalized.startswith(root.rstrip(os.sep) + os.sep):
            self.logger.error(f"Refusing path outside the root {self.root}: {relative}")
            return None
        return path

    def __repr__(self) -> str:
        return f"SourceLoader({self.root}, fallbacks={list(self.fallback_paths)})"
