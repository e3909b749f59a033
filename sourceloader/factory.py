"""CLI wiring helpers.

Builds settings and loaders from command-line options. Library classes
receive everything through their constructors; this module provides the
CLI's choices.
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from fnmatch import fnmatch
from pathlib import Path
from typing import Any

from .activation import DryRunActivator
from .activation import ModuleActivator
from .console import err_console
from .exceptions import SourceLoaderError
from .loader import SourceLoader
from .models import LoaderConfig
from .resolution import PathPredicate
from .settings import AppSettings
from .utils.error_format import escape_markup
from .utils.error_format import format_error_message

logger = logging.getLogger("sourceloader.cli")


@dataclass
class CliOptions:
    """Global options given before the sub-command."""

    root: Path | None = None
    fallback_paths: tuple[str, ...] = ()
    extension: str | None = None
    namespace_separator: str | None = None
    dry_run: bool = False
    settings: AppSettings = field(default_factory=AppSettings)

    def overrides(self) -> dict[str, Any]:
        """Command-line values that take precedence over settings files."""
        return {
            "root": self.root,
            "fallback_paths": list(self.fallback_paths) or None,
            "extension": self.extension,
            "namespace_separator": self.namespace_separator,
        }


def create_config(options: CliOptions) -> LoaderConfig:
    return options.settings.get_loader_config(**options.overrides())


def create_loader(options: CliOptions) -> SourceLoader:
    """Build a SourceLoader honouring settings files, overrides and --dry-run."""
    activator = DryRunActivator() if options.dry_run else ModuleActivator()
    return SourceLoader.from_config(create_config(options), activator=activator, logger=logger)


def glob_predicate(pattern: str | None) -> PathPredicate | None:
    """Turn a --glob option into a predicate over file names."""
    if not pattern:
        return None
    return lambda path: fnmatch(path.name, pattern)


def handle_errors(command: Callable) -> Callable:
    """Report loader errors and activation failures, then exit with status 1."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except SourceLoaderError as e:
            err_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e, include_type=False))}")
            sys.exit(1)
        except Exception as e:
            # Raised by an activated source file
            logger.debug("Activation failed", exc_info=True)
            err_console.print(f"[red]Activation failed:[/red] {escape_markup(format_error_message(e))}")
            sys.exit(1)

    return wrapper
