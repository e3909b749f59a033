"""Activation collaborators.

An activator is any callable taking the path of a resolved source file. The
resolution engine calls it exactly once per admitted file and never catches
what it raises.

- ModuleActivator: executes the file as a Python module (include-once)
- DryRunActivator: records paths without executing anything
"""

import hashlib
import importlib.machinery
import importlib.util
import logging
import re
import sys
from collections.abc import Callable
from pathlib import Path
from types import ModuleType

from .exceptions import ActivationError

Activator = Callable[[Path], None]

logger = logging.getLogger(__name__)


def module_name_for(path: Path) -> str:
    """Build a stable, collision-free module name for a source file.

    The same absolute path always maps to the same name; two files sharing a
    stem in different directories get different names.
    """
    digest = hashlib.sha256(str(path).encode()).hexdigest()[:12]
    stem = re.sub(r"\W", "_", path.stem) or "module"
    return f"sourceloader_{stem}_{digest}"


class ModuleActivator:
    """Execute source files as Python modules, at most once per path."""

    def __init__(self) -> None:
        self.modules: dict[Path, ModuleType] = {}

    def __call__(self, path: Path) -> None:
        key = Path(path).resolve()
        if key in self.modules:
            return

        module_name = module_name_for(key)
        # Explicit loader so extensions other than .py still load as source
        loader = importlib.machinery.SourceFileLoader(module_name, str(key))
        spec = importlib.util.spec_from_file_location(module_name, key, loader=loader)
        if spec is None or spec.loader is None:
            raise ActivationError(key, f"Cannot build an import spec for {key}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise

        self.modules[key] = module
        logger.debug(f"Activated {key} as {module_name}")

    def module_for(self, path: Path) -> ModuleType | None:
        """Return the module created for ``path``, if it was activated."""
        return self.modules.get(Path(path).resolve())

    def __repr__(self) -> str:
        return f"ModuleActivator({len(self.modules)} loaded)"


class DryRunActivator:
    """Record activation requests without executing the files."""

    def __init__(self) -> None:
        self.activated: list[Path] = []

    def __call__(self, path: Path) -> None:
        self.activated.append(Path(path))

    def __repr__(self) -> str:
        return f"DryRunActivator({len(self.activated)} recorded)"
