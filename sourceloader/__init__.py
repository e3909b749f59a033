"""sourceloader - resolve logical names to source files and activate them.

Public API:
- SourceLoader: facade (resolve, resolve_all, load, activate, activate_all, namespaces_of)
- Resolver, TreeWalker, ImportGate, NamespaceScanner: resolution engine parts
- ModuleActivator, DryRunActivator: activation collaborators
- LoaderConfig, ActivationReport: configuration and result models
- AppSettings: scope-merged YAML settings
"""

from .activation import Activator
from .activation import DryRunActivator
from .activation import ModuleActivator
from .exceptions import ActivationError
from .exceptions import InvalidSettingsError
from .exceptions import SourceLoaderError
from .loader import SourceLoader
from .models import ActivationReport
from .models import LoaderConfig
from .resolution import ImportGate
from .resolution import NamespaceScanner
from .resolution import Resolver
from .resolution import TreeWalker
from .settings import AppSettings

__all__ = [
    "ActivationError",
    "ActivationReport",
    "Activator",
    "AppSettings",
    "DryRunActivator",
    "ImportGate",
    "InvalidSettingsError",
    "LoaderConfig",
    "ModuleActivator",
    "NamespaceScanner",
    "Resolver",
    "SourceLoader",
    "SourceLoaderError",
    "TreeWalker",
]
