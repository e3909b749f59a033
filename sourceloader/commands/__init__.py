"""Sub-commands of the sourceloader CLI."""

from .activate import activate_all_cmd
from .activate import activate_cmd
from .config import config_cmd
from .namespaces import namespaces_cmd
from .resolve import resolve_cmd

__all__ = ["activate_all_cmd", "activate_cmd", "config_cmd", "namespaces_cmd", "resolve_cmd"]
