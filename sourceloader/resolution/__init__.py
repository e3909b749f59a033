"""Resolution engine: tree walking, suffix matching, admission and namespace scanning."""

from .gate import ImportGate
from .gate import PathPredicate
from .matcher import match_entries
from .matcher import matches
from .namespaces import NamespaceScanner
from .resolver import Resolver
from .walker import TreeWalker
from .walker import WalkEntry

__all__ = [
    "ImportGate",
    "NamespaceScanner",
    "PathPredicate",
    "Resolver",
    "TreeWalker",
    "WalkEntry",
    "match_entries",
    "matches",
]
