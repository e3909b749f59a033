"""Pydantic models for loader configuration and activation results."""

from pathlib import Path
from pathlib import PurePath

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

DEFAULT_EXTENSION = "py"
DEFAULT_NAMESPACE_SEPARATOR = "."
DEFAULT_IGNORED_NAMES = (".", "..", ".DS_Store")
DEFAULT_NAMESPACE_PATTERN = r"^namespace\s+(.*);$"


def check_fallback_path(value: str | PurePath) -> str:
    """Validate one fallback path and return it as a string.

    Fallback paths are sub-roots of the loader root: absolute paths and
    ``..`` components would let resolution reach outside the root.

    Raises:
        ValueError: The path is empty, absolute, or climbs out of the root
    """
    text = str(value)
    path = PurePath(text)
    if not text.strip():
        raise ValueError("Fallback path must not be empty")
    if path.is_absolute():
        raise ValueError(f"Fallback path must be relative to the root: {text}")
    if ".." in path.parts:
        raise ValueError(f"Fallback path must not leave the root: {text}")
    return text


class LoaderConfig(BaseModel):
    """Effective configuration for one SourceLoader."""

    root: Path = Field(default=Path("."), description="Directory anchoring all resolution")
    fallback_paths: list[str] = Field(
        default_factory=list, description="Sub-roots searched in order when the root has no match"
    )
    extension: str = Field(default=DEFAULT_EXTENSION, description="Source file extension, without the dot")
    namespace_separator: str = Field(
        default=DEFAULT_NAMESPACE_SEPARATOR, description="Separator used inside logical names"
    )
    ignored_names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_NAMES), description="Entry names skipped while walking"
    )
    namespace_pattern: str = Field(
        default=DEFAULT_NAMESPACE_PATTERN, description="Regex with one group capturing a namespace declaration"
    )

    @field_validator("fallback_paths")
    @classmethod
    def _validate_fallback_paths(cls, value: list[str]) -> list[str]:
        return [check_fallback_path(item) for item in value]

    @field_validator("extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        value = value.lstrip(".")
        if not value:
            raise ValueError("Extension must not be empty")
        return value

    @field_validator("namespace_separator")
    @classmethod
    def _validate_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("Namespace separator must not be empty")
        return value


class ActivationReport(BaseModel):
    """Outcome of activating every qualifying file under a directory.

    Attributes:
        directory: Directory that was walked
        activated: Files admitted and handed to the activator, in discovery order
        declined: Regular files rejected by the extension or the predicate
        failures: Leaves that were not regular files (dangling links, sockets, ...)
    """

    directory: Path
    activated: list[Path] = Field(default_factory=list)
    declined: list[Path] = Field(default_factory=list)
    failures: list[Path] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        """False as soon as one non-file leaf was met."""
        return not self.failures

    @property
    def visited(self) -> int:
        """Number of leaves examined; 0 means there was nothing to do."""
        return len(self.activated) + len(self.declined) + len(self.failures)
