"""Exception types raised by sourceloader.

Not-found outcomes are never exceptions: resolution returns an empty list and
activation returns ``False``. These types cover configuration mistakes and
activators that cannot load a path at all.
"""


class SourceLoaderError(Exception):
    """Base class for sourceloader errors."""


class InvalidSettingsError(SourceLoaderError):
    """Raised when loader configuration values are invalid."""


class ActivationError(SourceLoaderError):
    """Raised when an activator cannot build a loadable unit for a path."""

    def __init__(self, path, message: str):
        self.path = path
        self.message = message
        super().__init__(message)
