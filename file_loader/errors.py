"""Error taxonomy for file resolution.

Every failure of ``Resolver.load_file`` surfaces as a ``ResolutionError``
subclass. The underlying exception is kept on ``cause`` (and chained via
``raise ... from``) so callers can inspect the transport or OS error.
"""

from __future__ import annotations


class ResolutionError(Exception):
    """Base class for all resolution failures."""

    def __init__(self, file_name: str, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.file_name = file_name
        self.cause = cause


class NotFoundError(ResolutionError):
    """Directory or file lookup failed."""


class FileReadError(ResolutionError):
    """File was located but its content could not be read."""


class TransportError(ResolutionError):
    """Remote HTTP fetch failed."""


class OpenFailureError(ResolutionError):
    """Project file could not be opened."""
