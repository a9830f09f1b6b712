"""Protocols for the collaborators the resolver reads through.

The resolver never touches the file system or the network directly. It goes
through these capabilities so hosts can plug in their own directory, project
and HTTP implementations. Defaults live in ``filesystem``, ``project`` and
``transport``.
"""

from __future__ import annotations

from typing import Any
from typing import Protocol


class ReadableFile(Protocol):
    """Handle to a file whose full text can be read."""

    async def read_text(self) -> str:
        """Read full text content. Raises OSError or UnicodeDecodeError."""
        ...


class DirectoryCapability(Protocol):
    """Directory lookups that never create anything."""

    async def get_directory(self, path: str) -> Any:
        """Get a handle for an existing directory. Raises OSError if absent."""
        ...

    async def get_file(self, directory: Any, name: str) -> ReadableFile:
        """Look up name inside directory. Raises OSError if absent."""
        ...


class ProjectCapability(Protocol):
    """Files scoped to the active project."""

    async def open_file(self, name: str) -> ReadableFile:
        """Open a project-relative file for reading. Raises OSError on failure."""
        ...

    def resolve_name(self, name: str) -> str:
        """Get the canonical full path of a project-relative name."""
        ...


class HttpCapability(Protocol):
    """Remote text fetches."""

    async def get_text(self, url: str, content_type: str = "text") -> str:
        """GET url and return the response body.

        Raises httpx.HTTPError or httpx.InvalidURL (httpx transports) or OSError
        (any other transport) on failure.
        """
        ...
