"""Resolution strategies: HTTP, Directory and Project.

Each strategy makes exactly one attempt and translates collaborator failures
into the ``ResolutionError`` taxonomy. Ordering and fallback between
strategies is the resolver's job.
"""

from __future__ import annotations

import logging

import httpx

from .capabilities import DirectoryCapability
from .capabilities import HttpCapability
from .capabilities import ProjectCapability
from .errors import FileReadError
from .errors import NotFoundError
from .errors import OpenFailureError
from .errors import TransportError
from .models import LoadedFile
from .models import SourceKind
from .paths import resolve_path

logger = logging.getLogger(__name__)


class HttpStrategy:
    """Fetches URLs and memoizes successful responses for the process lifetime.

    The cache is never invalidated or trimmed.
    """

    kind = SourceKind.HTTP

    def __init__(self, http: HttpCapability, content_type: str = "text"):
        self.http = http
        self.content_type = content_type
        self._cache: dict[str, LoadedFile] = {}

    def cached(self, url: str) -> LoadedFile | None:
        """Return the cached record for url, if any."""
        return self._cache.get(url)

    @property
    def cached_urls(self) -> list[str]:
        return list(self._cache)

    async def load(self, url: str) -> LoadedFile:
        cached = self._cache.get(url)
        if cached is not None:
            return cached

        try:
            text = await self.http.get_text(url, self.content_type)
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            raise TransportError(url, f"Failed to fetch {url}: {e}", cause=e) from e

        loaded = LoadedFile(file_name=url, full_path=url, text=text, source=self.kind)
        self._cache[url] = loaded
        return loaded


class DirectoryStrategy:
    """Looks a name up in the directory of the file that referenced it."""

    kind = SourceKind.DIRECTORY

    def __init__(self, directories: DirectoryCapability):
        self.directories = directories

    async def load(self, file_name: str, root_file: str) -> LoadedFile:
        directory_path = resolve_path(root_file)

        try:
            directory = await self.directories.get_directory(directory_path)
            file = await self.directories.get_file(directory, file_name)
        except OSError as e:
            raise NotFoundError(file_name, f"{file_name} not found in {directory_path}: {e}", cause=e) from e

        try:
            text = await file.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(file_name, f"Failed to read {directory_path}{file_name}: {e}", cause=e) from e

        return LoadedFile(
            file_name=file_name,
            full_path=directory_path + file_name,
            text=text,
            source=self.kind,
        )


class ProjectStrategy:
    """Opens a name relative to the active project."""

    kind = SourceKind.PROJECT

    def __init__(self, project: ProjectCapability):
        self.project = project

    async def load(self, file_name: str) -> LoadedFile:
        try:
            file = await self.project.open_file(file_name)
        except OSError as e:
            raise OpenFailureError(file_name, f"Failed to open project file {file_name}: {e}", cause=e) from e

        try:
            text = await file.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(file_name, f"Failed to read project file {file_name}: {e}", cause=e) from e

        return LoadedFile(
            file_name=file_name,
            full_path=self.project.resolve_name(file_name),
            text=text,
            source=self.kind,
        )
