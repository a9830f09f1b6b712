"""Resolves file names to content with coalescing and ordered fallbacks.

Resolution order:
1. URLs (http:// or https://) are fetched remotely and cached for the
   lifetime of the resolver.
2. Local names are looked up in the directory of the root file first.
3. If that fails for any reason, the name is opened relative to the project.

Concurrent requests for the same name share a single in-flight future.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .capabilities import DirectoryCapability
from .capabilities import HttpCapability
from .capabilities import ProjectCapability
from .errors import ResolutionError
from .filesystem import LocalFileSystem
from .models import LoadedFile
from .models import SourceKind
from .paths import is_url
from .project import ProjectFiles
from .strategies import DirectoryStrategy
from .strategies import HttpStrategy
from .strategies import ProjectStrategy
from .timer import Timer
from .transport import HttpxFetcher

if TYPE_CHECKING:
    import httpx

    from .settings import LoaderSettings

logger = logging.getLogger(__name__)


def classify(file_name: str) -> SourceKind:
    """Pick the first strategy to try for file_name."""
    if is_url(file_name):
        return SourceKind.HTTP
    return SourceKind.DIRECTORY


class Resolver:
    """Loads files by name from the web, the root file's directory, or the project.

    State (in-flight requests and the remote cache) belongs to the instance,
    so independent resolvers never share results.
    """

    def __init__(
        self,
        http: HttpCapability | None = None,
        directories: DirectoryCapability | None = None,
        project: ProjectCapability | None = None,
        content_type: str = "text",
    ):
        """Initialize resolver with its collaborators.

        Args:
            http: Remote fetcher (default: HttpxFetcher with its own client)
            directories: Directory lookups (default: LocalFileSystem)
            project: Project file access (default: ProjectFiles rooted at CWD)
            content_type: Content-type hint sent with HTTP requests
        """
        self._http_strategy = HttpStrategy(http or HttpxFetcher(), content_type=content_type)
        self._directory_strategy = DirectoryStrategy(directories or LocalFileSystem())
        self._project_strategy = ProjectStrategy(project or ProjectFiles())
        self._pending: dict[str, asyncio.Future[LoadedFile]] = {}

    @classmethod
    def from_settings(cls, settings: LoaderSettings, http_client: httpx.AsyncClient | None = None) -> Resolver:
        """Build a resolver wired with the default capabilities for settings."""
        fetcher = HttpxFetcher(
            client=http_client,
            timeout=settings.http_timeout,
            follow_redirects=settings.follow_redirects,
        )
        return cls(
            http=fetcher,
            directories=LocalFileSystem(),
            project=ProjectFiles(Path(settings.project_root).expanduser()),
            content_type=settings.content_type,
        )

    @property
    def http(self) -> HttpCapability:
        return self._http_strategy.http

    def is_pending(self, file_name: str) -> bool:
        return file_name in self._pending

    @property
    def cached_urls(self) -> list[str]:
        return self._http_strategy.cached_urls

    async def aclose(self) -> None:
        """Release the HTTP transport, if it holds one."""
        close = getattr(self.http, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> Resolver:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def load_file(self, file_name: str, root_file: str) -> asyncio.Future[LoadedFile]:
        """Start (or join) resolution of file_name.

        Must be called with a running event loop. Await the returned future to
        get the LoadedFile; it fails with a ResolutionError subclass.

        Args:
            file_name: URL or name relative to root_file's directory / the project
            root_file: Path of the file that references file_name

        Returns:
            The in-flight future for file_name. Concurrent callers for the same
            name get the identical object.
        """
        pending = self._pending.get(file_name)
        if pending is not None:
            logger.debug(f"Joining in-flight request: {file_name}")
            return pending

        loop = asyncio.get_running_loop()
        kind = classify(file_name)

        if kind is SourceKind.HTTP:
            cached = self._http_strategy.cached(file_name)
            if cached is not None:
                logger.debug(f"Serving cached remote file: {file_name}")
                future = loop.create_future()
                future.set_result(cached)
                return future
            coro = self._http_strategy.load(file_name)
        else:
            coro = self._load_local(file_name, root_file)

        timer = Timer(start=True)
        task = loop.create_task(coro, name=f"load_file:{file_name}")
        self._pending[file_name] = task
        task.add_done_callback(lambda done: self._settle(file_name, done, timer))
        return task

    async def _load_local(self, file_name: str, root_file: str) -> LoadedFile:
        try:
            return await self._directory_strategy.load(file_name, root_file)
        except ResolutionError as e:
            logger.debug(f"Directory lookup failed, trying project: {e}")

        return await self._project_strategy.load(file_name)

    def _settle(self, file_name: str, task: asyncio.Future[LoadedFile], timer: Timer) -> None:
        if self._pending.get(file_name) is task:
            del self._pending[file_name]

        elapsed_ms = timer.elapsed()
        if task.cancelled():
            logger.debug(f"File load cancelled: {file_name}", extra={"file_name": file_name, "elapsed_ms": elapsed_ms})
            return

        error = task.exception()
        if error is not None:
            logger.info(
                f"File not loaded: {file_name} ({error}) after {elapsed_ms:.1f}ms",
                extra={"file_name": file_name, "elapsed_ms": elapsed_ms},
            )
            return

        loaded = task.result()
        logger.debug(
            f"File loaded: {file_name} from {loaded.source} after {elapsed_ms:.1f}ms",
            extra={"file_name": file_name, "elapsed_ms": elapsed_ms, "source": str(loaded.source)},
        )
