"""Project-scoped file access rooted at a single directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .filesystem import LocalFile
from .paths import canonicalize_folder_path

logger = logging.getLogger(__name__)


class ProjectFiles:
    """Opens files relative to a project root.

    Names that would escape the root (via ``..`` or an absolute path) are
    rejected with PermissionError.
    """

    def __init__(self, root: Path | str | None = None):
        """Initialize project files.

        Args:
            root: Project root directory (default: current working directory)
        """
        self.root = Path(root) if root is not None else Path.cwd()

    def resolve_name(self, name: str) -> str:
        """Get the canonical full path of a project-relative name."""
        root = canonicalize_folder_path(str(self.root.resolve()))
        if not root.endswith("/"):
            root += "/"
        return root + name

    async def open_file(self, name: str) -> LocalFile:
        return LocalFile(await asyncio.to_thread(self._locate, name))

    def _locate(self, name: str) -> Path:
        """Resolve name inside the project root. Blocking; run off the loop."""
        root = self.root.resolve()
        try:
            candidate = (root / name).resolve()
        except ValueError as e:
            # e.g. embedded null byte
            raise FileNotFoundError(f"Invalid project file name {name!r}: {e}") from e

        if not candidate.is_relative_to(root):
            logger.warning(f"Path traversal attempt blocked: {name}")
            raise PermissionError(f"Path escapes project root: {name}")

        if not candidate.is_file():
            raise FileNotFoundError(f"Project file not found: {name}")

        return candidate
