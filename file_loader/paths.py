"""Path helpers for resolving names relative to a root file."""

import posixpath
import re

_URL_PATTERN = re.compile(r"^https?://")


def is_url(file_name: str) -> bool:
    """Return True if file_name should be fetched over HTTP."""
    return bool(_URL_PATTERN.match(file_name))


def canonicalize_folder_path(path: str) -> str:
    """Normalize a directory path without a trailing separator.

    Collapses duplicate separators and ``.``/``..`` segments. An empty path
    means the current directory (``.``); the filesystem root stays ``/``.
    """
    return posixpath.normpath(path.replace("\\", "/"))


def resolve_path(root_file: str) -> str:
    """Get the canonical directory of root_file, with a trailing separator.

    Example:
        resolve_path("/a/b/c.txt") -> "/a/b/"
    """
    normalized = root_file.replace("\\", "/")
    directory = normalized[: normalized.rfind("/") + 1]
    canonical = canonicalize_folder_path(directory)
    if canonical.endswith("/"):
        return canonical
    return canonical + "/"


def resolve_name(root_file: str, file_name: str) -> str:
    """Get the full path of file_name when looked up next to root_file.

    Example:
        resolve_name("/a/b/c.txt", "d.txt") -> "/a/b/d.txt"
    """
    return resolve_path(root_file) + file_name
