"""File loader: resolve file names to content from the web, a root file's directory, or the project."""

from .errors import FileReadError
from .errors import NotFoundError
from .errors import OpenFailureError
from .errors import ResolutionError
from .errors import TransportError
from .models import LoadedFile
from .models import SourceKind
from .paths import resolve_name
from .paths import resolve_path
from .resolver import Resolver

__all__ = [
    "FileReadError",
    "LoadedFile",
    "NotFoundError",
    "OpenFailureError",
    "ResolutionError",
    "Resolver",
    "SourceKind",
    "TransportError",
    "resolve_name",
    "resolve_path",
]
