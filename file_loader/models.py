"""Data models for file loading."""

from enum import StrEnum

from pydantic import BaseModel
from pydantic import ConfigDict


class SourceKind(StrEnum):
    """Where a file's content was resolved from."""

    HTTP = "http"
    DIRECTORY = "directory"
    PROJECT = "project"


class LoadedFile(BaseModel):
    """A resolved file with its content.

    Attributes:
        file_name: The logical name that was requested
        full_path: Fully resolved path (the URL itself for remote files)
        text: File content
        source: Strategy that produced this record
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    full_path: str
    text: str
    source: SourceKind
