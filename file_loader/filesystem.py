"""Local file system implementation of the directory capability."""

from __future__ import annotations

import asyncio
from pathlib import Path


class LocalFile:
    """Readable handle to a file on the local file system."""

    def __init__(self, path: Path):
        self.path = path

    async def read_text(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")

    def __repr__(self) -> str:
        return f"LocalFile({str(self.path)!r})"


class LocalFileSystem:
    """Directory lookups backed by pathlib.

    Blocking stat calls run in a worker thread so lookups suspend the caller
    like any other I/O. Nothing is ever created.
    """

    async def get_directory(self, path: str) -> Path:
        directory = Path(path)
        if not await asyncio.to_thread(directory.is_dir):
            raise FileNotFoundError(f"Directory not found: {path}")
        return directory

    async def get_file(self, directory: Path, name: str) -> LocalFile:
        candidate = directory / name
        if not await asyncio.to_thread(candidate.is_file):
            raise FileNotFoundError(f"File not found: {candidate}")
        return LocalFile(candidate)
