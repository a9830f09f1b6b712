"""Tests for project-scoped file access."""

from pathlib import Path

import pytest
from file_loader.project import ProjectFiles


def test_resolve_name_is_canonical_root_plus_name(tmp_path: Path):
    project = ProjectFiles(tmp_path / "proj" / ".." / "proj")

    assert project.resolve_name("lib/util.txt") == f"{(tmp_path / 'proj').resolve().as_posix()}/lib/util.txt"


def test_defaults_to_current_directory(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert ProjectFiles().root.resolve() == tmp_path.resolve()


@pytest.mark.asyncio
async def test_open_file_reads_text(tmp_path: Path):
    (tmp_path / "notes.md").write_text("project notes")

    handle = await ProjectFiles(tmp_path).open_file("notes.md")

    assert await handle.read_text() == "project notes"


@pytest.mark.asyncio
async def test_open_file_missing_raises_file_not_found(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        await ProjectFiles(tmp_path).open_file("missing.md")


@pytest.mark.asyncio
async def test_open_file_blocks_absolute_path_outside_root(tmp_path: Path):
    outside = tmp_path / "outside.md"
    outside.write_text("secret")
    (tmp_path / "proj").mkdir()

    with pytest.raises(PermissionError):
        await ProjectFiles(tmp_path / "proj").open_file(str(outside))


@pytest.mark.asyncio
async def test_open_file_null_byte_raises_file_not_found(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        await ProjectFiles(tmp_path).open_file("a\x00b.md")
