"""Tests for file loading models."""

import pytest
from file_loader.models import LoadedFile
from file_loader.models import SourceKind
from pydantic import ValidationError


def test_loaded_file_creation():
    """Test LoadedFile can be created with required fields."""
    loaded = LoadedFile(file_name="d.txt", full_path="/a/b/d.txt", text="hello", source=SourceKind.DIRECTORY)

    assert loaded.file_name == "d.txt"
    assert loaded.full_path == "/a/b/d.txt"
    assert loaded.text == "hello"
    assert loaded.source == "directory"


def test_loaded_file_is_immutable():
    loaded = LoadedFile(file_name="d.txt", full_path="/a/b/d.txt", text="hello", source=SourceKind.DIRECTORY)

    with pytest.raises(ValidationError):
        loaded.text = "changed"


def test_loaded_file_rejects_unknown_source():
    with pytest.raises(ValidationError):
        LoadedFile(file_name="d.txt", full_path="/d.txt", text="", source="ftp")
