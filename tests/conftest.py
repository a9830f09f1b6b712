"""Pytest configuration for file loader tests."""

import logging
import sys
from pathlib import Path

import pytest

# Make the file_loader package importable without installing it
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from file_loader.logging_setup import JsonlHandler  # noqa: E402


@pytest.fixture(autouse=True)
def _remove_jsonl_handlers():
    """Drop JSONL handlers installed by a test so they don't leak into the next one."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, JsonlHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
