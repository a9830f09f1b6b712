"""Tests for the JSONL logging bootstrap."""

import json
import logging
from pathlib import Path

from file_loader.logging_setup import JsonlHandler
from file_loader.logging_setup import init_json_logging


def _read_lines(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_writes_structured_record_with_extras(tmp_path: Path):
    log_path = tmp_path / "logs" / "loader.jsonl"
    init_json_logging(str(log_path), "debug")

    logging.getLogger("file_loader.test").debug(
        "File loaded: a.txt", extra={"file_name": "a.txt", "elapsed_ms": 1.5}
    )

    entries = _read_lines(log_path)
    assert len(entries) == 1
    entry = entries[0]
    assert entry["lvl"] == "DEBUG"
    assert entry["logger"] == "file_loader.test"
    assert entry["message"] == "File loaded: a.txt"
    assert entry["file_name"] == "a.txt"
    assert entry["elapsed_ms"] == 1.5
    assert entry["schema"]["name"] == "file_loader.log"


def test_level_filters_records(tmp_path: Path):
    log_path = tmp_path / "loader.jsonl"
    init_json_logging(str(log_path), "WARNING")

    logger = logging.getLogger("file_loader.test")
    logger.info("hidden")
    logger.warning("shown")

    assert [e["message"] for e in _read_lines(log_path)] == ["shown"]


def test_reinit_replaces_previous_handler(tmp_path: Path):
    init_json_logging(str(tmp_path / "first.jsonl"), "INFO")
    init_json_logging(str(tmp_path / "second.jsonl"), "INFO")

    handlers = [h for h in logging.getLogger().handlers if isinstance(h, JsonlHandler)]

    assert len(handlers) == 1
    assert handlers[0].path == tmp_path / "second.jsonl"


def test_environment_overrides_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("FILE_LOADER_LOG_PATH", str(tmp_path / "env.jsonl"))
    monkeypatch.setenv("FILE_LOADER_LOG_LEVEL", "ERROR")

    handler = init_json_logging()

    assert handler.path == tmp_path / "env.jsonl"
    assert logging.getLogger().level == logging.ERROR
