"""Tests for logging setup."""

import json
import logging
from pathlib import Path

from blog_corpus.config import LoggingConfig
from blog_corpus.utils.logging import JsonlFormatter, log_event, setup_logging


def test_setup_logging_console_only():
    logger = setup_logging(LoggingConfig(level="WARNING"))

    assert logger.name == "blog_corpus"
    assert logger.level == logging.WARNING
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_file_logger_writes_jsonl(tmp_path: Path):
    cfg = LoggingConfig(console=False, file=True, filename="corpus.jsonl")
    logger = setup_logging(cfg, log_dir=tmp_path)

    log_event(logger, "Corpus loaded", event="corpus_loaded", articles=3)
    for handler in logger.handlers:
        handler.flush()
        handler.close()

    lines = (tmp_path / "corpus.jsonl").read_text(encoding="utf-8").strip().split("\n")
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["message"] == "Corpus loaded"
    assert entry["event"] == "corpus_loaded"
    assert entry["articles"] == 3
    assert entry["level"] == "INFO"
    assert "timestamp" in entry


def test_plain_file_format(tmp_path: Path):
    cfg = LoggingConfig(console=False, file=True, format="plain", filename="corpus.log")
    logger = setup_logging(cfg, log_dir=tmp_path)

    logger.warning("Unresolved reference")
    for handler in logger.handlers:
        handler.flush()
        handler.close()

    text = (tmp_path / "corpus.log").read_text(encoding="utf-8")
    assert "WARNING Unresolved reference" in text


def test_log_event_without_logger_is_a_no_op():
    log_event(None, "ignored", event="nothing")


def test_jsonl_formatter_keeps_only_extra_fields():
    """Standard LogRecord attributes stay out of the JSON line"""
    record = logging.LogRecord("blog_corpus", logging.WARNING, __file__, 1, "Unresolved %s", ("link",), None)
    record.event = "reference_unresolved"
    record.from_slug = "rust-async-closures"

    entry = json.loads(JsonlFormatter().format(record))

    assert entry["message"] == "Unresolved link"
    assert entry["event"] == "reference_unresolved"
    assert entry["from_slug"] == "rust-async-closures"
    assert set(entry) == {"timestamp", "level", "logger", "message", "event", "from_slug"}
