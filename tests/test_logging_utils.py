"""Tests for logging setup."""

import json
import logging

from changelog_digest.config import LoggingConfig
from changelog_digest.logging_utils import JsonlFormatter, log_event, setup_logging


def test_jsonl_formatter_includes_extras():
    record = logging.LogRecord(
        "changelog_digest", logging.INFO, __file__, 1, "Report written", None, None
    )
    record.changes = 3

    payload = json.loads(JsonlFormatter().format(record))

    assert payload["message"] == "Report written"
    assert payload["level"] == "INFO"
    assert payload["changes"] == 3
    assert "msg" not in payload


def test_setup_logging_writes_jsonl_file(tmp_path):
    cfg = LoggingConfig(console=False, file=True, format="jsonl", filename="run.jsonl")

    logger = setup_logging(cfg, tmp_path)
    log_event(logger, "Report written", airacs=2)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    lines = (tmp_path / "run.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["airacs"] == 2


def test_log_event_ignores_missing_logger():
    log_event(None, "nothing happens")
