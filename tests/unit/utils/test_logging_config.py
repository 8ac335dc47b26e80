# tests/unit/utils/test_logging_config.py

import logging

from src.utils.logging_config import ExtraFormatter, setup_logging


def test_extra_formatter_appends_sorted_extras():
    formatter = ExtraFormatter(fmt="%(levelname)s | %(message)s")
    record = logging.makeLogRecord(
        {"levelname": "INFO", "msg": "hello", "asset": "AAPL", "count": 3}
    )

    assert formatter.format(record) == "INFO | hello | asset=AAPL count=3"


def test_extra_formatter_without_extras_keeps_base_message():
    formatter = ExtraFormatter(fmt="%(levelname)s | %(message)s")
    record = logging.makeLogRecord({"levelname": "WARNING", "msg": "plain"})

    assert formatter.format(record) == "WARNING | plain"


def test_setup_logging_respects_log_level_env(monkeypatch, tmp_path):
    root = logging.getLogger()
    previous = root.level
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_DIR", str(tmp_path))

    try:
        setup_logging(logging.INFO, log_file=None)
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
