"""
🧪 test_logger.py — unit-тести для init_logging

Перевіряє:
- Створення кореневого логера parkright
- Заміну хендлерів при повторній ініціалізації
- Файловий JSON-лог з extra-полями
- Приглушення сторонніх логерів
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from parkright.shared.utils.logger import LOG_NAME, get_logger, init_logging, init_logging_from_config


@pytest.fixture(autouse=True)
def _restore_logger():
    root = logging.getLogger(LOG_NAME)
    level, handlers = root.level, list(root.handlers)
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_init_logging_console_only():
    logger = init_logging(level="DEBUG")

    assert logger.name == "parkright"
    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_init_logging_does_not_duplicate_handlers():
    init_logging()
    count_before = len(logging.getLogger(LOG_NAME).handlers)

    init_logging()
    count_after = len(logging.getLogger(LOG_NAME).handlers)

    assert count_before == count_after == 1


def test_json_file_log_contains_extra_fields(tmp_path):
    log_file = tmp_path / "logs" / "parkright.log"
    logger = init_logging(console=False, json_mode=True, file=str(log_file))

    get_logger("transport").warning("proxy down", extra={"intermediary": "P1"})
    for handler in logger.handlers:
        handler.flush()

    assert any(isinstance(h, TimedRotatingFileHandler) for h in logger.handlers)
    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "proxy down"
    assert payload["intermediary"] == "P1"
    assert payload["name"] == "parkright.transport"


def test_init_from_config_suppresses_third_party():
    init_logging_from_config({"level": "INFO", "suppress": {"httpx": "ERROR"}})

    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_get_logger_prefix():
    assert get_logger().name == "parkright"
    assert get_logger("dataset").name == "parkright.dataset"
