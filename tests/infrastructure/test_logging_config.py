"""Tests for the logging configuration."""

import logging

import pytest

from pricetrack.infrastructure.logging_config import ROOT_LOGGER_NAME, setup_logging
from pricetrack.infrastructure.settings import Settings


@pytest.fixture
def clean_logger(tmp_path, monkeypatch):
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved = logger.handlers[:]
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


class TestSetupLogging:

    def test_creates_log_file_in_logs_dir(self, clean_logger, tmp_path):
        log_file = setup_logging()
        assert log_file == tmp_path / "logs" / Settings.LOG_FILE_NAME
        assert log_file.exists()

    def test_file_and_console_handlers(self, clean_logger):
        setup_logging()
        kinds = {type(h) for h in clean_logger.handlers}
        assert logging.FileHandler in kinds
        assert logging.StreamHandler in kinds

    def test_console_only_shows_warnings(self, clean_logger):
        setup_logging()
        console = [h for h in clean_logger.handlers if not isinstance(h, logging.FileHandler)]
        assert console[0].level == logging.WARNING

    def test_repeated_calls_do_not_duplicate_handlers(self, clean_logger):
        setup_logging()
        setup_logging()
        assert len(clean_logger.handlers) == 2

    def test_child_loggers_reach_the_file(self, clean_logger):
        log_file = setup_logging()
        logging.getLogger("pricetrack.application.add_product").info("hello from child")
        for handler in clean_logger.handlers:
            handler.flush()
        assert "hello from child" in log_file.read_text(encoding="utf-8")
