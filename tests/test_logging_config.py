"""Tests for the package logging setup."""

import logging

import pytest

from digital_doilies.config import Config
from digital_doilies.utils.logging_config import LoggingConfig


@pytest.fixture
def configured_logging(tmp_path):
    LoggingConfig.shutdown()
    LoggingConfig.setup_logging(tmp_path / "logs")
    yield tmp_path / "logs"
    LoggingConfig.shutdown()


class TestLoggingConfig:

    def test_handlers_attach_to_package_logger(self, configured_logging):
        package_logger = logging.getLogger(LoggingConfig.LOGGER_NAME)
        root_handlers = list(logging.getLogger().handlers)

        assert len(package_logger.handlers) >= 2
        assert not package_logger.propagate
        for handler in package_logger.handlers:
            assert handler not in root_handlers

    def test_module_records_reach_log_file(self, configured_logging):
        logging.getLogger("digital_doilies.core.ledger").debug("stroke committed")
        for handler in logging.getLogger(LoggingConfig.LOGGER_NAME).handlers:
            handler.flush()

        log_file = LoggingConfig.get_log_file_path()
        assert log_file == configured_logging / Config.LOG_FILE_NAME
        text = log_file.read_text(encoding="utf-8")
        assert "digital_doilies.core.ledger: stroke committed" in text

    def test_setup_is_idempotent(self, configured_logging):
        package_logger = logging.getLogger(LoggingConfig.LOGGER_NAME)
        count = len(package_logger.handlers)

        LoggingConfig.setup_logging(configured_logging)

        assert len(package_logger.handlers) == count

    def test_get_logger_nests_outside_names(self):
        assert LoggingConfig.get_logger("__main__").name == "digital_doilies.__main__"
        assert LoggingConfig.get_logger("digital_doilies.main").name == "digital_doilies.main"
        assert LoggingConfig.get_logger("digital_doilies").name == "digital_doilies"
