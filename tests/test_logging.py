"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest

from caseboard.logging import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the caseboard logger clean for other tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_off_by_default(self):
        assert setup_logging() is None
        assert logging.getLogger(LOGGER_NAME).handlers == []

    def test_verbose_levels(self):
        assert setup_logging(verbose=1).level == logging.INFO
        assert setup_logging(verbose=2).level == logging.DEBUG

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(verbose=1)
        logger = setup_logging(verbose=1)

        assert len(logger.handlers) == 1

    def test_console_disabled_uses_file_only(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "caseboard.log"

        logger = setup_logging(verbose=2, log_file=log_file, console=False)

        assert [type(h) for h in logger.handlers] == [logging.FileHandler]
        assert log_file.exists()

    def test_file_receives_service_logs(self, tmp_path: Path):
        from caseboard.services import BoardService

        log_file = tmp_path / "caseboard.log"
        setup_logging(log_file=log_file)

        BoardService().add_column()

        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()
        content = log_file.read_text()
        assert "caseboard starting" in content
        assert "Column added" in content
