"""Test the package logging set-up.

Run:
    pytest tests/test_logging_config.py -v
"""

from __future__ import annotations

import logging

import pytest

from mathcanvas.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (logger.level, list(logger.handlers))
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved[0])
    for handler in saved[1]:
        logger.addHandler(handler)


class TestSetupLogging:
    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger) -> None:
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_level_by_name(self, package_logger) -> None:
        assert setup_logging("debug") is package_logger
        assert package_logger.level == logging.DEBUG

    def test_log_file(self, package_logger, tmp_path) -> None:
        path = tmp_path / "mathcanvas.log"
        setup_logging(logging.INFO, log_file=str(path))
        logging.getLogger("mathcanvas.render.curves").error("Directive #3 skipped")
        for handler in package_logger.handlers:
            handler.flush()
        text = path.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "mathcanvas.render.curves - ERROR - Directive #3 skipped" in text
