"""Tests for logging setup."""

import logging

from aliencfg.utils.logging_utils import LOG_FILE_NAME, level_from_str, setup_logging


def _own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_aliencfg_handler", False)]


class TestLevelFromStr:
    def test_names(self):
        assert level_from_str("debug") == logging.DEBUG
        assert level_from_str(" WARNING ") == logging.WARNING

    def test_unknown_or_empty_uses_default(self):
        assert level_from_str("loud") == logging.INFO
        assert level_from_str(None, default=logging.ERROR) == logging.ERROR


class TestSetupLogging:
    def test_writes_log_file(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = setup_logging(log_dir, level=logging.INFO)

        logging.getLogger("aliencfg.services.test").info("hello from test")
        for handler in logger.handlers:
            handler.flush()

        assert "hello from test" in (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(tmp_path, console=True)
        logger = setup_logging(tmp_path, console=True)
        assert len(_own_handlers(logger)) == 2

        logger = setup_logging(tmp_path)
        assert len(_own_handlers(logger)) == 1

    def test_level_is_applied(self, tmp_path):
        logger = setup_logging(tmp_path, level=logging.WARNING)
        assert logger.level == logging.WARNING
