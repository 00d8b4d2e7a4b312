"""Tests for storefront/common/log_config.py"""

import logging
import sys

from storefront.common.log_config import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger("storefront")
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_default_level_is_info(self):
        setup_logging()
        logger = logging.getLogger("storefront")
        assert logger.level == logging.INFO

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        logger = logging.getLogger("storefront")
        assert logger.level == logging.DEBUG

    def test_quiet_sets_warning(self):
        setup_logging(quiet=True)
        logger = logging.getLogger("storefront")
        assert logger.level == logging.WARNING

    def test_handler_outputs_to_stderr(self):
        setup_logging()
        logger = logging.getLogger("storefront")
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert handler.stream is sys.stderr

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        setup_logging(verbose=True)
        assert len(logging.getLogger("storefront").handlers) == 1

    def test_records_go_to_stderr_not_stdout(self, capsys):
        setup_logging()
        logging.getLogger("storefront.build").info("Loaded 4 products")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "INFO     storefront.build: Loaded 4 products" in captured.err
