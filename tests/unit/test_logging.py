"""Tests for logging helpers."""
import logging

import pytest

from paypy import setup_logging
from paypy.core.logging import get_logger, LIBRARY_LOGGERS


class TestLogging:
    """Test suite for logging helpers."""

    @pytest.fixture(autouse=True)
    def restore_levels(self):
        """Restore library logger levels after each test."""
        levels = {name: logging.getLogger(name).level for name in LIBRARY_LOGGERS}
        yield
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)

    def test_get_logger_propagates(self):
        logger = get_logger('paypy.test')

        assert logger.name == 'paypy.test'
        assert logger.propagate is True

    def test_get_logger_nests_foreign_names(self):
        assert get_logger('custom').name == 'paypy.custom'
        assert get_logger('paypy').name == 'paypy'

    def test_get_logger_keeps_explicit_level(self):
        logging.getLogger('paypy.explicit').setLevel(logging.DEBUG)

        assert get_logger('paypy.explicit').level == logging.DEBUG

    def test_setup_logging_sets_levels(self):
        setup_logging(logging.DEBUG)

        assert logging.getLogger('paypy.client').level == logging.DEBUG
        assert logging.getLogger('paypy.api').level == logging.DEBUG

        setup_logging(logging.WARNING)

        assert logging.getLogger('paypy').level == logging.WARNING

    def test_setup_logging_accepts_names(self):
        setup_logging('debug')

        assert logging.getLogger('paypy.version').level == logging.DEBUG
