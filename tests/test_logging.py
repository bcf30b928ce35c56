"""
Tests for logging configuration.
"""

import logging

import pytest
import structlog
from py_terrain.config import Settings
from py_terrain.utils.logging import configure_logging


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test structlog setup from settings."""

    def test_json_renderer(self, reset_structlog):
        configure_logging(Settings(log_level="DEBUG", log_format="json"))

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert logging.getLogger().level == logging.DEBUG

    def test_console_renderer(self, reset_structlog):
        configure_logging(Settings(log_level="warning", log_format="console"))

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, reset_structlog):
        configure_logging(Settings(log_level="chatty"))
        assert logging.getLogger().level == logging.INFO
