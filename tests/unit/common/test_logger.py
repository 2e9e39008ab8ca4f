"""Tests for logging infrastructure."""

import logging

import pytest

from graph_permissions.common.logger import ROOT_LOGGER_NAME, get_logger, setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_console_logger(self):
        """Test a console-only logger."""
        logger = setup_logger("gp_test_console", level="debug")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_file_logger(self, tmp_path):
        """Test file logging writes to log_dir."""
        log_dir = tmp_path / "logs"
        logger = setup_logger(
            "gp_test_file", log_dir=str(log_dir), file_logging=True, console_logging=False
        )
        logger.info("catalog loaded")
        for handler in logger.handlers:
            handler.flush()

        log_file = log_dir / "gp_test_file.log"
        assert log_file.exists()
        content = log_file.read_text()
        assert "[INFO] [gp_test_file] catalog loaded" in content

    def test_no_duplicate_handlers(self):
        """Test repeated setup does not add handlers."""
        setup_logger("gp_test_dupes")
        logger = setup_logger("gp_test_dupes", level="WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_invalid_level(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ValueError):
            setup_logger("gp_test_invalid", level="LOUD")


class TestGetLogger:
    """Tests for get_logger."""

    def test_component_logger_under_root(self):
        """Test component loggers are children of the package logger."""
        assert get_logger("catalog").name == f"{ROOT_LOGGER_NAME}.catalog"

    def test_qualified_name_unchanged(self):
        """Test already-qualified names are not prefixed twice."""
        assert get_logger("graph_permissions.scopes").name == "graph_permissions.scopes"
        assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME
