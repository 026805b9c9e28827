#!/usr/bin/env python3
"""Tests for the logging setup."""

import logging
import logging.handlers
import sys
from pathlib import Path

import pytest
import yaml
from rich.logging import RichHandler

# Add the src directory to the Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from kamae.utils.logger import LoggerManager, init_logging


@pytest.fixture
def root_handlers():
    """Yield the root handlers installed by the test and close them afterwards."""
    root_logger = logging.getLogger()
    saved = list(root_logger.handlers)
    yield root_logger
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers[:] = saved


def test_file_log_only_without_debug(tmp_path, root_handlers):
    print("📝 Initializing logging without --debug")
    init_logging(tmp_path / "config", logs_dir=tmp_path / "logs")

    handler_types = [type(handler) for handler in root_handlers.handlers]
    assert logging.handlers.RotatingFileHandler in handler_types
    assert RichHandler not in handler_types
    assert (tmp_path / "logs" / "kamae.log").exists()
    print("   ✅ No console handler drawing over the screen")


def test_debug_adds_console_handler_and_lowers_levels(tmp_path, root_handlers):
    init_logging(tmp_path / "config", debug=True, logs_dir=tmp_path / "logs")

    assert any(isinstance(handler, RichHandler) for handler in root_handlers.handlers)
    assert logging.getLogger("kamae.ui").level == logging.DEBUG


def test_partial_logging_yaml_is_merged_with_defaults(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    with open(config_dir / "logging.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"file_level": "INFO"}, f)

    config = LoggerManager(config_dir).load_config()
    assert config["file_level"] == "INFO"
    assert config["console_level"] == "WARNING"
    assert "file" in config["format"]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
