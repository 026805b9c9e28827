"""Logging configuration for kamae."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from rich.console import Console
from rich.logging import RichHandler


LOGS_DIR = Path("logs")
LOG_FILE = "kamae.log"


class LoggerManager:
    """Configures the root logger from ``logging.yaml``.

    A rotating file log is always written. The Rich console handler is only
    attached in debug mode: anything it prints while the Textual screen is
    active ends up on top of the menu.
    """

    def __init__(self, config_dir: Path, debug: bool = False, console: Optional[Console] = None):
        self.config_dir = Path(config_dir)
        self.debug_mode = debug
        self.console = console or Console(stderr=True)

    def load_config(self) -> Dict[str, Any]:
        """Defaults, shallow-merged with ``logging.yaml`` when present."""
        config = {
            'level': 'DEBUG' if self.debug_mode else 'INFO',
            'console_level': 'DEBUG' if self.debug_mode else 'WARNING',
            'file_level': 'DEBUG',
            'format': {
                'console': '%(message)s',
                'file': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            },
            'modules': {
                'kamae.app': 'INFO',
                'kamae.modules': 'INFO',
                'kamae.ui': 'WARNING',
                'kamae.utils': 'WARNING',
            }
        }

        config_file = self.config_dir / "logging.yaml"
        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    config.update(yaml.safe_load(f) or {})
            except (OSError, yaml.YAMLError) as e:
                print(f"Warning: Failed to load logging config, using default: {e}")

        if self.debug_mode:
            config['level'] = config['console_level'] = 'DEBUG'
            config['modules'] = {name: 'DEBUG' for name in config.get('modules', {})}
        return config

    def configure(self, logs_dir: Path = LOGS_DIR) -> None:
        """Replace the root logger's handlers and apply per-module levels."""
        config = self.load_config()
        logs_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            handler.close()
        root_logger.handlers.clear()
        root_logger.setLevel(getattr(logging, config['level']))

        if self.debug_mode:
            console_handler = RichHandler(
                console=self.console,
                rich_tracebacks=True,
                markup=True,
                show_path=True,
                show_time=False,
            )
            console_handler.setLevel(getattr(logging, config['console_level']))
            console_handler.setFormatter(logging.Formatter(config['format']['console']))
            root_logger.addHandler(console_handler)

        file_handler = logging.handlers.RotatingFileHandler(
            logs_dir / LOG_FILE,
            maxBytes=5*1024*1024,  # 5MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(getattr(logging, config['file_level']))
        file_handler.setFormatter(logging.Formatter(config['format']['file']))
        root_logger.addHandler(file_handler)

        for module_name, level in config.get('modules', {}).items():
            logging.getLogger(module_name).setLevel(getattr(logging, level))


def init_logging(config_dir: Path, debug: bool = False, console: Optional[Console] = None,
                 logs_dir: Path = LOGS_DIR) -> None:
    """Initialize the logging system.

    Args:
        config_dir: Configuration directory holding ``logging.yaml``
        debug: Enable debug mode (console handler, DEBUG levels)
        console: Rich console for the debug handler
        logs_dir: Directory for the rotating log file
    """
    LoggerManager(config_dir, debug, console).configure(logs_dir)

    logger = get_logger("kamae.logger")
    logger.info("Logging system initialized")
    if debug:
        logger.debug("Debug mode enabled")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_app_logger() -> logging.Logger:
    """Get the main application logger."""
    return get_logger("kamae.app")


def get_module_logger(module_name: str) -> logging.Logger:
    """Get a module-specific logger."""
    return get_logger(f"kamae.modules.{module_name}")


def get_ui_logger(screen_name: str) -> logging.Logger:
    """Get a UI screen-specific logger."""
    return get_logger(f"kamae.ui.{screen_name}")


def get_utils_logger(util_name: str) -> logging.Logger:
    """Get a utility-specific logger."""
    return get_logger(f"kamae.utils.{util_name}")
