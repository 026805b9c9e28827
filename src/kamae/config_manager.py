"""Configuration management for kamae."""

import yaml
from rich.color import Color, ColorParseError
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

from .utils.logger import get_utils_logger


DEFAULT_THEME = {
    "title": "#7C3AED",
    "category": "#059669",
    "selected": "#10B981",
    "unselected": "#6B7280",
    "help": "#9CA3AF",
    "summary": "#DC2626",
}


@dataclass
class AppConfig:
    """Application configuration data class."""
    name: str = "kamae"
    version: str = "0.1.0"
    author: str = ""
    description: str = "Bootstrap Application Installer"
    theme: str = "default"

    @property
    def title(self) -> str:
        return f"{self.name} - {self.description}"


class ConfigManager:
    """Manages application configuration from YAML files."""

    def __init__(self, config_dir: Path = Path("config")):
        self.config_dir = Path(config_dir)
        self._config_cache: Dict[str, Dict[str, Any]] = {}
        self.logger = get_utils_logger("config_manager")
        self.logger.debug(f"Config manager ready: config_dir={self.config_dir}")

    def load_config(self, config_name: str) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if config_name in self._config_cache:
            self.logger.debug(f"Using cached config: {config_name}")
            return self._config_cache[config_name]

        config_path = self.config_dir / f"{config_name}.yaml"
        self.logger.info(f"Loading config file: {config_path}")

        if not config_path.exists():
            self.logger.error(f"Config file not found: {config_path}")
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as file:
                config = yaml.safe_load(file)

            if config is None:
                self.logger.warning(f"Config file is empty: {config_name}")
                config = {}

            self._config_cache[config_name] = config
            return config

        except yaml.YAMLError as e:
            self.logger.error(f"YAML parsing failed [{config_name}]: {e}")
            raise
        except IOError as e:
            self.logger.error(f"Failed to read config file [{config_path}]: {e}")
            raise

    def get_app_config(self) -> AppConfig:
        """Get application configuration, falling back to built-in defaults."""
        try:
            config = self.load_config("app")
        except FileNotFoundError:
            self.logger.info("No app.yaml found, using default application config")
            return AppConfig()

        app_section = config.get("app", {}) or {}
        ui_section = config.get("ui", {}) or {}
        defaults = AppConfig()

        app_config = AppConfig(
            name=str(app_section.get("name", defaults.name)),
            version=str(app_section.get("version", defaults.version)),
            author=str(app_section.get("author", defaults.author)),
            description=str(app_section.get("description", defaults.description)),
            theme=str(ui_section.get("theme", defaults.theme)),
        )
        self.logger.debug(f"App config loaded: {app_config.name} v{app_config.version}")
        return app_config

    def get_theme_config(self, theme_name: Optional[str] = None) -> Dict[str, str]:
        """Get theme colours, merged over the default palette."""
        if theme_name is None:
            theme_name = self.get_app_config().theme

        try:
            themes = self.load_config("themes").get("themes", {}) or {}
        except FileNotFoundError:
            self.logger.info("No themes.yaml found, using default theme")
            return dict(DEFAULT_THEME)

        if theme_name not in themes:
            self.logger.warning(f"Theme '{theme_name}' does not exist, falling back to 'default'")
            theme_name = "default"

        theme = dict(DEFAULT_THEME)
        for key, value in (themes.get(theme_name, {}) or {}).items():
            if key in DEFAULT_THEME and not self._is_valid_color(value):
                self.logger.warning(f"Invalid colour '{value}' for '{key}' in theme '{theme_name}', using default")
                continue
            theme[key] = str(value)
        self.logger.debug(f"Using theme: {theme_name}")
        return theme

    @staticmethod
    def _is_valid_color(value: Any) -> bool:
        try:
            Color.parse(str(value))
        except ColorParseError:
            return False
        return True
