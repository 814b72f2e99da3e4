"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration with environment variable override support, plus the
typed browser session settings derived from it.

Features:
    - YAML configuration loading (config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with default values
    - SessionConfig: validated local / grid browser session settings

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Repository-level configuration file
DEFAULT_CONFIG_PATH = Path(__file__).parents[3] / "config" / "config.yaml"

# Where a browser session may run
HOST_LOCALHOST = "localhost"
HOST_GRID = "grid"
HOSTS = (HOST_LOCALHOST, HOST_GRID)


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "https://the-internet.herokuapp.com")
        'https://the-internet.herokuapp.com'

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.browser_name -> UI_BROWSER_NAME
        - grid.access_key -> GRID_ACCESS_KEY
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton - configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class SessionConfig:
    """
    Browser session settings.

    Attributes:
        base_url: Application under test
        host: 'localhost' (local browser) or 'grid' (remote browser grid)
        browser_name: Browser to run - chromium, chrome, firefox, webkit, ...
        browser_version: Requested browser version (grid only)
        platform_name: Requested operating system (grid only)
        headless: Run local browser without a window
        grid_url: Remote grid websocket endpoint
        grid_username: Grid account name
        grid_access_key: Grid access key (masked in repr)
        find_timeout: Milliseconds to wait when finding an element
        wait_timeout: Milliseconds for explicit waits
    """
    base_url: str = "https://the-internet.herokuapp.com"
    host: str = HOST_LOCALHOST
    browser_name: str = "chromium"
    browser_version: str = ""
    platform_name: str = ""
    headless: bool = True
    grid_url: str = ""
    grid_username: str = ""
    grid_access_key: str = field(default="", repr=False)
    find_timeout: int = 2000
    wait_timeout: int = 15000

    def __post_init__(self) -> None:
        if self.host not in HOSTS:
            raise ConfigurationError(
                f"Unknown host '{self.host}'. Expected one of: {', '.join(HOSTS)}"
            )
        if self.host == HOST_GRID and not self.grid_url:
            raise ConfigurationError("host 'grid' requires grid.url to be configured")

    @property
    def is_remote(self) -> bool:
        return self.host == HOST_GRID

    @classmethod
    def from_config(cls, loader: Optional[ConfigLoader] = None) -> "SessionConfig":
        """Build session settings from the `ui` and `grid` config sections."""
        loader = loader or ConfigLoader()
        defaults = cls()
        return cls(
            base_url=loader.get("ui.base_url", defaults.base_url),
            host=str(loader.get("ui.host", defaults.host)).lower(),
            browser_name=str(loader.get("ui.browser_name", defaults.browser_name)).lower(),
            browser_version=str(loader.get("ui.browser_version", defaults.browser_version) or ""),
            platform_name=str(loader.get("ui.platform_name", defaults.platform_name) or ""),
            headless=loader.get("ui.headless", defaults.headless),
            grid_url=loader.get("grid.url", defaults.grid_url) or "",
            grid_username=loader.get("grid.username", defaults.grid_username) or "",
            grid_access_key=loader.get("grid.access_key", defaults.grid_access_key) or "",
            find_timeout=loader.get("ui.find_timeout", defaults.find_timeout),
            wait_timeout=loader.get("ui.wait_timeout", defaults.wait_timeout),
        )


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "SessionConfig",
    "HOST_LOCALHOST",
    "HOST_GRID",
]
