"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based building blocks for page objects.

Components:
    - locator: immutable (strategy, value) element locators
    - page_base: base page facade over the browser driver
    - browser_manager: browser session lifecycle (local or remote grid)
    - config_loader: YAML / environment configuration and session settings
    - logging_setup: Loguru configuration

Author: Automation Team
License: MIT
================================================================================
"""

from .locator import By, ElementNotFoundError, Locator
from .page_base import BasePage, PageNotLoadedError
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError, SessionConfig

__all__ = [
    "By",
    "ElementNotFoundError",
    "Locator",
    "BasePage",
    "PageNotLoadedError",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "SessionConfig",
]
