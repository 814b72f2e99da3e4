"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle for UI tests.

Features:
    - Local browser launch (chromium, chrome, msedge, firefox, webkit)
    - Remote grid sessions with browser / version / platform capabilities
    - Test name reported to the grid as the session name
    - Isolated contexts per test, deterministic teardown

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
)

from .config_loader import ConfigurationError, SessionConfig


# browser_name -> (Playwright engine, release channel)
BROWSER_ALIASES: Dict[str, Tuple[str, Optional[str]]] = {
    "chromium": ("chromium", None),
    "chrome": ("chromium", "chrome"),
    "msedge": ("chromium", "msedge"),
    "edge": ("chromium", "msedge"),
    "firefox": ("firefox", None),
    "webkit": ("webkit", None),
    "safari": ("webkit", None),
}


def resolve_browser(browser_name: str) -> Tuple[str, Optional[str]]:
    """
    Map a configured browser name onto a Playwright engine and channel.

    Raises:
        ConfigurationError: Unsupported browser name
    """
    try:
        return BROWSER_ALIASES[browser_name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported browser '{browser_name}'. "
            f"Expected one of: {', '.join(BROWSER_ALIASES)}"
        ) from None


def build_capabilities(config: SessionConfig, test_name: str = "") -> Dict[str, str]:
    """
    Capabilities requested from a remote grid.

    Empty values are left out so the grid applies its own defaults.
    """
    capabilities = {
        "browserName": config.browser_name,
        "browserVersion": config.browser_version,
        "platformName": config.platform_name,
        "name": test_name,
    }
    return {key: value for key, value in capabilities.items() if value}


def build_grid_endpoint(grid_url: str, capabilities: Dict[str, str]) -> str:
    """Append JSON-encoded capabilities to the grid URL as the `caps` parameter."""
    separator = "&" if "?" in grid_url else "?"
    caps = quote(json.dumps(capabilities, separators=(",", ":")))
    return f"{grid_url}{separator}caps={caps}"


def build_auth_headers(config: SessionConfig) -> Dict[str, str]:
    """HTTP Basic credentials for the grid (empty when none configured)."""
    if not (config.grid_username and config.grid_access_key):
        return {}
    token = base64.b64encode(
        f"{config.grid_username}:{config.grid_access_key}".encode("utf-8")
    ).decode("ascii")
    return {"Authorization": f"Basic {token}"}


class BrowserManager:
    """
    Manages the browser session owned by one test.

    Usage:
        async with BrowserManager(SessionConfig.from_config(), "test_login") as manager:
            page = await manager.new_page()
            await page.goto("https://the-internet.herokuapp.com/login")
    """

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        session_config: Optional[SessionConfig] = None,
        test_name: str = "",
    ):
        """
        Initialize browser manager.

        Args:
            session_config: Where and which browser to run (defaults to config file)
            test_name: Reported to the grid as the session name
        """
        self.config = session_config or SessionConfig.from_config()
        self.test_name = test_name

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    async def start(self) -> None:
        """Start Playwright and open a local or remote browser."""
        engine, channel = resolve_browser(self.config.browser_name)
        self._playwright = await async_playwright().start()
        launcher: BrowserType = getattr(self._playwright, engine)

        try:
            if self.config.is_remote:
                self._browser = await self._connect_grid(launcher)
            else:
                self._browser = await self._launch_local(launcher, channel)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise

    async def _launch_local(self, launcher: BrowserType, channel: Optional[str]) -> Browser:
        launch_options: Dict[str, Any] = {"headless": self.config.headless}
        if channel:
            launch_options["channel"] = channel

        browser = await launcher.launch(**launch_options)
        logger.info(
            f"Browser started: {self.config.browser_name} "
            f"(headless={self.config.headless})"
        )
        return browser

    async def _connect_grid(self, launcher: BrowserType) -> Browser:
        capabilities = build_capabilities(self.config, self.test_name)
        endpoint = build_grid_endpoint(self.config.grid_url, capabilities)

        browser = await launcher.connect(
            endpoint,
            headers=build_auth_headers(self.config),
        )
        logger.info(f"Connected to grid {self.config.grid_url} with {capabilities}")
        return browser

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            browser, self._browser = self._browser, None
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"Failed to close browser: {e}")

        if self._playwright:
            playwright, self._playwright = self._playwright, None
            await playwright.stop()
            logger.info("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create new page in new or existing context."""
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "BROWSER_ALIASES",
    "build_auth_headers",
    "build_capabilities",
    "build_grid_endpoint",
    "resolve_browser",
]
