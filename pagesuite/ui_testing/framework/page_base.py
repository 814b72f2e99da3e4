"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Every page object extends BasePage and talks to the browser only through the
small set of primitives defined here:
    - visit
    - find
    - click
    - type
    - is_displayed / wait_for_is_displayed

plus screenshot and failure-capture utilities for reporting.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Locator as ElementHandle
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config_loader import ConfigLoader, SessionConfig
from .locator import ElementNotFoundError, Locator


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class PageNotLoadedError(AssertionError):
    """Raised when a page object is opened but the browser is on another page."""
    pass


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare:
        URL_PATH: path of the page relative to the base URL
        LOADED_INDICATOR: locator that must be displayed once the page is open

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"
            LOADED_INDICATOR = Locator(By.ID, "login")
            USERNAME_INPUT = Locator(By.ID, "username")

            async def login_with(self, username: str, password: str):
                await self.type(self.USERNAME_INPUT, username)
                ...

        login = await LoginPage(page).open()
    """

    # Override in subclasses
    URL_PATH: str = "/"
    LOADED_INDICATOR: Optional[Locator] = None

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        find_timeout: Optional[int] = None,
        wait_timeout: Optional[int] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to `ui.base_url`)
            find_timeout: Milliseconds to wait when finding an element
            wait_timeout: Milliseconds for explicit waits
        """
        self.page = page
        defaults = SessionConfig()
        config = ConfigLoader()
        if not base_url:
            base_url = config.get("ui.base_url", defaults.base_url)
        self.base_url = base_url.rstrip("/")
        if find_timeout is None:
            find_timeout = config.get("ui.find_timeout", defaults.find_timeout)
        if wait_timeout is None:
            wait_timeout = config.get("ui.wait_timeout", defaults.wait_timeout)
        self.find_timeout = find_timeout
        self.wait_timeout = wait_timeout

    @classmethod
    def from_session(cls, page: Page, session_config: SessionConfig, **kwargs):
        """Build a page object using the timeouts and base URL of a session."""
        return cls(
            page,
            base_url=session_config.base_url,
            find_timeout=session_config.find_timeout,
            wait_timeout=session_config.wait_timeout,
            **kwargs,
        )

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Page Lifecycle
    # =========================================================================

    async def open(self):
        """Navigate to this page and verify it loaded."""
        await self.visit(self.URL_PATH)
        await self.assert_loaded()
        return self

    async def assert_loaded(self) -> None:
        """
        Verify the browser landed on this page.

        Raises:
            PageNotLoadedError: LOADED_INDICATOR is not displayed
        """
        if self.LOADED_INDICATOR is None:
            return
        if not await self.is_displayed(self.LOADED_INDICATOR):
            raise PageNotLoadedError(
                f"{type(self).__name__} not loaded: "
                f"'{self.LOADED_INDICATOR}' not displayed at {self.page.url}"
            )

    # =========================================================================
    # Driver Primitives
    # =========================================================================

    async def visit(self, url: str) -> None:
        """
        Navigate to a URL.

        Absolute URLs are used as-is, anything else is treated as a path
        relative to the base URL.
        """
        target = url if "http" in url else f"{self.base_url}{url}"
        with allure.step(f"Visit {target}"):
            await self.page.goto(target)
            logger.debug(f"Navigated to: {target}")

    async def find(
        self,
        locator: Locator,
        timeout: Optional[int] = None,
    ) -> ElementHandle:
        """
        Find the first element matching a locator.

        Args:
            locator: Element locator
            timeout: Milliseconds to wait for the element to be attached

        Returns:
            Playwright Locator bound to the element

        Raises:
            ElementNotFoundError: No element matched within the timeout
        """
        timeout = self.find_timeout if timeout is None else timeout
        element = self.page.locator(locator.selector).first
        try:
            await element.wait_for(state="attached", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(
                f"No element found for '{locator}' within {timeout}ms"
            ) from e
        return element

    async def click(self, locator: Locator) -> None:
        """Click an element."""
        with allure.step(f"Click: {locator}"):
            element = await self.find(locator)
            await element.click()
            logger.debug(f"Clicked: {locator}")

    async def type(self, locator: Locator, text: str) -> None:
        """Type text into an input element, replacing its content."""
        shown = "*" * len(text) if "password" in locator.value.lower() else text
        with allure.step(f"Type into {locator}: {shown}"):
            element = await self.find(locator)
            await element.fill(text)
            logger.debug(f"Typed into {locator}: {shown}")

    async def is_displayed(
        self,
        locator: Locator,
        timeout: Optional[int] = None,
    ) -> bool:
        """
        Check if an element is displayed.

        A missing element is reported as not displayed rather than raised.
        """
        try:
            element = await self.find(locator, timeout=timeout)
        except ElementNotFoundError:
            logger.debug(f"Not displayed (not found): {locator}")
            return False
        return await element.is_visible()

    async def wait_for_is_displayed(
        self,
        locator: Locator,
        timeout: Optional[int] = None,
    ) -> bool:
        """
        Explicitly wait for an element to become visible.

        Returns:
            True if the element became visible before the timeout
        """
        timeout = self.wait_timeout if timeout is None else timeout
        element = self.page.locator(locator.selector).first
        try:
            await element.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError:
            logger.warning(f"'{locator}' not visible after {timeout}ms")
            return False
        return True

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> Path:
        """Capture screenshot and current URL of a failed test."""
        with allure.step("Capture failure details"):
            path = await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )
        return path


__all__ = [
    "BasePage",
    "PageNotLoadedError",
]
