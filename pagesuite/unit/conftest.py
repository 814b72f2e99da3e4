"""
Fixtures for browser-free unit tests.

FakePage stands in for a Playwright Page: elements are registered by locator
and anything not registered behaves like a selector that never matches.
"""

from typing import Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pagesuite.ui_testing.framework.config_loader import ConfigLoader
from pagesuite.ui_testing.framework.locator import Locator

BASE_URL = "https://the-internet.herokuapp.com"


def make_element(present: bool = True, visible: bool = True) -> MagicMock:
    """Fake Playwright Locator for a single element."""

    async def wait_for(state: str = "visible", timeout: float = None) -> None:
        if not present or (state == "visible" and not visible):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    element = MagicMock(name="element")
    element.wait_for = AsyncMock(side_effect=wait_for)
    element.is_visible = AsyncMock(return_value=present and visible)
    element.click = AsyncMock()
    element.fill = AsyncMock()
    return element


class FakePage:
    """Minimal async Playwright Page double."""

    def __init__(self, url: str = f"{BASE_URL}/login"):
        self.url = url
        self.elements: Dict[str, MagicMock] = {}
        self.requested: List[str] = []
        self.goto = AsyncMock()
        self.screenshot = AsyncMock(side_effect=self._write_screenshot)

    def add(self, locator: Locator, present: bool = True, visible: bool = True) -> MagicMock:
        element = make_element(present=present, visible=visible)
        self.elements[locator.selector] = element
        return element

    def locator(self, selector: str) -> MagicMock:
        self.requested.append(selector)
        element = self.elements.get(selector)
        if element is None:
            element = make_element(present=False)
        handle = MagicMock(name=f"locator({selector})")
        handle.first = element
        return handle

    @staticmethod
    async def _write_screenshot(path: str, full_page: bool = False) -> bytes:
        with open(path, "wb") as f:
            f.write(b"\x89PNG")
        return b"\x89PNG"


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Isolate tests from UI_* / GRID_* overrides and the config singleton."""
    for key in (
        "UI_BASE_URL",
        "UI_HOST",
        "UI_BROWSER_NAME",
        "UI_BROWSER_VERSION",
        "UI_PLATFORM_NAME",
        "UI_HEADLESS",
        "UI_FIND_TIMEOUT",
        "UI_WAIT_TIMEOUT",
        "GRID_URL",
        "GRID_USERNAME",
        "GRID_ACCESS_KEY",
    ):
        monkeypatch.delenv(key, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()
