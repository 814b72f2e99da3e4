"""
================================================================================
Dynamic Loading Page Object (Async / Playwright)
================================================================================

Pages whose content appears only after a delay (/dynamic_loading/<n>):
    - example 1: element present but hidden until loading finishes
    - example 2: element rendered after loading finishes

Both need an explicit wait rather than an immediate visibility check.

================================================================================
"""

from __future__ import annotations

import allure

from pagesuite.ui_testing.framework.locator import By, Locator
from pagesuite.ui_testing.framework.page_base import BasePage


class DynamicLoadingPage(BasePage):
    """Dynamic loading page object (async)."""

    URL_PATH = "/dynamic_loading"

    START_BUTTON = Locator(By.CSS, "#start button")
    FINISH_TEXT = Locator(By.ID, "finish")

    LOADED_INDICATOR = START_BUTTON

    @allure.step("Open dynamic loading example {number}")
    async def open(self, number: int = 1) -> "DynamicLoadingPage":
        """Navigate to an example and verify its start button is displayed."""
        await self.visit(f"{self.URL_PATH}/{number}")
        await self.assert_loaded()
        return self

    @allure.step("Load dynamic loading example {number}")
    async def load_example(self, number: int) -> None:
        """Open an example and start the loading."""
        await self.open(number)
        await self.click(self.START_BUTTON)

    async def finish_text_present(self) -> bool:
        """Wait until the loaded content is shown."""
        return await self.wait_for_is_displayed(self.FINISH_TEXT)
