"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Form authentication page of the demo application (/login).

Opening the page verifies the login form is displayed, so a test constructed
against the wrong page fails immediately instead of on its first action.

================================================================================
"""

from __future__ import annotations

import allure

from pagesuite.ui_testing.framework.locator import By, Locator
from pagesuite.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/login"

    LOGIN_FORM = Locator(By.ID, "login")
    USERNAME_INPUT = Locator(By.ID, "username")
    PASSWORD_INPUT = Locator(By.ID, "password")
    SUBMIT_BUTTON = Locator(By.CSS, "button[type='submit']")
    SUCCESS_MESSAGE = Locator(By.CSS, ".flash.success")
    FAILURE_MESSAGE = Locator(By.CSS, ".flash.error")

    LOADED_INDICATOR = LOGIN_FORM

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page and verify the form is displayed."""
        return await super().open()

    @allure.step("Login with username={username}")
    async def login_with(self, username: str, password: str) -> None:
        """Fill in the login form and submit it."""
        await self.type(self.USERNAME_INPUT, username)
        await self.type(self.PASSWORD_INPUT, password)
        await self.click(self.SUBMIT_BUTTON)

    async def success_message_present(self) -> bool:
        return await self.is_displayed(self.SUCCESS_MESSAGE)

    async def failure_message_present(self) -> bool:
        return await self.is_displayed(self.FAILURE_MESSAGE)
