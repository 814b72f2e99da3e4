"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live browser tests.

Each test owns one browser session:
    session_config -> browser_manager -> page -> page objects

The session is opened before the test and closed after it, whatever the
outcome. Failed tests get a screenshot attached to the Allure report.

================================================================================
"""

import os
from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Page

from pagesuite.ui_testing.framework.browser_manager import BrowserManager
from pagesuite.ui_testing.framework.config_loader import SessionConfig
from pagesuite.ui_testing.framework.page_base import BasePage
from pagesuite.ui_testing.pages.dynamic_loading_page import DynamicLoadingPage
from pagesuite.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
def session_config() -> SessionConfig:
    """Browser session settings from config/config.yaml and UI_* overrides."""
    return SessionConfig.from_config()


@pytest.fixture
async def browser_manager(
    request,
    session_config: SessionConfig,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser session.

    The test name is reported to a remote grid as the session name.
    """
    async with BrowserManager(session_config, test_name=request.node.name) as manager:
        yield manager


@pytest.fixture
async def page(
    request,
    browser_manager: BrowserManager,
    session_config: SessionConfig,
) -> AsyncGenerator[Page, None]:
    """New page in an isolated context; captures a screenshot on failure."""
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await BasePage.from_session(page, session_config).capture_failure(
                request.node.name
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
async def login_page(page: Page, session_config: SessionConfig) -> LoginPage:
    """LoginPage already opened and verified."""
    return await LoginPage.from_session(page, session_config).open()


@pytest.fixture
def dynamic_loading_page(page: Page, session_config: SessionConfig) -> DynamicLoadingPage:
    """DynamicLoadingPage; call `load_example(n)` to open an example."""
    return DynamicLoadingPage.from_session(page, session_config)


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """
    Credentials for the demo application.

    The valid pair is the public demo account of the application under test.
    """
    return {
        "valid_user": {
            "username": os.getenv("UI_USERNAME", "tomsmith"),
            "password": os.getenv("UI_PASSWORD", "SuperSecretPassword!"),
        },
        "invalid_user": {
            "username": os.getenv("UI_USERNAME", "tomsmith"),
            "password": "bad password",
        },
    }
