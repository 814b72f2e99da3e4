"""
Repository-level pytest configuration.

Why this exists:
  - Register the command line options that select the browser session
  - Translate them into the `UI_*` environment overrides read by ConfigLoader
  - Keep behavior explicit and discoverable

Secrets (grid credentials) are never passed on the command line; provide them
through GRID_USERNAME / GRID_ACCESS_KEY.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


# command line option -> environment override
OPTION_ENV_MAP = {
    "ui_browser": "UI_BROWSER_NAME",
    "ui_host": "UI_HOST",
    "ui_base_url": "UI_BASE_URL",
}


def pytest_addoption(parser):
    """Register browser session options."""
    group = parser.getgroup("pagesuite", "browser session")
    group.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run live browser tests (skipped by default)",
    )
    group.addoption(
        "--ui-browser",
        default=None,
        help="Browser to run: chromium, chrome, msedge, firefox, webkit",
    )
    group.addoption(
        "--ui-host",
        default=None,
        help="Where the browser runs: localhost or grid",
    )
    group.addoption(
        "--ui-base-url",
        dest="ui_base_url",
        default=None,
        help="Application under test",
    )
    group.addoption(
        "--ui-headed",
        action="store_true",
        default=False,
        help="Show the browser window",
    )


def pytest_configure(config):
    """Apply command line options as configuration overrides."""
    for option, env_key in OPTION_ENV_MAP.items():
        value = config.getoption(option)
        if value:
            os.environ[env_key] = value

    if config.getoption("ui_headed"):
        os.environ["UI_HEADLESS"] = "false"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
