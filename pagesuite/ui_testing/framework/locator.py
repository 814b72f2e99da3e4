"""
================================================================================
Element Locators
================================================================================

A locator is an immutable (strategy, value) pair describing how to find one
UI element. Page objects declare their locators once, as class attributes,
and hand them to the BasePage facade which resolves them with Playwright.

Supported strategies:
    - id, css, xpath, name, class name, tag name
    - link text (anchor with exact text)
    - text (Playwright text engine)
    - test id (data-testid attribute)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict


class ElementNotFoundError(Exception):
    """Raised when a locator matches no element within the find timeout."""
    pass


class By:
    """Locator strategy names."""

    ID = "id"
    CSS = "css"
    XPATH = "xpath"
    NAME = "name"
    CLASS_NAME = "class name"
    TAG_NAME = "tag name"
    LINK_TEXT = "link text"
    TEXT = "text"
    TEST_ID = "test id"


# Strategy -> Playwright selector builder
_SELECTOR_BUILDERS: Dict[str, Callable[[str], str]] = {
    By.ID: lambda value: f"id={value}",
    By.CSS: lambda value: f"css={value}",
    By.XPATH: lambda value: f"xpath={value}",
    By.NAME: lambda value: f'css=[name="{value}"]',
    By.CLASS_NAME: lambda value: f"css=.{value}",
    By.TAG_NAME: lambda value: f"css={value}",
    By.LINK_TEXT: lambda value: f'css=a:text-is("{value}")',
    By.TEXT: lambda value: f"text={value}",
    By.TEST_ID: lambda value: f"data-testid={value}",
}

STRATEGIES = tuple(_SELECTOR_BUILDERS)


@dataclass(frozen=True)
class Locator:
    """
    How to find a single element on a page.

    Attributes:
        strategy: One of the `By` constants
        value: Strategy-specific value (an id, a CSS selector, ...)

    Usage:
        >>> USERNAME = Locator(By.ID, "username")
        >>> USERNAME.selector
        'id=username'
        >>> str(USERNAME)
        'id=username'
    """
    strategy: str
    value: str

    def __post_init__(self) -> None:
        if self.strategy not in _SELECTOR_BUILDERS:
            raise ValueError(
                f"Unknown locator strategy '{self.strategy}'. "
                f"Expected one of: {', '.join(STRATEGIES)}"
            )
        if not self.value:
            raise ValueError(f"Locator value for '{self.strategy}' must not be empty")

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        return _SELECTOR_BUILDERS[self.strategy](self.value)

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"


__all__ = [
    "By",
    "ElementNotFoundError",
    "Locator",
    "STRATEGIES",
]
