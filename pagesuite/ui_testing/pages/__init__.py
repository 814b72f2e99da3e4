"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .dynamic_loading_page import DynamicLoadingPage

__all__ = [
    "LoginPage",
    "DynamicLoadingPage",
]
