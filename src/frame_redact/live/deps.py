"""Optional dependency checks for live frame sanitization.

The core sanitizer has no third-party dependencies; only attaching to a
running browser needs Playwright. Its browsers are never downloaded here:
live mode drives the user's own Chrome or Edge over CDP.
"""

from __future__ import annotations

INSTALL_HINT = "pip install frame-redact[live]"


def check_playwright() -> bool:
    """Check if the Playwright sync API can be imported.

    Returns:
        True if live mode is available
    """
    try:
        from playwright.sync_api import sync_playwright  # noqa: F401
    except ImportError:
        return False
    return True


def missing_playwright_message() -> str:
    """Message shown when live mode is requested without Playwright."""
    return f"Playwright not installed. Run: {INSTALL_HINT}"
