"""Sanitization of document trees and HTML.

Saved pages are parsed with BeautifulSoup; no browser is needed.

Exports:
    - sanitize: Sanitize a document tree in place
    - Sanitizer: Reusable sanitizer bound to a rule set
    - RunStats: Counters returned by a run
    - sanitize_html: Sanitize an HTML string
    - find_leaks: Report sensitive literals still present in content
"""

from __future__ import annotations

from frame_redact.sanitization.html import Leak, find_leaks, sanitize_html
from frame_redact.sanitization.sanitizer import (
    EDITOR_SELECTOR,
    INPUT_AREA_SELECTOR,
    SANITIZED_ATTRIBUTES,
    VIEW_LINE_SELECTOR,
    VIEW_LINES_SELECTOR,
    RunStats,
    Sanitizer,
    sanitize,
)

__all__ = [
    # Tree sanitization
    "sanitize",
    "Sanitizer",
    "RunStats",
    "SANITIZED_ATTRIBUTES",
    "EDITOR_SELECTOR",
    "VIEW_LINES_SELECTOR",
    "VIEW_LINE_SELECTOR",
    "INPUT_AREA_SELECTOR",
    # HTML helpers
    "sanitize_html",
    "find_leaks",
    "Leak",
]
