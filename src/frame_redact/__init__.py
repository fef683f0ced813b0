"""Redaction of sensitive identifiers from web pages.

This library provides tools for:
- Replacing tenant names, GUIDs, thumbprints, resource names and usernames
  in a document tree, including Monaco code editor lines
- Sanitizing saved HTML pages and frames
- Sanitizing a frame of a running browser in place before a screenshot
- Checking files for identifiers that are still present

Core sanitization needs only BeautifulSoup (with html5lib).
Optional features require: playwright (live), typer (cli).

Example usage:
    from frame_redact import sanitize, sanitize_html

    # Sanitize saved HTML
    clean_html, stats = sanitize_html(raw_html)
    print(stats.summary())

    # Sanitize a tree in place
    from frame_redact.tree import parse_html
    document = parse_html(raw_html)
    stats = sanitize(document)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export public API for convenience
from frame_redact.sanitization import (
    RunStats,
    Sanitizer,
    find_leaks,
    sanitize,
    sanitize_html,
)

__all__ = [
    "__version__",
    "RunStats",
    "Sanitizer",
    "find_leaks",
    "sanitize",
    "sanitize_html",
]
