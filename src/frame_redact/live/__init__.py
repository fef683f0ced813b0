"""Live browser frame sanitization using Playwright.

Requires the 'live' optional dependency: pip install frame-redact[live]

Exports:
    - attach_and_sanitize: Attach over CDP and sanitize a frame in place
    - sanitize_frame: Sanitize an already selected Playwright frame
    - select_frame: Pick a frame by name or URL substring
    - LiveNode: Node interface over a Playwright handle
    - LiveResult: Result dataclass from attach_and_sanitize
    - check_playwright: Check if Playwright is available
"""

from __future__ import annotations

from frame_redact.live.deps import check_playwright
from frame_redact.live.frame import (
    LiveAttachError,
    LiveNode,
    LiveResult,
    attach_and_sanitize,
    sanitize_frame,
    select_frame,
)

__all__ = [
    "attach_and_sanitize",
    "sanitize_frame",
    "select_frame",
    "LiveNode",
    "LiveResult",
    "LiveAttachError",
    "check_playwright",
]
