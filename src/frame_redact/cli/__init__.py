"""CLI for frame-redact.

This module provides a Typer-based CLI for sanitizing saved pages, checking
files for leftover identifiers, and sanitizing a live browser frame.

Requires the 'cli' optional dependency: pip install frame-redact[cli]
"""

from __future__ import annotations
