"""Pytest configuration and fixtures for frame-redact tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from frame_redact.rules import RuleSet, load_rules

# Trimmed copy of the markup Monaco renders for a JSON editor
MONACO_EDITOR_HTML = (
    '<div class="monaco-editor" role="code">'
    '<div class="overflow-guard">'
    '<textarea class="inputarea" aria-label="Editor content"></textarea>'
    '<div class="monaco-scrollable-element">'
    '<div class="lines-content">'
    '<div class="view-lines">'
    '<div class="view-line"><span><span class="mtk1">{</span></span></div>'
    '<div class="view-line"><span><span class="mtk1">&nbsp;&nbsp;</span>'
    '<span class="mtk20">"tenantId"</span><span class="mtk1">:&nbsp;</span>'
    '<span class="mtk5">"d692f14b-8df6-4f72-ab7d-b4b2981a6b</span>'
    '<span class="mtk5">58"</span></span></div>'
    '<div class="view-line"><span><span class="mtk1">}</span></span></div>'
    "</div></div></div></div></div>"
)


@pytest.fixture
def rules() -> RuleSet:
    """The packaged rule set."""
    return load_rules()


@pytest.fixture
def monaco_html() -> str:
    """Markup of a single Monaco editor."""
    return MONACO_EDITOR_HTML


@pytest.fixture
def html_file(tmp_path: Path):
    """Create an HTML file for testing."""

    def _create(content: str, name: str = "page.html") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _create
