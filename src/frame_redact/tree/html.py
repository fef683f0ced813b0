"""HTML parsing and serialization for saved pages.

Pages are parsed with BeautifulSoup using the html5lib tree builder, which
applies the same tree construction rules as a browser: implied end tags
close ``p`` and ``li`` elements, ``<?...?>`` becomes a comment and CDATA
inside SVG or MathML becomes text. The sanitized page therefore renders
the way the original did.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, PageElement

PARSER = "html5lib"


def parse_html(markup: str) -> BeautifulSoup:
    """Parse a page or frame.

    Args:
        markup: HTML source

    Returns:
        The parsed document. Fragments get the ``html``, ``head`` and
        ``body`` elements a browser would add.
    """
    return BeautifulSoup(markup, PARSER)


def parse_fragment(markup: str) -> list[PageElement]:
    """Parse an HTML fragment, e.g. the value assigned to ``innerHTML``.

    Args:
        markup: HTML fragment

    Returns:
        Top-level nodes of the fragment, detached from any parent
    """
    # Start inside <body> so leading whitespace is kept
    soup = BeautifulSoup(f"<body>{markup}", PARSER)
    body = soup.body
    if body is None:
        return []
    nodes = list(body.contents)
    for node in nodes:
        node.extract()
    return nodes


def to_html(node: PageElement) -> str:
    """Serialize a document or element back to HTML."""
    return str(node)
