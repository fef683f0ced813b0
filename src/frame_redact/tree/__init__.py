"""Document tree used by the sanitizer.

Exports:
    - Node: Protocol the sanitizer walks
    - SoupNode: Node implementation over a parsed page
    - as_node: Wrap a BeautifulSoup object as a node
    - parse_html, parse_fragment, to_html: HTML <-> BeautifulSoup
    - NodeAccessError: raised when a node cannot be read or written
"""

from __future__ import annotations

from frame_redact.tree.html import PARSER, parse_fragment, parse_html, to_html
from frame_redact.tree.nodes import (
    COMMENT,
    ELEMENT,
    OTHER,
    TEXT,
    VALUE_TAGS,
    Node,
    NodeAccessError,
    SoupNode,
    as_node,
)

__all__ = [
    # Node interface
    "Node",
    "NodeAccessError",
    "TEXT",
    "ELEMENT",
    "COMMENT",
    "OTHER",
    "VALUE_TAGS",
    # Parsed pages
    "SoupNode",
    "as_node",
    "PARSER",
    "parse_html",
    "parse_fragment",
    "to_html",
]
