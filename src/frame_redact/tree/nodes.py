"""Node interface and the BeautifulSoup-backed document nodes.

The sanitizer only talks to nodes through the ``Node`` protocol, so it can
run against a parsed page (``SoupNode``) or against a live browser frame
(see ``frame_redact.live``).

Kinds:
    - ``"text"``: leaf holding a string (CDATA included)
    - ``"element"``: tag, attributes, children, serialized inner markup
    - ``"comment"``: preserved on serialization, never sanitized
    - ``"other"``: doctypes, declarations, processing instructions
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from bs4 import BeautifulSoup, CData, Comment, NavigableString, PageElement, Tag
from bs4.element import PreformattedString

from frame_redact.tree.html import parse_fragment

TEXT = "text"
ELEMENT = "element"
COMMENT = "comment"
OTHER = "other"

# Controls whose value is sanitized on its own
VALUE_TAGS = frozenset({"input", "textarea"})


class NodeAccessError(Exception):
    """Raised by a node implementation when a read or write fails."""


class Node(Protocol):
    """What the sanitizer needs from a document node.

    Text nodes only have to support ``kind``, ``text`` and ``release``;
    the rest is read on element nodes only. Implementations raise
    ``NodeAccessError`` when a value cannot be read or written.
    """

    @property
    def kind(self) -> str: ...

    @property
    def text(self) -> str | None: ...

    @text.setter
    def text(self, value: str) -> None: ...

    @property
    def tag(self) -> str: ...

    @property
    def children(self) -> Sequence[Node]: ...

    def has_attribute(self, name: str) -> bool: ...

    def get_attribute(self, name: str) -> str | None: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    @property
    def value(self) -> str | None: ...

    @value.setter
    def value(self, value: str) -> None: ...

    @property
    def inner_html(self) -> str: ...

    @inner_html.setter
    def inner_html(self, markup: str) -> None: ...

    def matches(self, selector: str) -> bool: ...

    def query_all(self, selector: str) -> list[Node]: ...

    def query_first(self, selector: str) -> Node | None: ...

    def release(self) -> None: ...


class SoupNode:
    """Node interface over a BeautifulSoup element or string.

    Child and query results are wrapped in the same class as the node they
    came from. A saved page has no live form state, so the value of a
    control is read from and written to its markup.
    """

    def __init__(self, element: PageElement) -> None:
        self.element = element

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element!r})"

    def _tag(self) -> Tag:
        if not isinstance(self.element, Tag):
            raise NodeAccessError(f"Not an element: {self.element!r}")
        return self.element

    @property
    def kind(self) -> str:
        element = self.element
        if isinstance(element, Tag):
            return ELEMENT
        if isinstance(element, Comment):
            return COMMENT
        if isinstance(element, CData) or not isinstance(element, PreformattedString):
            return TEXT
        return OTHER

    @property
    def text(self) -> str | None:
        if isinstance(self.element, Tag):
            return self.element.get_text()
        return str(self.element)

    @text.setter
    def text(self, value: str) -> None:
        old = self.element
        if not isinstance(old, NavigableString):
            raise NodeAccessError(f"Cannot set text of {old!r}")
        # Keep the string class so CDATA and script text serialize the same way
        new = type(old)(value)
        if old.parent is not None:
            old.replace_with(new)
        self.element = new

    @property
    def tag(self) -> str:
        if isinstance(self.element, Tag):
            return self.element.name.lower()
        return ""

    @property
    def children(self) -> list[SoupNode]:
        if not isinstance(self.element, Tag):
            return []
        return [type(self)(child) for child in self.element.contents]

    def has_attribute(self, name: str) -> bool:
        return isinstance(self.element, Tag) and self.element.has_attr(name.lower())

    def get_attribute(self, name: str) -> str | None:
        if not isinstance(self.element, Tag):
            return None
        value = self.element.get(name.lower())
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def set_attribute(self, name: str, value: str) -> None:
        self._tag()[name.lower()] = value

    @property
    def value(self) -> str | None:
        tag = self.tag
        if tag == "input":
            return self.get_attribute("value")
        if tag == "textarea":
            return self._tag().get_text()
        return None

    @value.setter
    def value(self, value: str) -> None:
        tag = self.tag
        if tag == "input":
            self.set_attribute("value", value)
        elif tag == "textarea":
            self._tag().string = value
        else:
            raise NodeAccessError(f"<{tag or self.kind}> has no value")

    @property
    def inner_html(self) -> str:
        return self._tag().decode_contents()

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        element = self._tag()
        element.clear()
        for child in parse_fragment(markup):
            element.append(child)

    def matches(self, selector: str) -> bool:
        element = self.element
        if not isinstance(element, Tag) or isinstance(element, BeautifulSoup):
            return False
        return bool(element.css.match(selector))

    def query_all(self, selector: str) -> list[SoupNode]:
        if not isinstance(self.element, Tag):
            return []
        return [type(self)(found) for found in self.element.select(selector)]

    def query_first(self, selector: str) -> SoupNode | None:
        if not isinstance(self.element, Tag):
            return None
        found = self.element.select_one(selector)
        return type(self)(found) if found is not None else None

    def release(self) -> None:
        """Nothing to release for an in-memory node."""


def as_node(root: Node | PageElement) -> Node:
    """Wrap a BeautifulSoup object as a node; pass nodes through."""
    if isinstance(root, PageElement):
        return SoupNode(root)
    return root
