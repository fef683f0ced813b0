"""Tree sanitizer.

Walks a document tree depth-first and applies the ordered replacement
rules to:
    - text nodes
    - descriptive attributes (aria-label, title, placeholder, value,
      data-original-title)
    - values of input and textarea controls
    - the rendered lines and hidden input area of Monaco code editors

Editor lines are rewritten at the markup level because Monaco splits each
line into styling spans. Tree mutation is in place; the only return value
is the ``RunStats`` counters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import PageElement

from frame_redact.rules import RuleSet, load_rules
from frame_redact.tree import ELEMENT, TEXT, VALUE_TAGS, Node, NodeAccessError, as_node

_LOGGER = logging.getLogger(__name__)

# Attributes that can carry visible or hover text
SANITIZED_ATTRIBUTES: tuple[str, ...] = (
    "aria-label",
    "title",
    "placeholder",
    "value",
    "data-original-title",
)

EDITOR_SELECTOR = ".monaco-editor"
VIEW_LINES_SELECTOR = ".view-lines"
VIEW_LINE_SELECTOR = ".view-line"
INPUT_AREA_SELECTOR = "textarea.inputarea"


@dataclass
class RunStats:
    """Counters for a single sanitizer run.

    Attributes:
        replacements: Text nodes changed plus editor lines rewritten
        editors_modified: Editor lines rewritten plus editor input areas changed
    """

    replacements: int = 0
    editors_modified: int = 0

    def summary(self) -> str:
        """One-line human readable summary."""
        return f"Sanitized {self.replacements} items, {self.editors_modified} editor regions"


class Sanitizer:
    """Apply an ordered rule set to every reachable string in a tree."""

    def __init__(self, rules: RuleSet | None = None) -> None:
        self.rules = rules if rules is not None else load_rules()

    def sanitize(self, root: Node | PageElement | None) -> RunStats:
        """Sanitize a tree in place.

        Never raises for unreadable nodes; they are skipped. Every node
        reached below the root is released once it has been visited.

        Args:
            root: Node or BeautifulSoup object to start from (None is
                treated as an empty tree)

        Returns:
            Counters for this run
        """
        stats = RunStats()
        if root is None:
            return stats

        root = as_node(root)
        self._walk(root, stats)
        self._sanitize_editors(root, stats)

        _LOGGER.info("Sanitized %d items, %d editor regions", stats.replacements, stats.editors_modified)
        return stats

    def _walk(self, root: Node, stats: RunStats) -> None:
        # Explicit stack keeps deep pages clear of the recursion limit
        stack: list[Node] = [root]
        while stack:
            node = stack.pop()
            try:
                self._visit(node, stats, stack)
            finally:
                if node is not root:
                    _release(node)

    def _visit(self, node: Node, stats: RunStats, stack: list[Node]) -> None:
        try:
            kind = node.kind
        except NodeAccessError as e:
            _LOGGER.debug("Skipping unreadable node: %s", e)
            return

        if kind == TEXT:
            self._sanitize_text(node, stats)
        elif kind == ELEMENT:
            self._sanitize_element(node)
            try:
                children = list(node.children)
            except NodeAccessError as e:
                _LOGGER.debug("Skipping children of <%s>: %s", _tag_of(node), e)
                return
            stack.extend(reversed(children))

    def _sanitize_text(self, node: Node, stats: RunStats) -> None:
        try:
            original = node.text
            if not isinstance(original, str):
                return
            text = self.rules.apply(original)
            if text != original:
                node.text = text
                stats.replacements += 1
        except NodeAccessError as e:
            _LOGGER.debug("Skipping text node: %s", e)

    def _sanitize_element(self, node: Node) -> None:
        for name in SANITIZED_ATTRIBUTES:
            try:
                if not node.has_attribute(name):
                    continue
                value = node.get_attribute(name)
                if not isinstance(value, str):
                    continue
                node.set_attribute(name, self.rules.apply(value))
            except NodeAccessError as e:
                _LOGGER.debug("Skipping attribute %s: %s", name, e)

        try:
            if node.tag.lower() not in VALUE_TAGS:
                return
            value = node.value
            if isinstance(value, str) and value:
                node.value = self.rules.apply(value)
        except NodeAccessError as e:
            _LOGGER.debug("Skipping control value: %s", e)

    def _sanitize_editors(self, root: Node, stats: RunStats) -> None:
        try:
            if root.kind != ELEMENT:
                return
            editors = list(root.query_all(EDITOR_SELECTOR))
            root_is_editor = root.matches(EDITOR_SELECTOR)
        except NodeAccessError as e:
            _LOGGER.debug("Cannot search for editors: %s", e)
            return

        if root_is_editor:
            self._sanitize_editor(root, stats)
        for editor in editors:
            try:
                self._sanitize_editor(editor, stats)
            finally:
                _release(editor)

    def _sanitize_editor(self, editor: Node, stats: RunStats) -> None:
        self._sanitize_editor_lines(editor, stats)
        self._sanitize_editor_input(editor, stats)

    def _sanitize_editor_lines(self, editor: Node, stats: RunStats) -> None:
        try:
            view_lines = editor.query_first(VIEW_LINES_SELECTOR)
            if view_lines is None:
                return
            try:
                lines = list(view_lines.query_all(VIEW_LINE_SELECTOR))
            finally:
                _release(view_lines)
        except NodeAccessError as e:
            _LOGGER.debug("Skipping editor lines: %s", e)
            return

        for line in lines:
            try:
                original = line.inner_html
                if not isinstance(original, str):
                    continue
                markup = self.rules.apply(original)
                if markup != original:
                    line.inner_html = markup
                    stats.editors_modified += 1
                    stats.replacements += 1
            except NodeAccessError as e:
                _LOGGER.debug("Skipping editor line: %s", e)
            finally:
                _release(line)

    def _sanitize_editor_input(self, editor: Node, stats: RunStats) -> None:
        try:
            input_area = editor.query_first(INPUT_AREA_SELECTOR)
            if input_area is None:
                return
        except NodeAccessError as e:
            _LOGGER.debug("Skipping editor input area: %s", e)
            return

        try:
            original = input_area.value
            if not isinstance(original, str) or not original:
                return
            value = self.rules.apply(original)
            if value != original:
                input_area.value = value
                # Counted as an editor change only, not as a replacement
                stats.editors_modified += 1
        except NodeAccessError as e:
            _LOGGER.debug("Skipping editor input area: %s", e)
        finally:
            _release(input_area)


def _release(node: Node) -> None:
    try:
        node.release()
    except NodeAccessError as e:
        _LOGGER.debug("Could not release node: %s", e)


def _tag_of(node: Node) -> str:
    try:
        return node.tag
    except NodeAccessError:
        return "?"


def sanitize(root: Node | PageElement | None, rules: RuleSet | None = None) -> RunStats:
    """Sanitize a tree in place with the given (default: built-in) rules.

    Args:
        root: Root node or BeautifulSoup object, or None
        rules: Rule set to apply; the packaged rules when omitted

    Returns:
        Counters for this run

    Example:
        >>> from frame_redact.tree import parse_html
        >>> doc = parse_html("<p>owner: jagilber</p>")
        >>> sanitize(doc).replacements
        1
    """
    return Sanitizer(rules).sanitize(root)
