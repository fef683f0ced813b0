"""Live browser frame sanitization using Playwright.

Attaches to a Chromium instance that is already running with remote
debugging enabled (``--remote-debugging-port``), picks the frame showing
the page to be captured and sanitizes its DOM in place. Nothing is
navigated or reloaded: the sanitizer sees the document exactly as the
user left it.

Requires the 'live' optional dependency: pip install frame-redact[live]
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from frame_redact.live.deps import check_playwright, missing_playwright_message
from frame_redact.rules import RuleSet
from frame_redact.sanitization import RunStats, Sanitizer
from frame_redact.tree import COMMENT, ELEMENT, TEXT, NodeAccessError

if TYPE_CHECKING:
    from playwright.sync_api import Frame, JSHandle

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")

# DOM nodeType values
_NODE_TYPES = {1: ELEMENT, 3: TEXT, 8: COMMENT}


class LiveAttachError(Exception):
    """Raised when a live browser frame cannot be reached."""


def _guard(call: Callable[[], _T]) -> _T:
    """Run a Playwright call, turning driver errors into NodeAccessError."""
    from playwright.sync_api import Error as PlaywrightError

    try:
        return call()
    except PlaywrightError as e:
        raise NodeAccessError(str(e)) from e


class LiveNode:
    """Node interface over a Playwright handle to a DOM node.

    Every property read or write is one round trip to the browser. The
    node kind and tag are cached since they never change for a node. The
    sanitizer releases each handle it reaches once the node is visited.
    """

    def __init__(self, handle: JSHandle) -> None:
        self.handle = handle
        self._kind: str | None = None
        self._tag: str | None = None

    def __repr__(self) -> str:
        return f"LiveNode({self.handle!r})"

    def _eval(self, expression: str, arg: Any = None) -> Any:
        return _guard(lambda: self.handle.evaluate(expression, arg))

    def _nodes(self, expression: str, arg: Any = None) -> list[LiveNode]:
        """Evaluate an expression returning an array of nodes."""

        def _collect() -> list[LiveNode]:
            array = self.handle.evaluate_handle(expression, arg)
            try:
                properties = array.get_properties()
            finally:
                array.dispose()
            ordered = sorted((int(key), value) for key, value in properties.items() if key.isdigit())
            return [LiveNode(value) for _, value in ordered]

        return _guard(_collect)

    @property
    def kind(self) -> str:
        if self._kind is None:
            node_type = self._eval("n => n.nodeType")
            self._kind = _NODE_TYPES.get(node_type, "other")
        return self._kind

    @property
    def text(self) -> str | None:
        result: str | None = self._eval("n => n.textContent")
        return result

    @text.setter
    def text(self, value: str) -> None:
        self._eval("(n, v) => { n.textContent = v; }", value)

    @property
    def tag(self) -> str:
        if self._tag is None:
            self._tag = str(self._eval("n => n.tagName || ''")).lower()
        return self._tag

    @property
    def children(self) -> list[LiveNode]:
        return self._nodes("n => Array.from(n.childNodes)")

    def has_attribute(self, name: str) -> bool:
        return bool(self._eval("(n, a) => n.hasAttribute(a)", name))

    def get_attribute(self, name: str) -> str | None:
        result: str | None = self._eval("(n, a) => n.getAttribute(a)", name)
        return result

    def set_attribute(self, name: str, value: str) -> None:
        self._eval("(n, [a, v]) => { n.setAttribute(a, v); }", [name, value])

    @property
    def value(self) -> str | None:
        result = self._eval("n => (typeof n.value === 'string' ? n.value : null)")
        return result if isinstance(result, str) else None

    @value.setter
    def value(self, value: str) -> None:
        self._eval("(n, v) => { n.value = v; }", value)

    @property
    def inner_html(self) -> str:
        return str(self._eval("n => n.innerHTML"))

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        self._eval("(n, v) => { n.innerHTML = v; }", markup)

    def matches(self, selector: str) -> bool:
        return bool(self._eval("(n, s) => n.nodeType === 1 && n.matches(s)", selector))

    def query_all(self, selector: str) -> list[LiveNode]:
        return self._nodes("(n, s) => Array.from(n.querySelectorAll(s))", selector)

    def query_first(self, selector: str) -> LiveNode | None:
        def _first() -> LiveNode | None:
            handle = self.handle.evaluate_handle("(n, s) => n.querySelector(s)", selector)
            element = handle.as_element()
            if element is None:
                handle.dispose()
                return None
            return LiveNode(element)

        return _guard(_first)

    def release(self) -> None:
        """Dispose the remote handle. The node must not be used afterwards."""
        _guard(self.handle.dispose)


@dataclass
class LiveResult:
    """Result of sanitizing a live frame.

    Attributes:
        stats: Sanitizer counters (None if sanitization did not run)
        frame_url: URL of the frame that was sanitized
        success: True if the frame was sanitized
        error: Error message if it was not
    """

    stats: RunStats | None = None
    frame_url: str | None = None
    success: bool = True
    error: str | None = None


def sanitize_frame(frame: Frame, rules: RuleSet | None = None) -> RunStats:
    """Sanitize the body of a live frame in place.

    Args:
        frame: Playwright frame
        rules: Rule set to apply; the packaged rules when omitted

    Returns:
        Counters for this run

    Raises:
        NodeAccessError: If the frame document cannot be evaluated
    """
    sanitizer = Sanitizer(rules)
    body = _guard(lambda: frame.evaluate_handle("() => document.body"))
    element = body.as_element()
    if element is None:
        _LOGGER.warning("Frame %s has no body", frame.url)
        return sanitizer.sanitize(None)

    root = LiveNode(element)
    stats = sanitizer.sanitize(root)
    try:
        root.release()
    except NodeAccessError as e:
        _LOGGER.debug("Could not release frame body: %s", e)
    return stats


def select_frame(
    frames: list[Frame],
    frame_url: str | None = None,
    frame_name: str | None = None,
) -> Frame | None:
    """Pick a frame by name or URL substring.

    With neither given, the first frame is returned. Name wins over URL
    when both are given.

    Args:
        frames: Candidate frames, main frames first
        frame_url: Substring the frame URL must contain
        frame_name: Exact frame name (the iframe's ``name`` attribute)

    Returns:
        The matching frame, or None
    """
    if frame_name is not None:
        return next((frame for frame in frames if frame.name == frame_name), None)
    if frame_url is not None:
        return next((frame for frame in frames if frame_url in frame.url), None)
    return frames[0] if frames else None


def attach_and_sanitize(
    cdp_url: str,
    frame_url: str | None = None,
    frame_name: str | None = None,
    rules: RuleSet | None = None,
) -> LiveResult:
    """Attach to a running browser over CDP and sanitize one frame.

    The browser is left running; only the Playwright connection is closed.

    Args:
        cdp_url: DevTools endpoint, e.g. "http://localhost:9222"
        frame_url: Substring of the target frame URL
        frame_name: Name of the target frame
        rules: Rule set to apply; the packaged rules when omitted

    Returns:
        LiveResult describing what was sanitized

    Example:
        >>> result = attach_and_sanitize("http://localhost:9222", frame_url="reactblade")
        >>> print(result.stats.summary())
    """
    if not check_playwright():
        return LiveResult(success=False, error=missing_playwright_message())

    from playwright.sync_api import Error as PlaywrightError
    from playwright.sync_api import sync_playwright

    try:
        with sync_playwright() as p:
            browser = p.chromium.connect_over_cdp(cdp_url)
            frames: list[Frame] = []
            for context in browser.contexts:
                for page in context.pages:
                    frames.extend(page.frames)

            if not frames:
                raise LiveAttachError(f"No open pages found at {cdp_url}")

            frame = select_frame(frames, frame_url=frame_url, frame_name=frame_name)
            if frame is None:
                wanted = frame_name if frame_name is not None else frame_url
                raise LiveAttachError(f"No frame matching {wanted!r} among {len(frames)} frames")

            _LOGGER.info("Sanitizing frame %s", frame.url)
            stats = sanitize_frame(frame, rules)
            return LiveResult(stats=stats, frame_url=frame.url)
    except (LiveAttachError, NodeAccessError) as e:
        return LiveResult(success=False, error=str(e))
    except PlaywrightError as e:
        return LiveResult(success=False, error=f"Cannot attach to {cdp_url}: {e}")
