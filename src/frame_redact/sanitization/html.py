"""HTML string helpers.

Thin wrappers that parse saved page markup with BeautifulSoup, run
the sanitizer, and serialize the result. Also provides a leak check that
reports any sensitive literal still present in a piece of content, for
use before a capture is shared.
"""

from __future__ import annotations

from dataclasses import dataclass

from frame_redact.rules import RuleSet, load_rules
from frame_redact.sanitization.sanitizer import RunStats, Sanitizer
from frame_redact.tree import parse_html, to_html


@dataclass
class Leak:
    """A sensitive literal found in content.

    Attributes:
        rule: Name of the rule whose pattern matched
        match: The matched text
        line: 1-based line number of the match
        filename: Source filename, empty if not from a file
    """

    rule: str
    match: str
    line: int
    filename: str = ""


def sanitize_html(markup: str, *, rules: RuleSet | None = None) -> tuple[str, RunStats]:
    """Remove sensitive identifiers from an HTML document.

    Args:
        markup: Page or frame HTML (e.g. saved from DevTools)
        rules: Rule set to apply; the packaged rules when omitted

    Returns:
        Tuple of (sanitized HTML, run counters). Empty input is returned
        as is; anything else comes back as a complete document.

    Example:
        >>> html, stats = sanitize_html("<p>sfjagilber1nt3so</p>")
        >>> "<p>servicefabriccluster</p>" in html
        True
    """
    if not markup:
        return markup, RunStats()
    document = parse_html(markup)
    stats = Sanitizer(rules).sanitize(document)
    return to_html(document), stats


def find_leaks(
    content: str,
    filename: str = "",
    *,
    rules: RuleSet | None = None,
) -> list[Leak]:
    """Check content for sensitive literals the rules would replace.

    Guard rules only match text that is already a replacement and are
    skipped.

    Args:
        content: Text to check (HTML or anything else)
        filename: Optional filename for context in reports
        rules: Rule set to check against; the packaged rules when omitted

    Returns:
        One Leak per match, ordered by rule then position
    """
    if rules is None:
        rules = load_rules()

    leaks: list[Leak] = []
    for rule in rules:
        if rule.guard:
            continue
        for match in rule.pattern.finditer(content):
            line_num = content.count("\n", 0, match.start()) + 1
            leaks.append(Leak(rule=rule.name, match=match.group(0), line=line_num, filename=filename))
    return leaks
