"""Ordered replacement rules.

A rule pairs a case-insensitive regex with a literal replacement. A
``RuleSet`` applies its rules one after another, each rule seeing the
output of the rule before it, so order matters: specific identifiers
must come before generic substrings that could match inside them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rule:
    """A single pattern -> replacement pair.

    Attributes:
        name: Short identifier used in leak reports and logs
        pattern: Compiled regex (always case-insensitive)
        replacement: Literal replacement text (no group references)
        guard: True for rules that only protect text produced by an
            earlier rule and never match original content
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str
    guard: bool = False

    def apply(self, text: str) -> str:
        """Replace every match of this rule in text."""
        replacement = self.replacement
        return self.pattern.sub(lambda _match: replacement, text)


@dataclass(frozen=True)
class RuleSet:
    """Immutable ordered collection of rules."""

    rules: tuple[Rule, ...] = field(default_factory=tuple)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> RuleSet:
        """Build a rule set from (regex, replacement) pairs.

        Handy for tests and one-off scripts. Names are generated from the
        position in the list.
        """
        rules = tuple(
            Rule(name=f"rule_{i}", pattern=re.compile(regex, re.IGNORECASE), replacement=replacement)
            for i, (regex, replacement) in enumerate(pairs)
        )
        return cls(rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def apply(self, text: str) -> str:
        """Apply every rule in order, each to the previous rule's output.

        Args:
            text: Input string

        Returns:
            The string after all rules have run
        """
        for rule in self.rules:
            text = rule.apply(text)
        return text
