"""Replacement rules for redaction.

This module provides:
- The ordered ``Rule``/``RuleSet`` types
- Loading and compiling of the packaged rule list
"""

from __future__ import annotations

from frame_redact.rules.loader import (
    RuleLoadError,
    clear_rule_cache,
    compile_rule,
    load_json_file,
    load_rules,
)
from frame_redact.rules.ruleset import Rule, RuleSet

__all__ = [
    "Rule",
    "RuleSet",
    "RuleLoadError",
    "clear_rule_cache",
    "compile_rule",
    "load_json_file",
    "load_rules",
]
