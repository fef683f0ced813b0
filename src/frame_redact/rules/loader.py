"""Rule loading utilities.

The replacement rules ship as package data (``rules.json``). This module
reads that file, compiles each entry into a ``Rule`` and caches the
resulting ``RuleSet``.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from frame_redact.rules.ruleset import Rule, RuleSet

_LOGGER = logging.getLogger(__name__)

_BUILTIN_RULES_FILE = "rules.json"

# Loaded rule sets keyed by resolved file path
_rule_cache: dict[str, RuleSet] = {}


class RuleLoadError(Exception):
    """Raised when the rule file cannot be loaded or compiled."""


def _get_builtin_path(filename: str) -> Path:
    """Get path to a file shipped next to this module.

    Args:
        filename: Name of the data file (e.g., "rules.json")

    Returns:
        Path to the packaged file
    """
    return Path(__file__).parent / filename


def load_json_file(path: Path | str) -> dict[str, Any]:
    """Load a JSON file with error handling.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed JSON data

    Raises:
        RuleLoadError: If file cannot be read or parsed
    """
    path_str = str(path)
    try:
        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = json.load(f)
            return data
    except FileNotFoundError as e:
        raise RuleLoadError(f"Rule file not found: {path_str}") from e
    except PermissionError as e:
        raise RuleLoadError(f"Permission denied reading rule file: {path_str}") from e
    except json.JSONDecodeError as e:
        raise RuleLoadError(f"Invalid JSON in rule file {path_str}: {e}") from e


def compile_rule(rule_def: dict[str, Any]) -> Rule:
    """Compile a rule definition.

    Matching is always case-insensitive. Extra flags may be listed by
    their ``re`` attribute name under ``flags``.

    Args:
        rule_def: Dict with 'name', 'regex', 'replacement' and optional
            'flags' and 'guard'

    Returns:
        Compiled rule

    Raises:
        RuleLoadError: If a key is missing or the regex is invalid
    """
    try:
        name = rule_def["name"]
        regex = rule_def["regex"]
        replacement = rule_def["replacement"]
    except KeyError as e:
        raise RuleLoadError(f"Rule definition missing key {e}: {rule_def!r}") from e

    flags = re.IGNORECASE
    for flag_name in rule_def.get("flags", []):
        flag = getattr(re, flag_name, None)
        if flag is not None and isinstance(flag, re.RegexFlag):
            flags |= flag
        else:
            _LOGGER.warning("Unknown regex flag in rule %s: %s", name, flag_name)

    try:
        pattern = re.compile(regex, flags)
    except re.error as e:
        raise RuleLoadError(f"Invalid regex in rule {name}: {e}") from e

    return Rule(name=name, pattern=pattern, replacement=str(replacement), guard=bool(rule_def.get("guard", False)))


def _load_rule_file(path: Path) -> RuleSet:
    data = load_json_file(path)
    rule_defs = data.get("rules")
    if not isinstance(rule_defs, list):
        raise RuleLoadError(f"Rule file {path} has no 'rules' list")
    return RuleSet(tuple(compile_rule(rule_def) for rule_def in rule_defs))


def load_rules() -> RuleSet:
    """Load the built-in ordered rule set.

    Returns:
        The packaged rules, compiled. Cached after the first call.

    Raises:
        RuleLoadError: If the packaged rule file is missing or broken
    """
    path = _get_builtin_path(_BUILTIN_RULES_FILE)
    cache_key = str(path.resolve())
    cached = _rule_cache.get(cache_key)
    if cached is not None:
        return cached

    rules = _load_rule_file(path)
    _LOGGER.debug("Loaded %d rules from %s", len(rules), path)
    _rule_cache[cache_key] = rules
    return rules


def clear_rule_cache() -> None:
    """Clear the rule cache.

    Useful for testing.
    """
    _rule_cache.clear()
