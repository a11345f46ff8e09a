"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/pattern.py
Translates shell-style file name masks into full-match regular expressions.

Rules:
- '.' is literal
- '*' matches zero or more characters
- '?' matches exactly one character
Everything else is passed through as regular expression syntax.
"""

import re
from functools import lru_cache
from typing import Pattern

from bayan.core.errors import ConfigurationError


def wildcard_to_regex(mask: str) -> str:
    """
    Examples:
        "*.txt"       → ".*\\.txt"
        "report?.csv" → "report.\\.csv"
    """
    regex = mask.replace(".", r"\.")
    regex = regex.replace("*", ".*")
    return regex.replace("?", ".")


@lru_cache(maxsize=128)
def compile_mask(mask: str) -> Pattern[str]:
    """Compile a name mask, failing fast on an invalid expression."""
    regex = wildcard_to_regex(mask)
    try:
        return re.compile(regex)
    except re.error as e:
        raise ConfigurationError(f"Invalid name pattern '{mask}': {e}") from e


def matches_mask(filename: str, mask: str) -> bool:
    """Full-string match of a file name against a mask (not a substring search)."""
    return compile_mask(mask).fullmatch(filename) is not None
