"""Ordered pattern/replacement lists with first-match-wins lookup."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from serde_msgspec import StructBaseStrict


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Return the compiled form of ``pattern``, cached per process.

    Raises
    ------
    ValueError
        Raised when the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        msg = f"Invalid regular expression {pattern!r}: {exc}"
        raise ValueError(msg) from exc


def validate_patterns(patterns: Iterable[str]) -> None:
    """Compile every pattern so invalid ones fail at construction time."""
    for pattern in patterns:
        compile_pattern(pattern)


class PatternRule(StructBaseStrict, frozen=True, array_like=True):
    """Regular expression paired with a replacement or target value.

    Encoded as a two-element array, matching how the pairs are written in
    configuration files.
    """

    pattern: str
    replacement: str

    def __post_init__(self) -> None:
        compile_pattern(self.pattern)

    @property
    def regex(self) -> re.Pattern[str]:
        """Compiled pattern."""
        return compile_pattern(self.pattern)

    def matches(self, text: str) -> bool:
        """Return True when the pattern matches at the start of ``text``."""
        return self.regex.match(text) is not None

    def apply(self, text: str) -> str:
        """Substitute every occurrence of the pattern with the replacement.

        ``\\1`` style back-references in the replacement are expanded.

        Returns
        -------
        str
            Rewritten text.
        """
        return self.regex.sub(self.replacement, text)


def resolve_first_match(rules: Sequence[PatternRule], text: str) -> PatternRule | None:
    """Return the first rule matching ``text``, scanning in configured order.

    Returns
    -------
    PatternRule | None
        Matching rule, or None when no rule matches.
    """
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def any_pattern_matches(patterns: Sequence[str], text: str) -> bool:
    """Return True when any pattern matches at the start of ``text``."""
    return any(compile_pattern(pattern).match(text) is not None for pattern in patterns)


__all__ = [
    "PatternRule",
    "any_pattern_matches",
    "compile_pattern",
    "resolve_first_match",
    "validate_patterns",
]
