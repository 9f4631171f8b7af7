"""Lint severity table and strict-mode settings."""

from __future__ import annotations

from collections.abc import Mapping

import msgspec

from checker_options.enums import Severity
from serde_msgspec import StructBaseStrict
from utils.mappings import freeze_mapping


class LintSettings(StructBaseStrict, frozen=True):
    """Per-rule lint severities with a fallback for unlisted rules."""

    default_severity: Severity = Severity.OFF
    rules: Mapping[str, Severity] = msgspec.field(default_factory=dict)

    def __post_init__(self) -> None:
        msgspec.structs.force_setattr(self, "rules", freeze_mapping(self.rules))

    def severity_of(self, rule: str) -> Severity:
        """Return the configured severity of ``rule``.

        Returns
        -------
        Severity
            Explicit severity, or the default when the rule is not listed.
        """
        return self.rules.get(rule, self.default_severity)

    def is_enabled(self, rule: str) -> bool:
        """Return True when ``rule`` reports at warning level or above."""
        return self.severity_of(rule) is not Severity.OFF

    def explicit_rules(self) -> tuple[str, ...]:
        """Return the rules with an explicit severity, sorted by name."""
        return tuple(sorted(self.rules))


class StrictModeSettings(StructBaseStrict, frozen=True):
    """Lints promoted to errors in files marked as strict."""

    lints: frozenset[str] = frozenset()

    def is_strict(self, lint: str) -> bool:
        """Return True when ``lint`` is enforced in strict files."""
        return lint in self.lints


__all__ = ["LintSettings", "StrictModeSettings"]
