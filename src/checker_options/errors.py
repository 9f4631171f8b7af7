"""Exceptions raised while constructing or transferring options."""

from __future__ import annotations

from collections.abc import Mapping


class OptionsError(ValueError):
    """Base class for options construction failures."""


class OptionsValidationError(OptionsError):
    """Raised when a field value is rejected while building options.

    Parameters
    ----------
    message
        Human-readable summary.
    details
        Normalized validation payload (type, summary, and optional path).
    """

    def __init__(self, message: str, *, details: Mapping[str, str] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, str] = dict(details or {})


class OptionsTransportError(OptionsError):
    """Raised when a transferred options payload cannot be reconstructed."""


__all__ = ["OptionsError", "OptionsTransportError", "OptionsValidationError"]
