"""Construction of fully populated options records.

Every field of ``Options`` carries a default, so a record is complete as
soon as it exists. External loaders (config files, CLI flags, environment)
reduce their sources to builtin values and hand them to ``build_options``;
nothing downstream ever sees a partially initialized record.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import cast

import msgspec

from checker_options.errors import OptionsValidationError
from checker_options.model import Options
from serde_msgspec import convert, to_builtins, validation_error_payload

logger = logging.getLogger(__name__)


def default_options(**overrides: object) -> Options:
    """Return an options record with defaults and keyword overrides.

    Overrides go through the same strict conversion as ``build_options``, so
    enum members, nested records and plain builtin values are all accepted
    while out-of-range values are not.

    Returns
    -------
    Options
        Options record.

    Raises
    ------
    OptionsValidationError
        Raised when an override names an unknown field, has the wrong type,
        violates a bound, or holds an invalid regular expression.
    """
    opts = _convert_options(_override_payload(overrides), context="Invalid options override")
    _log_built(opts, source="defaults")
    return opts


def build_options(payload: Mapping[str, object], *, location: str = "<payload>") -> Options:
    """Build options from builtin values produced by an external loader.

    Parameters
    ----------
    payload
        Mapping of field names to JSON-compatible values. Missing fields take
        their defaults.
    location
        Where the payload came from, used in error messages.

    Returns
    -------
    Options
        Validated options record.

    Raises
    ------
    OptionsValidationError
        Raised when a value has the wrong type, violates a bound, names an
        unknown field, or holds an invalid regular expression.
    """
    opts = _convert_options(payload, context=f"Options validation failed for {location}")
    _log_built(opts, source=location)
    return opts


def with_overrides(opts: Options, **changes: object) -> Options:
    """Return a copy of ``opts`` with ``changes`` applied.

    The original record is left untouched. The merged values are validated
    as strictly as a freshly built record.

    Returns
    -------
    Options
        New options record.

    Raises
    ------
    OptionsValidationError
        Raised when a change names an unknown field, has the wrong type,
        violates a bound, or holds an invalid regular expression.
    """
    base = cast("dict[str, object]", to_builtins(opts))
    payload = base | _override_payload(changes)
    updated = _convert_options(payload, context="Invalid options override")
    _log_built(updated, source="overrides")
    return updated


def _override_payload(overrides: Mapping[str, object]) -> dict[str, object]:
    try:
        return cast("dict[str, object]", to_builtins(dict(overrides)))
    except TypeError as exc:
        msg = f"Invalid options override: {exc}"
        raise OptionsValidationError(msg, details={"summary": str(exc)}) from exc


def _convert_options(payload: Mapping[str, object], *, context: str) -> Options:
    try:
        return convert(dict(payload), target_type=Options, strict=True)
    except msgspec.ValidationError as exc:
        details = validation_error_payload(exc)
        msg = f"{context}: {details.get('summary', exc)}"
        raise OptionsValidationError(msg, details=details) from exc


def _log_built(opts: Options, *, source: str) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built options from %s fingerprint=%s", source, opts.fingerprint())


__all__ = ["build_options", "default_options", "with_overrides"]
