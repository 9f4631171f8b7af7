"""Options inspection commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import msgspec
from cyclopts import Parameter

from checker_options import Options, build_options, decisions, default_options
from checker_options.errors import OptionsError
from checker_options.model import effective_payload
from cli.exit_codes import ExitCode
from serde_msgspec import dumps_json, loads_json

logger = logging.getLogger(__name__)

OverridesParam = Annotated[
    Path | None,
    Parameter(
        name="--overrides",
        help="JSON object of option values applied over the defaults.",
    ),
]


def load_options(overrides: Path | None) -> Options:
    """Return defaults, or defaults with the values from an overrides file.

    Parameters
    ----------
    overrides
        Optional path to a JSON object of field values.

    Returns
    -------
    Options
        Effective options record.
    """
    if overrides is None:
        return default_options()
    payload = loads_json(overrides.read_bytes(), target_type=dict[str, object])
    return build_options(payload, location=str(overrides))


def _load_or_exit_code(overrides: Path | None) -> Options | int:
    try:
        return load_options(overrides)
    except (OptionsError, OSError, msgspec.DecodeError) as exc:
        logger.error("Failed to load options: %s", exc)
        sys.stderr.write(f"error: {exc}\n")
        return int(ExitCode.from_exception(exc))


def _write_json(payload: object) -> None:
    sys.stdout.write(dumps_json(payload, pretty=True).decode("utf-8") + "\n")


def show_options(*, overrides: OverridesParam = None) -> int:
    """Show every effective option value as JSON.

    Returns:
    -------
    int
        Exit status code.
    """
    opts = _load_or_exit_code(overrides)
    if isinstance(opts, int):
        return opts
    _write_json(effective_payload(opts))
    return int(ExitCode.SUCCESS)


def fingerprint_options(*, overrides: OverridesParam = None) -> int:
    """Print the fingerprint of the effective options.

    Returns:
    -------
    int
        Exit status code.
    """
    opts = _load_or_exit_code(overrides)
    if isinstance(opts, int):
        return opts
    sys.stdout.write(opts.fingerprint() + "\n")
    return int(ExitCode.SUCCESS)


def explain_file(path: str, /, *, overrides: OverridesParam = None) -> int:
    """Show every per-file decision for ``path`` as JSON.

    Returns:
    -------
    int
        Exit status code.
    """
    opts = _load_or_exit_code(overrides)
    if isinstance(opts, int):
        return opts
    _write_json(explain_payload(opts, path))
    return int(ExitCode.SUCCESS)


def explain_payload(opts: Options, path: str) -> dict[str, object]:
    """Return the decisions that apply to ``path`` under ``opts``.

    Returns
    -------
    dict[str, object]
        Decision name to effective value.
    """
    return {
        "path": path,
        "component_syntax_parsed": decisions.parse_component_syntax(opts),
        "component_syntax_typechecked": decisions.typecheck_component_syntax_in_file(
            opts, path
        ),
        "renders_type_validation": decisions.renders_type_validation_in_file(opts, path),
        "strict_es6_import_export": decisions.strict_es6_import_export_in_file(opts, path),
        "relay_integration": decisions.relay_integration_enabled_in_file(opts, path),
        "relay_module_prefix": decisions.relay_integration_module_prefix_for_file(opts, path),
        "haste_name": decisions.reduce_haste_name(opts, path),
        "should_profile": decisions.should_profile(opts),
        "jsx_pragma": decisions.jsx_pragma(opts),
    }


__all__ = [
    "explain_file",
    "explain_payload",
    "fingerprint_options",
    "load_options",
    "show_options",
]
