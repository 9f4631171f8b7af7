"""Effective behavior derived from the options record.

Every function here is pure and total over a constructed ``Options`` value.
Per-file decisions accept a ``FileKey``, a path string, or any path-like
object.

Path-prefix overrides compare raw strings: a configured prefix ``src/foo``
also covers ``src/foobar/x.js``. Prefixes are not matched on path-segment
boundaries, so include a trailing ``/`` to restrict one to a directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from checker_options.enums import ComponentSyntax
from checker_options.file_key import FileLike, normalized_path
from checker_options.model import Options
from checker_options.patterns import any_pattern_matches, resolve_first_match
from checker_options.records import JsxPragma, JsxReact


def _has_prefix(prefixes: Sequence[str], file: FileLike) -> bool:
    if not prefixes:
        return False
    filename = normalized_path(file)
    return any(filename.startswith(prefix) for prefix in prefixes)


# -----------------------------------------------------------------------------
# Component syntax
# -----------------------------------------------------------------------------


def typecheck_component_syntax(opts: Options) -> bool:
    """Return True when component syntax is fully type checked."""
    match opts.component_syntax:
        case ComponentSyntax.OFF | ComponentSyntax.PARSING:
            return False
        case ComponentSyntax.FULL:
            return True
        case _:
            assert_never(opts.component_syntax)


def parse_component_syntax(opts: Options) -> bool:
    """Return True when component syntax is accepted by the parser."""
    match opts.component_syntax:
        case ComponentSyntax.OFF:
            return False
        case ComponentSyntax.PARSING | ComponentSyntax.FULL:
            return True
        case _:
            assert_never(opts.component_syntax)


def typecheck_component_syntax_in_file(opts: Options, file: FileLike) -> bool:
    """Return True when component syntax is type checked in ``file``.

    The include list only widens the global setting; an empty list leaves it
    unchanged.

    Parameters
    ----------
    opts
        Options record.
    file
        File identifier or path.

    Returns
    -------
    bool
        Global decision, or whether the normalized path starts with any
        configured include prefix.
    """
    return typecheck_component_syntax(opts) or _has_prefix(
        opts.component_syntax_includes, file
    )


def renders_type_validation_in_file(opts: Options, file: FileLike) -> bool:
    """Return True when render types are validated in ``file``."""
    return opts.renders_type_validation or _has_prefix(
        opts.renders_type_validation_includes, file
    )


def strict_es6_import_export_in_file(opts: Options, file: FileLike) -> bool:
    """Return True when ES6 import/export rules are enforced in ``file``."""
    return opts.strict_es6_import_export and not _has_prefix(
        opts.strict_es6_import_export_excludes, file
    )


# -----------------------------------------------------------------------------
# Gating
# -----------------------------------------------------------------------------


def should_profile(opts: Options) -> bool:
    """Return True when profiling output should be produced.

    Quiet mode suppresses profiling regardless of the profile flag.
    """
    return opts.profile and not opts.quiet


def jsx_pragma(opts: Options) -> str | None:
    """Return the custom JSX factory, or None for the standard factory."""
    match opts.jsx:
        case JsxReact():
            return None
        case JsxPragma(pragma=pragma):
            return pragma
        case _:
            assert_never(opts.jsx)


# -----------------------------------------------------------------------------
# Pattern lists
# -----------------------------------------------------------------------------


def map_module_name(opts: Options, name: str) -> str | None:
    """Rewrite a module name with the first matching name mapper.

    Returns
    -------
    str | None
        Rewritten name, or None when no mapper matches.
    """
    rule = resolve_first_match(opts.module_name_mappers, name)
    if rule is None:
        return None
    return rule.apply(name)


def missing_module_generator(opts: Options, name: str) -> str | None:
    """Return the generator configured for a module that cannot be resolved.

    Returns
    -------
    str | None
        Generator of the first matching rule, or None when no rule matches.
        An empty string is a match with an empty generator.
    """
    rule = resolve_first_match(opts.missing_module_generators, name)
    if rule is None:
        return None
    return rule.replacement


def reduce_haste_name(opts: Options, filename: str) -> str | None:
    """Return the Haste module name for ``filename``.

    Returns
    -------
    str | None
        Name produced by the first matching reducer, or None.
    """
    rule = resolve_first_match(opts.haste_name_reducers, filename)
    if rule is None:
        return None
    return rule.apply(filename)


def relay_integration_enabled_in_file(opts: Options, file: FileLike) -> bool:
    """Return True when the Relay integration applies to ``file``."""
    if not opts.enable_relay_integration:
        return False
    return not any_pattern_matches(opts.relay_integration_excludes, normalized_path(file))


def relay_integration_module_prefix_for_file(opts: Options, file: FileLike) -> str | None:
    """Return the Relay module prefix to use for ``file``, if any."""
    prefix = opts.relay_integration_module_prefix
    if prefix is None:
        return None
    if any_pattern_matches(opts.relay_integration_module_prefix_includes, normalized_path(file)):
        return prefix
    return None


# -----------------------------------------------------------------------------
# Rollouts
# -----------------------------------------------------------------------------


def rollout_value(opts: Options, name: str) -> str | None:
    """Return the variant configured for rollout ``name``, None when inactive."""
    return opts.enabled_rollouts.get(name)


def rollout_enabled(opts: Options, name: str, variant: str) -> bool:
    """Return True when rollout ``name`` is set to ``variant``."""
    return rollout_value(opts, name) == variant


__all__ = [
    "jsx_pragma",
    "map_module_name",
    "missing_module_generator",
    "parse_component_syntax",
    "reduce_haste_name",
    "relay_integration_enabled_in_file",
    "relay_integration_module_prefix_for_file",
    "renders_type_validation_in_file",
    "rollout_enabled",
    "rollout_value",
    "should_profile",
    "strict_es6_import_export_in_file",
    "typecheck_component_syntax",
    "typecheck_component_syntax_in_file",
]
