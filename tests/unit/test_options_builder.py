"""Tests for options construction."""

from __future__ import annotations

import logging

import pytest

from checker_options import (
    ComponentSyntax,
    FormatOptions,
    JsxPragma,
    OptionsError,
    OptionsValidationError,
    PatternRule,
    build_options,
    default_options,
    with_overrides,
)


def test_build_options_applies_defaults_for_missing_fields() -> None:
    """Fields absent from the payload take their defaults."""
    opts = build_options({"max_workers": 4})
    assert opts.max_workers == 4
    assert opts == default_options(max_workers=4)


@pytest.mark.parametrize(
    "payload",
    [
        {"max_workers": "4"},
        {"component_syntax": "sometimes"},
        {"quiet": 1},
        {"format": {"bracket_spacing": "yes"}},
    ],
)
def test_build_options_rejects_wrong_types(payload: dict[str, object]) -> None:
    """Values are converted strictly, without coercion."""
    with pytest.raises(OptionsValidationError):
        build_options(payload)


@pytest.mark.parametrize(
    "payload",
    [
        {"max_workers": 0},
        {"recursion_limit": 0},
        {"traces": -1},
        {"max_seconds_for_check_per_worker": -0.5},
        {"log_saving": {"check": {"threshold_time_ms": 10, "rate": 150.0}}},
    ],
)
def test_build_options_rejects_out_of_bound_values(payload: dict[str, object]) -> None:
    """Bounded scalars are checked when the record is built."""
    with pytest.raises(OptionsValidationError):
        build_options(payload)


def test_build_options_rejects_unknown_fields() -> None:
    """Unknown keys are errors rather than silently ignored."""
    with pytest.raises(OptionsValidationError) as excinfo:
        build_options({"max_wrokers": 4}, location="opts.json")
    assert "opts.json" in str(excinfo.value)
    assert excinfo.value.details["type"] == "ValidationError"


def test_validation_error_is_an_options_error() -> None:
    """Construction failures share one base class derived from ValueError."""
    with pytest.raises(OptionsError):
        build_options({"quiet": "no"})
    with pytest.raises(ValueError, match="Invalid options override"):
        default_options(not_a_field=True)


def test_with_overrides_returns_new_record() -> None:
    """Overrides produce a new record and leave the original unchanged."""
    base = default_options()
    updated = with_overrides(
        base,
        component_syntax=ComponentSyntax.FULL,
        format=FormatOptions(single_quotes=True),
    )
    assert base.component_syntax is ComponentSyntax.OFF
    assert base.format_single_quotes is False
    assert updated.component_syntax is ComponentSyntax.FULL
    assert updated.format_single_quotes is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"component_syntax": "bogus"},
        {"max_workers": 0},
        {"traces": -1},
        {"quiet": "yes"},
    ],
)
def test_keyword_builders_validate_values(overrides: dict[str, object]) -> None:
    """Keyword builders reject out-of-enum and out-of-bound values."""
    with pytest.raises(OptionsValidationError):
        default_options(**overrides)
    with pytest.raises(OptionsValidationError):
        with_overrides(default_options(), **overrides)


def test_with_overrides_keeps_existing_values() -> None:
    """Fields not named in the changes carry over from the base record."""
    base = default_options(
        enabled_rollouts={"a": "on"},
        module_name_mappers=(PatternRule(pattern="^a", replacement="A"),),
        jsx=JsxPragma(pragma="h"),
    )
    updated = with_overrides(base, quiet=True)
    assert updated == default_options(
        quiet=True,
        enabled_rollouts={"a": "on"},
        module_name_mappers=base.module_name_mappers,
        jsx=JsxPragma(pragma="h"),
    )
    assert updated.enabled_rollouts == {"a": "on"}
    assert updated.jsx == JsxPragma(pragma="h")
    assert not base.quiet


def test_with_overrides_validates_patterns() -> None:
    """Overrides with invalid regular expressions are rejected."""
    with pytest.raises(OptionsValidationError):
        with_overrides(default_options(), relay_integration_excludes=("(",))


def test_build_logs_fingerprint_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Construction reports the fingerprint of the new record."""
    with caplog.at_level(logging.DEBUG, logger="checker_options.builder"):
        opts = build_options({"debug": True}, location="test-payload")
    assert f"fingerprint={opts.fingerprint()}" in caplog.text
    assert "test-payload" in caplog.text
