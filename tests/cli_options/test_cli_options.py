"""Tests for the options inspection commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from checker_options import default_options
from cli.commands.options import explain_file, fingerprint_options, show_options
from cli.exit_codes import ExitCode


def _write_overrides(path: Path, payload: dict[str, object]) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_show_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    """Without overrides every default value is printed."""
    assert show_options() == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload["module"] == "node"
    assert payload["component_syntax"] == "off"
    assert payload["format"] == {"bracket_spacing": True, "single_quotes": False}


def test_show_with_overrides(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Override values replace defaults in the printed payload."""
    overrides = _write_overrides(
        tmp_path / "opts.json",
        {"module": "haste", "module_name_mappers": [["^a", "A"]]},
    )
    assert show_options(overrides=overrides) == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload["module"] == "haste"
    assert payload["module_name_mappers"] == [{"pattern": "^a", "replacement": "A"}]


def test_fingerprint_matches_library(capsys: pytest.CaptureFixture[str]) -> None:
    """The printed fingerprint is the record's fingerprint."""
    assert fingerprint_options() == ExitCode.SUCCESS
    assert capsys.readouterr().out.strip() == default_options().fingerprint()


def test_explain_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Per-file decisions reflect the include prefixes."""
    overrides = _write_overrides(
        tmp_path / "opts.json",
        {
            "component_syntax": "parsing",
            "component_syntax_includes": ["src/ui/"],
            "profile": True,
            "quiet": True,
        },
    )
    assert explain_file("src/ui/Button.js", overrides=overrides) == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload["component_syntax_parsed"] is True
    assert payload["component_syntax_typechecked"] is True
    assert payload["should_profile"] is False
    assert payload["jsx_pragma"] is None
    assert payload["haste_name"] is None


def test_invalid_overrides_return_validation_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Rejected values map to the validation exit code."""
    overrides = _write_overrides(tmp_path / "opts.json", {"max_workers": 0})
    assert show_options(overrides=overrides) == ExitCode.VALIDATION_ERROR
    assert "error:" in capsys.readouterr().err


def test_missing_overrides_file_returns_config_exit_code(tmp_path: Path) -> None:
    """A missing overrides file maps to the config exit code."""
    assert fingerprint_options(overrides=tmp_path / "absent.json") == ExitCode.CONFIG_ERROR


def test_malformed_json_returns_config_exit_code(tmp_path: Path) -> None:
    """Malformed JSON maps to the config exit code."""
    path = tmp_path / "opts.json"
    path.write_text("{not json", encoding="utf-8")
    assert show_options(overrides=path) == ExitCode.CONFIG_ERROR


def test_exit_code_from_exception() -> None:
    """Common exceptions map to their exit codes."""
    assert ExitCode.from_exception(FileNotFoundError("x")) is ExitCode.CONFIG_ERROR
    assert ExitCode.from_exception(ValueError("x")) is ExitCode.VALIDATION_ERROR
    assert ExitCode.from_exception(RuntimeError("x")) is ExitCode.GENERAL_ERROR
