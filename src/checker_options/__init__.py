"""Immutable configuration model for the checker.

Example
-------
>>> from checker_options import build_options, decisions
>>> opts = build_options({"component_syntax": "parsing", "profile": True})
>>> decisions.parse_component_syntax(opts), decisions.typecheck_component_syntax(opts)
(True, False)
>>> decisions.should_profile(opts)
True
"""

from checker_options import decisions
from checker_options.builder import build_options, default_options, with_overrides
from checker_options.enums import (
    CastingSyntax,
    ChannelMode,
    ComponentSyntax,
    ModuleSystem,
    ReactRuntime,
    SavedStateFetcher,
    Severity,
)
from checker_options.errors import OptionsError, OptionsTransportError, OptionsValidationError
from checker_options.file_key import FileKey, FileKind
from checker_options.lint import LintSettings, StrictModeSettings
from checker_options.model import Options
from checker_options.patterns import PatternRule
from checker_options.records import (
    FileOptions,
    FormatOptions,
    GcControl,
    JsxMode,
    JsxPragma,
    JsxReact,
    LogSaving,
    SlowToCheckLogging,
    VerboseOptions,
)
from checker_options.transport import decode_options, encode_options

__all__ = [
    "CastingSyntax",
    "ChannelMode",
    "ComponentSyntax",
    "FileKey",
    "FileKind",
    "FileOptions",
    "FormatOptions",
    "GcControl",
    "JsxMode",
    "JsxPragma",
    "JsxReact",
    "LintSettings",
    "LogSaving",
    "ModuleSystem",
    "Options",
    "OptionsError",
    "OptionsTransportError",
    "OptionsValidationError",
    "PatternRule",
    "ReactRuntime",
    "SavedStateFetcher",
    "Severity",
    "SlowToCheckLogging",
    "StrictModeSettings",
    "VerboseOptions",
    "build_options",
    "decisions",
    "decode_options",
    "default_options",
    "encode_options",
    "with_overrides",
]
