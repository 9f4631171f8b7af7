"""The immutable options record shared by every checker component."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, cast

import msgspec

from checker_options.enums import (
    CastingSyntax,
    ChannelMode,
    ComponentSyntax,
    ModuleSystem,
    ReactRuntime,
    SavedStateFetcher,
    Severity,
)
from checker_options.lint import LintSettings, StrictModeSettings
from checker_options.patterns import PatternRule, validate_patterns
from checker_options.records import (
    FileOptions,
    FormatOptions,
    GcControl,
    JsxMode,
    JsxReact,
    LogSaving,
    NonNegFloat,
    NonNegInt,
    SlowToCheckLogging,
    VerboseOptions,
)
from core.config_base import config_fingerprint
from serde_msgspec import StructBaseStrict, to_builtins
from utils.mappings import freeze_mapping

PositiveInt = Annotated[int, msgspec.Meta(ge=1)]

OPTIONS_FINGERPRINT_VERSION = 1

DEFAULT_CONFIG_NAME = ".checkerconfig"
DEFAULT_TEMP_DIR = "/tmp/checker"
DEFAULT_SUPPRESS_TYPES: frozenset[str] = frozenset({"$CheckerFixMe"})
DEFAULT_HASTE_PATHS_INCLUDES: tuple[str, ...] = ("<PROJECT_ROOT>/.*",)


class Options(StructBaseStrict, frozen=True):
    """Every runtime-tunable setting of the checker.

    Built once per process and never mutated. Fields are read directly; the
    properties below cover accessors whose name differs from the field or
    that reach into a nested record. Derived decisions combining several
    fields live in :mod:`checker_options.decisions`.
    """

    all: bool = False
    any_propagation: bool = True
    autoimports: bool = True
    autoimports_ranked_by_usage: bool = True
    automatic_require_default: bool = False
    babel_loose_array_spread: bool = False
    casting_syntax: CastingSyntax = CastingSyntax.BOTH
    channel_mode: ChannelMode = ChannelMode.PIPE
    component_syntax: ComponentSyntax = ComponentSyntax.OFF
    component_syntax_includes: tuple[str, ...] = ()
    component_syntax_deep_read_only: bool = False
    config_hash: str = ""
    config_name: str = DEFAULT_CONFIG_NAME
    debug: bool = False
    direct_dependent_files_fix: bool = False
    distributed: bool = False
    enable_const_params: bool = False
    enable_relay_integration: bool = False
    enabled_rollouts: Mapping[str, str] = msgspec.field(default_factory=dict)
    enforce_strict_call_arity: bool = True
    enums: bool = False
    estimate_recheck_time: bool = True
    exact_by_default: bool = True
    facebook_fbs: str | None = None
    facebook_fbt: str | None = None
    facebook_module_interop: bool = False
    file_options: FileOptions = msgspec.field(default_factory=FileOptions)
    format: FormatOptions = msgspec.field(default_factory=FormatOptions)
    gc_worker: GcControl = msgspec.field(default_factory=GcControl)
    global_find_ref: bool = False
    global_rename: bool = False
    haste_module_ref_prefix: str | None = None
    haste_module_ref_prefix_legacy_interop: str | None = None
    haste_name_reducers: tuple[PatternRule, ...] = ()
    haste_paths_excludes: tuple[str, ...] = ()
    haste_paths_includes: tuple[str, ...] = DEFAULT_HASTE_PATHS_INCLUDES
    ignore_non_literal_requires: bool = False
    include_suppressions: bool = False
    include_warnings: bool = False
    incremental_error_collation: bool = False
    jsx: JsxMode = msgspec.field(default_factory=JsxReact)
    lazy_mode: bool = False
    lint_severities: LintSettings = msgspec.field(default_factory=LintSettings)
    log_file: str = ""
    log_saving: Mapping[str, LogSaving] = msgspec.field(default_factory=dict)
    long_lived_workers: bool = False
    max_files_checked_per_worker: PositiveInt = 100
    max_header_tokens: NonNegInt = 10
    max_literal_length: NonNegInt = 100
    max_seconds_for_check_per_worker: NonNegFloat = 5.0
    max_workers: PositiveInt = 1
    merge_timeout: NonNegFloat | None = 100.0
    missing_module_generators: tuple[PatternRule, ...] = ()
    module: ModuleSystem = ModuleSystem.NODE
    module_name_mappers: tuple[PatternRule, ...] = ()
    modules_are_use_strict: bool = False
    munge_underscores: bool = False
    node_main_fields: tuple[str, ...] = ("main",)
    node_resolver_allow_root_relative: bool = False
    node_resolver_root_relative_dirnames: tuple[str, ...] = ("",)
    profile: bool = False
    quiet: bool = False
    react_runtime: ReactRuntime = ReactRuntime.CLASSIC
    recursion_limit: PositiveInt = 10000
    relay_integration_excludes: tuple[str, ...] = ()
    relay_integration_module_prefix: str | None = None
    relay_integration_module_prefix_includes: tuple[str, ...] = ()
    renders_type_validation: bool = False
    renders_type_validation_includes: tuple[str, ...] = ()
    root: str = "."
    root_name: str | None = None
    saved_state_allow_reinit: bool = True
    saved_state_fetcher: SavedStateFetcher = SavedStateFetcher.DUMMY
    saved_state_force_recheck: bool = False
    saved_state_no_fallback: bool = False
    saved_state_skip_version_check: bool = False
    saved_state_verify: bool = False
    slow_to_check_logging: SlowToCheckLogging = msgspec.field(
        default_factory=SlowToCheckLogging
    )
    strict_es6_import_export: bool = False
    strict_es6_import_export_excludes: tuple[str, ...] = ()
    strict_mode: StrictModeSettings = msgspec.field(default_factory=StrictModeSettings)
    strip_root: bool = False
    suppress_types: frozenset[str] = DEFAULT_SUPPRESS_TYPES
    temp_dir: str = DEFAULT_TEMP_DIR
    traces: NonNegInt = 0
    use_mixed_in_catch_variables: bool = False
    verbose: VerboseOptions | None = None
    wait_for_recheck: bool = False

    def __post_init__(self) -> None:
        """Freeze mapping fields and reject regular expressions that would fail."""
        for name in ("enabled_rollouts", "log_saving"):
            msgspec.structs.force_setattr(self, name, freeze_mapping(getattr(self, name)))
        validate_patterns(self.relay_integration_excludes)
        validate_patterns(self.relay_integration_module_prefix_includes)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def module_system(self) -> ModuleSystem:
        """Module resolution strategy."""
        return self.module

    @property
    def is_debug_mode(self) -> bool:
        """Whether debug output is enabled."""
        return self.debug

    @property
    def is_quiet(self) -> bool:
        """Whether non-essential output is suppressed."""
        return self.quiet

    @property
    def max_trace_depth(self) -> int:
        """Depth of error traces, 0 when tracing is off."""
        return self.traces

    @property
    def format_bracket_spacing(self) -> bool:
        """Whether printed object literals pad their braces."""
        return self.format.bracket_spacing

    @property
    def format_single_quotes(self) -> bool:
        """Whether printed strings prefer single quotes."""
        return self.format.single_quotes

    @property
    def should_ignore_non_literal_requires(self) -> bool:
        """Whether `require` calls with computed arguments are skipped."""
        return self.ignore_non_literal_requires

    @property
    def should_include_warnings(self) -> bool:
        """Whether warnings are reported alongside errors."""
        return self.include_warnings

    @property
    def should_munge_underscores(self) -> bool:
        """Whether underscore-prefixed class members are treated as private."""
        return self.munge_underscores

    @property
    def should_strip_root(self) -> bool:
        """Whether reported paths are made relative to the project root."""
        return self.strip_root

    def lint_severity(self, rule: str) -> Severity:
        """Return the effective severity of a lint rule."""
        return self.lint_severities.severity_of(rule)

    # ------------------------------------------------------------------
    # Fingerprinting
    # ------------------------------------------------------------------

    def fingerprint_payload(self) -> Mapping[str, object]:
        """Return a canonical payload covering every top-level field.

        Returns
        -------
        Mapping[str, object]
            Versioned payload with one entry per field, defaults included.
        """
        return {
            "version": OPTIONS_FINGERPRINT_VERSION,
            "options": effective_payload(self),
        }

    def fingerprint(self) -> str:
        """Return a deterministic fingerprint of the record.

        Returns
        -------
        str
            SHA-256 hexdigest identical in every process holding an equal record.
        """
        return config_fingerprint(self.fingerprint_payload())


def _expand(value: object) -> object:
    if isinstance(value, msgspec.Struct):
        expanded: dict[str, object] = {}
        tag = value.__struct_config__.tag
        if tag is not None:
            expanded[value.__struct_config__.tag_field] = tag
        for name in value.__struct_fields__:
            expanded[name] = _expand(getattr(value, name))
        return expanded
    if isinstance(value, tuple):
        return [_expand(item) for item in value]
    if isinstance(value, frozenset):
        return sorted(value)
    if isinstance(value, Mapping):
        return {key: _expand(item) for key, item in value.items()}
    return value


def effective_payload(opts: Options) -> dict[str, object]:
    """Return every field of ``opts`` as builtins, defaults included.

    Unlike the wire encoding, nested records are expanded in full so two
    records compare equal here only when every leaf value is equal.

    Returns
    -------
    dict[str, object]
        JSON-compatible mapping keyed by field name.
    """
    return cast("dict[str, object]", to_builtins(_expand(opts), str_keys=True))


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_HASTE_PATHS_INCLUDES",
    "DEFAULT_SUPPRESS_TYPES",
    "DEFAULT_TEMP_DIR",
    "OPTIONS_FINGERPRINT_VERSION",
    "Options",
    "effective_payload",
    "PositiveInt",
]
