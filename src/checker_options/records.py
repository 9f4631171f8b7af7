"""Nested sub-records owned by the options record."""

from __future__ import annotations

from typing import Annotated

import msgspec

from serde_msgspec import StructBaseStrict

NonNegInt = Annotated[int, msgspec.Meta(ge=0)]
NonNegFloat = Annotated[float, msgspec.Meta(ge=0.0)]
Percentage = Annotated[float, msgspec.Meta(ge=0.0, le=100.0)]

DEFAULT_MODULE_FILE_EXTS: tuple[str, ...] = (".js", ".jsx", ".mjs", ".cjs", ".json")
DEFAULT_MODULE_RESOURCE_EXTS: tuple[str, ...] = (
    ".css",
    ".jpg",
    ".png",
    ".gif",
    ".eot",
    ".svg",
    ".ttf",
    ".woff",
    ".woff2",
    ".mp4",
    ".webm",
    ".webp",
)
DEFAULT_NODE_RESOLVER_DIRNAMES: tuple[str, ...] = ("node_modules",)


class FormatOptions(StructBaseStrict, frozen=True):
    """Output formatting preferences for generated code."""

    bracket_spacing: bool = True
    single_quotes: bool = False


class GcControl(StructBaseStrict, frozen=True):
    """Garbage collector tuning for worker processes.

    ``None`` leaves the runtime default in place.
    """

    minor_heap_size: NonNegInt | None = None
    major_heap_increment: NonNegInt | None = None
    space_overhead: NonNegInt | None = None
    window_size: NonNegInt | None = None
    custom_major_ratio: NonNegInt | None = None
    custom_minor_ratio: NonNegInt | None = None
    custom_minor_max_size: NonNegInt | None = None


class LogSaving(StructBaseStrict, frozen=True):
    """Thresholds for persisting logs of a slow server method.

    Attributes
    ----------
    threshold_time_ms
        Only calls slower than this are candidates for saving.
    limit
        Maximum number of saved logs, unbounded when ``None``.
    rate
        Sampling rate, as a percentage of candidate calls.
    """

    threshold_time_ms: NonNegInt
    limit: NonNegInt | None = None
    rate: Percentage = 100.0


class SlowToCheckLogging(StructBaseStrict, frozen=True):
    """Thresholds, in seconds, above which slow checks are logged."""

    slow_components_logging_threshold: NonNegFloat | None = None
    slow_expressions_logging_threshold: NonNegFloat | None = None


class FileOptions(StructBaseStrict, frozen=True):
    """File discovery settings consumed by the file watcher and resolver."""

    default_lib_dir: str | None = None
    ignores: tuple[str, ...] = ()
    untyped: tuple[str, ...] = ()
    declarations: tuple[str, ...] = ()
    includes: tuple[str, ...] = ()
    lib_paths: tuple[str, ...] = ()
    module_file_exts: tuple[str, ...] = DEFAULT_MODULE_FILE_EXTS
    module_resource_exts: tuple[str, ...] = DEFAULT_MODULE_RESOURCE_EXTS
    node_resolver_dirnames: tuple[str, ...] = DEFAULT_NODE_RESOLVER_DIRNAMES
    implicitly_include_root: bool = True


class VerboseOptions(StructBaseStrict, frozen=True):
    """Verbose tracing of the checker."""

    indent: NonNegInt = 2
    depth: NonNegInt = 1
    enabled_during_lib_check: bool = False
    focused_files: tuple[str, ...] | None = None


class JsxReact(StructBaseStrict, frozen=True, tag="react", tag_field="kind"):
    """JSX desugars into the standard ``React.createElement`` call."""


class JsxPragma(StructBaseStrict, frozen=True, tag="pragma", tag_field="kind"):
    """JSX desugars into a call to a user-specified function.

    Children are still passed as varargs after the props argument.
    """

    pragma: str


JsxMode = JsxReact | JsxPragma


__all__ = [
    "DEFAULT_MODULE_FILE_EXTS",
    "DEFAULT_MODULE_RESOURCE_EXTS",
    "DEFAULT_NODE_RESOLVER_DIRNAMES",
    "FileOptions",
    "FormatOptions",
    "GcControl",
    "JsxMode",
    "JsxPragma",
    "JsxReact",
    "LogSaving",
    "NonNegFloat",
    "NonNegInt",
    "Percentage",
    "SlowToCheckLogging",
    "VerboseOptions",
]
