"""Closed enumerations used by the options record."""

from __future__ import annotations

from enum import StrEnum


class ModuleSystem(StrEnum):
    """Module resolution strategy."""

    NODE = "node"
    HASTE = "haste"


class SavedStateFetcher(StrEnum):
    """Where saved state is loaded from during lazy initialization."""

    DUMMY = "dummy"
    LOCAL = "local"
    SCM = "scm"
    FB = "fb"


class ReactRuntime(StrEnum):
    """React JSX runtime used when desugaring JSX."""

    AUTOMATIC = "automatic"
    CLASSIC = "classic"


class ComponentSyntax(StrEnum):
    """Support level for component declaration syntax."""

    OFF = "off"
    PARSING = "parsing"
    FULL = "full"


class CastingSyntax(StrEnum):
    """Accepted type-cast dialect."""

    COLON = "colon"
    AS = "as"
    BOTH = "both"


class ChannelMode(StrEnum):
    """Transport used between the server and its workers."""

    PIPE = "pipe"
    SOCKET = "socket"


class Severity(StrEnum):
    """Lint severity."""

    OFF = "off"
    WARN = "warn"
    ERROR = "error"


__all__ = [
    "CastingSyntax",
    "ChannelMode",
    "ComponentSyntax",
    "ModuleSystem",
    "ReactRuntime",
    "SavedStateFetcher",
    "Severity",
]
