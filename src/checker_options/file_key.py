"""File identifiers consumed by per-file decisions."""

from __future__ import annotations

import os
from enum import StrEnum

from serde_msgspec import StructBaseStrict


class FileKind(StrEnum):
    """How the checker treats a file."""

    SOURCE = "source"
    LIB = "lib"
    JSON = "json"
    RESOURCE = "resource"


class FileKey(StructBaseStrict, frozen=True):
    """Identity of a file known to the checker."""

    path: str
    kind: FileKind = FileKind.SOURCE

    def to_path_string(self) -> str:
        """Return the path of the file as given at registration."""
        return self.path


type FileLike = FileKey | str | os.PathLike[str]

HOST_DIR_SEP = os.sep


def normalize_filename_dir_sep(filename: str, *, sep: str | None = None) -> str:
    """Return ``filename`` with host directory separators rewritten to ``/``.

    Parameters
    ----------
    filename
        Path string to normalize.
    sep
        Directory separator to replace. Defaults to ``HOST_DIR_SEP``.

    Returns
    -------
    str
        Path using ``/`` as the separator. Unchanged on POSIX hosts.
    """
    if sep is None:
        sep = HOST_DIR_SEP
    if sep == "/":
        return filename
    return filename.replace(sep, "/")


def normalized_path(file: FileLike) -> str:
    """Return the normalized path string of a file identifier."""
    if isinstance(file, FileKey):
        raw = file.to_path_string()
    else:
        raw = os.fspath(file)
    return normalize_filename_dir_sep(raw)


__all__ = [
    "FileKey",
    "FileKind",
    "FileLike",
    "HOST_DIR_SEP",
    "normalize_filename_dir_sep",
    "normalized_path",
]
