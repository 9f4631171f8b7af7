"""Read-only mapping used inside frozen records."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class FrozenMapping[K, V](Mapping[K, V]):
    """Immutable, hashable mapping preserving insertion order.

    Values must be hashable for ``hash()`` to succeed. Compares equal to any
    mapping holding the same items.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Mapping[K, V] | None = None) -> None:
        self._data: dict[K, V] = dict(data) if data is not None else {}
        self._hash: int | None = None

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def freeze_mapping[K, V](value: Mapping[K, V]) -> FrozenMapping[K, V]:
    """Return ``value`` as a ``FrozenMapping``, reusing it when already frozen.

    Returns
    -------
    FrozenMapping[K, V]
        Read-only view over a private copy of ``value``.
    """
    if isinstance(value, FrozenMapping):
        return value
    return FrozenMapping(value)


__all__ = ["FrozenMapping", "freeze_mapping"]
