"""Read-only lookup table of source positions."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from lincol.models.position import Position


class Positions:
    """A table of ``Position`` information keyed by JSON-Pointer-like paths.

    Entries are fixed at construction and kept in ascending key order, so
    the table can be shared between readers without locking.
    """

    __slots__ = ("_index",)

    def __init__(self, entries: Mapping[str, Position] | None = None) -> None:
        ordered = dict(sorted((entries or {}).items()))
        self._index: Mapping[str, Position] = MappingProxyType(ordered)

    def get(self, path: str) -> Position | None:
        """Return the position recorded for ``path``, or ``None``.

        The lookup is an exact string match. Paths use ``/`` separators and
        integer segments for sequence indices; keys are not escaped, and
        elements of a top-level sequence are addressed as ``//0``.
        """
        return self._index.get(path)

    def iterate(self) -> Iterator[tuple[str, Position]]:
        """Yield ``(path, position)`` pairs in ascending path order."""
        return iter(self._index.items())

    def __iter__(self) -> Iterator[tuple[str, Position]]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, path: object) -> bool:
        return path in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Positions):
            return NotImplemented
        return list(self._index.items()) == list(other._index.items())

    def __repr__(self) -> str:
        return f"Positions({len(self._index)} entries)"

    @property
    def paths(self) -> list[str]:
        return list(self._index)
