"""Immutable containers used to hold media type parameters."""
from collections.abc import Mapping

from typing import Any, Dict, Iterable, Iterator, Tuple, Union  # noqa


MappingOrPairs = Union[Mapping, Iterable[Tuple[Any, Any]]]


class FrozenMap(Mapping):
    """Read-only mapping that remembers insertion order.

    The constructor copies its argument so later changes to the caller's
    mapping are not visible through this one.  Re-inserting a key (either
    while copying or through :meth:`union`) replaces its value but keeps
    the position where it was first inserted.

    The ``keys()`` and ``items()`` views are ordered, read-only sets.
    """

    __slots__ = ('_dict',)

    def __init__(self, mapping: MappingOrPairs = None) -> None:
        self._dict: Dict[Any, Any] = dict(mapping or {})

    def __getitem__(self, key: Any) -> Any:
        return self._dict[key]

    def __iter__(self) -> Iterator:
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __hash__(self) -> int:
        return hash(frozenset(self._dict.items()))

    def __repr__(self) -> str:
        return 'FrozenMap(%r)' % self._dict

    def union(self, other: MappingOrPairs) -> 'FrozenMap':
        """Return a new map with ``other`` laid over this one.

        Keys already present keep their position, keys only present in
        ``other`` are appended in the order ``other`` yields them.
        """
        merged = dict(self._dict)
        merged.update(other)
        return FrozenMap(merged)

    def discard(self, key: Any) -> 'FrozenMap':
        if key not in self._dict:
            return self
        return FrozenMap((k, v) for k, v in self._dict.items() if k != key)
