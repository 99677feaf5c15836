"""Ordered collection of tree entries keyed by name."""

from typing import Dict, Generic, Iterator, List, Optional, Protocol, TypeVar


class Named(Protocol):
    @property
    def name(self) -> str: ...


T = TypeVar("T", bound=Named)


class NamedCollection(Generic[T]):
    """Insertion-ordered collection of entries that are unique by name.

    Membership is decided by an entry's name alone: two entries with the same name
    collide even if every other attribute differs. The collection does not raise
    domain errors; callers check contains() before add() and report collisions
    themselves.

    Example:
        >>> from collections import namedtuple
        >>> Entry = namedtuple("Entry", "name value")
        >>> entries = NamedCollection()
        >>> entries.add(Entry("b", 1))
        >>> entries.add(Entry("a", 2))
        >>> entries.names()
        ['b', 'a']
        >>> entries.contains(Entry("a", 99))
        True
    """

    def __init__(self) -> None:
        self._entries: Dict[str, T] = {}

    def contains(self, entry: T) -> bool:
        """Check whether an entry with the same name is already present."""
        return entry.name in self._entries

    def add(self, entry: T) -> None:
        """Append an entry.

        Args:
            entry: The entry to append. Its name must not be present yet.

        Raises:
            KeyError: If an entry with the same name is already present.
        """
        if entry.name in self._entries:
            raise KeyError(f"Entry '{entry.name}' is already present")
        self._entries[entry.name] = entry

    def get(self, name: str) -> Optional[T]:
        return self._entries.get(name)

    def names(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NamedCollection({self.names()!r})"
