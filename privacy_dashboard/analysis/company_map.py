"""Ordered, insert-only mapping used to hold company rollups."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Generic, TypeVar

V = TypeVar("V")


class EntityMap(Mapping[str, V], Generic[V]):
    """Read-only mapping view with first-write-wins insertion.

    Keys keep the order in which they were first seen. A key, once
    present, is never replaced or removed: ``get_or_create`` returns
    the existing value and ignores the factory.
    """

    def __init__(self) -> None:
        self._items: dict[str, V] = {}

    def get_or_create(self, key: str, factory: Callable[[], V]) -> V:
        """Return the value for *key*, creating it with *factory* if unseen."""
        if key not in self._items:
            self._items[key] = factory()
        return self._items[key]

    def __getitem__(self, key: str) -> V:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"EntityMap({list(self._items)!r})"
