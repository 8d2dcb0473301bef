"""Insertion-ordered set used to track first-seen rows and columns."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """A sequence of unique items kept in first-insertion order.

    Backed by a ``dict`` so membership checks and inserts are O(1); adding an
    item that is already present leaves its position untouched.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = dict.fromkeys(items)

    def add(self, item: T) -> bool:
        """Append ``item`` if it is new. Returns ``True`` when it was added."""
        if item in self._items:
            return False
        self._items[item] = None
        return True

    def sort(self, *, key: Callable[[T], Any] | None = None, reverse: bool = False) -> None:
        """Reorder in place; ``sorted`` is stable so ties keep insertion order."""
        self._items = dict.fromkeys(sorted(self._items, key=key, reverse=reverse))

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


__all__ = ["OrderedSet"]
