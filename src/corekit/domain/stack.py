"""A generic last-in-first-out container."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from .errors import EmptyStackError

T = TypeVar("T")


class Stack(Generic[T]):
    """Unbounded LIFO stack.

    Underflow (``pop``/``peek`` on an empty stack) raises ``EmptyStackError``
    and leaves the stack untouched. Instances are not safe for concurrent
    mutation; callers sharing a stack across threads must lock around it.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        """Place `item` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyStackError: If the stack has no items.
        """
        if not self._items:
            raise EmptyStackError("pop")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyStackError: If the stack has no items.
        """
        if not self._items:
            raise EmptyStackError("peek")
        return self._items[-1]

    def size(self) -> int:
        """Return the number of items on the stack."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove every item. Safe to call on an empty stack."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
