"""A singly ordered list of arbitrary contents with front and back insertion."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


class LinkedList:
    """An ordered collection supporting the classic list operations."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: Deque[Any] = deque(items or ())

    def add_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        self._items.appendleft(content)

    def add_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        self._items.append(content)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"

    def last(self) -> Any:
        """Content of the last element, or ``None`` when the list is empty."""
        return self._items[-1] if self._items else None

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first element, passing its content to ``delete`` if given."""
        if not self._items:
            raise IndexError("pop from an empty list")
        content = self._items.popleft()
        if delete is not None:
            delete(content)
        return content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element in order, passing each content to ``delete``."""
        while self._items:
            self.pop_front(delete)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self._items:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of ``func(content)`` for each element.

        If ``func`` fails, the contents built so far are released through
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self._items:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result