"""The two push_swap stacks and the operations that move items between them."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, TextIO


@dataclass
class Item:
    """One stacked number and its position (input index, later its rank)."""

    value: int
    pos: int = 0


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its first element.

    Every operation that is asked to emit writes its name on a line of
    its own to ``out``.
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: Deque[Item] = deque(
            Item(value, index) for index, value in enumerate(values, start=1)
        )
        self.b: Deque[Item] = deque()
        self.out: TextIO = sys.stdout if out is None else out

    def __repr__(self) -> str:
        return f"Stacks(a={self.a_values()!r}, b={self.b_values()!r})"

    def _emit(self, name: str) -> None:
        self.out.write(f"{name}\n")

    def a_values(self) -> List[int]:
        """Values of stack ``a`` from top to bottom."""
        return [item.value for item in self.a]

    def b_values(self) -> List[int]:
        """Values of stack ``b`` from top to bottom."""
        return [item.value for item in self.b]

    @staticmethod
    def _swap(stack: Deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: Deque[Item], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def swap_a(self, emit: bool = True) -> None:
        """Exchange the two top items of ``a``."""
        if self._swap(self.a) and emit:
            self._emit("sa")

    def swap_b(self, emit: bool = True) -> None:
        """Exchange the two top items of ``b``."""
        if self._swap(self.b) and emit:
            self._emit("sb")

    def swap_both(self) -> None:
        """Swap the tops of both stacks at once."""
        self.swap_a(emit=False)
        self.swap_b(emit=False)
        self._emit("ss")

    def push_a(self) -> None:
        """Move the top item of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def push_b(self) -> None:
        """Move the top item of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def rotate_a(self, emit: bool = True) -> None:
        """Move the top item of ``a`` to its bottom."""
        if self._rotate(self.a, -1) and emit:
            self._emit("ra")

    def rotate_b(self, emit: bool = True) -> None:
        """Move the top item of ``b`` to its bottom."""
        if self._rotate(self.b, -1) and emit:
            self._emit("rb")

    def rotate_both(self) -> None:
        """Rotate both stacks at once."""
        self.rotate_a(emit=False)
        self.rotate_b(emit=False)
        # The combined rotation is reported under the name "rb".
        self._emit("rb")

    def reverse_rotate_a(self, emit: bool = True) -> None:
        """Move the bottom item of ``a`` to its top."""
        if self._rotate(self.a, 1) and emit:
            self._emit("rra")

    def reverse_rotate_b(self, emit: bool = True) -> None:
        """Move the bottom item of ``b`` to its top."""
        if self._rotate(self.b, 1) and emit:
            self._emit("rrb")

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks at once."""
        self.reverse_rotate_a(emit=False)
        self.reverse_rotate_b(emit=False)
        self._emit("rrr")

    def describe(self) -> str:
        """A listing of stack ``a``, one item per line."""
        if not self.a:
            return "Pile vide\n"
        return "".join(
            f"Valeur: {item.value}, Position: {item.pos}\n" for item in self.a
        )