"""Sorting strategies that move items between the stacks and emit each move."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile

from pushswap.stacks import Stacks


def sort_three(stacks: Stacks) -> None:
    """Sort up to three items on ``a``.

    Two items are always swapped; callers only pass unsorted pairs.
    """
    a = stacks.a
    if len(a) < 2:
        return
    if len(a) == 2:
        stacks.swap_a()
        return
    first, second, third = (item.value for item in list(a)[:3])
    if first > second and first > third:
        stacks.rotate_a()
        if a[0].value > a[1].value:
            stacks.swap_a()
    elif second > third:
        stacks.reverse_rotate_a()
        if a[0].value > a[1].value:
            stacks.swap_a()
    elif first > second:
        stacks.swap_a()


def find_smallest(stacks: Stacks) -> int:
    """The smallest value on ``a``."""
    return min(stacks.a_values())


def push_smallest_to_b(stacks: Stacks, smallest: int) -> None:
    """Bring ``smallest`` to the top of ``a`` by the shorter way and push it to ``b``."""
    values = stacks.a_values()
    index = values.index(smallest)
    if index <= 2:
        for _ in range(index):
            stacks.rotate_a()
    else:
        for _ in range(len(values) - index):
            stacks.reverse_rotate_a()
    stacks.push_b()


def sort_five(stacks: Stacks) -> None:
    """Sort four or five items on ``a``."""
    if len(stacks.a) == 4:
        push_smallest_to_b(stacks, find_smallest(stacks))
        sort_three(stacks)
        stacks.push_a()
        return
    push_smallest_to_b(stacks, find_smallest(stacks))
    push_smallest_to_b(stacks, find_smallest(stacks))
    sort_three(stacks)
    stacks.push_a()
    stacks.push_a()


def best_block_size(size: int) -> int:
    """The number of ranks handled per block for a stack of ``size`` items."""
    if size <= 101:
        return 13
    if size <= 499:
        return 20
    return 29


def assign_positions(stacks: Stacks) -> None:
    """Replace each position on ``a`` by the item's rank, starting at 1."""
    ranked = sorted(stacks.a, key=lambda item: item.value)
    for rank, item in enumerate(ranked, start=1):
        item.pos = rank


def pivot(stacks: Stacks, start: int, end: int) -> int:
    """Midpoint of the ranks in the leading run of ``a`` lying within ``start..end``."""
    run = list(takewhile(lambda pos: start <= pos <= end, (item.pos for item in stacks.a)))
    low = min(run, default=end)
    high = max(run, default=start)
    return (low + high) // 2


@dataclass
class Block:
    """State of the block-by-block transfer from ``a`` to ``b``."""

    size: int
    start: int = 0
    end: int = 0
    pivot: int = 0
    rot_count: int = 0
    stack_size: int = 0

    @classmethod
    def for_stack_size(cls, stack_size: int) -> "Block":
        """A fresh block sized for a stack of ``stack_size`` items."""
        return cls(size=best_block_size(stack_size))

    def update(self, stacks: Stacks) -> None:
        """Recompute the range and pivot for the current contents of ``a``."""
        self.stack_size = len(stacks.a)
        self.end = self.start + self.size
        self.pivot = pivot(stacks, self.start, self.end)

    def step(self, stacks: Stacks) -> None:
        """Push the top of ``a`` if it belongs to the block, otherwise rotate."""
        if stacks.a[0].pos <= self.end:
            if self.rot_count > self.stack_size // 2:
                self._unwind(stacks)
            self._push(stacks)
            return
        stacks.rotate_a()
        self.rot_count += 1
        if self.rot_count >= self.stack_size:
            self.start += self.size
            self.rot_count = 0

    def _unwind(self, stacks: Stacks) -> None:
        while self.rot_count < self.stack_size:
            stacks.reverse_rotate_a()
            self.rot_count += 1
        self.rot_count = 0

    def _push(self, stacks: Stacks) -> None:
        stacks.push_b()
        if stacks.b[0].pos < self.pivot:
            stacks.rotate_b()
        self.start += 1
        self.rot_count = 0


def _move_blocks_to_b(stacks: Stacks, size: int) -> None:
    block = Block.for_stack_size(size)
    while stacks.a:
        block.update(stacks)
        block.step(stacks)


def max_position(stacks: Stacks) -> int:
    """Index in ``b`` of the item with the highest rank."""
    if not stacks.b:
        raise ValueError("stack b is empty")
    best_index, best_pos = 0, 0
    for index, item in enumerate(stacks.b):
        if item.pos > best_pos:
            best_index, best_pos = index, item.pos
    return best_index


def _optimize(stacks: Stacks) -> None:
    b = stacks.b
    if len(b) >= 2 and b[0].pos < b[1].pos:
        if len(b) == 2 or b[1].pos > b[2].pos:
            stacks.swap_a()


def push_back_to_a(stacks: Stacks) -> None:
    """Return every item from ``b`` to ``a``, highest rank first."""
    while stacks.b:
        size = len(stacks.b)
        index = max_position(stacks)
        while index > 0:
            if index <= size // 2:
                stacks.rotate_b()
                index -= 1
            else:
                stacks.reverse_rotate_b()
                index = 0 if index + 1 == size else index + 1
        _optimize(stacks)
        stacks.push_a()


def sort_large(stacks: Stacks) -> None:
    """Sort a stack of more than five items by ranked blocks."""
    size = len(stacks.a)
    assign_positions(stacks)
    _move_blocks_to_b(stacks, size)
    push_back_to_a(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if size <= 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        sort_large(stacks)