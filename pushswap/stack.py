"""The two stacks of the puzzle and the eight moves that act on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence

__all__ = ["Stack", "Machine", "is_sorted"]


def is_sorted(values: Iterable[int]) -> bool:
    """True when *values* never decrease from front to back."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


class Stack:
    """A stack of integers whose top is at index 0."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    @property
    def top(self) -> int:
        """The value on top of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def is_sorted(self) -> bool:
        """True when the values rise, or stay level, from top to bottom."""
        return is_sorted(self._items)

    def min_position(self) -> int:
        """Index of the first occurrence of the smallest value."""
        if not self._items:
            raise ValueError("empty stack has no minimum")
        return min(range(len(self._items)), key=self._items.__getitem__)

    def max_position(self) -> int:
        """Index of the first occurrence of the largest value."""
        if not self._items:
            raise ValueError("empty stack has no maximum")
        return max(range(len(self._items)), key=self._items.__getitem__)

    @property
    def min_value(self) -> int:
        """The smallest value on the stack."""
        return self._items[self.min_position()]

    @property
    def max_value(self) -> int:
        """The largest value on the stack."""
        return self._items[self.max_position()]

    def _push(self, value: int) -> None:
        self._items.appendleft(value)

    def _pop(self) -> int:
        return self._items.popleft()

    def _swap(self) -> bool:
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def _rotate(self, steps: int) -> bool:
        if len(self._items) < 2:
            return False
        self._items.rotate(steps)
        return True


def _print_move(name: str) -> None:
    sys.stdout.write(name + "\n")


class Machine:
    """Stacks a and b with the moves of the puzzle.

    Stack a starts with *values* and b starts empty. Every move that changes
    something is passed by name to *emit* (by default printed on its own line
    to standard output) and recorded in ``operations``; a move that cannot
    apply does nothing.
    """

    def __init__(
        self,
        values: Sequence[int] | Iterable[int] = (),
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations: list[str] = []
        self._emit = _print_move if emit is None else emit

    def _record(self, name: str) -> None:
        self.operations.append(name)
        self._emit(name)

    def pa(self) -> None:
        """Move the top of b onto a."""
        if len(self.b):
            self.a._push(self.b._pop())
            self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if len(self.a):
            self.b._push(self.a._pop())
            self._record("pb")

    def sa(self) -> None:
        """Swap the two top values of a."""
        if self.a._swap():
            self._record("sa")

    def sb(self) -> None:
        """Swap the two top values of b."""
        if self.b._swap():
            self._record("sb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        if self.a._rotate(-1):
            self._record("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        if self.b._rotate(-1):
            self._record("rb")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        if self.a._rotate(1):
            self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        if self.b._rotate(1):
            self._record("rrb")