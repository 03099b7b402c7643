"""Strategies that sort stack a using the moves of a Machine."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.parsing import normalize
from pushswap.stack import Machine

__all__ = [
    "sort_three",
    "sort_four_five",
    "sort_back",
    "chunk_sort",
    "handle_sorting",
    "solve",
]


def sort_three(machine: Machine) -> None:
    """Sort a stack a of at most three values in place."""
    a = machine.a
    if len(a) < 2:
        return
    max_pos = a.max_position()
    if max_pos == 0:
        machine.ra()
    elif max_pos == 1:
        machine.rra()
    if a[0] > a[1]:
        machine.sa()


def sort_four_five(machine: Machine) -> None:
    """Sort a small stack a by parking its smallest values on b."""
    a = machine.a
    while len(a) > 3:
        min_index = a.min_position()
        if min_index <= len(a) // 2:
            for _ in range(min_index):
                machine.ra()
        else:
            for _ in range(len(a) - min_index):
                machine.rra()
        machine.pb()
    sort_three(machine)
    while len(machine.b):
        machine.pa()


def _push_chunk(machine: Machine, start: int, end: int) -> None:
    """Push every value of a in [start, end) to b, sinking the lower half."""
    a, b = machine.a, machine.b
    mid = (start + end) // 2
    pushed = 0
    while len(a) and pushed < end - start:
        if start <= a.top < end:
            machine.pb()
            pushed += 1
            if b.top < mid and len(b) > 1:
                machine.rb()
        else:
            machine.ra()


def sort_back(machine: Machine) -> None:
    """Return the values of b to a, largest first, so that a ends up sorted."""
    a_push, b = machine.pa, machine.b
    while len(b):
        target = b.max_value
        rotate = machine.rb if b.max_position() <= len(b) // 2 else machine.rrb
        while b.top != target:
            rotate()
        a_push()


def _chunk_size(size: int) -> int:
    if size <= 100:
        divisor = 4
    elif size <= 500:
        divisor = 8
    else:
        divisor = 12
    return max(size // divisor, 1)


def chunk_sort(machine: Machine) -> None:
    """Sort stack a, which must hold the ranks 0 to n-1, by chunks.

    The ranks are pushed to b one range at a time, then brought back to a
    largest first.
    """
    a = machine.a
    original_size = len(a)
    if sorted(a) != list(range(original_size)):
        raise ValueError("chunk sort needs the ranks 0 to n-1 on stack a")
    chunk_size = _chunk_size(original_size)
    chunk_start = 0
    while len(a):
        _push_chunk(machine, chunk_start, chunk_start + chunk_size)
        chunk_start += chunk_size
        remaining = original_size - chunk_start
        if remaining < chunk_size:
            chunk_size = remaining
    sort_back(machine)


def handle_sorting(machine: Machine) -> None:
    """Sort stack a with the strategy suited to its size."""
    size = len(machine.a)
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_three(machine)
    elif size <= 5:
        sort_four_five(machine)
    else:
        chunk_sort(machine)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort the distinct integers *values*.

    Duplicates raise InputError; an already sorted input needs no moves.
    """
    ranks = normalize(list(values))
    machine = Machine(ranks, emit=lambda _name: None)
    if not machine.a.is_sorted():
        handle_sorting(machine)
    return machine.operations