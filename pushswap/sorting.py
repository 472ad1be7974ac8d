"""Sorting strategies that solve the puzzle with the two-stack operations."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.parsing import needs_sorting
from pushswap.stacks import (
    Operation,
    Stacks,
    maximum,
    minimum,
    next_min,
    search_less,
)

SMALL_CHUNK = 30
LARGE_CHUNK = 60
LARGE_INPUT = 300


def normalize(values: Sequence[int]) -> list[int]:
    """Replace every value by its rank, 1 for the smallest.

    The relative order of the values is kept. When a value repeats, only its
    first occurrence is ranked and later ones keep their original value.
    """
    items = list(values)
    if not items:
        return []
    result = list(items)
    rank = 1
    current = next_min(items, None)
    while current is not None:
        result[items.index(current)] = rank
        rank += 1
        current = next_min(items, current)
    return result


def sort_three(stacks: Stacks) -> None:
    """Order the three values at the top of stack a, in at most two moves."""
    first, second, third = list(stacks.a)[:3]
    if first < second < third:
        return
    if first < second and first < third:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RA)
    elif second < first < third:
        stacks.apply(Operation.SA)
    elif third < first < second:
        stacks.apply(Operation.RRA)
    elif first > second and first > third and second < third:
        stacks.apply(Operation.RA)
    elif first > second > third:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RRA)


def sort_four(stacks: Stacks) -> None:
    """Sort four values in stack a, using stack b for one of them."""
    while stacks.a.top() != minimum(stacks.a):
        items = list(stacks.a)
        smallest = minimum(items)
        if items[1] == smallest and items[0] != maximum(items):
            stacks.apply(Operation.SA)
        elif items[3] == smallest:
            stacks.apply(Operation.RRA)
        else:
            stacks.apply(Operation.RA)
    if not stacks.is_sorted():
        stacks.apply(Operation.PB)
        sort_three(stacks)
        stacks.apply(Operation.PA)


def sort_five(stacks: Stacks) -> None:
    """Sort five values in stack a, using stack b for two of them."""
    while stacks.a.top() != minimum(stacks.a):
        stacks.apply(Operation.RA)
    if not stacks.is_sorted():
        stacks.apply(Operation.PB)
        sort_four(stacks)
        stacks.apply(Operation.PA)
        if maximum(stacks.a) == stacks.a.top():
            stacks.apply(Operation.RA)


def sort_small(stacks: Stacks) -> None:
    """Sort stack a when it holds two to five values; other sizes are left alone."""
    size = len(stacks.a)
    if size == 2:
        first, second = stacks.a
        if first > second:
            stacks.apply(Operation.SA)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)


def search_chunks(stacks: Stacks, chunk: int, size: int) -> None:
    """Move ranks into stack b one chunk at a time.

    Values up to the current chunk bound are pushed to b, and those in the
    lower half of the chunk are rotated to its bottom. When b is full up to
    the bound, the bound grows by a whole chunk. Stops when a holds three
    values or fewer, is sorted, or the bound reaches size.
    """
    half = chunk // 2
    while len(stacks.a) > 3 and chunk < size and not stacks.is_sorted():
        while stacks.a.top() > chunk and len(stacks.b) <= chunk:
            stacks.apply(Operation.RA)
        if stacks.a.top() <= chunk:
            stacks.apply(Operation.PB)
            if stacks.b.top() <= chunk - half:
                if stacks.a.top() > chunk and len(stacks.b) <= chunk:
                    stacks.apply(Operation.RR)
                else:
                    stacks.apply(Operation.RB)
        if len(stacks.b) == chunk:
            chunk += half * 2


def bring_back(stacks: Stacks) -> None:
    """Push every value of stack b back onto a, largest first.

    The value just below the maximum is pushed early when it reaches the top
    of b, and swapped into place once the maximum follows it.
    """
    pending_swap = False
    while len(stacks.b):
        if stacks.b.top() == maximum(stacks.b) - 1:
            stacks.apply(Operation.PA)
            pending_swap = True
        largest = maximum(stacks.b)
        if stacks.b.top() != largest:
            if search_less(stacks.b, largest):
                stacks.apply(Operation.RRB)
            else:
                stacks.apply(Operation.RB)
        if stacks.b.top() == maximum(stacks.b):
            stacks.apply(Operation.PA)
            if pending_swap:
                stacks.apply(Operation.SA)
            pending_swap = False


def chunk_sort(stacks: Stacks) -> None:
    """Sort stack a of ranks 1..n by chunks; meant for six values or more."""
    size = len(stacks.a)
    chunk = SMALL_CHUNK if size < LARGE_INPUT else LARGE_CHUNK
    search_chunks(stacks, chunk, size)
    while len(stacks.a) > 3 and not stacks.is_sorted():
        if stacks.a.top() == minimum(stacks.a):
            stacks.apply(Operation.PB)
        else:
            stacks.apply(Operation.RA)
    if len(stacks.a) == 3:
        sort_three(stacks)
    bring_back(stacks)


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort values, top of the stack first.

    Sorted or empty input needs no operations; repeated values raise
    InputError.
    """
    items = list(values)
    if not needs_sorting(items):
        return []
    stacks = Stacks(normalize(items))
    if len(stacks.a) < 6:
        sort_small(stacks)
    else:
        chunk_sort(stacks)
    return list(stacks.history)