"""The two stacks of the puzzle, the operations on them and value queries."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional, Union


class Operation(Enum):
    """An instruction of the puzzle, valued by its textual name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stack:
    """A stack of integers whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stack):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def push_front(self, value: int) -> None:
        """Put value on top of the stack."""
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        """Put value at the bottom of the stack."""
        self._items.append(value)

    def pop_front(self) -> int:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def top(self) -> int:
        """Return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def last(self) -> int:
        """Return the bottom value; IndexError when empty."""
        if not self._items:
            raise IndexError("last of an empty stack")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def map(self, func: Callable[[int], int]) -> "Stack":
        """Return a new stack holding func applied to each value, in order."""
        return Stack(func(value) for value in self._items)

    def swap(self) -> None:
        """Exchange the two top values; IndexError with fewer than two."""
        if len(self._items) < 2:
            raise IndexError("swap needs at least two values")
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom; IndexError when empty."""
        if not self._items:
            raise IndexError("rotate of an empty stack")
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top; IndexError when empty."""
        if not self._items:
            raise IndexError("reverse rotate of an empty stack")
        self._items.rotate(1)


class Stacks:
    """Stacks a and b with the puzzle's operations and a record of them.

    In lenient mode pushing from an empty stack and rotating a stack of fewer
    than two values do nothing; otherwise they raise IndexError. Swapping
    fewer than two values always raises IndexError.
    """

    def __init__(self, values: Iterable[int] = (), lenient: bool = False) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.lenient = lenient
        self.history: list[Operation] = []

    def apply(self, operation: Union[Operation, str]) -> Operation:
        """Carry out one operation, record it and return it.

        A string is taken as the operation's name; an unknown name raises
        ValueError.
        """
        op = Operation(operation)
        if op is Operation.SA:
            self.a.swap()
        elif op is Operation.SB:
            self.b.swap()
        elif op is Operation.SS:
            if len(self.a) < 2 or len(self.b) < 2:
                raise IndexError("swap needs at least two values")
            self.a.swap()
            self.b.swap()
        elif op is Operation.PA:
            self._push(self.b, self.a)
        elif op is Operation.PB:
            self._push(self.a, self.b)
        elif op is Operation.RA:
            self._rotate(self.a, reverse=False)
        elif op is Operation.RB:
            self._rotate(self.b, reverse=False)
        elif op is Operation.RR:
            self._check_rotatable(self.a, self.b)
            self._rotate(self.a, reverse=False)
            self._rotate(self.b, reverse=False)
        elif op is Operation.RRA:
            self._rotate(self.a, reverse=True)
        elif op is Operation.RRB:
            self._rotate(self.b, reverse=True)
        else:
            self._check_rotatable(self.a, self.b)
            self._rotate(self.a, reverse=True)
            self._rotate(self.b, reverse=True)
        self.history.append(op)
        return op

    def is_sorted(self) -> bool:
        """True when stack a holds its values in ascending order."""
        return is_sorted(self.a)

    def _push(self, source: Stack, target: Stack) -> None:
        if not len(source):
            if self.lenient:
                return
            raise IndexError("push from an empty stack")
        target.push_front(source.pop_front())

    def _check_rotatable(self, *stacks: Stack) -> None:
        if not self.lenient and any(not len(stack) for stack in stacks):
            raise IndexError("rotate of an empty stack")

    def _rotate(self, stack: Stack, reverse: bool) -> None:
        if len(stack) < 2:
            if self.lenient or len(stack):
                return
            raise IndexError("rotate of an empty stack")
        if reverse:
            stack.reverse_rotate()
        else:
            stack.rotate()


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is followed by a smaller one."""
    items = list(values)
    return all(a <= b for a, b in zip(items, items[1:]))


def minimum(values: Iterable[int]) -> int:
    """Return the smallest value; ValueError when there are none."""
    return min(values)


def maximum(values: Iterable[int]) -> int:
    """Return the largest value; ValueError when there are none."""
    return max(values)


def next_min(values: Iterable[int], previous: Optional[int]) -> Optional[int]:
    """Return the smallest value above previous.

    With previous None this is the minimum; once previous is the maximum the
    sequence is exhausted and None is returned.
    """
    items = list(values)
    if previous is None:
        return minimum(items)
    top = maximum(items)
    if previous == top:
        return None
    return min((v for v in items if previous < v < top), default=top)


def search_less(values: Iterable[int], num: int) -> bool:
    """Tell whether reverse rotation reaches a value >= num sooner than rotation.

    Rotation counts the values below num from the top down; reverse rotation
    counts its moves until such a value is on top. True means reverse
    rotation needs fewer moves. ValueError when no value reaches num.
    """
    items = list(values)
    if not any(v >= num for v in items):
        raise ValueError(f"no value is at least {num}")
    forward = next(i for i, v in enumerate(items) if v >= num)
    if forward == 0:
        return False
    backward = 1 + next(i for i, v in enumerate(reversed(items)) if v >= num)
    return forward > backward