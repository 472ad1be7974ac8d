"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Union

from pushswap.parsing import InputError, parse_stack
from pushswap.sorting import normalize
from pushswap.stacks import Operation, Stacks, is_sorted

# Instructions are tried in this order; the first whose text starts with the
# line read wins, so a truncated last line such as "r" means "ra".
_CANDIDATES: tuple[Operation, ...] = (
    Operation.SA,
    Operation.SB,
    Operation.SS,
    Operation.PA,
    Operation.PB,
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRA,
    Operation.RRB,
    Operation.RRR,
)


def parse_instruction(line: str) -> Operation:
    """Return the operation a line of input names.

    The line may end with a newline. A line matches an operation when it is
    a leading part of the operation's name followed by a newline, so a final
    line without its newline is still understood. Anything else, including
    an empty line, raises InputError.
    """
    if not line:
        raise InputError()
    for operation in _CANDIDATES:
        if f"{operation.value}\n".startswith(line):
            return operation
    raise InputError()


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of stream, each with its newline if it had one."""
    yield from stream


def read_instructions(stream: TextIO) -> Iterator[Operation]:
    """Yield the operation named by each line of stream.

    An unknown line raises InputError when it is reached.
    """
    for line in read_lines(stream):
        yield parse_instruction(line)


def check(values: Sequence[int], instructions: Iterable[Union[Operation, str]]) -> bool:
    """Apply instructions to a stack holding values and tell whether a ends sorted.

    Pushing from an empty stack and rotating fewer than two values do
    nothing. Only stack a is judged: it must be non-empty and ascending.
    Swapping fewer than two values raises IndexError.
    """
    stacks = Stacks(normalize(values), lenient=True)
    for instruction in instructions:
        stacks.apply(instruction)
    return len(stacks.a) > 0 and stacks.is_sorted()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read operations from standard input and print OK or KO.

    Already sorted numbers print OK without reading any input. Bad numbers
    or a bad instruction write "Error" to standard error instead.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_stack(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if not values:
        return 0
    if is_sorted(values):
        sys.stdout.write("OK\n")
        return 0
    try:
        sorted_ok = check(values, read_instructions(sys.stdin))
    except (InputError, IndexError):
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())