"""Command that prints the operations sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_stack
from pushswap.sorting import push_swap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; write "Error" to stderr on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_stack(args)
        operations = push_swap(values)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())