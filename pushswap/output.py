"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
from typing import Optional, TextIO, Union

CharLike = Union[str, int]


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
    else:
        stream.write(chr(operator.index(c) & 0xFF))


def putstr_fd(text: Optional[str], stream: TextIO) -> None:
    """Write text; None writes nothing."""
    if text is None:
        return
    stream.write(text)


def putendl_fd(text: Optional[str], stream: TextIO) -> None:
    """Write text followed by a newline; None writes nothing at all."""
    if text is None:
        return
    stream.write(text + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of an integer."""
    stream.write(str(operator.index(n)))