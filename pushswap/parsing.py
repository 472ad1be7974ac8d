"""Reading the stack's numbers from command-line arguments and validating them."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.chars import isdigit
from pushswap.stacks import is_sorted
from pushswap.textutil import split

INT_MIN = -2147483648
INT_MAX = 2147483647
MAX_TOKEN_LENGTH = 11

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"
_DIGITS = "0123456789"
_ULLONG_MODULUS = 1 << 64


class InputError(ValueError):
    """Raised when the program's input is not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi32(text: str) -> int:
    """Parse a leading integer with the 32-bit clamping rules of the sorter.

    Leading whitespace is skipped and one sign is accepted; two signs in a
    row give 0. A negative number whose magnitude exceeds 2147483647 gives 0,
    a positive one above 2147483648 gives -1, and 2147483648 itself wraps to
    -2147483648.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1
    if pos < length and text[pos] in _SIGNS:
        if text[pos] == "-":
            sign = -1
        if pos + 1 < length and text[pos + 1] in _SIGNS:
            return 0
        pos += 1

    result = 0
    while pos < length and text[pos] in _DIGITS:
        result = (result * 10 + int(text[pos])) % _ULLONG_MODULUS
        pos += 1

    if result > INT_MAX and sign < 0:
        clamped = 0
    elif result > INT_MAX + 1 and sign > 0:
        clamped = -1
    else:
        clamped = result
    return _wrap32(_wrap32(clamped) * sign)


def is_number(token: str) -> bool:
    """True when token is an optional sign followed only by ASCII digits."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return all(isdigit(ch) for ch in body)


def split_arguments(args: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split them into non-empty tokens."""
    return split(" ".join(args), " ")


def check_tokens(tokens: Iterable[str]) -> None:
    """Raise InputError for a token that is too long or not a number."""
    for token in tokens:
        if token and (len(token) > MAX_TOKEN_LENGTH or not is_number(token)):
            raise InputError()


def parse_int(token: str) -> int:
    """Convert a checked token to an integer; InputError outside the 32-bit range."""
    sign = 1
    body = token
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]

    digits = []
    for ch in body:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0

    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def check_duplicates(values: Iterable[int]) -> None:
    """Raise InputError when any value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError()
        seen.add(value)


def parse_stack(args: Sequence[str]) -> list[int]:
    """Turn the arguments into the list of stack values, top first.

    Raises InputError for malformed tokens, values outside the 32-bit range
    and repeated values. No tokens at all give an empty list.
    """
    tokens = split_arguments(args)
    check_tokens(tokens)
    values = [parse_int(token) for token in tokens]
    check_duplicates(values)
    return values


def needs_sorting(values: Sequence[int]) -> bool:
    """True when the values are distinct and not yet in ascending order.

    An empty sequence needs nothing; repeated values raise InputError.
    """
    if not values:
        return False
    check_duplicates(values)
    return not is_sorted(values)