"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"
_DIGITS = "0123456789"
_ULLONG_MODULUS = 1 << 64
_LLONG_MAX = 9223372036854775807


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does, with 32-bit wrap.

    Leading whitespace is skipped and one optional sign is accepted; two signs
    in a row give 0. Digits are accumulated as an unsigned 64-bit value; past
    the signed 64-bit range the result is -1 (positive) or 0 (negative).
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

    if result > _LLONG_MAX:
        return 0 if sign < 0 else -1
    return _to_int32(_to_int32(result) * sign)


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isprint(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(n))


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code