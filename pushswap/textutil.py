"""String helpers with C-string semantics: splitting, searching, trimming."""

from __future__ import annotations

import operator
from typing import Callable, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return a one-character string from a character or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _length(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"negative length {n}")
    return n


def split(text: str, sep: CharLike) -> list[str]:
    """Split text on a single separator character, dropping empty pieces."""
    return [piece for piece in text.split(_char(sep)) if piece]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the terminator, at len(text).
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the terminator, at len(text).
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def striteri(text: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, character) for every character of text, in order."""
    for index, ch in enumerate(text):
        func(index, ch)


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of first and second."""
    return first + second


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, NUL included.

    Returns the resulting string and the length the full result would have
    had: len(dst) + len(src), or size + len(src) when dst already exceeds
    the buffer, in which case dst is returned unchanged.
    """
    size = _length(size)
    if size < len(dst):
        return dst, size + len(src)
    room = max(size - 1 - len(dst), 0)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, NUL included.

    Returns the copied (possibly truncated) string and len(src). With a size
    of zero nothing is copied.
    """
    size = _length(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, character) for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch.

    The end of a string compares as the code 0, and comparison stops there.
    """
    n = _length(n)
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index of needle within the first n characters of haystack, or None.

    An empty needle is found at index 0.
    """
    n = _length(n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in charset."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end of text, or an empty text, gives an empty string.
    """
    start = _length(start)
    length = _length(length)
    if not text or start > len(text):
        return ""
    length = min(length, len(text))
    return text[start : start + length]