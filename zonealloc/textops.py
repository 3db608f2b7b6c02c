"""String searching, comparison, joining and mapping helpers.

Comparisons follow C string rules: the end of a string counts as the
character with code 0. Search functions return an index, or None when
nothing is found.
"""

from __future__ import annotations

import operator
from itertools import islice, zip_longest
from typing import Callable, Optional, Tuple

_NUL = "\0"


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _count(n: int, what: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")
    return n


def _first_difference(pairs) -> int:
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
    return 0


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first *char* in *text*.

    Searching for the NUL character finds the end of the string.
    """
    char = _single(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last *char* in *text*.

    Searching for the NUL character finds the end of the string.
    """
    char = _single(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare(a: str, b: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return _first_difference(zip_longest(a, b, fillvalue=_NUL))


def compare_n(a: str, b: str, n: int) -> int:
    """Like compare, but looks at no more than the first *n* characters."""
    n = _count(n, "length")
    return _first_difference(islice(zip_longest(a, b, fillvalue=_NUL), n))


def equals(a: str, b: str) -> bool:
    """True if both strings hold the same characters."""
    return compare(a, b) == 0


def equals_n(a: str, b: str, n: int) -> bool:
    """True if the first *n* characters of both strings are the same."""
    return compare_n(a, b, n) == 0


def find_substring(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of *needle*; an empty needle matches at 0."""
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def find_substring_n(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *n* characters."""
    n = _count(n, "length")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def join(a: str, b: str) -> str:
    """The concatenation of *a* and *b*."""
    return a + b


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* characters, terminator included.

    Returns the resulting string and the length the full concatenation would
    have had, so a result length below that number signals truncation. When
    *dst* already fills the buffer it is returned unchanged and the reported
    length counts only the first *size* characters of it.
    """
    size = _count(size, "size")
    dst_len = min(len(dst), size)
    total = dst_len + len(src)
    room = size - dst_len
    if room == 0:
        return dst, total
    return dst + src[: room - 1], total


def substring(text: str, start: int, length: int) -> str:
    """The *length* characters of *text* beginning at *start*."""
    start = _count(start, "start")
    length = _count(length, "length")
    if start + length > len(text):
        raise IndexError(
            f"substring [{start}, {start + length}) runs past the end "
            f"of a string of length {len(text)}"
        )
    return text[start : start + length]


def map_chars(text: str, func: Callable[[str], str]) -> str:
    """A new string with *func* applied to every character."""
    return "".join(func(ch) for ch in text)


def map_chars_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """A new string with *func* applied to every index and character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def find_first(text: str, char: str) -> Optional[int]:
    """Index of the first *char* in *text*; the end of string is never matched."""
    char = _single(char)
    if char == _NUL:
        return None
    index = text.find(char)
    return None if index < 0 else index


def find_last(text: str, char: str) -> Optional[int]:
    """Index of the last *char* in *text*; NUL matches the end of string."""
    return rfind_char(text, char)


def find_nth(text: str, char: str, n: int) -> Optional[int]:
    """Index of the *n*-th occurrence (counting from 1) of *char* in *text*."""
    char = _single(char)
    n = operator.index(n)
    if n < 1:
        raise ValueError(f"occurrence number must be at least 1, got {n}")
    seen = 0
    for index, ch in enumerate(text):
        if ch == char:
            seen += 1
            if seen == n:
                return index
    return None