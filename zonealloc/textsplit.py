"""Splitting, trimming and copying of strings and string tables."""

from __future__ import annotations

import operator
import re
from typing import Iterable, List, Optional, Tuple

_TRIM_CHARS = " \n\t"
_BLANK_RUN = re.compile(r"[ \t]+")


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return sep


def word_count(text: str, sep: str) -> int:
    """Number of non-empty runs of characters other than *sep* in *text*."""
    return len(split_words(text, sep))


def split_words(text: str, sep: str) -> List[str]:
    """The words of *text* separated by one or more *sep* characters."""
    sep = _separator(sep)
    return [word for word in text.split(sep) if word]


def trim(text: str) -> str:
    """*text* without leading and trailing spaces, newlines and tabs."""
    return text.strip(_TRIM_CHARS)


def squeeze_blanks(text: str) -> str:
    """Trim *text*, then replace each run of spaces and tabs with one space."""
    return _BLANK_RUN.sub(" ", trim(text))


def split_at(text: str, index: int) -> Tuple[str, str]:
    """Split *text* around the character at *index*, dropping that character."""
    index = operator.index(index)
    if not 0 <= index < len(text):
        raise IndexError(f"split index {index} out of range for length {len(text)}")
    return text[:index], text[index + 1 :]


def copy_table(items: Optional[Iterable[str]]) -> List[str]:
    """A new list holding the strings of *items*; None gives an empty list."""
    if items is None:
        return []
    return list(items)


def table_size(items: Optional[Iterable[str]]) -> int:
    """Number of strings in *items*; None counts as empty."""
    if items is None:
        return 0
    return sum(1 for _ in items)