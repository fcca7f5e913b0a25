"""Separator normalization for transliterated text.

Pure functions with no domain dependencies.  Input is expected to be
ASCII already (see :mod:`slugkit.transliterate`); anything that is not an
ASCII letter or digit is treated as a non-word character, including any
non-ASCII leftovers.
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from enum import Enum, auto

WORD_CHARS = frozenset(string.ascii_lowercase + string.digits)

# ASCII letters only; str.lower() maps "K" (KELVIN SIGN) and "İ" to ASCII
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class _State(Enum):
    GAP = auto()
    WORD = auto()


def fold_case(text: str) -> str:
    """Lowercase ASCII letters only."""
    return text.translate(_ASCII_LOWER)


def iter_words(text: str) -> Iterator[str]:
    """Yield the maximal runs of word characters in *text*, lowercased.

    A two-state scan: ``GAP`` (initial, and inside any run of non-word
    characters) and ``WORD``.  A word is emitted on the ``WORD -> GAP``
    transition and at end of input, so leading and trailing non-word runs
    never produce an empty token.

    >>> list(iter_words("--Hello,  World!"))
    ['hello', 'world']
    """
    folded = fold_case(text)
    state = _State.GAP
    start = 0
    for index, char in enumerate(folded):
        is_word = char in WORD_CHARS
        if state is _State.WORD and not is_word:
            yield folded[start:index]
            state = _State.GAP
        elif state is _State.GAP and is_word:
            start = index
            state = _State.WORD
    if state is _State.WORD:
        yield folded[start:]


def _truncate(words: Iterable[str], sep: str, max_length: int) -> list[str]:
    """Keep whole words while the joined length stays within *max_length*.

    A first word longer than the limit is cut to fit so that a non-empty
    input never truncates to an empty slug.
    """
    kept: list[str] = []
    size = 0
    for word in words:
        extra = len(word) + (len(sep) if kept else 0)
        if size + extra > max_length:
            if not kept:
                kept.append(word[:max_length])
            break
        kept.append(word)
        size += extra
    return kept


def normalize(
    text: str,
    sep: str,
    *,
    stop_words: Iterable[str] = (),
    max_length: int | None = None,
) -> str:
    """Collapse every non-word run of *text* into one literal *sep*.

    *sep* is inserted verbatim, never re-normalized, so ``"%%"`` yields
    ``"hello%%world"`` and ``""`` concatenates the words.  Words listed in
    *stop_words* (compared case-insensitively) are dropped.  When
    *max_length* is a positive int the result is cut at a word boundary.

    >>> normalize("Hello   World!", "_")
    'hello_world'
    """
    words: Iterable[str] = iter_words(text)
    stopped = frozenset(fold_case(word) for word in stop_words)
    if stopped:
        words = (word for word in words if word not in stopped)
    if max_length:
        words = _truncate(words, sep, max_length)
    return sep.join(words)


__all__ = ["WORD_CHARS", "fold_case", "iter_words", "normalize"]
