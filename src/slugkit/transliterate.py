"""Non-ASCII to ASCII transliteration.

Romanization data comes from Unidecode's static per-codepoint tables:
accented Latin folds to its base letter or digraph, Cyrillic is
romanized letter by letter, and CJK ideographs map to toneless pinyin
syllables.  Unidecode terminates every CJK syllable with a space, which
the normalizer later turns into a separator (``"影師嗎"`` becomes
``"Ying Shi Ma "`` here and ``"ying-shi-ma"`` as a slug).
"""

from __future__ import annotations

from functools import lru_cache

from unidecode import unidecode

# Unidecode fills unassigned table slots with this marker
_PLACEHOLDER = "[?]"

_SURROGATES = range(0xD800, 0xE000)


@lru_cache(maxsize=8192)
def romanize(char: str) -> str:
    """Return the ASCII romanization of a single character.

    Characters without a romanization (unassigned code points, private
    use, lone surrogates, table placeholders) map to ``""``.
    """
    if char.isascii():
        return char
    if ord(char) in _SURROGATES:
        return ""
    ascii_text = unidecode(char, errors="ignore")
    if ascii_text == _PLACEHOLDER:
        return ""
    return ascii_text


def transliterate(text: str) -> str:
    """Map every character of *text* to ASCII.

    ASCII passes through untouched, including case and punctuation;
    lowercasing and separator handling happen in :mod:`slugkit.normalize`.

    >>> transliterate("Æúű--cool?")
    'AEuu--cool?'
    """
    if text.isascii():
        return text
    return "".join(romanize(char) for char in text)


__all__ = ["romanize", "transliterate"]
