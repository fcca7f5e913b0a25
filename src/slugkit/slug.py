"""Slug generation: transliterate, normalize, optionally randomize.

:func:`slugify` runs the whole pipeline for a :class:`SlugConfig`.  The
six ``slug*`` functions below are fixed configurations of it, one per
combination of custom separator, random suffix and suffix length.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from slugkit.errors import ActionableError
from slugkit.logging import logger
from slugkit.normalize import iter_words, normalize
from slugkit.randomize import (
    DEFAULT_ALPHABET,
    DEFAULT_RANDOMNESS_LENGTH,
    append_random,
    validate_length,
)
from slugkit.transliterate import transliterate

DEFAULT_SEPARATOR = "-"


@dataclass(frozen=True)
class SlugConfig:
    """Per-call slug options.

    All values are validated on construction, so a bad length fails
    before any text is processed.  ``max_length`` of ``None`` or ``0``
    means unlimited and applies to the slug before the random suffix.
    ``stop_words`` are stored transliterated and lowercased, the form
    they are compared in.

    ``separator`` is inserted verbatim and is assumed to be ASCII.  A
    non-ASCII separator is transliterated away when a slug is slugified
    again, so such slugs are not idempotent and :func:`is_slug` rejects
    them.
    """

    separator: str = DEFAULT_SEPARATOR
    randomness: bool = False
    randomness_length: int = DEFAULT_RANDOMNESS_LENGTH
    alphabet: str = DEFAULT_ALPHABET
    max_length: int | None = None
    stop_words: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str):
            raise ActionableError.validation(
                field_name="separator",
                reason=f"must be a string, got {type(self.separator).__name__}",
            )
        validate_length(self.randomness_length)
        if self.max_length is not None:
            validate_length(self.max_length, field_name="max_length")
        if not self.alphabet:
            raise ActionableError.validation(
                field_name="alphabet",
                reason="must contain at least one character",
                suggestion="Use the default alphabet (a-z0-9) or pass a non-empty string",
            )
        if isinstance(self.stop_words, str):
            raise ActionableError.validation(
                field_name="stop_words",
                reason="must be a sequence of words, not a single string",
                suggestion=f"Wrap it in a tuple: stop_words=({self.stop_words!r},)",
            )
        # Stop words are matched against transliterated words
        object.__setattr__(
            self,
            "stop_words",
            tuple(
                word
                for stop_word in self.stop_words
                for word in iter_words(transliterate(stop_word))
            ),
        )


def slugify(
    text: str,
    config: SlugConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> str:
    """Turn *text* into a slug according to *config*.

    >>> slugify("Компьютер")
    'komp-iuter'
    """
    config = config or SlugConfig()
    base = normalize(
        transliterate(text),
        config.separator,
        stop_words=config.stop_words,
        max_length=config.max_length,
    )
    if not config.randomness:
        logger.debug("Slugified %r -> %r", text, base)
        return base

    result = append_random(
        base,
        config.separator,
        config.randomness_length,
        config.alphabet,
        rng=rng,
    )
    logger.debug("Slugified %r -> %r (random suffix)", text, result)
    return result


def is_slug(text: str, separator: str = DEFAULT_SEPARATOR) -> bool:
    """Return True when *text* is already a normalized slug for *separator*.

    Only meaningful for ASCII separators: ``slug_sep("a b", "é")`` gives
    ``"aéb"``, which re-slugifies to ``"aeb"`` and so is not a slug.
    """
    return slugify(text, SlugConfig(separator=separator)) == text


# ---------------------------------------------------------------------------
# Fixed-configuration entry points
# ---------------------------------------------------------------------------


def slug(text: str) -> str:
    """Slug with ``-`` as separator."""
    return slugify(text)


def slug_sep(text: str, separator: str) -> str:
    """Slug with a caller-chosen separator."""
    return slugify(text, SlugConfig(separator=separator))


def slug_rand(text: str) -> str:
    """Slug plus ``-`` and a 5-character random suffix."""
    return slugify(text, SlugConfig(randomness=True))


def slug_rand_sep(text: str, separator: str) -> str:
    """Slug plus *separator* and a 5-character random suffix."""
    return slugify(text, SlugConfig(separator=separator, randomness=True))


def slug_rand_c(text: str, randomness_length: int) -> str:
    """Slug plus ``-`` and a random suffix of *randomness_length* characters."""
    return slugify(text, SlugConfig(randomness=True, randomness_length=randomness_length))


def slug_rand_sep_c(text: str, separator: str, randomness_length: int) -> str:
    """Slug plus *separator* and a random suffix of *randomness_length* characters."""
    return slugify(
        text,
        SlugConfig(
            separator=separator,
            randomness=True,
            randomness_length=randomness_length,
        ),
    )


__all__ = [
    "DEFAULT_SEPARATOR",
    "SlugConfig",
    "is_slug",
    "slug",
    "slug_rand",
    "slug_rand_c",
    "slug_rand_sep",
    "slug_rand_sep_c",
    "slug_sep",
    "slugify",
]
