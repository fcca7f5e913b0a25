"""Random suffixes for slugs that need a uniqueness hint.

Suffixes come from the :mod:`random` module.  They exist to make
collisions unlikely, not to be unguessable, so a seeded
:class:`random.Random` may be passed in for reproducible output.
"""

from __future__ import annotations

import random
import string

from slugkit.errors import ActionableError

DEFAULT_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_RANDOMNESS_LENGTH = 5


def validate_length(length: object, *, field_name: str = "randomness_length") -> int:
    """Return *length* as an int, or raise ``InvalidLength``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ActionableError.invalid_length(length, field_name=field_name)
    return length


def random_suffix(
    length: int,
    alphabet: str = DEFAULT_ALPHABET,
    *,
    rng: random.Random | None = None,
) -> str:
    """Draw *length* characters uniformly and independently from *alphabet*."""
    length = validate_length(length)
    if not alphabet:
        raise ActionableError.validation(
            field_name="alphabet",
            reason="must contain at least one character",
            suggestion="Use the default alphabet (a-z0-9) or pass a non-empty string",
        )
    chooser = rng or random
    return "".join(chooser.choices(alphabet, k=length))


def append_random(
    base: str,
    sep: str,
    length: int = DEFAULT_RANDOMNESS_LENGTH,
    alphabet: str = DEFAULT_ALPHABET,
    *,
    rng: random.Random | None = None,
) -> str:
    """Return ``base + sep + suffix``.

    An empty *base* yields the bare suffix so the result never starts
    with *sep*.  A zero *length* still appends *sep*, keeping the result
    exactly ``len(base) + len(sep) + length`` long.
    """
    suffix = random_suffix(length, alphabet, rng=rng)
    if not base:
        return suffix
    return f"{base}{sep}{suffix}"


__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_RANDOMNESS_LENGTH",
    "append_random",
    "random_suffix",
    "validate_length",
]
