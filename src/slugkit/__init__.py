"""URL-safe ASCII slugs from arbitrary text."""

from slugkit.errors import ActionableError, ErrorType, InvalidLength
from slugkit.slug import (
    SlugConfig,
    is_slug,
    slug,
    slug_rand,
    slug_rand_c,
    slug_rand_sep,
    slug_rand_sep_c,
    slug_sep,
    slugify,
)

__all__ = [
    "ActionableError",
    "ErrorType",
    "InvalidLength",
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
