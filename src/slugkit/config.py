"""Configuration loading and validation.

Loads a ``settings.toml`` file and validates every field up front, before
any text is processed.  A batch run that fails on its first input because
of a bad suffix length is cheaper to fix than one that fails halfway.

The validated config is exposed as a :class:`Settings` dataclass with a
``slug`` section (defaults for :class:`~slugkit.slug.SlugConfig`) and a
``logging`` section.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from slugkit.errors import ActionableError
from slugkit.randomize import DEFAULT_ALPHABET, DEFAULT_RANDOMNESS_LENGTH, validate_length
from slugkit.slug import DEFAULT_SEPARATOR, SlugConfig

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass
class SlugSection:
    """Slug defaults from ``[slug]``."""

    separator: str = DEFAULT_SEPARATOR
    randomness: bool = False
    randomness_length: int = DEFAULT_RANDOMNESS_LENGTH
    alphabet: str = DEFAULT_ALPHABET
    max_length: int = 0
    stop_words: list[str] = field(default_factory=list)


@dataclass
class LoggingSection:
    """Logging settings from ``[logging]``."""

    level: str = "INFO"
    log_dir: str = ""

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


@dataclass
class Settings:
    """Top-level validated configuration."""

    slug: SlugSection = field(default_factory=SlugSection)
    logging: LoggingSection = field(default_factory=LoggingSection)

    def slug_config(self) -> SlugConfig:
        """Build a :class:`SlugConfig` from the ``[slug]`` defaults."""
        return SlugConfig(
            separator=self.slug.separator,
            randomness=self.slug.randomness,
            randomness_length=self.slug.randomness_length,
            alphabet=self.slug.alphabet,
            max_length=self.slug.max_length or None,
            stop_words=tuple(self.slug.stop_words),
        )


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~slugkit.errors.ActionableError`:
      - CONFIG if the file is missing or unreadable, or a section has the wrong shape
      - PARSE if the file is not UTF-8 or the TOML is malformed
      - VALIDATION if field values are out of range
      - INVALID_LENGTH if a length is negative or not an integer

    Returns a fully validated :class:`Settings` instance.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or copy from config/settings.toml.example",
        )

    try:
        raw_text = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ActionableError.from_exception(
            exc,
            service=str(filepath),
            operation="load_settings",
            suggestion=f"Make {filepath} a readable UTF-8 TOML file",
        ) from exc

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            raw_error=str(exc),
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    return _validate(data, filepath)


def _validate(data: dict[str, object], filepath: Path) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- slug section --------------------------------------------------------
    slug_data = _optional_section(data, "slug", filepath)

    separator = slug_data.get("separator", DEFAULT_SEPARATOR)
    if not isinstance(separator, str):
        raise ActionableError.validation(
            field_name="slug.separator",
            reason=f"must be a string, got {type(separator).__name__}",
            suggestion='Quote the separator, e.g. separator = "_"',
        )

    randomness = slug_data.get("randomness", False)
    if not isinstance(randomness, bool):
        raise ActionableError.validation(
            field_name="slug.randomness",
            reason=f"must be true or false, got {randomness!r}",
        )

    randomness_length = validate_length(
        slug_data.get("randomness_length", DEFAULT_RANDOMNESS_LENGTH),
        field_name="slug.randomness_length",
    )
    max_length = validate_length(
        slug_data.get("max_length", 0),
        field_name="slug.max_length",
    )

    alphabet = slug_data.get("alphabet", DEFAULT_ALPHABET)
    if not isinstance(alphabet, str) or not alphabet:
        raise ActionableError.validation(
            field_name="slug.alphabet",
            reason="must be a non-empty string",
            suggestion=f'Set [slug].alphabet, e.g. alphabet = "{DEFAULT_ALPHABET}"',
        )

    stop_words = slug_data.get("stop_words", [])
    if not isinstance(stop_words, list) or not all(isinstance(w, str) for w in stop_words):
        raise ActionableError.validation(
            field_name="slug.stop_words",
            reason="must be a list of strings",
            suggestion='Set [slug].stop_words, e.g. stop_words = ["a", "the"]',
        )

    slug = SlugSection(
        separator=separator,
        randomness=randomness,
        randomness_length=randomness_length,
        alphabet=alphabet,
        max_length=max_length,
        stop_words=list(stop_words),
    )

    # -- logging section -----------------------------------------------------
    logging_data = _optional_section(data, "logging", filepath)

    level = str(logging_data.get("level", "INFO")).upper()
    if level not in _LEVELS:
        raise ActionableError.validation(
            field_name="logging.level",
            reason=f"'{level}' is not one of {', '.join(_LEVELS)}",
            suggestion="Set [logging].level to DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    log_settings = LoggingSection(
        level=level,
        log_dir=str(logging_data.get("log_dir", "")),
    )

    return Settings(slug=slug, logging=log_settings)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _optional_section(data: dict[str, object], name: str, filepath: Path) -> dict[str, object]:
    """Return a top-level section (empty if absent), or raise CONFIG if not a table."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] in {filepath} must be a table, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table",
        )
    return section
