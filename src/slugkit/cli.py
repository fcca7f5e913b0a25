"""CLI command handlers for slugkit.

Each public ``handle_*`` function corresponds to a CLI subcommand and
returns the process exit status.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys

from slugkit.config import Settings, load_settings
from slugkit.logging import configure_logging, logger
from slugkit.slug import SlugConfig, is_slug, slugify


def _load(args: argparse.Namespace) -> Settings:
    """Load settings from ``--config`` when given, else use defaults."""
    settings = load_settings(args.config) if args.config else Settings()
    configure_logging(settings.logging.level_number, log_dir=settings.logging.log_dir)
    return settings


def _slug_config(settings: Settings, args: argparse.Namespace) -> SlugConfig:
    """Apply command-line overrides on top of the ``[slug]`` defaults."""
    config = settings.slug_config()
    overrides: dict[str, object] = {}
    if args.separator is not None:
        overrides["separator"] = args.separator
    if args.random or args.length is not None:
        overrides["randomness"] = True
    if args.length is not None:
        overrides["randomness_length"] = args.length
    if args.max_length is not None:
        overrides["max_length"] = args.max_length or None
    if args.stop_word:
        overrides["stop_words"] = config.stop_words + tuple(args.stop_word)
    return dataclasses.replace(config, **overrides)


def handle_slug(args: argparse.Namespace) -> int:
    """Print one slug per input text.

    Texts come from the positional arguments, or one per line from
    stdin when none are given.
    """
    settings = _load(args)
    config = _slug_config(settings, args)

    texts = args.text or [line.rstrip("\r\n") for line in sys.stdin]
    for text in texts:
        print(slugify(text, config))
    logger.debug("Generated %d slugs", len(texts))
    return 0


def handle_check(args: argparse.Namespace) -> int:
    """Exit 0 if the argument is already a normalized slug, 1 otherwise."""
    settings = _load(args)
    separator = settings.slug.separator if args.separator is None else args.separator

    if is_slug(args.slug, separator):
        print(f"ok: {args.slug!r} is a valid slug")
        return 0
    normalized = slugify(args.slug, SlugConfig(separator=separator))
    print(f"not a slug: {args.slug!r} normalizes to {normalized!r}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="slugkit",
        description="Generate URL-safe ASCII slugs from arbitrary text",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="PATH",
        help="Settings TOML file (default: built-in defaults)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- slug ----------------------------------------------------------------
    slug_p = sub.add_parser("slug", help="Slugify text (arguments or stdin lines)")
    slug_p.add_argument("text", nargs="*", help="Text to slugify (default: read stdin)")
    slug_p.add_argument(
        "--separator",
        "-s",
        type=str,
        default=None,
        help="Separator between words and before the random suffix (default: -)",
    )
    slug_p.add_argument(
        "--random",
        "-r",
        action="store_true",
        help="Append a random suffix",
    )
    slug_p.add_argument(
        "--length",
        "-n",
        type=int,
        default=None,
        metavar="N",
        help="Random suffix length (implies --random; default: 5)",
    )
    slug_p.add_argument(
        "--max-length",
        type=int,
        default=None,
        metavar="N",
        help="Truncate the slug at a word boundary to N characters (0 = unlimited)",
    )
    slug_p.add_argument(
        "--stop-word",
        action="append",
        default=None,
        metavar="WORD",
        help="Drop WORD from the slug (repeatable)",
    )

    # -- check ---------------------------------------------------------------
    check_p = sub.add_parser("check", help="Check whether a string is already a slug")
    check_p.add_argument("slug", type=str, help="Candidate slug")
    check_p.add_argument(
        "--separator",
        "-s",
        type=str,
        default=None,
        help="Separator the slug should use (default: -)",
    )

    return parser
