"""CLI entry point for slugkit."""

from __future__ import annotations

import sys

from slugkit.cli import build_parser, handle_check, handle_slug
from slugkit.errors import ActionableError, ErrorType
from slugkit.logging import logger

_HANDLERS = {
    "slug": handle_slug,
    "check": handle_check,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return _HANDLERS[args.command](args)
    except Exception as exc:
        err = ActionableError.from_exception(exc, "slugkit", args.command)
        if err.error_type == ErrorType.UNEXPECTED:
            logger.exception("%s", err.error)
        else:
            logger.error("%s", err.error)
        logger.debug("Error detail: %s", err.to_dict())
        if err.suggestion:
            print(f"Suggestion: {err.suggestion}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
