from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .log_utility import add_log_arguments, configure_logging
from .naming import NameStyle
from .renaming import rename_files

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regularize-filename",
        description=(
            "Regularize the names of your files according to your favourite"
            " naming convention."
        ),
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        type=Path,
        help="Files to process.",
    )
    style_group = parser.add_argument_group("naming convention")
    styles = style_group.add_mutually_exclusive_group(required=False)
    for flags, style, label in (
        (("-k", "--kebab-case"), NameStyle.KEBAB_CASE, "kebab-case (default)"),
        (("-s", "--snake-case"), NameStyle.SNAKE_CASE, "snake_case"),
        (("-c", "--camel-case"), NameStyle.CAMEL_CASE, "camelCase"),
        (("-p", "--pascal-case"), NameStyle.PASCAL_CASE, "PascalCase"),
    ):
        styles.add_argument(
            *flags,
            action="store_const",
            dest="style",
            const=style,
            help=f"Use {label}.",
        )
    parser.set_defaults(style=NameStyle.KEBAB_CASE)
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the renames without performing them.",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first file that cannot be renamed.",
    )
    add_log_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args)
    logger.debug(f"Using {args.style.name} for {len(args.files)} file(s)")

    failures = 0
    for outcome in rename_files(
        args.files,
        args.style,
        dry_run=args.dry_run,
        keep_going=not args.fail_fast,
        announce=lambda plan: print(plan.describe(), flush=True),
    ):
        if not outcome.succeeded:
            failures += 1
    if failures:
        logger.warning(f"{failures} file(s) could not be renamed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
