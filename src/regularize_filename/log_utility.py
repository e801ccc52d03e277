from __future__ import annotations

import logging
from dataclasses import KW_ONLY, dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import argparse

CONSOLE_FORMAT = "{levelname:s}: {message:s}"
FILE_FORMAT = (
    "[{asctime:s}.{msecs:03.0f}] [{levelname:s}] {module:s}: {message:s}"
)


@dataclass
class LogFileOptions:
    path: Path
    _ = KW_ONLY
    max_kb: int = 512  # 0 for unbounded size and no rotation
    backup_count: int = 1  # 0 for no rolling backups
    level: int = logging.DEBUG

    def create_handler(self) -> logging.Handler:
        handler = RotatingFileHandler(
            self.path,
            encoding="utf-8",
            maxBytes=self.max_kb * 1024,
            backupCount=self.backup_count,
        )
        handler.setLevel(self.level)
        handler.setFormatter(
            logging.Formatter(
                fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", style="{"
            )
        )
        return handler


def configure_logging_custom(
    console_level: int, log_file_options: LogFileOptions | None = None
) -> None:
    root = logging.getLogger()
    root.handlers = []
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, style="{"))
    root.addHandler(console_handler)
    level = console_level
    if log_file_options:
        level = min(level, log_file_options.level)
        root.addHandler(log_file_options.create_handler())
    root.setLevel(level)
    logging.debug("logging configured")


def add_log_arguments(parser: argparse.ArgumentParser) -> None:
    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-file",
        metavar="FILE",
        help="Also write a detailed log of every rename to FILE.",
    )
    verbosity = log_group.add_mutually_exclusive_group(required=False)
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        dest="console_level",
        const=logging.INFO,
        help="Report each completed rename on the console.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        dest="console_level",
        const=logging.ERROR,
        help="Only report failures on the console.",
    )
    verbosity.add_argument(
        "--debug",
        action="store_const",
        dest="console_level",
        const=logging.DEBUG,
        help="Show everything, including files that were already regular.",
    )


def configure_logging(args: argparse.Namespace) -> None:
    configure_logging_custom(
        console_level=args.console_level or logging.WARNING,
        log_file_options=(
            LogFileOptions(Path(args.log_file)) if args.log_file else None
        ),
    )
