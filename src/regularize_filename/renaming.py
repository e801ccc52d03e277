from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .naming import NameStyle, convert_name

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger = logging.getLogger(__name__)

DOT = "."


class RenameError(Exception):
    """Raised when a path cannot be given a regularized name."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class EmptyNameError(RenameError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Name would be empty after formatting: {path}", path=path
        )


class InvalidNameError(RenameError):
    def __init__(self, path: Path, name: str) -> None:
        super().__init__(
            f"Name is not a valid file name after formatting: {path}"
            f" -> {name!r}",
            path=path,
        )
        self.name = name


def split_filename(name: str) -> tuple[str, str | None]:
    """Split a file name into its stem and its extension.

    Only the last dot starts an extension, and a leading dot never does, so
    ``".bashrc"`` has no extension while ``"foo."`` has an empty one.
    """
    if name == "..":
        return name, None
    stem, dot, extension = name.rpartition(DOT)
    if not dot or not stem:
        return name, None
    return stem, extension


def format_filename(name: str, style: NameStyle) -> str:
    stem, extension = split_filename(name)
    # every dot in the stem separates labels, not just the last one
    formatted = DOT.join(
        convert_name(label, style) for label in stem.split(DOT)
    )
    if extension is None:
        return formatted
    return f"{formatted}{DOT}{extension.lower()}"


@dataclass(frozen=True)
class RenamePlan:
    source: Path
    target: Path

    @property
    def changed(self) -> bool:
        return self.source != self.target

    def describe(self) -> str:
        return f"mv {self.source} {self.target}"


@dataclass(frozen=True)
class RenameOutcome:
    source: Path
    plan: RenamePlan | None = None  # None when no target name was found
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def plan_rename(path: Path, style: NameStyle) -> RenamePlan:
    new_name = format_filename(path.name, style)
    if not new_name:
        raise EmptyNameError(path)
    try:
        target = path.with_name(new_name)
    except ValueError as error:
        # e.g. "!." formats to "."
        raise InvalidNameError(path, new_name) from error
    return RenamePlan(source=path, target=target)


def apply_rename(plan: RenamePlan) -> None:
    if not plan.changed:
        logger.debug(f"Already regular: {plan.source}")
        return
    plan.source.rename(plan.target)
    logger.info(f"Renamed {plan.source} to {plan.target}")


def rename_files(
    paths: Iterable[Path],
    style: NameStyle,
    *,
    dry_run: bool = False,
    keep_going: bool = True,
    announce: Callable[[RenamePlan], None] | None = None,
) -> Iterator[RenameOutcome]:
    """Plan and perform a rename for each path, yielding one outcome each.

    ``announce`` is called with each plan before the rename is attempted.
    Failures are logged and reported on the outcome.  Unless ``keep_going``
    is false, the remaining paths are still processed.
    """
    for path in paths:
        try:
            plan = plan_rename(path, style)
        except RenameError as error:
            logger.error(str(error))
            yield RenameOutcome(path, error=error)
            if not keep_going:
                return
            continue
        if announce is not None:
            announce(plan)
        if dry_run:
            yield RenameOutcome(path, plan)
            continue
        try:
            apply_rename(plan)
        except OSError as error:
            logger.error(f"Could not rename {plan.source}: {error}")
            yield RenameOutcome(path, plan, error)
            if not keep_going:
                return
            continue
        yield RenameOutcome(path, plan)
