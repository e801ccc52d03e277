from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class NameStyleConfig:
    separator: str  # "_", "-", or ""
    capitalize_first: bool  # capitalize first word?
    capitalize_rest: bool  # capitalize words after first?


@unique
class NameStyle(Enum):
    _config: NameStyleConfig

    SNAKE_CASE = auto(), NameStyleConfig("_", False, False)  # snake_case
    KEBAB_CASE = auto(), NameStyleConfig("-", False, False)  # kebab-case
    CAMEL_CASE = auto(), NameStyleConfig("", False, True)  # camelCase
    PASCAL_CASE = auto(), NameStyleConfig("", True, True)  # PascalCase

    def __new__(cls, value: int, config: NameStyleConfig) -> NameStyle:
        obj = object.__new__(cls)
        obj._value_ = value
        obj._config = config
        return obj

    @property
    def config(self) -> NameStyleConfig:
        return self._config


def split_into_words(name: str) -> list[str]:
    """Split ``name`` into words on separators and case transitions.

    Any character that is neither alphabetic nor numeric separates words
    and is dropped.  Within a run of alphanumerics a new word starts when
    the case changes, but only once the current word holds at least two
    characters, so ``"FOOBar"`` splits as ``["FOOB", "ar"]``.  Digits
    never change the tracked case and always join the current word.
    """
    words: list[str] = []
    current = ""
    last_was_upper = False
    for char in name:
        if char.isalpha():
            same_case = (char.isupper() and last_was_upper) or (
                char.islower() and not last_was_upper
            )
            last_was_upper = char.isupper()
        elif char.isnumeric():
            same_case = True
        else:
            if current:
                words.append(current)
            current = ""
            continue
        if len(current) < 2 or same_case:
            current += char
        else:
            words.append(current)
            current = char
    if current:
        words.append(current)
    return words


def split_head(word: str) -> tuple[str, str]:
    """Return the first code point of ``word`` and the remainder."""
    return word[:1], word[1:]


def capitalize_word(word: str) -> str:
    head, tail = split_head(word)
    return head.upper() + tail.lower()


def join_words(words: Sequence[str], style: NameStyle) -> str:
    words = [word for word in words if word]
    cfg = style.config
    return cfg.separator.join(
        (
            capitalize_word(w)
            if (i == 0 and cfg.capitalize_first)
            or (i > 0 and cfg.capitalize_rest)
            else w.lower()
        )
        for i, w in enumerate(words)
    )


# names used by callers that think in terms of segmenting and casing
segment = split_into_words
apply_case = join_words


def convert_name(name: str, style: NameStyle) -> str:
    """Convert a name in any supported style to the given target style."""
    words = split_into_words(name)
    return join_words(words, style)
