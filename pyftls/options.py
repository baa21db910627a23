"""Command-line option handling for the directory lister."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Sequence


class Flag(enum.IntFlag):
    """Listing options, one bit each."""

    LONG_FORMAT = 0b00001
    RECURSIVE = 0b00010
    SHOW_ALL = 0b00100
    REVERSE = 0b01000
    SORT_TIME = 0b10000


OPTION_LETTERS: Dict[str, Flag] = {
    "l": Flag.LONG_FORMAT,
    "R": Flag.RECURSIVE,
    "a": Flag.SHOW_ALL,
    "r": Flag.REVERSE,
    "t": Flag.SORT_TIME,
}

_HELP = "--help"


class OptionError(ValueError):
    """An option letter that the lister does not know."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Unknown option: -{option}")


@dataclass
class Options:
    """Parsed options: the flag set, the operands, and whether to colour output."""

    flags: Flag = Flag(0)
    paths: List[str] = field(default_factory=list)
    colorize: bool = False

    @property
    def long_format(self) -> bool:
        return bool(self.flags & Flag.LONG_FORMAT)

    @property
    def recursive(self) -> bool:
        return bool(self.flags & Flag.RECURSIVE)

    @property
    def show_all(self) -> bool:
        return bool(self.flags & Flag.SHOW_ALL)

    @property
    def reverse(self) -> bool:
        return bool(self.flags & Flag.REVERSE)

    @property
    def sort_time(self) -> bool:
        return bool(self.flags & Flag.SORT_TIME)


def _is_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-"


def rearrange_argv(argv: Sequence[str]) -> List[str]:
    """Gather every flag letter into one leading ``-...`` argument.

    ``argv`` holds the arguments without the program name. Letters keep the
    order of their first appearance and repeats are dropped; operands
    (including a lone ``-``) follow in their original order.
    """
    letters = dict.fromkeys(ch for arg in argv if _is_flag(arg) for ch in arg[1:])
    result = ["-" + "".join(letters)] if letters else []
    result.extend(arg for arg in argv if not _is_flag(arg))
    return result


def parse_options(argv: Sequence[str]) -> Options:
    """Parse arguments (without the program name) into :class:`Options`.

    Raises :class:`OptionError` for an unknown option letter. A bare
    ``--help`` is accepted and ignored. No operands leaves ``paths`` empty.
    """
    args = rearrange_argv(argv)
    flags = Flag(0)
    start = 0
    if args and _is_flag(args[0]):
        start = 1
        if args[0] != _HELP:
            for letter in args[0][1:]:
                flag = OPTION_LETTERS.get(letter)
                if flag is None:
                    raise OptionError(letter)
                flags |= flag
    return Options(flags=flags, paths=args[start:])