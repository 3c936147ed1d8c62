"""Splitting command-line arguments into keys and values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .errors import ErrorCode, NouzenError


class ArgumentType(Enum):
    """Kind of a parsed command-line argument."""

    NON_VALUE = "non-value"
    VALUE = "value"
    VALUE_ONLY = "value-only"


@dataclass(frozen=True)
class Argument:
    """A parsed argument: an optional key and an optional value."""

    type: ArgumentType
    key: str | None = None
    value: str | None = None


class ArgumentError(NouzenError):
    """Raised when the command line cannot be split into arguments."""


def _split(item: str) -> Argument:
    key_part = item.lstrip("-")
    if key_part == item:
        if not item:
            raise ArgumentError(ErrorCode.ARGPARSE_ARGUMENT_EMPTY, item)
        return Argument(ArgumentType.VALUE_ONLY, None, item)

    key, sep, value = key_part.partition("=")
    if sep and value:
        return Argument(ArgumentType.VALUE, key, value)
    return Argument(ArgumentType.NON_VALUE, key, None)


def parse_arguments(args: Iterable[str]) -> list[Argument]:
    """Parse arguments (without the program name) into a list of Argument.

    An item starting with dashes is a key, with an optional value after '='.
    A bare item is the value of the key right before it, which must not
    already have one.
    """
    parsed: list[Argument] = []
    for item in args:
        argument = _split(item)
        if argument.type is not ArgumentType.VALUE_ONLY:
            parsed.append(argument)
            continue
        if not parsed or parsed[-1].type is not ArgumentType.NON_VALUE:
            raise ArgumentError(ErrorCode.ARGPARSE_VALUE_UNEXPECTED, item)
        parsed[-1] = Argument(ArgumentType.VALUE, parsed[-1].key, argument.value)
    return parsed