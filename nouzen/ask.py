"""Asking the user for a yes/no confirmation."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, TextIO

from .keys import ConsoleInputReader, Key, KeyType

PROMPT = "Do you want to continue? [Y/n] "

_INTERRUPT_KEYS = frozenset({KeyType.CTRL_C, KeyType.CTRL_D, KeyType.CTRL_BACKSLASH})


class Answer(IntEnum):
    """The user's reply to a confirmation prompt."""

    YES = 0x01
    NO = 0x02
    INTERRUPTED = 0x03


def _wait_for_answer(read_key: Callable[[], Key], out: TextIO) -> Answer:
    while True:
        try:
            key = read_key()
        except EOFError:
            return Answer.INTERRUPTED
        if key.type in _INTERRUPT_KEYS:
            return Answer.INTERRUPTED
        if key.type is KeyType.Y:
            out.write(key.name)
            return Answer.YES
        if key.type is KeyType.N:
            out.write(key.name)
            return Answer.NO
        if key.type is KeyType.ENTER:
            out.write("y")
            return Answer.YES


def ask(
    read_key: Callable[[], Key] | None = None,
    out: TextIO | None = None,
) -> Answer:
    """Prompt 'Do you want to continue? [Y/n]' and wait for an answer.

    'y' or Enter answers yes, 'n' answers no, and Ctrl+C, Ctrl+D,
    Ctrl+\\ or closed input interrupt. Other keys are ignored. Unless the
    answer is yes, 'Abort.' is written to standard error. Without
    read_key, keys are read from the console in raw mode.
    """
    if out is None:
        out = sys.stdout

    out.write(PROMPT)
    out.flush()

    if read_key is None:
        with ConsoleInputReader() as reader:
            answer = _wait_for_answer(reader.read_key, out)
    else:
        answer = _wait_for_answer(read_key, out)

    out.flush()
    out.write("\r\n")
    out.flush()

    if answer is not Answer.YES:
        sys.stderr.write("Abort.\n")

    return answer