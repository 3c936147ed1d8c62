"""Reading single key presses from the console."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum, auto

_WINDOWS = os.name == "nt"

if _WINDOWS:
    import msvcrt
else:
    import termios
    import tty

_READ_SIZE = 16


class KeyType(Enum):
    """Which key was pressed."""

    PAGE_UP = auto()
    PAGE_DOWN = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ENTER = auto()
    HOME = auto()
    END = auto()
    DELETE = auto()
    CTRL_C = auto()
    CTRL_BACKSLASH = auto()
    CTRL_D = auto()
    ZERO = auto()
    ONE = auto()
    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    NINE = auto()
    HYPHEN = auto()
    COMMA = auto()
    EMPTY = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    EXCLAMATION_MARK = auto()
    DOUBLE_QUOTATION_MARK = auto()
    OCTOTHORPE = auto()
    DOLLAR_SIGN = auto()
    PERCENT_SIGN = auto()
    AMPERSAND = auto()
    APOSTROPHE = auto()
    OPEN_ROUND_BRACKET = auto()
    CLOSE_ROUND_BRACKET = auto()
    ASTERISK = auto()
    PERIOD = auto()
    SLASH = auto()
    COLON = auto()
    SEMICOLON = auto()
    LESS_THAN = auto()
    EQUAL_SIGN = auto()
    GREATER_THAN = auto()
    QUESTION_MARK = auto()
    AT_SIGN = auto()
    UNKNOWN = auto()


class KeySubtype(Enum):
    """Broad category of a key."""

    DIGIT = auto()
    ASCII_LOWERCASE = auto()
    ASCII_UPPERCASE = auto()
    ARROW = auto()
    PUNCTUATION = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Key:
    """A key, its display name and the bytes a terminal sends for it."""

    type: KeyType
    subtype: KeySubtype
    name: str
    code: bytes


EMPTY_KEY = Key(KeyType.EMPTY, KeySubtype.UNKNOWN, "Empty", b"")
UNKNOWN_KEY = Key(KeyType.UNKNOWN, KeySubtype.UNKNOWN, "Unknown", b"")


def _build_keys() -> tuple[Key, ...]:
    keys = [
        Key(KeyType.PAGE_UP, KeySubtype.UNKNOWN, "Page Up", b"\x1b[5~"),
        Key(KeyType.PAGE_DOWN, KeySubtype.UNKNOWN, "Page Down", b"\x1b[6~"),
        Key(KeyType.ARROW_UP, KeySubtype.UNKNOWN, "Arrow Up", b"\x1b[A"),
        Key(KeyType.ARROW_DOWN, KeySubtype.ARROW, "Arrow Down", b"\x1b[B"),
        Key(KeyType.ARROW_LEFT, KeySubtype.ARROW, "Arrow Left", b"\x1b[D"),
        Key(KeyType.ARROW_RIGHT, KeySubtype.ARROW, "Arrow Right", b"\x1b[C"),
        Key(KeyType.ENTER, KeySubtype.UNKNOWN, "Enter", b"\r"),
        Key(KeyType.HOME, KeySubtype.UNKNOWN, "Home", b"\x1b[H"),
        Key(KeyType.END, KeySubtype.UNKNOWN, "End", b"\x1b[F"),
        Key(KeyType.DELETE, KeySubtype.UNKNOWN, "Delete", b"\x7f"),
        Key(KeyType.CTRL_C, KeySubtype.UNKNOWN, "CTRL + C", b"\x03"),
        Key(KeyType.CTRL_BACKSLASH, KeySubtype.UNKNOWN, "CTRL + \\", b"\x1c"),
        Key(KeyType.CTRL_D, KeySubtype.UNKNOWN, "CTRL + D", b"\x04"),
    ]
    digits = (
        KeyType.ZERO, KeyType.ONE, KeyType.TWO, KeyType.THREE, KeyType.FOUR,
        KeyType.FIVE, KeyType.SIX, KeyType.SEVEN, KeyType.EIGHT, KeyType.NINE,
    )
    keys.extend(
        Key(key_type, KeySubtype.DIGIT, str(digit), str(digit).encode())
        for digit, key_type in enumerate(digits)
    )
    keys.append(Key(KeyType.HYPHEN, KeySubtype.UNKNOWN, "-", b"-"))
    keys.append(Key(KeyType.COMMA, KeySubtype.UNKNOWN, ",", b","))
    for letter in "abcdefghijklmnopqrstuvwxyz":
        key_type = KeyType[letter.upper()]
        keys.append(Key(key_type, KeySubtype.ASCII_LOWERCASE, letter, letter.encode()))
        upper = letter.upper()
        keys.append(Key(key_type, KeySubtype.ASCII_UPPERCASE, upper, upper.encode()))
    punctuation = (
        (KeyType.EXCLAMATION_MARK, "!"),
        (KeyType.DOUBLE_QUOTATION_MARK, '"'),
        (KeyType.OCTOTHORPE, "#"),
        (KeyType.DOLLAR_SIGN, "$"),
        (KeyType.PERCENT_SIGN, "%"),
        (KeyType.AMPERSAND, "&"),
        (KeyType.APOSTROPHE, "'"),
        (KeyType.OPEN_ROUND_BRACKET, "("),
        (KeyType.CLOSE_ROUND_BRACKET, ")"),
        (KeyType.ASTERISK, "*"),
        (KeyType.COMMA, ","),
        (KeyType.HYPHEN, "-"),
        (KeyType.PERIOD, "."),
        (KeyType.SLASH, "/"),
        (KeyType.COLON, ":"),
        (KeyType.SEMICOLON, ";"),
        (KeyType.LESS_THAN, "<"),
        (KeyType.EQUAL_SIGN, "="),
        (KeyType.GREATER_THAN, ">"),
        (KeyType.QUESTION_MARK, "?"),
        (KeyType.AT_SIGN, "@"),
    )
    keys.extend(
        Key(key_type, KeySubtype.PUNCTUATION, char, char.encode())
        for key_type, char in punctuation
    )
    return tuple(keys)


KEYS: tuple[Key, ...] = _build_keys()
"""Every known key, in lookup order."""


def lookup_key(data: bytes) -> Key:
    """Return the key that the bytes read from a terminal stand for.

    Input ends at the first NUL byte. The first key whose code starts
    with the input wins; empty input gives EMPTY_KEY and input that
    matches nothing gives UNKNOWN_KEY.
    """
    data = bytes(data).split(b"\0", 1)[0]
    if not data:
        return EMPTY_KEY
    for key in KEYS:
        if key.code.startswith(data):
            return key
    return UNKNOWN_KEY


# Second byte after a 0x00/0xE0 prefix from the Windows console, mapped
# onto the escape sequences used in the key table.
_WINDOWS_SPECIAL = {
    "I": b"\x1b[5~",
    "Q": b"\x1b[6~",
    "H": b"\x1b[A",
    "P": b"\x1b[B",
    "K": b"\x1b[D",
    "M": b"\x1b[C",
    "G": b"\x1b[H",
    "O": b"\x1b[F",
    "S": b"\x7f",
}


class ConsoleInputReader:
    """Reads key presses one at a time, with the terminal in raw mode.

    Use as a context manager: entering switches the terminal to raw mode
    and leaving restores its previous settings. A file descriptor that is
    not a terminal is read as it is.
    """

    def __init__(self, fd: int | None = None) -> None:
        self._explicit_fd = fd is not None
        self.fd = fd
        self._saved = None

    def _descriptor(self) -> int:
        if self.fd is None:
            import sys

            self.fd = sys.stdin.fileno()
        return self.fd

    def __enter__(self) -> "ConsoleInputReader":
        if _WINDOWS and not self._explicit_fd:
            return self
        fd = self._descriptor()
        if os.isatty(fd):
            self._saved = termios.tcgetattr(fd)
            tty.setraw(fd, termios.TCSAFLUSH)
        return self

    def __exit__(self, *args) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
            self._saved = None

    def _read_windows(self) -> bytes:
        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            return _WINDOWS_SPECIAL.get(msvcrt.getwch(), b"")
        return char.encode("utf-8")

    def read_key(self) -> Key:
        """Wait for a key press and return the key.

        Raises EOFError when the input is closed.
        """
        if _WINDOWS and not self._explicit_fd:
            data = self._read_windows()
            return lookup_key(data) if data else UNKNOWN_KEY
        data = os.read(self._descriptor(), _READ_SIZE)
        if not data:
            raise EOFError("console input closed")
        return lookup_key(data)