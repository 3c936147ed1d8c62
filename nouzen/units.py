"""Integer digit counts and human-readable byte sizes."""

from __future__ import annotations

_SIZE_UNITS = ("", "K", "M", "G", "T", "P", "E", "Z")


def int_length(value: int) -> int:
    """Return the number of characters needed to print a signed integer."""
    size = 1 if value < 0 else 0
    return size + uint_length(abs(value))


def uint_length(value: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    if value < 0:
        raise ValueError("value must not be negative")
    size = 1
    while value >= 10:
        value //= 10
        size += 1
    return size


def format_size(value: float) -> str:
    """Format a byte count using binary (1024) multiples, e.g. '1.5 KB'."""
    value = float(value)
    for unit in _SIZE_UNITS:
        if abs(value) >= 1024.0:
            value /= 1024.0
            continue
        return f"{value:3.1f} {unit}B"
    return f"{value:.1f} YB"