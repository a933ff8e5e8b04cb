"""Bit level utilities."""

from typing import NoReturn


def parity(*bits: int) -> int:
    """Even parity of the given bits, the sum mod 2."""
    return sum(bits) % 2


def toggle_bit(bit: int) -> int:
    """Inverts a single bit value."""
    return 1 - bit


def get_bit(value: int, bit_pos: int) -> int:
    """Gets the value of a specific bit of an integer.

    Returns: 1 for high, 0 for low.
    """
    return (value >> bit_pos) & 1


def unreachable(*args: object) -> NoReturn:
    raise RuntimeError("Unreachable", args)
