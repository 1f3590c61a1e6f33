"""Fixed-width 8-bit arithmetic and bitwise operations.

Unsigned operands lie in 0..255 and signed operands in -128..127; results
wrap around exactly as 8-bit registers do.
"""

from __future__ import annotations

_U8_MASK = 0xFF


def _check_unsigned(*values: int) -> None:
    for value in values:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{value} is not an unsigned 8-bit integer")


def _check_signed(*values: int) -> None:
    for value in values:
        if not -0x80 <= value <= 0x7F:
            raise ValueError(f"{value} is not a signed 8-bit integer")


def _to_unsigned(value: int) -> int:
    return value & _U8_MASK


def _to_signed(value: int) -> int:
    return ((value + 0x80) & _U8_MASK) - 0x80


def add(a: int, b: int) -> int:
    """Add two unsigned bytes, wrapping on overflow."""
    _check_unsigned(a, b)
    return _to_unsigned(a + b)


def add_signed(a: int, b: int) -> int:
    """Add two signed bytes, wrapping on overflow."""
    _check_signed(a, b)
    return _to_signed(a + b)


def subtract(a: int, b: int) -> int:
    """Subtract two unsigned bytes, wrapping on underflow."""
    _check_unsigned(a, b)
    return _to_unsigned(a - b)


def subtract_signed(a: int, b: int) -> int:
    """Subtract two signed bytes, wrapping on overflow."""
    _check_signed(a, b)
    return _to_signed(a - b)


def twos_complement(value: int) -> str:
    """Return the 8-bit two's complement bit pattern of a signed byte."""
    _check_signed(value)
    return format(_to_unsigned(value), "08b")


def shift_left(value: int) -> int:
    """Logically shift an unsigned byte one bit to the left."""
    _check_unsigned(value)
    return _to_unsigned(value << 1)


def shift_right(value: int) -> int:
    """Logically shift an unsigned byte one bit to the right."""
    _check_unsigned(value)
    return value >> 1


def shift_left_signed(value: int) -> int:
    """Shift a signed byte one bit to the left, wrapping into 8 bits."""
    _check_signed(value)
    return _to_signed(value << 1)


def shift_right_signed(value: int) -> int:
    """Arithmetically shift a signed byte one bit to the right."""
    _check_signed(value)
    return value >> 1


def bit_and(a: int, b: int) -> int:
    """Return the bitwise AND of two unsigned bytes."""
    _check_unsigned(a, b)
    return a & b


def clear(a: int, b: int) -> int:
    """Return the bitwise AND of two signed bytes, for clearing with an inverted mask."""
    _check_signed(a, b)
    return a & b


def bit_or(a: int, b: int) -> int:
    """Return the bitwise OR of two unsigned bytes."""
    _check_unsigned(a, b)
    return a | b


def bit_xor(a: int, b: int) -> int:
    """Return the bitwise XOR of two unsigned bytes."""
    _check_unsigned(a, b)
    return a ^ b