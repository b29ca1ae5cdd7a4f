"""Command-line argument parsing and validation for the dining simulation."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32
_LONG_BITS = 64


class InputError(ValueError):
    """Raised when the simulation arguments are not acceptable."""


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def parse_int(text: str) -> int:
    """Parse a leading integer from ``text`` the way ``atoi`` does.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without a leading number yields 0. The result wraps
    like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    result = 0
    for char in rest:
        if not _is_digit(char):
            break
        result = _wrap(result * 10 + (ord(char) - ord("0")), _LONG_BITS)
    return _wrap(result * sign, _INT_BITS)


def validate_args(args: list[str] | tuple[str, ...]) -> tuple[int, ...]:
    """Check the arguments (program name excluded) and return them as integers.

    Expected: philosopher count, time to die, time to eat, time to sleep and,
    optionally, the number of meals each philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise InputError(f"expected 4 or 5 arguments, got {len(args)}")
    for arg in args:
        if not all(_is_digit(char) for char in arg):
            raise InputError(f"argument is not a non-negative number: {arg!r}")
    values = tuple(parse_int(arg) for arg in args)
    if len(values) == 5 and values[4] <= 0:
        raise InputError("number of meals must be at least 1")
    if values[0] < 1:
        raise InputError("number of philosophers must be at least 1")
    for value in values[1:4]:
        if value <= 10:
            raise InputError("times must be greater than 10 milliseconds")
    return values