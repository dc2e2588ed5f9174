"""Integer parsing with explicit base and bit-size rules.

The accepted syntax follows the usual flag conventions. With base 0 the
base comes from the prefix: ``0x`` for hex, ``0o`` or a bare leading ``0``
for octal, ``0b`` for binary, and decimal otherwise. Underscores may
separate digits, but only with base 0. A bit size of 0 means the native
integer width of 64 bits.
"""

from __future__ import annotations

import json

_SYNTAX = "invalid syntax"
_RANGE = "value out of range"
_INT_SIZE = 64
_PREFIX_BASES = {"b": 2, "o": 8, "x": 16}


class NumberError(ValueError):
    """Raised when a string cannot be converted to an integer."""

    def __init__(self, func: str, num: str, reason: str) -> None:
        self.func = func
        self.num = num
        self.reason = reason
        super().__init__(f"{func}: parsing {json.dumps(num)}: {reason}")


def _digit_value(ch: str) -> int | None:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return None


def _underscore_ok(s: str) -> bool:
    """Report whether underscores in ``s`` only ever separate digits."""
    saw = "^"
    if s[:1] in ("-", "+") and s:
        s = s[1:]
    is_hex = False
    if len(s) >= 2 and s[0] == "0" and s[1].lower() in _PREFIX_BASES:
        is_hex = s[1].lower() == "x"
        s = s[2:]
        saw = "0"
    for ch in s:
        if "0" <= ch <= "9" or (is_hex and "a" <= ch.lower() <= "f" and len(ch.lower()) == 1):
            saw = "0"
        elif ch == "_":
            if saw != "0":
                return False
            saw = "_"
        else:
            if saw == "_":
                return False
            saw = "!"
    return saw != "_"


def _parse_unsigned(func: str, s: str, base: int, bit_size: int) -> int:
    if not s:
        raise NumberError(func, s, _SYNTAX)

    original = s
    base_from_prefix = base == 0

    if base == 0:
        base = 10
        if s[0] == "0":
            marker = s[1:2].lower()
            if len(s) >= 3 and marker in _PREFIX_BASES:
                base = _PREFIX_BASES[marker]
                s = s[2:]
            else:
                base = 8
                s = s[1:]
    elif not 2 <= base <= 36:
        raise NumberError(func, original, f"invalid base {base}")

    if bit_size == 0:
        bit_size = _INT_SIZE
    elif not 0 < bit_size <= 64:
        raise NumberError(func, original, f"invalid bit size {bit_size}")

    max_value = (1 << bit_size) - 1
    value = 0
    saw_underscore = False
    for ch in s:
        if ch == "_" and base_from_prefix:
            saw_underscore = True
            continue
        digit = _digit_value(ch)
        if digit is None or digit >= base:
            raise NumberError(func, original, _SYNTAX)
        value = value * base + digit
        if value > max_value:
            raise NumberError(func, original, _RANGE)

    if saw_underscore and not _underscore_ok(original):
        raise NumberError(func, original, _SYNTAX)
    return value


def parse_uint(s: str, base: int, bit_size: int) -> int:
    """Parse ``s`` as an unsigned integer that fits in ``bit_size`` bits."""
    return _parse_unsigned("ParseUint", s, base, bit_size)


def _parse_signed(func: str, s: str, base: int, bit_size: int) -> int:
    if not s:
        raise NumberError(func, s, _SYNTAX)

    negative = s[0] == "-"
    body = s[1:] if s[0] in ("+", "-") else s
    try:
        magnitude = _parse_unsigned(func, body, base, bit_size)
    except NumberError as exc:
        raise NumberError(func, s, exc.reason) from None

    cutoff = 1 << ((bit_size or _INT_SIZE) - 1)
    if negative:
        if magnitude > cutoff:
            raise NumberError(func, s, _RANGE)
        return -magnitude
    if magnitude >= cutoff:
        raise NumberError(func, s, _RANGE)
    return magnitude


def parse_int(s: str, base: int, bit_size: int) -> int:
    """Parse ``s`` as a signed integer that fits in ``bit_size`` bits."""
    return _parse_signed("ParseInt", s, base, bit_size)


def atoi(s: str) -> int:
    """Parse ``s`` as a decimal native-width signed integer."""
    return _parse_signed("Atoi", s, 10, 0)