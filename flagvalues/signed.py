"""Flag values holding signed integers of fixed widths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from flagvalues.numparse import atoi, parse_int


@dataclass
class IntValue:
    """A native-width signed integer flag value."""

    value: int = 0

    BIT_SIZE: ClassVar[int] = 64
    TYPE_NAME: ClassVar[str] = "int"

    def __post_init__(self) -> None:
        low = -(1 << (self.BIT_SIZE - 1))
        high = -low - 1
        if not low <= self.value <= high:
            raise ValueError(f"{self.value} is out of range for {self.TYPE_NAME}")

    def set(self, s: str) -> None:
        """Parse ``s`` (any base prefix allowed) and store it."""
        self.value = parse_int(s, 0, self.BIT_SIZE)

    def type(self) -> str:
        """Return the name of this value's type."""
        return self.TYPE_NAME

    def __str__(self) -> str:
        return str(self.value)


class Int8Value(IntValue):
    """An 8-bit signed integer flag value."""

    BIT_SIZE = 8
    TYPE_NAME = "int8"


class Int16Value(IntValue):
    """A 16-bit signed integer flag value."""

    BIT_SIZE = 16
    TYPE_NAME = "int16"


class Int32Value(IntValue):
    """A 32-bit signed integer flag value."""

    BIT_SIZE = 32
    TYPE_NAME = "int32"


class Int64Value(IntValue):
    """A 64-bit signed integer flag value."""

    BIT_SIZE = 64
    TYPE_NAME = "int64"


def int_conv(sval: str) -> int:
    """Convert the text form of an int flag (decimal only)."""
    return atoi(sval)


def int8_conv(sval: str) -> int:
    """Convert the text form of an int8 flag."""
    return parse_int(sval, 0, 8)


def int16_conv(sval: str) -> int:
    """Convert the text form of an int16 flag."""
    return parse_int(sval, 0, 16)


def int32_conv(sval: str) -> int:
    """Convert the text form of an int32 flag."""
    return parse_int(sval, 0, 32)


def int64_conv(sval: str) -> int:
    """Convert the text form of an int64 flag."""
    return parse_int(sval, 0, 64)