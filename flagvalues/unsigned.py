"""Flag values holding unsigned integers of fixed widths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from flagvalues.numparse import parse_uint


@dataclass
class UintValue:
    """A native-width unsigned integer flag value."""

    value: int = 0

    BIT_SIZE: ClassVar[int] = 64
    TYPE_NAME: ClassVar[str] = "uint"

    def __post_init__(self) -> None:
        high = (1 << self.BIT_SIZE) - 1
        if not 0 <= self.value <= high:
            raise ValueError(f"{self.value} is out of range for {self.TYPE_NAME}")

    def set(self, s: str) -> None:
        """Parse ``s`` (any base prefix allowed) and store it."""
        self.value = parse_uint(s, 0, self.BIT_SIZE)

    def type(self) -> str:
        """Return the name of this value's type."""
        return self.TYPE_NAME

    def __str__(self) -> str:
        return str(self.value)


class Uint8Value(UintValue):
    """An 8-bit unsigned integer flag value."""

    BIT_SIZE = 8
    TYPE_NAME = "uint8"


class Uint16Value(UintValue):
    """A 16-bit unsigned integer flag value."""

    BIT_SIZE = 16
    TYPE_NAME = "uint16"


class Uint32Value(UintValue):
    """A 32-bit unsigned integer flag value."""

    BIT_SIZE = 32
    TYPE_NAME = "uint32"


class Uint64Value(UintValue):
    """A 64-bit unsigned integer flag value."""

    BIT_SIZE = 64
    TYPE_NAME = "uint64"


def uint_conv(sval: str) -> int:
    """Convert the text form of a uint flag (native width)."""
    return parse_uint(sval, 0, 0)


def uint8_conv(sval: str) -> int:
    """Convert the text form of a uint8 flag."""
    return parse_uint(sval, 0, 8)


def uint16_conv(sval: str) -> int:
    """Convert the text form of a uint16 flag."""
    return parse_uint(sval, 0, 16)


def uint32_conv(sval: str) -> int:
    """Convert the text form of a uint32 flag."""
    return parse_uint(sval, 0, 32)


def uint64_conv(sval: str) -> int:
    """Convert the text form of a uint64 flag."""
    return parse_uint(sval, 0, 64)