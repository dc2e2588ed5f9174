"""Flag values holding lists of integers, filled from comma-separated text."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from flagvalues.numparse import atoi, parse_int, parse_uint


def _parse_items(text: str, parse: Callable[[str], int]) -> list[int]:
    return [parse(item) for item in text.split(",")]


def _int32_item(text: str) -> int:
    return parse_int(text, 0, 32)


def _int64_item(text: str) -> int:
    return parse_int(text, 0, 64)


def _uint_item(text: str) -> int:
    return parse_uint(text, 10, 0)


@dataclass
class _NumberSlice:
    """Shared storage for integer list values."""

    value: list[int] = field(default_factory=list)
    changed: bool = field(default=False, compare=False)

    def _absorb(self, items: list[int]) -> None:
        if not self.changed:
            self.value = items
        else:
            self.value.extend(items)
        self.changed = True

    def __str__(self) -> str:
        return "[" + ",".join(str(item) for item in self.value) + "]"


class IntSliceValue(_NumberSlice):
    """A list of native-width signed integers, each given in decimal."""

    def set(self, val: str) -> None:
        """Parse comma-separated items; replace the default on first use, then extend."""
        self._absorb(_parse_items(val, atoi))

    def type(self) -> str:
        """Return the name of this value's type."""
        return "intSlice"


class Int32SliceValue(_NumberSlice):
    """A list of 32-bit signed integers; base prefixes are allowed."""

    def set(self, val: str) -> None:
        """Parse comma-separated items; replace the default on first use, then extend."""
        self._absorb(_parse_items(val, _int32_item))

    def type(self) -> str:
        """Return the name of this value's type."""
        return "int32Slice"


class Int64SliceValue(_NumberSlice):
    """A list of 64-bit signed integers; base prefixes are allowed."""

    def set(self, val: str) -> None:
        """Parse comma-separated items; replace the default on first use, then extend."""
        self._absorb(_parse_items(val, _int64_item))

    def type(self) -> str:
        """Return the name of this value's type."""
        return "int64Slice"


class UintSliceValue(_NumberSlice):
    """A list of native-width unsigned integers, each given in decimal."""

    def set(self, val: str) -> None:
        """Parse comma-separated items; replace the default on first use, then extend."""
        self._absorb(_parse_items(val, _uint_item))

    def type(self) -> str:
        """Return the name of this value's type."""
        return "uintSlice"


def _conv(val: str, parse: Callable[[str], int]) -> list[int]:
    inner = val.strip("[]")
    if not inner:
        return []
    return _parse_items(inner, parse)


def int_slice_conv(val: str) -> list[int]:
    """Convert the bracketed text form of an intSlice flag."""
    return _conv(val, atoi)


def int32_slice_conv(val: str) -> list[int]:
    """Convert the bracketed text form of an int32Slice flag."""
    return _conv(val, _int32_item)


def int64_slice_conv(val: str) -> list[int]:
    """Convert the bracketed text form of an int64Slice flag."""
    return _conv(val, _int64_item)


def uint_slice_conv(val: str) -> list[int]:
    """Convert the bracketed text form of a uintSlice flag."""
    return _conv(val, _uint_item)