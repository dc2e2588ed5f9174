"""Flag values holding strings, string lists and string-to-int maps."""

from __future__ import annotations

from dataclasses import dataclass, field

from flagvalues.csvfields import read_as_csv, write_as_csv
from flagvalues.numparse import atoi


@dataclass
class StringValue:
    """A plain string flag value."""

    value: str = ""

    def set(self, val: str) -> None:
        """Store ``val`` unchanged."""
        self.value = val

    def type(self) -> str:
        """Return the name of this value's type."""
        return "string"

    def __str__(self) -> str:
        return self.value


@dataclass
class StringArrayValue:
    """A list of strings; each use of the flag adds one item, commas and all."""

    value: list[str] = field(default_factory=list)
    changed: bool = field(default=False, compare=False)

    def set(self, val: str) -> None:
        """Replace the default on first use, then append ``val``."""
        if not self.changed:
            self.value = [val]
            self.changed = True
        else:
            self.value.append(val)

    def type(self) -> str:
        """Return the name of this value's type."""
        return "stringArray"

    def __str__(self) -> str:
        return "[" + write_as_csv(self.value) + "]"


@dataclass
class StringSliceValue:
    """A list of strings; each use of the flag adds comma-separated items."""

    value: list[str] = field(default_factory=list)
    changed: bool = field(default=False, compare=False)

    def set(self, val: str) -> None:
        """Split ``val`` as a CSV record; replace the default on first use, then extend."""
        items = read_as_csv(val)
        if not self.changed:
            self.value = items
        else:
            self.value.extend(items)
        self.changed = True

    def type(self) -> str:
        """Return the name of this value's type."""
        return "stringSlice"

    def __str__(self) -> str:
        return "[" + write_as_csv(self.value) + "]"


def _parse_pairs(val: str) -> dict[str, int]:
    out: dict[str, int] = {}
    for pair in val.split(","):
        key, sep, number = pair.partition("=")
        if not sep:
            raise ValueError(f"{pair} must be formatted as key=value")
        out[key] = atoi(number)
    return out


@dataclass
class StringToIntValue:
    """A mapping from strings to ints, given as ``a=1,b=2``."""

    value: dict[str, int] = field(default_factory=dict)
    changed: bool = field(default=False, compare=False)

    def set(self, val: str) -> None:
        """Parse ``key=value`` pairs; replace the default on first use, then merge."""
        pairs = _parse_pairs(val)
        if not self.changed:
            self.value = pairs
        else:
            self.value.update(pairs)
        self.changed = True

    def type(self) -> str:
        """Return the name of this value's type."""
        return "stringToInt"

    def __str__(self) -> str:
        return "[" + ",".join(f"{k}={v}" for k, v in self.value.items()) + "]"


def string_conv(sval: str) -> str:
    """Convert the text form of a string flag, which is the string itself."""
    if not isinstance(sval, str):
        raise TypeError(f"expected a string, got {type(sval).__name__}")
    return sval


def _unbracket(sval: str) -> str:
    if len(sval) < 2:
        raise ValueError(f"{sval!r} is not a bracketed list")
    return sval[1:-1]


def string_array_conv(sval: str) -> list[str]:
    """Convert the bracketed text form of a stringArray flag."""
    inner = _unbracket(sval)
    if not inner:
        return []
    return read_as_csv(inner)


def string_slice_conv(sval: str) -> list[str]:
    """Convert the bracketed text form of a stringSlice flag."""
    inner = _unbracket(sval)
    if not inner:
        return []
    return read_as_csv(inner)


def string_to_int_conv(val: str) -> dict[str, int]:
    """Convert the bracketed text form of a stringToInt flag."""
    inner = val.strip("[]")
    if not inner:
        return {}
    return _parse_pairs(inner)