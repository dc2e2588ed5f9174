"""Flag values holding IP addresses, address lists, IPv4 masks and networks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from ipaddress import (
    IPv4Address,
    IPv4Network,
    IPv6Address,
    IPv6Network,
    ip_address,
    ip_network,
)

from flagvalues.csvfields import read_as_csv, write_as_csv
from flagvalues.numparse import NumberError, parse_int

Address = IPv4Address | IPv6Address
Network = IPv4Network | IPv6Network

_NIL = "<nil>"
_QUOTES = str.maketrans("", "", "\"'`")
_V4_IN_V6_PREFIX = bytes(10) + b"\xff\xff"


def _quoted(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def _raw_address(text: str) -> Address | None:
    """Parse a bare IPv4 or IPv6 address; zones are not allowed."""
    if "%" in text:
        return None
    try:
        return ip_address(text)
    except ValueError:
        return None


def _parse_ip(text: str) -> Address | None:
    """Parse an address, folding IPv4-mapped IPv6 addresses to IPv4."""
    addr = _raw_address(text)
    if isinstance(addr, IPv6Address) and addr.ipv4_mapped is not None:
        return addr.ipv4_mapped
    return addr


def _sixteen_bytes(addr: Address) -> bytes:
    if isinstance(addr, IPv4Address):
        return _V4_IN_V6_PREFIX + addr.packed
    return addr.packed


def _parse_cidr(text: str) -> Network | None:
    """Parse ``address/prefix``; the host bits are cleared in the result."""
    addr_text, sep, prefix_text = text.partition("/")
    if not sep:
        return None
    addr = _raw_address(addr_text)
    if addr is None:
        return None
    if not (prefix_text.isascii() and prefix_text.isdigit()):
        return None
    prefix = int(prefix_text)
    if prefix > addr.max_prefixlen:
        return None
    return ip_network((addr, prefix), strict=False)


@dataclass
class IPValue:
    """A single IP address flag value."""

    value: Address | None = None

    def set(self, s: str) -> None:
        """Parse ``s`` (surrounding space ignored) and store the address."""
        addr = _parse_ip(s.strip())
        if addr is None:
            raise ValueError(f"failed to parse IP: {_quoted(s)}")
        self.value = addr

    def type(self) -> str:
        """Return the name of this value's type."""
        return "ip"

    def __str__(self) -> str:
        return _NIL if self.value is None else str(self.value)


def ip_conv(sval: str) -> Address:
    """Convert the text form of an ip flag."""
    addr = _parse_ip(sval)
    if addr is None:
        raise ValueError(f"invalid string being converted to IP address: {sval}")
    return addr


@dataclass
class IPSliceValue:
    """A list of IP addresses; each use of the flag adds comma-separated items."""

    value: list[Address] = field(default_factory=list)
    changed: bool = field(default=False, compare=False)

    def set(self, val: str) -> None:
        """Drop all quote characters, split on commas, and parse each address.

        The default is replaced on first use; later uses extend the list.
        """
        try:
            items = read_as_csv(val.translate(_QUOTES))
        except EOFError:
            items = []
        out: list[Address] = []
        for item in items:
            addr = _parse_ip(item.strip())
            if addr is None:
                raise ValueError(f"invalid string being converted to IP address: {item}")
            out.append(addr)
        if not self.changed:
            self.value = out
        else:
            self.value.extend(out)
        self.changed = True

    def type(self) -> str:
        """Return the name of this value's type."""
        return "ipSlice"

    def __str__(self) -> str:
        return "[" + write_as_csv([str(addr) for addr in self.value]) + "]"


def ip_slice_conv(val: str) -> list[Address]:
    """Convert the bracketed text form of an ipSlice flag."""
    inner = val.strip("[]")
    if not inner:
        return []
    out: list[Address] = []
    for item in inner.split(","):
        addr = _parse_ip(item.strip())
        if addr is None:
            raise ValueError(f"invalid string being converted to IP address: {item}")
        out.append(addr)
    return out


def parse_ipv4_mask(s: str) -> bytes | None:
    """Parse an IPv4 mask as dotted form (``255.255.255.0``) or hex (``ffffff00``).

    Returns the four mask bytes, or None when ``s`` is neither form.
    """
    addr = _parse_ip(s)
    if addr is None:
        if len(s) != 8:
            return None
        octets = []
        for start in range(0, 8, 2):
            try:
                octets.append(parse_int("0x" + s[start:start + 2], 0, 0))
            except NumberError:
                return None
        addr = _parse_ip(".".join(str(octet) for octet in octets))
        if addr is None:
            return None
    return _sixteen_bytes(addr)[12:16]


def ipv4_mask_conv(sval: str) -> bytes:
    """Convert the text form of an ipMask flag."""
    mask = parse_ipv4_mask(sval)
    if mask is None:
        raise ValueError(f"unable to parse {sval} as net.IPMask")
    return mask


@dataclass
class IPMaskValue:
    """An IPv4 mask flag value, held as its four bytes."""

    value: bytes | None = None

    def set(self, s: str) -> None:
        """Parse ``s`` as an IPv4 mask and store it."""
        mask = parse_ipv4_mask(s)
        if mask is None:
            raise ValueError(f"failed to parse IP mask: {_quoted(s)}")
        self.value = mask

    def type(self) -> str:
        """Return the name of this value's type."""
        return "ipMask"

    def __str__(self) -> str:
        return self.value.hex() if self.value else _NIL


@dataclass
class IPNetValue:
    """An IP network flag value given in CIDR notation."""

    value: Network | None = None

    def set(self, value: str) -> None:
        """Parse ``value`` (surrounding space ignored) as ``address/prefix``."""
        text = value.strip()
        network = _parse_cidr(text)
        if network is None:
            raise ValueError(f"invalid CIDR address: {text}")
        self.value = network

    def type(self) -> str:
        """Return the name of this value's type."""
        return "ipNet"

    def __str__(self) -> str:
        return _NIL if self.value is None else str(self.value)


def ipnet_conv(sval: str) -> Network:
    """Convert the text form of an ipNet flag."""
    network = _parse_cidr(sval.strip())
    if network is None:
        raise ValueError(f"invalid string being converted to IPNet: {sval}")
    return network