import pytest

from flagvalues.numparse import NumberError
from flagvalues.unsigned import (
    Uint8Value,
    Uint16Value,
    Uint32Value,
    Uint64Value,
    UintValue,
    uint8_conv,
    uint16_conv,
    uint32_conv,
    uint64_conv,
    uint_conv,
)


def test_type_name():
    assert UintValue().type() == "uint"
    assert Uint8Value().type() == "uint8"
    assert Uint16Value().type() == "uint16"
    assert Uint32Value().type() == "uint32"
    assert Uint64Value().type() == "uint64"


def test_default_is_zero():
    for v in (UintValue(), Uint8Value(), Uint16Value(), Uint32Value(), Uint64Value()):
        assert v.value == 0
        assert str(v) == "0"


def test_set_round_trip_decimal():
    cases = (
        (UintValue(), 64),
        (Uint8Value(), 8),
        (Uint16Value(), 16),
        (Uint32Value(), 32),
        (Uint64Value(), 64),
    )
    for v, bits in cases:
        for n in (0, 1, (1 << bits) - 1, (1 << (bits - 1))):
            v.set(str(n))
            assert v.value == n
            assert str(v) == str(n)


def test_set_accepts_prefixes():
    cases = (
        (UintValue(), 64),
        (Uint8Value(), 8),
        (Uint16Value(), 16),
        (Uint32Value(), 32),
        (Uint64Value(), 64),
    )
    for v, bits in cases:
        n = (1 << bits) - 1
        v.set("0x" + format(n, "x"))
        assert v.value == n
        v.set("0o" + format(n, "o"))
        assert v.value == n
        v.set("0b" + format(n, "b"))
        assert v.value == n
        v.set("0" + format(n, "o"))
        assert v.value == n


def test_set_pinned_prefixed_maxima():
    v8 = Uint8Value()
    v8.set("0377")
    assert v8.value == 255
    v16 = Uint16Value()
    v16.set("0o177777")
    assert v16.value == 65535
    v32 = Uint32Value()
    v32.set("0xffffffff")
    assert v32.value == 4294967295


def test_set_out_of_range():
    cases = (
        (UintValue(value=1), 64),
        (Uint8Value(value=1), 8),
        (Uint16Value(value=1), 16),
        (Uint32Value(value=1), 32),
        (Uint64Value(value=1), 64),
    )
    for v, bits in cases:
        with pytest.raises(NumberError) as info:
            v.set(str(1 << bits))
        assert info.value.reason == "value out of range"
        assert v.value == 1


@pytest.mark.parametrize("bad", ["", "-1", "abc", "1.5", " 1"])
def test_set_invalid_syntax(bad):
    for v in (UintValue(), Uint8Value(), Uint16Value(), Uint32Value(), Uint64Value()):
        with pytest.raises(NumberError) as info:
            v.set(bad)
        assert info.value.func == "ParseUint"
        assert info.value.reason == "invalid syntax"


def test_constructor_range_check():
    assert UintValue(value=(1 << 64) - 1).value == (1 << 64) - 1
    assert Uint8Value(value=255).value == 255
    assert Uint16Value(value=65535).value == 65535
    assert Uint32Value(value=4294967295).value == 4294967295
    assert Uint64Value(value=(1 << 64) - 1).value == (1 << 64) - 1
    with pytest.raises(ValueError):
        UintValue(value=1 << 64)
    with pytest.raises(ValueError):
        Uint8Value(value=256)
    with pytest.raises(ValueError):
        Uint16Value(value=65536)
    with pytest.raises(ValueError):
        Uint32Value(value=1 << 32)
    with pytest.raises(ValueError):
        Uint64Value(value=1 << 64)
    with pytest.raises(ValueError):
        Uint8Value(value=-1)
    with pytest.raises(ValueError):
        UintValue(value=-1)


def test_conv_round_trip():
    assert uint_conv("0") == 0
    assert uint_conv("7") == 7
    assert uint8_conv("0xff") == 255
    assert uint8_conv("255") == 255
    assert uint16_conv("65535") == 65535
    assert uint16_conv("0x7") == 7
    assert uint32_conv("0xffffffff") == 4294967295
    assert uint64_conv("18446744073709551615") == 18446744073709551615
    assert uint_conv("0xffffffffffffffff") == 18446744073709551615


def test_conv_out_of_range():
    with pytest.raises(NumberError) as info:
        uint_conv(str(1 << 64))
    assert info.value.reason == "value out of range"
    with pytest.raises(NumberError) as info:
        uint8_conv(str(1 << 8))
    assert info.value.reason == "value out of range"
    with pytest.raises(NumberError) as info:
        uint16_conv(str(1 << 16))
    assert info.value.reason == "value out of range"
    with pytest.raises(NumberError) as info:
        uint32_conv(str(1 << 32))
    assert info.value.reason == "value out of range"
    with pytest.raises(NumberError) as info:
        uint64_conv(str(1 << 64))
    assert info.value.reason == "value out of range"


def test_conv_rejects_negative():
    with pytest.raises(NumberError):
        uint_conv("-5")
    with pytest.raises(NumberError):
        uint8_conv("-5")
    with pytest.raises(NumberError):
        uint16_conv("-5")
    with pytest.raises(NumberError):
        uint32_conv("-5")
    with pytest.raises(NumberError):
        uint64_conv("-5")


def test_conv_matches_set():
    v = Uint16Value()
    v.set("0x1f")
    assert v.value == uint16_conv("0x1f") == 31


def test_underscore_separators_allowed_with_prefix_detection():
    v = Uint32Value()
    v.set("1_000")
    assert v.value == uint32_conv("1000")
    with pytest.raises(NumberError):
        v.set("1__000")


def test_str_reflects_value():
    v = Uint64Value()
    v.set(str((1 << 64) - 1))
    assert str(v) == str((1 << 64) - 1)