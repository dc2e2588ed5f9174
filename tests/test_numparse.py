import pytest

from flagvalues.numparse import NumberError, atoi, parse_int, parse_uint


@pytest.mark.parametrize("n", [0, 1, 7, 255, 4096, 123456789, 2**63 - 1])
def test_parse_int_round_trips_with_python_prefixes(n):
    assert parse_int(str(n), 0, 64) == n
    assert parse_int(hex(n), 0, 64) == n
    assert parse_int(oct(n), 0, 64) == n
    assert parse_int(bin(n), 0, 64) == n
    assert parse_int("-" + str(n), 0, 64) == -n


@pytest.mark.parametrize("n", [1, 8, 511, 2**40])
def test_leading_zero_means_octal(n):
    assert parse_int("0" + oct(n)[2:], 0, 64) == n


def test_uppercase_prefixes_and_digits():
    assert parse_int("0XFF", 0, 64) == int("0xff", 16)
    assert parse_uint("0B101", 0, 64) == int("101", 2)


def test_explicit_base():
    assert parse_int("zz", 36, 64) == int("zz", 36)
    assert parse_uint("ff", 16, 8) == int("ff", 16)


def test_plus_sign_accepted():
    assert parse_int("+42", 10, 64) == 42


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_signed_limits(bits):
    high = 2 ** (bits - 1) - 1
    low = -(2 ** (bits - 1))
    assert parse_int(str(high), 0, bits) == high
    assert parse_int(str(low), 0, bits) == low
    with pytest.raises(NumberError) as info:
        parse_int(str(high + 1), 0, bits)
    assert info.value.reason == "value out of range"
    with pytest.raises(NumberError):
        parse_int(str(low - 1), 0, bits)


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_unsigned_limits(bits):
    high = 2**bits - 1
    assert parse_uint(str(high), 0, bits) == high
    with pytest.raises(NumberError) as info:
        parse_uint(str(high + 1), 0, bits)
    assert info.value.reason == "value out of range"


def test_bit_size_zero_is_64():
    assert parse_int(str(2**63 - 1), 0, 0) == 2**63 - 1
    with pytest.raises(NumberError):
        parse_int(str(2**63), 0, 0)


@pytest.mark.parametrize("text", ["1_000", "0x_ff", "0b1_0_1", "-1_2"])
def test_valid_underscores_with_base_zero(text):
    assert parse_int(text, 0, 64) == int(text, 0)


@pytest.mark.parametrize("text", ["_1", "1__0", "1_", "0x"])
def test_bad_syntax_with_base_zero(text):
    with pytest.raises(NumberError) as info:
        parse_int(text, 0, 64)
    assert info.value.reason == "invalid syntax"
    assert info.value.num == text
    assert info.value.func == "ParseInt"


def test_underscores_rejected_with_explicit_base():
    with pytest.raises(NumberError):
        parse_int("1_000", 10, 64)


@pytest.mark.parametrize("text", ["", "+", "-", "abc", "1.5", " 1", "9a"])
def test_parse_int_syntax_errors(text):
    with pytest.raises(NumberError):
        parse_int(text, 0, 64)


def test_parse_uint_rejects_sign():
    with pytest.raises(NumberError) as info:
        parse_uint("-1", 0, 64)
    assert info.value.func == "ParseUint"


def test_invalid_base_and_bit_size():
    with pytest.raises(NumberError, match="invalid base"):
        parse_int("1", 1, 64)
    with pytest.raises(NumberError, match="invalid bit size"):
        parse_uint("1", 10, 65)


def test_error_is_value_error_and_names_input():
    with pytest.raises(ValueError) as info:
        parse_int("oops", 0, 64)
    assert "oops" in str(info.value)


def test_atoi_decimal_only():
    assert atoi("-17") == -17
    assert atoi(str(2**63 - 1)) == 2**63 - 1
    with pytest.raises(NumberError) as info:
        atoi("0x10")
    assert info.value.func == "Atoi"
    with pytest.raises(NumberError):
        atoi("1_0")