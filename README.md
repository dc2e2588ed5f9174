# flagvalues

Typed values for command-line flags. Each value type holds its current
setting in a `value` attribute, parses new text with `set()`, reports its
kind through `type()`, and renders itself back to text with `str()`. A
matching `*_conv` function turns that text form back into a plain Python
value.

The package has no dependencies outside the standard library.

## Installing

From a checkout of the project:

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Value types | Functions |
| --- | --- | --- |
| `flagvalues.numparse` | — | `parse_int`, `parse_uint`, `atoi`, raising `NumberError` |
| `flagvalues.signed` | `IntValue`, `Int8Value`, `Int16Value`, `Int32Value`, `Int64Value` | `int_conv`, `int8_conv`, `int16_conv`, `int32_conv`, `int64_conv` |
| `flagvalues.unsigned` | `UintValue`, `Uint8Value`, `Uint16Value`, `Uint32Value`, `Uint64Value` | `uint_conv`, `uint8_conv`, `uint16_conv`, `uint32_conv`, `uint64_conv` |
| `flagvalues.csvfields` | — | `read_as_csv`, `write_as_csv`, raising `CSVError` |
| `flagvalues.textvalues` | `StringValue`, `StringArrayValue`, `StringSliceValue`, `StringToIntValue` | `string_conv`, `string_array_conv`, `string_slice_conv`, `string_to_int_conv` |
| `flagvalues.slices` | `IntSliceValue`, `Int32SliceValue`, `Int64SliceValue`, `UintSliceValue` | `int_slice_conv`, `int32_slice_conv`, `int64_slice_conv`, `uint_slice_conv` |
| `flagvalues.netvalues` | `IPValue`, `IPSliceValue`, `IPMaskValue`, `IPNetValue` | `ip_conv`, `ip_slice_conv`, `ipv4_mask_conv`, `ipnet_conv`, `parse_ipv4_mask` |

## Behaviour worth knowing

### Integers

- `parse_int(s, base, bit_size)` and `parse_uint(s, base, bit_size)` check
  that the result fits in `bit_size` bits; a `bit_size` of 0 means 64.
  With `base` 0 the base comes from the prefix: `0x` for hex, `0o` or a
  bare leading `0` for octal, `0b` for binary, decimal otherwise. Also only
  with `base` 0, `_` may separate digits (`1_000`, `0x_ff`).
  Failures raise `NumberError`, a `ValueError`, whose message reads like
  `ParseInt: parsing "abc": invalid syntax` or `...: value out of range`.
- `atoi(s)` parses decimal only, into a 64-bit signed range.
- `IntValue` … `Int64Value` and `UintValue` … `Uint64Value` take any base
  prefix in `set()`. Their constructors raise `ValueError` when the initial
  value does not fit the type's width.
- `int_conv` and `IntSliceValue` accept decimal text only; `UintSliceValue`
  and `uint_slice_conv` likewise. `Int32SliceValue` and `Int64SliceValue`
  accept base prefixes.

### Lists and maps

- List values (`StringSliceValue`, `IntSliceValue`, `IPSliceValue` and the
  rest) replace their default the first time they are set and append on
  every later call.
- Text given to `StringSliceValue` is split as one CSV record, so
  `"one,two"` in quotes stays a single item. `StringArrayValue` never
  splits: each `set()` adds exactly one item.
- `StringToIntValue` takes `key=value` pairs separated by commas; a pair
  without `=` raises `ValueError`. Later calls merge into the map, new keys
  overwriting old ones.
- The `*_conv` functions for lists and maps read the bracketed form that
  `str()` produces, such as `[1,2,3]`; `[]` gives an empty result.

### CSV records

- `read_as_csv` returns the fields of the first record. An empty string
  gives `[]`; text holding only blank lines raises `EOFError`; a stray or
  unclosed quote raises `CSVError`.
- `write_as_csv` joins fields with commas and quotes those that hold a
  comma, a quote, a line break or leading white space.

### Network values

- `IPValue` ignores surrounding white space and folds IPv4-mapped IPv6
  addresses to IPv4. Before it is set, `str()` gives `<nil>`.
- `IPSliceValue.set()` drops every `"`, `'` and backtick character before
  splitting on commas, and trims white space around each address.
- `parse_ipv4_mask` accepts both dotted form (`255.255.255.0`) and the
  eight-digit hex form (`ffffff00`), returning four bytes or `None`.
  `IPMaskValue` renders its mask in hex.
- `IPNetValue` accepts CIDR text and keeps the network address, so
  `1.2.3.4/8` is shown as `1.0.0.0/8`. Zone suffixes (`%eth0`) and
  prefixes longer than the address are rejected.

## Example

```python
from flagvalues.slices import IntSliceValue, int_slice_conv
from flagvalues.textvalues import StringSliceValue

ports = IntSliceValue([80])
ports.set("8080,8081")
ports.set("9000")
print(str(ports))                   # [8080,8081,9000]
print(int_slice_conv(str(ports)))   # [8080, 8081, 9000]

names = StringSliceValue()
names.set('"one,two",three')
print(str(names))                   # ["one,two",three]
```

Invalid text raises an exception from `set()` and from the converters, and
a value that fails to parse is left holding what it held before.

## What this package does not do

It provides the value types only. There is no flag set: nothing here
registers named flags or shorthands, walks a list of command-line
arguments, handles `--name=value` syntax, or prints usage text. A program
that wants those has to route each argument's text to the matching value's
`set()` itself.