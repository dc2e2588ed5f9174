"""Reading and writing one comma-separated record.

Quoting follows RFC 4180 with strict rules. A quote inside an unquoted
field is an error, and so is any text after the closing quote of a quoted
field other than a comma or the end of the line. A quoted field may span
lines.
"""

from __future__ import annotations

from collections.abc import Iterator

_BARE_QUOTE = 'bare " in non-quoted field'
_BAD_QUOTE = 'extraneous or missing " in quoted-field'


class CSVError(ValueError):
    """Raised when a record is not well-formed."""

    def __init__(self, line: int, column: int, reason: str) -> None:
        self.line = line
        self.column = column
        self.reason = reason
        super().__init__(f"parse error on line {line}, column {column}: {reason}")


def _lines(val: str) -> Iterator[str]:
    """Yield the lines of ``val``, each ending in a bare newline except maybe the last."""
    *complete, last = val.split("\n")
    for line in complete:
        yield line.removesuffix("\r") + "\n"
    if last:
        yield last.removesuffix("\r")


def _is_blank(line: str) -> bool:
    return line in ("", "\n")


def read_as_csv(val: str) -> list[str]:
    """Return the fields of the first record in ``val``.

    An empty string gives no fields. Text holding only blank lines raises
    ``EOFError``; malformed quoting raises ``CSVError``.
    """
    if val == "":
        return []

    lines = _lines(val)
    line_no = 0
    for full in lines:
        line_no += 1
        if not _is_blank(full):
            break
    else:
        raise EOFError("no record found")

    line = full
    fields: list[str] = []

    def column() -> int:
        return len(full) - len(line) + 1

    while True:
        if not line.startswith('"'):
            comma = line.find(",")
            field = line[:comma] if comma >= 0 else line.removesuffix("\n")
            quote = field.find('"')
            if quote >= 0:
                raise CSVError(line_no, column() + quote, _BARE_QUOTE)
            fields.append(field)
            if comma < 0:
                return fields
            line = line[comma + 1:]
            continue

        line = line[1:]
        parts: list[str] = []
        while True:
            quote = line.find('"')
            if quote >= 0:
                parts.append(line[:quote])
                line = line[quote + 1:]
                if line.startswith('"'):
                    parts.append('"')
                    line = line[1:]
                elif line.startswith(","):
                    line = line[1:]
                    fields.append("".join(parts))
                    break
                elif _is_blank(line):
                    fields.append("".join(parts))
                    return fields
                else:
                    raise CSVError(line_no, column() - 1, _BAD_QUOTE)
            elif line:
                parts.append(line)
                nxt = next(lines, None)
                if nxt is None:
                    raise CSVError(line_no, column() + len(line), _BAD_QUOTE)
                line_no += 1
                full = line = nxt
            else:
                raise CSVError(line_no, column(), _BAD_QUOTE)


def _needs_quotes(field: str) -> bool:
    if field == "":
        return False
    if field == "\\.":
        return True
    if any(ch in field for ch in ',"\r\n'):
        return True
    return field[0].isspace()


def _quote(field: str) -> str:
    if not _needs_quotes(field):
        return field
    return '"' + field.replace('"', '""') + '"'


def write_as_csv(vals: list[str]) -> str:
    """Format ``vals`` as one record, quoting fields where needed."""
    return ",".join(_quote(field) for field in vals)