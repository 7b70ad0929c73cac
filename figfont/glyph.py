"""
Glyph and codetag decoding.

Each glyph is `height` rows of art. Every row ends with a delimiter
character, taken from the end of the glyph's first row; the last row ends
with the delimiter doubled:

     _ @
    | |@
    |_|@@

Glyphs beyond the required set are introduced by a codetag line giving
their character code and an optional comment:

    0x0102  LATIN CAPITAL LETTER A WITH BREVE
"""

import re
from dataclasses import dataclass

from .errors import InvalidCharacter
from .header import Header
from .reader import read_line
from .subcharacter import BLANK, SubCharacter, row_width, tokenize

HEX_RE = re.compile(rb"[0-9a-fA-F]+")
OCT_RE = re.compile(rb"[0-7]+")
DEC_RE = re.compile(rb"[0-9]+")

CODE_MIN = -(2 ** 31)
CODE_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Glyph:
    """The rows of one character's art, all padded to the same width."""

    rows: tuple[tuple[SubCharacter, ...], ...]
    comment: str | None = None

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((row_width(row) for row in self.rows), default=0)

    def lines(self) -> list[str]:
        """Each row as text, hard blanks shown as spaces."""
        return ["".join(str(token) for token in row) for row in self.rows]


def read_rows(source, height: int) -> list[bytes]:
    """Read the rows of one glyph; the last may end at end of stream."""
    rows = [read_line(source) for _ in range(height - 1)]
    rows.append(read_line(source, lenient=True))
    return rows


def trim_rows(rows: list[bytes]) -> list[bytes]:
    """Check the row delimiters and strip them."""
    if not rows[0]:
        raise InvalidCharacter("first glyph row is empty")
    delimiter = rows[0][-1:]

    trimmed = []
    for row in rows[:-1]:
        if not row.endswith(delimiter):
            raise InvalidCharacter(f"glyph row {row!r} does not end with {delimiter!r}")
        trimmed.append(row[:-1])

    last = rows[-1]
    if not last.endswith(delimiter * 2):
        raise InvalidCharacter(f"last glyph row {last!r} does not end with {delimiter * 2!r}")
    trimmed.append(last[:-2])
    return trimmed


def pad_rows(rows: list[list[SubCharacter]]) -> tuple[tuple[SubCharacter, ...], ...]:
    """Right-pad every row with blanks to the width of the widest one."""
    width = max(row_width(row) for row in rows)
    return tuple(
        tuple(row) + (BLANK,) * (width - row_width(row))
        for row in rows
    )


def decode_glyph(source, header: Header, encoding: str = "latin-1") -> Glyph:
    """Read one glyph of header.height rows."""
    rows = trim_rows(read_rows(source, header.height))
    tokens = [tokenize(row, header.hard_blank, encoding) for row in rows]
    return Glyph(pad_rows(tokens))


def parse_code(token: bytes) -> int:
    """Parse a signed decimal, octal (0...) or hexadecimal (0x...) code."""
    sign = 1
    digits = token
    if digits.startswith(b"-"):
        sign = -1
        digits = digits[1:]

    if digits[:2] in (b"0x", b"0X"):
        digits, pattern, base = digits[2:], HEX_RE, 16
    elif digits.startswith(b"0"):
        digits, pattern, base = digits, OCT_RE, 8
    else:
        pattern, base = DEC_RE, 10

    if not pattern.fullmatch(digits):
        raise InvalidCharacter(f"invalid character code {token!r}")

    code = sign * int(digits, base)
    if not CODE_MIN <= code <= CODE_MAX:
        raise InvalidCharacter(f"character code {token!r} out of range")
    return code


def parse_codetag(line: bytes, encoding: str = "latin-1") -> tuple[int, str | None]:
    """Split a codetag line at its first space into code and optional comment."""
    token, _, rest = line.partition(b" ")
    code = parse_code(token)

    comment = None
    if rest.strip():
        comment = rest.strip().decode(encoding, errors="replace")
    return code, comment


def decode_codetagged_glyph(source, header: Header, encoding: str = "latin-1") -> tuple[int, Glyph]:
    """Read a codetag line and the glyph it introduces."""
    code, comment = parse_codetag(read_line(source), encoding)
    glyph = decode_glyph(source, header, encoding)
    return code, Glyph(glyph.rows, comment)
