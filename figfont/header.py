"""
FIGlet font header decoding.

The header is the first line of a font file:

    flf2a$ 6 5 16 15 11 0 24463 229
    ^    ^ ^ ^ ^  ^  ^  ^ ^     ^
    |    | | | |  |  |  | |     codetag count (optional)
    |    | | | |  |  |  | full layout (optional)
    |    | | | |  |  |  print direction (optional)
    |    | | | |  |  comment lines
    |    | | | |  old layout
    |    | | | max length
    |    | | baseline
    |    | height
    |    hard blank
    magic

It is followed by the given number of comment lines.
"""

import logging
import re
from dataclasses import dataclass, fields, replace
from enum import Enum

from .errors import InvalidHeader
from .reader import read_line

logger = logging.getLogger(__name__)

MAGIC = b"flf2a"

UNSIGNED_RE = re.compile(rb"[0-9]+")
SIGNED_RE = re.compile(rb"-?[0-9]+")


@dataclass(frozen=True)
class Layout:
    """
    Smushing and kerning rules of a font, one boolean per rule.

    Field order matches the bit order of the header's full layout value:
    the first field is bit 0 (value 1), the last is bit 14 (value 16384).
    """

    horizontal_equal: bool = False
    horizontal_lowline: bool = False
    horizontal_hierarchy: bool = False
    horizontal_pair: bool = False
    horizontal_bigx: bool = False
    horizontal_hardblank: bool = False
    horizontal_kerning: bool = False
    horizontal_smush: bool = False
    vertical_equal: bool = False
    vertical_lowline: bool = False
    vertical_hierarchy: bool = False
    vertical_pair: bool = False
    vertical_bigx: bool = False
    vertical_kerning: bool = False
    vertical_smush: bool = False

    @classmethod
    def flag_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_bits(cls, bits: int) -> "Layout":
        """Build a layout from a full layout value, rejecting unknown bits."""
        names = cls.flag_names()
        if bits < 0 or bits >> len(names):
            raise InvalidHeader(f"invalid full layout value {bits}")
        return cls(**{name: bool(bits >> i & 1) for i, name in enumerate(names)})

    @property
    def bits(self) -> int:
        return sum(1 << i for i, name in enumerate(self.flag_names()) if getattr(self, name))

    def enabled(self) -> list[str]:
        """Names of the flags that are set."""
        return [name for name in self.flag_names() if getattr(self, name)]


def layout_from_old_layout(old_layout: int) -> Layout:
    """Derive the layout flags from the legacy signed layout value."""
    if old_layout < 0:
        return Layout()
    if old_layout == 0:
        return Layout(horizontal_hardblank=True)
    return Layout.from_bits((old_layout & 31) | 128)


class PrintDirection(Enum):
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


@dataclass(frozen=True)
class Header:
    hard_blank: bytes
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    layout: Layout
    comment: str = ""
    print_direction: PrintDirection = PrintDirection.LEFT_TO_RIGHT
    codetag_count: int | None = None


def _parse_int(field: bytes, name: str, signed: bool = False) -> int:
    pattern = SIGNED_RE if signed else UNSIGNED_RE
    if not pattern.fullmatch(field):
        raise InvalidHeader(f"header field {name} is not a valid integer: {field!r}")
    return int(field)


def parse_header_line(line: bytes) -> Header:
    """Parse the header line alone; the comment is left empty."""
    if not line.startswith(MAGIC):
        raise InvalidHeader(f"missing {MAGIC.decode()} magic: {line[:16]!r}")

    hard_blank, _, rest = line[len(MAGIC):].partition(b" ")
    if not hard_blank:
        raise InvalidHeader("missing hard blank character")

    args = rest.split()
    if not 5 <= len(args) <= 8:
        raise InvalidHeader(f"expected 6 to 9 header fields, got {len(args) + 1}")

    height = _parse_int(args[0], "height")
    if height < 1:
        raise InvalidHeader("font height must be at least 1")
    baseline = _parse_int(args[1], "baseline")
    max_length = _parse_int(args[2], "max_length")
    old_layout = _parse_int(args[3], "old_layout", signed=True)
    comment_lines = _parse_int(args[4], "comment_lines")

    print_direction = PrintDirection.LEFT_TO_RIGHT
    if len(args) > 5:
        value = _parse_int(args[5], "print_direction")
        try:
            print_direction = PrintDirection(value)
        except ValueError:
            raise InvalidHeader(f"invalid print direction {value}") from None

    if len(args) > 6:
        layout = Layout.from_bits(_parse_int(args[6], "full_layout"))
    else:
        layout = layout_from_old_layout(old_layout)

    codetag_count = None
    if len(args) > 7:
        codetag_count = _parse_int(args[7], "codetag_count")

    return Header(
        hard_blank=hard_blank,
        height=height,
        baseline=baseline,
        max_length=max_length,
        old_layout=old_layout,
        comment_lines=comment_lines,
        layout=layout,
        print_direction=print_direction,
        codetag_count=codetag_count,
    )


def decode_header(source, encoding: str = "latin-1") -> Header:
    """Read the header line and the comment block that follows it."""
    header = parse_header_line(read_line(source))

    lines = [read_line(source) for _ in range(header.comment_lines)]
    comment = b"\n".join(lines).decode(encoding, errors="replace")

    logger.debug(
        "header: hard blank %r, height %d, layout %d, %d comment lines, codetag count %s",
        header.hard_blank, header.height, header.layout.bits,
        header.comment_lines, header.codetag_count,
    )
    return replace(header, comment=comment)
