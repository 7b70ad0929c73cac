"""Assemble a complete font from a byte stream."""

import io
import logging
from types import MappingProxyType

from .errors import InvalidFont
from .glyph import Glyph, decode_codetagged_glyph, decode_glyph
from .header import Header, decode_header
from .reader import has_data, peekable

logger = logging.getLogger(__name__)

# Latin-1 codes of Ä Ö Ü ä ö ü ß, in the order they appear in a font file.
DEUTSCH_CODES = (196, 214, 220, 228, 246, 252, 223)

REQUIRED_CODES = tuple(range(32, 127)) + DEUTSCH_CODES

FALLBACK_CODE = 126


class Font:
    """A decoded font: its header and a read-only table of glyphs by code."""

    __slots__ = ("_header", "_glyphs")

    def __init__(self, header: Header, glyphs: dict[int, Glyph]):
        self._header = header
        self._glyphs = MappingProxyType(dict(glyphs))

    @property
    def header(self) -> Header:
        return self._header

    @property
    def glyphs(self):
        return self._glyphs

    def get(self, code: int) -> Glyph:
        """Glyph for code, or the glyph for '~' when the font lacks it."""
        glyph = self._glyphs.get(code)
        if glyph is None:
            return self._glyphs[FALLBACK_CODE]
        return glyph

    def codes(self) -> list[int]:
        return sorted(self._glyphs)

    def __contains__(self, code):
        return code in self._glyphs

    def __len__(self):
        return len(self._glyphs)

    def __eq__(self, other):
        if not isinstance(other, Font):
            return NotImplemented
        return self._header == other._header and dict(self._glyphs) == dict(other._glyphs)

    def __hash__(self):
        return hash((self._header, frozenset(self._glyphs.items())))

    def __repr__(self):
        return f"<Font height={self._header.height} glyphs={len(self._glyphs)}>"


def decode(stream, encoding: str = "latin-1") -> Font:
    """
    Decode a font from a binary stream.

    The header is followed by the required glyphs (codes 32-126 and the
    German letters), then by any number of codetagged glyphs up to the end
    of the stream. Any error aborts the whole decode.
    """
    source = peekable(stream)
    header = decode_header(source, encoding)

    glyphs = {}
    for code in REQUIRED_CODES:
        glyphs[code] = decode_glyph(source, header, encoding)

    count = 0
    while has_data(source):
        code, glyph = decode_codetagged_glyph(source, header, encoding)
        glyphs[code] = glyph
        count += 1

    if header.codetag_count is not None and header.codetag_count != count:
        raise InvalidFont(
            f"header declares {header.codetag_count} codetagged characters, found {count}"
        )

    logger.debug("decoded %d glyphs (%d codetagged)", len(glyphs), count)
    return Font(header, glyphs)


def decode_bytes(data: bytes, encoding: str = "latin-1") -> Font:
    return decode(io.BytesIO(data), encoding)


def parse(text: str, encoding: str = "utf-8") -> Font:
    """Decode a font given as text, encoding it back to bytes first."""
    return decode_bytes(text.encode(encoding), encoding)
