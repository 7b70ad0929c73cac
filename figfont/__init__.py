"""Decode FIGlet (.flf) fonts into headers and glyph tables."""

from .errors import (
    FigFontError,
    FontIOError,
    InvalidCharacter,
    InvalidExtension,
    InvalidFont,
    InvalidHeader,
    NotEnoughData,
    ParseError,
)
from .font import REQUIRED_CODES, Font, decode, decode_bytes, parse
from .glyph import Glyph
from .header import Header, Layout, PrintDirection
from .loader import load, standard
from .subcharacter import BLANK, Blank, SubCharacter, Symbol

__all__ = [
    "BLANK",
    "Blank",
    "FigFontError",
    "Font",
    "FontIOError",
    "Glyph",
    "Header",
    "InvalidCharacter",
    "InvalidExtension",
    "InvalidFont",
    "InvalidHeader",
    "Layout",
    "NotEnoughData",
    "ParseError",
    "PrintDirection",
    "REQUIRED_CODES",
    "SubCharacter",
    "Symbol",
    "decode",
    "decode_bytes",
    "load",
    "parse",
    "standard",
]
