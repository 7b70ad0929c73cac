"""Exceptions raised while loading and decoding FIGlet fonts."""


class FigFontError(Exception):
    """Base class for every error raised by figfont."""


class ParseError(FigFontError, ValueError):
    """The font data does not follow the FIGlet font format."""


class NotEnoughData(ParseError):
    """The stream ended where a line or line terminator was required."""


class InvalidHeader(ParseError):
    """The header line is malformed."""


class InvalidCharacter(ParseError):
    """A glyph or its codetag line is malformed."""


class InvalidFont(ParseError):
    """The font as a whole is inconsistent with its header."""


class InvalidExtension(ParseError):
    """The font path does not carry the .flf extension."""


class FontIOError(FigFontError, OSError):
    """Reading the font file or its archive failed."""
