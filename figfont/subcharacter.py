"""
Split glyph rows into display tokens.

A row of glyph art is a sequence of SubCharacters: either a hard blank,
which renders as a single space cell but must stay distinguishable from a
literal space, or a Symbol holding one extended grapheme cluster.
"""

from dataclasses import dataclass
from functools import lru_cache

import regex
from wcwidth import wcswidth, wcwidth

from .errors import InvalidCharacter

GRAPHEME_RE = regex.compile(r"\X")


@lru_cache(maxsize=4096)
def display_width(text: str) -> int:
    """Number of terminal cells taken by text."""
    width = wcswidth(text)
    if width < 0:
        # Control characters have no defined width; count them as zero.
        width = sum(max(wcwidth(c), 0) for c in text)
    return width


class SubCharacter:
    """A single display token of a glyph row."""

    __slots__ = ()

    is_blank = False

    @property
    def width(self) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class Symbol(SubCharacter):
    """One grapheme cluster of glyph art."""

    text: str

    @property
    def width(self) -> int:
        return display_width(self.text)

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Blank(SubCharacter):
    """A hard blank: always one space cell."""

    is_blank = True

    @property
    def width(self) -> int:
        return 1

    def __str__(self):
        return " "


BLANK = Blank()


def graphemes(text: str) -> list[str]:
    """Segment text into extended grapheme clusters."""
    return GRAPHEME_RE.findall(text)


def tokenize(raw: bytes, hard_blank: bytes, encoding: str = "latin-1") -> list[SubCharacter]:
    """
    Tokenize a raw row, emitting one Blank per hard blank occurrence.

    The text between hard blanks is decoded with the given encoding and
    split into grapheme clusters. Undecodable bytes raise InvalidCharacter.
    """
    if not hard_blank:
        raise ValueError("hard blank marker must not be empty")

    tokens = []
    for i, piece in enumerate(raw.split(hard_blank)):
        if i:
            tokens.append(BLANK)
        if not piece:
            continue
        try:
            text = piece.decode(encoding)
        except UnicodeDecodeError as exc:
            raise InvalidCharacter(f"cannot decode glyph row {raw!r} as {encoding}: {exc}") from exc
        tokens.extend(Symbol(g) for g in graphemes(text))
    return tokens


def row_width(tokens) -> int:
    """Total display width of a sequence of SubCharacters."""
    return sum(token.width for token in tokens)
