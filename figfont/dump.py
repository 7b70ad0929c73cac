#!/usr/bin/env python3
"""
Decode a FIGlet font and dump what was decoded.

Usage:
    figfont-dump <font.flf|standard> [output.yaml]

    The first argument is a .flf file (plain or zipped) or the word
    "standard" for the bundled font.

Outputs:
    A summary of the header and glyph table on stdout.
    output.yaml - the decoded font (metadata and glyph rows), if given.
"""

import sys
from pathlib import Path

import yaml

from .errors import FigFontError
from .font import Font
from .loader import load, standard


def glyph_to_data(glyph) -> dict:
    """Convert a glyph to plain data: its width and rows as text."""
    data = {"width": glyph.width, "lines": glyph.lines()}
    if glyph.comment is not None:
        data["comment"] = glyph.comment
    return data


def font_to_data(font: Font) -> dict:
    """Convert a decoded font to a dictionary of plain YAML-friendly values."""
    header = font.header
    metadata = {
        "hard_blank": header.hard_blank.decode("latin-1"),
        "height": header.height,
        "baseline": header.baseline,
        "max_length": header.max_length,
        "old_layout": header.old_layout,
        "layout": header.layout.enabled(),
        "print_direction": header.print_direction.name.lower(),
        "comment": header.comment,
    }
    if header.codetag_count is not None:
        metadata["codetag_count"] = header.codetag_count

    glyphs = {code: glyph_to_data(font.glyphs[code]) for code in font.codes()}
    return {"metadata": metadata, "glyphs": glyphs}


def write_yaml(font: Font, output_path: Path):
    with open(output_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(font_to_data(font), f, allow_unicode=True, sort_keys=False)


def print_summary(font: Font, name: str):
    header = font.header
    print(f"Font: {name}")
    print(f"  Height: {header.height} (baseline {header.baseline})")
    print(f"  Hard blank: {header.hard_blank!r}")
    print(f"  Layout: {', '.join(header.layout.enabled()) or 'full width'}")
    print(f"  Print direction: {header.print_direction.name.lower()}")
    print(f"  Glyphs: {len(font)}")


def main():
    if len(sys.argv) < 2:
        print("Usage: figfont-dump <font.flf|standard> [output.yaml]")
        print("\nExample:")
        print("  figfont-dump fonts/banner.flf banner.yaml")
        sys.exit(1)

    name = sys.argv[1]

    try:
        font = standard() if name == "standard" else load(name)
    except FigFontError as e:
        print(f"Error: cannot load {name}: {e}")
        sys.exit(1)

    print_summary(font, name)

    if len(sys.argv) > 2:
        output_path = Path(sys.argv[2])
        output_path.parent.mkdir(parents=True, exist_ok=True)
        write_yaml(font, output_path)
        print(f"  Decoded font saved to: {output_path}")


if __name__ == "__main__":
    main()
