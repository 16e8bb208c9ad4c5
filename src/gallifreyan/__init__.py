"""
Gallifreyan Word Geometry
=========================
Turns a word into the point sequences of a circular Gallifreyan glyph.

Usage:
    >>> from gallifreyan import parse, layout
    >>> drawings = layout(parse("TCHXD"), radius=6.0)

Each returned `Drawing` is a single-pass sequence of (x, y) points to be
stroked (or, for dots, filled) by a rendering front end.
"""
from gallifreyan.config import DEFAULT_SETTINGS, GlyphSettings
from gallifreyan.errors import (
    GallifreyanError,
    GeometryPreconditionError,
    ParseError,
    UnimplementedShapeError,
)
from gallifreyan.model.alphabet import ALPHABET, Letter, LetterForm
from gallifreyan.model.geometry_primitives import Degree, Drawing, DrawingKind, Polar
from gallifreyan.model.layout import Character, draw_edges, layout, to_characters
from gallifreyan.model.word import Word, parse

__all__ = [
    "ALPHABET",
    "Character",
    "DEFAULT_SETTINGS",
    "Degree",
    "Drawing",
    "DrawingKind",
    "GallifreyanError",
    "GeometryPreconditionError",
    "GlyphSettings",
    "Letter",
    "LetterForm",
    "ParseError",
    "Polar",
    "UnimplementedShapeError",
    "Word",
    "draw_edges",
    "layout",
    "parse",
    "to_characters",
]
