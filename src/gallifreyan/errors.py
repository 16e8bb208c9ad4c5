"""
Error Types
===========
Exceptions raised by the word parser and the geometry engine.

Classes:
    GallifreyanError: Common base, a ValueError.
    ParseError: A token of the input has no matching letter.
    GeometryPreconditionError: A geometric computation got degenerate input.
    UnimplementedShapeError: A letter or shape has no realized geometry yet.
"""
from __future__ import annotations


class GallifreyanError(ValueError):
    """Base class for all errors raised by the package."""


class ParseError(GallifreyanError):
    """Raised when a token of the input string is not a known letter."""

    def __init__(self, token: str, index: int) -> None:
        self.token = token
        self.index = index
        super().__init__(f"Unknown letter '{token}' at position {index}.")


class GeometryPreconditionError(GallifreyanError):
    """Raised when a geometric computation cannot produce a finite result."""


class UnimplementedShapeError(GeometryPreconditionError, NotImplementedError):
    """Raised for shapes whose geometry is not realized (vowels)."""
