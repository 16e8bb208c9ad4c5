"""Decoration Catalog - dots and lines that tell letters sharing a shape apart."""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import List, Tuple, assert_never

from gallifreyan.config import DEFAULT_SETTINGS, GlyphSettings
from gallifreyan.errors import UnimplementedShapeError
from gallifreyan.model.geometry_primitives import Degree, Drawing
from gallifreyan.model.geometry_utils import dot, line
from gallifreyan.model.shapes import Base, ShapeKind


class DecorationKind(StrEnum):
    BLANK = "blank"
    DOT1 = "dot1"
    DOT2 = "dot2"
    DOT3 = "dot3"
    DOT4 = "dot4"
    LINE1 = "line1"
    LINE2 = "line2"
    LINE3 = "line3"


# Radial anchor of the marks, in letter sizes inward from the letter position.
CRESCENT_ANCHOR = 1.1
FULL_ANCHOR = 1.4
DEFAULT_ANCHOR = 0.2

TWO_MARKS: Tuple[float, ...] = (-45.0, 45.0)
THREE_MARKS: Tuple[float, ...] = (-45.0, 0.0, 45.0)
FOUR_MARKS: Tuple[float, ...] = (-30.0, -15.0, 15.0, 30.0)


@dataclass(frozen=True)
class Decoration:
    """
    Marks drawn over a base shape. `angle` is only read by LINE1, whose single
    line direction is chosen by the caller.
    """
    kind: DecorationKind
    base: Base
    angle: Degree = Degree(0.0)

    @property
    def offsets(self) -> Tuple[Degree, ...]:
        """Directions of the marks relative to the inward direction of the letter."""
        match self.kind:
            case DecorationKind.BLANK:
                values: Tuple[float, ...] = ()
            case DecorationKind.DOT1:
                values = (0.0,)
            case DecorationKind.DOT2 | DecorationKind.LINE2:
                values = TWO_MARKS
            case DecorationKind.DOT3 | DecorationKind.LINE3:
                values = THREE_MARKS
            case DecorationKind.DOT4:
                values = FOUR_MARKS
            case DecorationKind.LINE1:
                return (self.angle,)
            case _:
                assert_never(self.kind)
        return tuple(Degree(v) for v in values)

    @property
    def count(self) -> int:
        """Number of drawings the decoration emits."""
        return len(self.offsets)

    @property
    def is_line(self) -> bool:
        return self.kind in (DecorationKind.LINE1, DecorationKind.LINE2, DecorationKind.LINE3)

    def anchor_scale(self) -> float:
        match self.base.kind:
            case ShapeKind.CRESCENT:
                return CRESCENT_ANCHOR
            case ShapeKind.FULL:
                return FULL_ANCHOR
            case ShapeKind.QUARTER | ShapeKind.NEW:
                return DEFAULT_ANCHOR
            case ShapeKind.VOWEL:
                raise UnimplementedShapeError("Decorations on vowel shapes are not implemented.")
            case _:
                assert_never(self.base.kind)

    def to_drawings(self, settings: GlyphSettings = DEFAULT_SETTINGS) -> List[Drawing]:
        if self.kind is DecorationKind.BLANK:
            return []

        scale = self.anchor_scale()
        size = self.base.size
        drawings = []
        for offset in self.offsets:
            anchor = self.base.inward(scale, offset)
            if self.is_line:
                drawings.append(line(self.base.center, anchor, anchor.angle, settings.line_length * size))
            else:
                drawings.append(dot(self.base.center, anchor, anchor.angle, settings.dot_radius * size))
        return drawings
