"""Shape Catalog - the five base shapes a letter is drawn on."""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, assert_never

from gallifreyan.config import DEFAULT_SETTINGS, GlyphSettings
from gallifreyan.model.geometry_primitives import Degree, Drawing, Polar
from gallifreyan.model.geometry_utils import arc, law_of_sines_angle


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ShapeKind(StrEnum):
    """Describes the base shape of a letter."""
    VOWEL = "vowel"
    CRESCENT = "crescent"
    FULL = "full"
    QUARTER = "quarter"
    NEW = "new"


# ------------------------------------------------------------------------------
# Constants
# ------------------------------------------------------------------------------
# Inward offset of the shape circle from the letter position, in letter sizes.
CRESCENT_HEIGHT = 0.9
FULL_HEIGHT = 1.2

# Gap of the open shapes, measured from the outward direction of the letter.
CRESCENT_BASE_OFFSET = Degree(30.0)
QUARTER_BASE_OFFSET = Degree(90.0)
QUARTER_ARC_START = Degree(95.0)
QUARTER_ARC_END = Degree(265.0)

FULL_TURN = (Degree(0.0), Degree(360.0))
INWARD = Degree(180.0)


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Base:
    """
    The base shape of ONE letter.

    `center` is the letter's position on the word ring. `satellite` points from
    there with the letter size as radius; every shape anchor is derived from it.
    """
    kind: ShapeKind
    center: Polar
    satellite: Polar

    @classmethod
    def at(cls, kind: ShapeKind, position: Polar, size: float) -> Base:
        """Place a shape of `kind` at `position`, with a letter circle of radius `size`."""
        satellite = position.divide(Polar(position.radius / size, Degree(0.0)))
        return cls(kind=kind, center=position, satellite=satellite)

    @property
    def size(self) -> float:
        return self.satellite.radius

    @property
    def has_edge(self) -> bool:
        """Only open shapes cut the word ring and need stitching."""
        return self.kind in (ShapeKind.CRESCENT, ShapeKind.QUARTER)

    def inward(self, factor: float, offset: Degree = Degree(0.0)) -> Polar:
        """Satellite scaled by `factor`, pointing towards the word center (rotated by `offset`)."""
        return self.satellite.scale(factor, self.center.angle + INWARD + offset)

    def to_drawing(self, settings: GlyphSettings = DEFAULT_SETTINGS) -> Drawing:
        theta = self.center.angle
        step = settings.arc_step
        match self.kind:
            case ShapeKind.VOWEL:
                return arc(self.center, self.satellite, self.size * settings.vowel_scale, FULL_TURN, step)
            case ShapeKind.CRESCENT:
                return arc(
                    self.center,
                    self.inward(CRESCENT_HEIGHT),
                    self.size,
                    (theta + CRESCENT_BASE_OFFSET, theta + Degree(360.0) - CRESCENT_BASE_OFFSET),
                    step,
                )
            case ShapeKind.FULL:
                return arc(self.center, self.inward(FULL_HEIGHT), self.size, FULL_TURN, step)
            case ShapeKind.QUARTER:
                return arc(
                    self.center,
                    self.inward(0.0),
                    self.size,
                    (theta + QUARTER_ARC_START, theta + QUARTER_ARC_END),
                    step,
                )
            case ShapeKind.NEW:
                return arc(self.center, self.inward(0.0), self.size, FULL_TURN, step)
            case _:
                assert_never(self.kind)

    def edge_offset(self) -> Optional[Degree]:
        """Half-width of the gap the shape leaves in the word ring, seen from the word center."""
        match self.kind:
            case ShapeKind.CRESCENT:
                return law_of_sines_angle(self.size, self.center.radius, CRESCENT_BASE_OFFSET)
            case ShapeKind.QUARTER:
                return law_of_sines_angle(self.size, self.center.radius, QUARTER_BASE_OFFSET)
            case ShapeKind.VOWEL | ShapeKind.FULL | ShapeKind.NEW:
                return None
            case _:
                assert_never(self.kind)

    def starting_angle(self) -> Optional[Degree]:
        offset = self.edge_offset()
        return None if offset is None else self.center.angle - offset

    def ending_angle(self) -> Optional[Degree]:
        offset = self.edge_offset()
        return None if offset is None else self.center.angle + offset
