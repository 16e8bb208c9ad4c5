"""
Word Layout & Stitching
=======================
Places the letters of a word around the word ring and joins the open shapes
into one continuous boundary.

Consonants are spread evenly around the ring, the first one at the top
(-90 degrees). Vowels ride the consonant read before them. After every
letter is drawn, the open (edge-bearing) shapes are connected in reading
order by arcs along the ring, the last one back to the first.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
import logging
from typing import List, Optional, Sequence

from gallifreyan.config import DEFAULT_SETTINGS, GlyphSettings
from gallifreyan.errors import GeometryPreconditionError
from gallifreyan.model.alphabet import Letter, form_of
from gallifreyan.model.decorations import Decoration
from gallifreyan.model.geometry_primitives import Degree, Drawing, Polar
from gallifreyan.model.geometry_utils import draw_arc
from gallifreyan.model.shapes import Base
from gallifreyan.model.word import Word

logger = logging.getLogger(__name__)

FIRST_LETTER_ANGLE = Degree(-90.0)


@dataclass(frozen=True)
class Character:
    """One letter instantiated at its place on the word ring."""
    letter: Letter
    base: Base
    decoration: Decoration

    @classmethod
    def create(cls, letter: Letter, position: Polar, settings: GlyphSettings = DEFAULT_SETTINGS) -> Character:
        form = form_of(letter)
        base = Base.at(form.shape, position, settings.letter_size)
        decoration = Decoration(form.decoration, base, Degree(form.line_angle))
        return cls(letter=letter, base=base, decoration=decoration)

    @property
    def position(self) -> Polar:
        return self.base.center

    @property
    def has_edge(self) -> bool:
        return self.base.has_edge

    def starting_angle(self) -> Optional[Degree]:
        return self.base.starting_angle()

    def ending_angle(self) -> Optional[Degree]:
        return self.base.ending_angle()

    def draw_base(self, settings: GlyphSettings = DEFAULT_SETTINGS) -> Drawing:
        return self.base.to_drawing(settings)

    def draw_decoration(self, settings: GlyphSettings = DEFAULT_SETTINGS) -> List[Drawing]:
        return self.decoration.to_drawings(settings)


def letter_angles(word: Word) -> List[Degree]:
    """
    Angular position of every letter of `word`, in reading order.

    Raises:
        GeometryPreconditionError: If the word has no consonant to place.
    """
    n_consonants = len(word.consonants)
    if n_consonants == 0:
        raise GeometryPreconditionError(f"Cannot lay out '{word}': the word has no consonants.")

    step = 360.0 / n_consonants
    index = -1
    angles: List[Degree] = []
    for letter in word:
        if not letter.is_vowel:
            index += 1
        angles.append(Degree(index * step) + FIRST_LETTER_ANGLE)
    return angles


def to_characters(word: Word, radius: float, settings: GlyphSettings = DEFAULT_SETTINGS) -> List[Character]:
    """Instantiate every letter of `word` on a ring of `radius`."""
    if not math.isfinite(radius) or radius <= 0.0:
        raise GeometryPreconditionError(f"Word radius must be positive and finite, got {radius}.")

    angles = letter_angles(word)
    characters = [
        Character.create(letter, Polar(radius, angle), settings)
        for letter, angle in zip(word, angles)
    ]
    logger.debug(f"Placed {len(characters)} letters of '{word}' on a ring of radius {radius}.")
    return characters


def draw_edges(characters: Sequence[Character], settings: GlyphSettings = DEFAULT_SETTINGS) -> List[Drawing]:
    """
    Stitch the open shapes together along the word ring.

    Every edge-bearing character is joined to the next one in reading order,
    the last one back to the first. Without edge-bearing characters nothing
    is drawn.

    Raises:
        GeometryPreconditionError: If the gaps of two neighbouring open shapes
            overlap, i.e. the ring is too crowded to stitch.
    """
    with_edges = [c for c in characters if c.has_edge]
    if not with_edges:
        return []

    with_edges.append(with_edges[0])
    drawings = []
    for current, following in zip(with_edges[:-1], with_edges[1:]):
        edge_1 = current.ending_angle()
        edge_2 = following.starting_angle()
        if edge_1 is None or edge_2 is None:
            raise GeometryPreconditionError("An edge-bearing character has no gap angles.")

        # a lone open shape is stitched to itself around the full ring
        distance = (following.position.angle - current.position.angle).value % 360.0 or 360.0
        sweep = (edge_2 - edge_1).value % 360.0
        if sweep > distance:
            raise GeometryPreconditionError(
                f"Ring of radius {current.position.radius} is too crowded: the gaps of "
                f"'{current.letter}' and '{following.letter}' overlap."
            )
        drawings.append(draw_arc(current.position.radius, (edge_1, edge_2), step=settings.arc_step))
    return drawings


def layout(word: Word, radius: float, settings: GlyphSettings = DEFAULT_SETTINGS) -> List[Drawing]:
    """
    Lay out `word` on a ring of `radius` around the origin.

    Returns:
        For every letter its base drawing followed by its decoration drawings,
        in reading order, then the stitching arcs.

    Raises:
        GeometryPreconditionError: For a word without consonants, a non-positive
            or non-finite radius, a ring too small or too crowded for the
            letters, or letters without a realized shape (vowels).
    """
    characters = to_characters(word, radius, settings)

    drawings: List[Drawing] = []
    for character in characters:
        drawings.append(character.draw_base(settings))
        drawings.extend(character.draw_decoration(settings))

    edges = draw_edges(characters, settings)
    drawings.extend(edges)

    logger.info(f"Laid out '{word}': {len(characters)} letters, {len(edges)} stitching arcs, {len(drawings)} drawings.")
    return drawings
