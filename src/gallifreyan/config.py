"""
Configuration & Global Constants
================================
This module serves as the central registry for the drawing constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (letter size, sampling step, mark
   sizes) from being scattered throughout the geometry code.
2. Overrides: The values are bundled into `GlyphSettings` so a caller can lay
   out a word with a different letter size or sampling resolution without
   touching the defaults.

Exports:
    LETTER_SIZE (float): Radius of a letter circle in word units.
    ARC_STEP (float): Angular sampling step of arcs in degrees.
    DOT_RADIUS (float): Radius of a dot cluster, as a multiple of letter size.
    LINE_LENGTH (float): Length of a decoration line, as a multiple of letter size.
    VOWEL_SCALE (float): Radius of a vowel ring, as a multiple of letter size.
    DEFAULT_SETTINGS (GlyphSettings): The constants above bundled together.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import math

# Global Constants
LETTER_SIZE: float = 2.0
ARC_STEP: float = 1.0
DOT_RADIUS: float = 0.08
LINE_LENGTH: float = 1.0
VOWEL_SCALE: float = 0.5


@dataclass(frozen=True)
class GlyphSettings:
    """Drawing parameters shared by every letter of a word."""
    letter_size: float = LETTER_SIZE
    arc_step: float = ARC_STEP
    dot_radius: float = DOT_RADIUS
    line_length: float = LINE_LENGTH
    vowel_scale: float = VOWEL_SCALE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(f"Setting '{f.name}' must be positive and finite, got {value}.")


DEFAULT_SETTINGS: GlyphSettings = GlyphSettings()
