from __future__ import annotations

from typing import Tuple

from math import asin, ceil, degrees, isclose, isfinite, sin
import numpy as np

from gallifreyan.config import ARC_STEP, DOT_RADIUS, LETTER_SIZE, LINE_LENGTH
from gallifreyan.errors import GeometryPreconditionError
from gallifreyan.model.geometry_primitives import Degree, Drawing, DrawingKind, Polar

ORIGIN = Polar(0.0, Degree(0.0))
DOT_SAMPLES = 8


def law_of_sines_angle(known_side: float, unknown_side: float, opposite_angle: Degree) -> Degree:
    """
    Solve a triangle for the angle opposite `known_side`.

    The triangle is given by one angle (`opposite_angle`) and the side facing it
    (`unknown_side`), so that sin(result) / known_side = sin(opposite_angle) / unknown_side.

    Args:
        known_side: Length of the side facing the requested angle.
        unknown_side: Length of the side facing `opposite_angle`.
        opposite_angle: The known angle of the triangle.

    Returns:
        The angle opposite `known_side`, in [-90, 90] degrees.

    Raises:
        GeometryPreconditionError: If no such triangle exists, i.e. the sine
            argument falls outside [-1, 1] or `unknown_side` is zero.
    """
    if unknown_side == 0.0:
        raise GeometryPreconditionError("Law of sines: the side opposite the known angle is zero.")

    ratio = known_side / unknown_side * sin(opposite_angle.radians)
    if not -1.0 <= ratio <= 1.0:
        raise GeometryPreconditionError(
            f"Law of sines: degenerate triangle (sides {known_side}, {unknown_side}, "
            f"angle {opposite_angle.value}°, sine argument {ratio:.6f})."
        )
    return Degree(degrees(asin(ratio)))


def arc(
    center: Polar,
    satellite: Polar,
    satellite_radius: float,
    angle_range: Tuple[Degree, Degree],
    step: float = ARC_STEP,
) -> Drawing:
    """
    Sample a circular arc around `center + satellite`.

    Args:
        center: Anchor of the shape, relative to the word center.
        satellite: Offset from `center` to the arc's own center.
        satellite_radius: Radius of the arc.
        angle_range: Start and end direction of the sampled points (degrees).
        step: Angular distance between consecutive samples (degrees).

    Returns:
        A polyline including both endpoints. A full turn is returned as a closed ring.
    """
    if not isfinite(step) or step <= 0.0:
        raise ValueError(f"Arc step must be positive, got {step}.")

    start, end = angle_range
    span = end.value - start.value
    n_points = max(2, ceil(abs(span) / step) + 1)

    angles = np.deg2rad(np.linspace(start.value, end.value, n_points))
    cx, cy = (center + satellite).to_cartesian()
    pts = np.column_stack((cx + satellite_radius * np.cos(angles), cy + satellite_radius * np.sin(angles)))

    # close the ring
    if span != 0.0 and isclose(abs(span) % 360.0, 0.0, abs_tol=1e-9):
        pts[-1] = pts[0]

    return Drawing(pts)


def dot(center: Polar, satellite: Polar, direction: Degree, radius: float = DOT_RADIUS * LETTER_SIZE) -> Drawing:
    """
    A point cluster marking `center + satellite`: the mark itself followed by a
    small ring of points around it, starting at `direction`.
    """
    mx, my = (center + satellite).to_cartesian()
    angles = direction.radians + np.linspace(0.0, 2.0 * np.pi, DOT_SAMPLES, endpoint=False)
    ring = np.column_stack((mx + radius * np.cos(angles), my + radius * np.sin(angles)))
    return Drawing(np.vstack(([mx, my], ring)), kind=DrawingKind.POINTS)


def line(center: Polar, satellite: Polar, direction: Degree, length: float = LINE_LENGTH * LETTER_SIZE) -> Drawing:
    """A straight segment starting at `center + satellite`, running `length` along `direction`."""
    start = center + satellite
    end = start + Polar(length, direction)
    return Drawing([start.to_cartesian(), end.to_cartesian()])


def draw_arc(radius: float, angles: Tuple[Degree, Degree], step: float = ARC_STEP) -> Drawing:
    """
    Arc about the word center, sweeping counter-clockwise from the first angle to the second.
    An end angle lying before the start is unwrapped by whole turns.
    """
    start, end = angles
    end_value = end.value
    while end_value < start.value:
        end_value += 360.0
    return arc(ORIGIN, ORIGIN, radius, (start, Degree(end_value)), step=step)
