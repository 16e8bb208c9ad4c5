"""
Coordinate Model.

Angles, polar points and drawings. Every letter is positioned in a polar
frame centered on the middle of the word; Cartesian coordinates only appear
when points are sampled into a Drawing.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator, Optional, Tuple, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True, order=True)
class Degree:
    """An angle in degrees."""
    value: float

    def __add__(self, other: Degree) -> Degree:
        return Degree(self.value + other.value)

    def __sub__(self, other: Degree) -> Degree:
        return Degree(self.value - other.value)

    def __neg__(self) -> Degree:
        return Degree(-self.value)

    def __mul__(self, scalar: float) -> Degree:
        return Degree(self.value * scalar)

    __rmul__ = __mul__

    def __float__(self) -> float:
        return float(self.value)

    @property
    def radians(self) -> float:
        return math.radians(self.value)

    def normalized(self) -> Degree:
        """Same direction, expressed in [0, 360)."""
        return Degree(self.value % 360.0)


@dataclass(frozen=True)
class Polar:
    """
    A point relative to the word center, given by its distance and direction.
    """
    radius: float
    angle: Degree

    def __post_init__(self) -> None:
        if self.radius < 0.0:
            raise ValueError(f"Polar radius must be non-negative, got {self.radius}.")

    def __add__(self, other: Polar) -> Polar:
        # Polar + Polar = vector sum, resolved in Cartesian space
        if not isinstance(other, Polar):
            raise TypeError("Can only add a Polar to a Polar.")
        x1, y1 = self.to_cartesian()
        x2, y2 = other.to_cartesian()
        return Polar.from_cartesian(x1 + x2, y1 + y2)

    def scale(self, factor: float, angle: Optional[Degree] = None) -> Polar:
        """
        Multiply the radius by `factor`, keeping the direction unless `angle` overrides it.
        """
        return Polar(self.radius * factor, self.angle if angle is None else angle)

    def divide(self, divisor: Polar) -> Polar:
        """Shrink the radius by `divisor.radius` and rotate by `divisor.angle`."""
        if divisor.radius == 0.0: raise ZeroDivisionError
        return Polar(self.radius / divisor.radius, self.angle + divisor.angle)

    def rotate(self, delta: Degree) -> Polar:
        return Polar(self.radius, self.angle + delta)

    def to_cartesian(self) -> Tuple[float, float]:
        rad = self.angle.radians
        return self.radius * math.cos(rad), self.radius * math.sin(rad)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array(self.to_cartesian())

    @classmethod
    def from_cartesian(cls, x: float, y: float) -> Polar:
        return cls(math.hypot(x, y), Degree(math.degrees(math.atan2(y, x))))


class DrawingKind(StrEnum):
    """How a renderer should treat the points of a drawing."""
    POLYLINE = "polyline"
    POINTS = "points"


class Drawing:
    """
    An ordered, single-pass sequence of Cartesian (x, y) points.

    Iterating consumes the drawing; once exhausted it yields nothing more.
    """

    def __init__(self, points: npt.ArrayLike, kind: DrawingKind = DrawingKind.POLYLINE) -> None:
        arr = np.asarray(points, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")
        self.kind = kind
        self._points = arr
        self._cursor = 0

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return self

    def __next__(self) -> Tuple[float, float]:
        if self._cursor >= len(self._points):
            raise StopIteration
        x, y = self._points[self._cursor]
        self._cursor += 1
        return float(x), float(y)

    def __length_hint__(self) -> int:
        return len(self._points) - self._cursor

    def __repr__(self) -> str:
        return f"Drawing(kind={self.kind.value}, remaining={self.__length_hint__()})"

    @property
    def exhausted(self) -> bool:
        return self._cursor >= len(self._points)

    def consume(self) -> npt.NDArray[np.float64]:
        """Return the remaining points as an (N, 2) array and exhaust the drawing."""
        remaining = self._points[self._cursor:].copy()
        self._cursor = len(self._points)
        return remaining
