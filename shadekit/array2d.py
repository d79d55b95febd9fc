"""A dense two-dimensional grid of values with wrapping access."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator
from typing import Any

Point = tuple[int, int]

PI = 3.14159265


class Array2D:
    """A ``width`` x ``height`` grid stored row by row.

    Elements are addressed with ``(x, y)`` pairs; ``x`` runs along a row.
    """

    __slots__ = ("width", "height", "_data")

    def __init__(self, width: int, height: int, fill: Any = 0.0) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid size {width}x{height}")
        self.width = width
        self.height = height
        self._data: list[Any] = [fill] * (width * height)

    def size(self) -> Point:
        """Return ``(width, height)``."""
        return (self.width, self.height)

    def _offset(self, point: Point) -> int:
        x, y = point
        if not self.contains(x, y):
            raise IndexError(f"point {point!r} outside {self.width}x{self.height} array")
        return y * self.width + x

    def __getitem__(self, point: Point) -> Any:
        return self._data[self._offset(point)]

    def __setitem__(self, point: Point, value: Any) -> None:
        self._data[self._offset(point)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Array2D({self.width}, {self.height})"

    def points(self) -> Iterator[Point]:
        """Yield every ``(x, y)`` in storage order: rows top to bottom."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def wrap_point(self, x: int, y: int) -> Point:
        """Wrap a point toroidally into the array's bounds."""
        if self.width == 0 or self.height == 0:
            raise IndexError("cannot wrap a point into an empty array")
        return (x % self.width, y % self.height)

    def wr(self, x: int, y: int) -> Any:
        """Read the element at ``(x, y)`` with wrap-around addressing."""
        return self[self.wrap_point(x, y)]

    def set_wr(self, x: int, y: int, value: Any) -> None:
        """Write the element at ``(x, y)`` with wrap-around addressing."""
        self[self.wrap_point(x, y)] = value

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clone(self) -> Array2D:
        """Return an independent copy."""
        result = Array2D(self.width, self.height)
        result._data = list(self._data)
        return result


def _like_value(array: Array2D, scalar: float) -> Any:
    sample = next(iter(array), None)
    if isinstance(sample, tuple):
        return tuple(type(c)(scalar) for c in sample)
    return scalar


def empty_like(array: Array2D) -> Array2D:
    """A new array of the same size whose contents are unset (``None``)."""
    return Array2D(array.width, array.height, None)


def ones_like(array: Array2D) -> Array2D:
    """A new array of the same size filled with ones."""
    return Array2D(array.width, array.height, _like_value(array, 1.0))


def zeros_like(array: Array2D) -> Array2D:
    """A new array of the same size filled with zeros."""
    return Array2D(array.width, array.height, _like_value(array, 0.0))


def rotate(point: tuple[float, float], angle: float) -> tuple[float, float]:
    """Rotate a 2D point about the origin by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    x, y = point
    return (x * c - y * s, x * s + y * c)


def rand_float() -> float:
    """A uniformly distributed float in ``[0, 1]``."""
    return random.random()