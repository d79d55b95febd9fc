"""Cubic and bicubic interpolation over :class:`Array2D` grids."""

from __future__ import annotations

import math

from shadekit.array2d import Array2D

Vec4 = tuple[float, float, float, float]


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t


def cubic(val0: float, val1: float, t0: float, t1: float, x: float) -> float:
    """Cubic Hermite interpolation between two values with given tangents."""
    x2 = x * x
    x3 = x2 * x
    return (
        lerp(val0, val1, -2 * x3 + 3 * x2)
        + (x3 - 2 * x2 + x) * t0
        + (x3 - x2) * t1
    )


def cubic_coefs(x: float) -> Vec4:
    """Catmull-Rom weights for the four samples around fraction ``x``."""
    x2 = x * x
    x3 = x2 * x
    return (
        -0.5 * (x3 - 2 * x2 + x),
        1.5 * x3 - 2.5 * x2 + 1,
        -1.5 * x3 + 2 * x2 + 0.5 * x,
        0.5 * (x3 - x2),
    )


def dot4(a: Vec4, b: Vec4) -> float:
    return sum(p * q for p, q in zip(a, b))


def _cell(src: Array2D, xn: float, yn: float) -> tuple[int, int, float, float]:
    x = xn * src.width - 0.5
    y = yn * src.height - 0.5
    ix = math.floor(x)
    iy = math.floor(y)
    return ix, iy, x - ix, y - iy


def _row(src: Array2D, ix: int, y: int, coefs: Vec4) -> float:
    samples = tuple(src.wr(ix + dx, y) for dx in (-1, 0, 1, 2))
    return dot4(samples, coefs)


def get_bicubic(src: Array2D, xn: float, yn: float) -> float:
    """Sample ``src`` bicubically at normalized coordinates, wrapping at edges."""
    ix, iy, fx, fy = _cell(src, xn, yn)
    x_coefs = cubic_coefs(fx)
    rows = tuple(_row(src, ix, iy + dy, x_coefs) for dy in (-1, 0, 1, 2))
    return dot4(rows, cubic_coefs(fy))


def get_bicubic2(src: Array2D, xn: float, yn: float) -> float:
    """Sample ``src`` cubically along x only, on the row at or above ``yn``."""
    ix, iy, fx, _ = _cell(src, xn, yn)
    return _row(src, ix, iy, cubic_coefs(fx))