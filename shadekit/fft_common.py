"""Twiddle tables for computing a real FFT via a half-length complex FFT."""

from __future__ import annotations

import math
from enum import Enum

Complex2 = tuple[float, float]


class FFTDir(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def get_a_and_b(n: int, direction: FFTDir) -> tuple[list[Complex2], list[Complex2]]:
    """Return the ``A`` and ``B`` split coefficients for a real transform of length ``n``.

    Each list holds ``n // 2`` complex numbers as ``(re, im)`` pairs.
    """
    if n < 0:
        raise ValueError(f"transform length must be non-negative, got {n}")
    half = n // 2
    sign = -1.0 if direction is FFTDir.FORWARD else 1.0
    a: list[Complex2] = []
    b: list[Complex2] = []
    for k in range(half):
        angle = math.pi * k / half
        s = math.sin(angle)
        c = math.cos(angle)
        a.append((0.5 * (1.0 - s), 0.5 * sign * c))
        b.append((0.5 * (1.0 + s), -0.5 * sign * c))
    return a, b