"""Multi-octave and range-scaled simplex noise."""

from __future__ import annotations

import math
from collections.abc import Callable

from shadekit.simplexnoise import raw_noise_2d, raw_noise_3d, raw_noise_4d


def _octaves(
    octaves: float,
    persistence: float,
    scale: float,
    sample: Callable[[float], float],
) -> float:
    """Sum ``sample(frequency)`` over the octaves, normalized by total amplitude."""
    count = math.ceil(octaves)
    if count <= 0:
        raise ValueError(f"octaves must be positive, got {octaves!r}")
    total = 0.0
    frequency = scale
    amplitude = 1.0
    max_amplitude = 0.0
    for _ in range(count):
        total += sample(frequency) * amplitude
        frequency *= 2
        max_amplitude += amplitude
        amplitude *= persistence
    return total / max_amplitude


def _rescale(value: float, lo_bound: float, hi_bound: float) -> float:
    return value * (hi_bound - lo_bound) / 2 + (hi_bound + lo_bound) / 2


def octave_noise_2d(octaves: float, persistence: float, scale: float, x: float, y: float) -> float:
    """2D noise summed over octaves of doubling frequency and decaying amplitude."""
    return _octaves(octaves, persistence, scale, lambda f: raw_noise_2d(x * f, y * f))


def octave_noise_3d(
    octaves: float, persistence: float, scale: float, x: float, y: float, z: float
) -> float:
    """3D noise summed over octaves of doubling frequency and decaying amplitude."""
    return _octaves(octaves, persistence, scale, lambda f: raw_noise_3d(x * f, y * f, z * f))


def octave_noise_4d(
    octaves: float, persistence: float, scale: float, x: float, y: float, z: float, w: float
) -> float:
    """4D noise summed over octaves of doubling frequency and decaying amplitude."""
    return _octaves(
        octaves, persistence, scale, lambda f: raw_noise_4d(x * f, y * f, z * f, w * f)
    )


def scaled_octave_noise_2d(
    octaves: float,
    persistence: float,
    scale: float,
    lo_bound: float,
    hi_bound: float,
    x: float,
    y: float,
) -> float:
    """Octave noise mapped from ``[-1, 1]`` onto ``[lo_bound, hi_bound]``."""
    return _rescale(octave_noise_2d(octaves, persistence, scale, x, y), lo_bound, hi_bound)


def scaled_octave_noise_3d(
    octaves: float,
    persistence: float,
    scale: float,
    lo_bound: float,
    hi_bound: float,
    x: float,
    y: float,
    z: float,
) -> float:
    """Octave noise mapped from ``[-1, 1]`` onto ``[lo_bound, hi_bound]``."""
    return _rescale(octave_noise_3d(octaves, persistence, scale, x, y, z), lo_bound, hi_bound)


def scaled_octave_noise_4d(
    octaves: float,
    persistence: float,
    scale: float,
    lo_bound: float,
    hi_bound: float,
    x: float,
    y: float,
    z: float,
    w: float,
) -> float:
    """Octave noise mapped from ``[-1, 1]`` onto ``[lo_bound, hi_bound]``."""
    return _rescale(
        octave_noise_4d(octaves, persistence, scale, x, y, z, w), lo_bound, hi_bound
    )


def scaled_raw_noise_2d(lo_bound: float, hi_bound: float, x: float, y: float) -> float:
    """Raw noise mapped from ``[-1, 1]`` onto ``[lo_bound, hi_bound]``."""
    return _rescale(raw_noise_2d(x, y), lo_bound, hi_bound)


def scaled_raw_noise_3d(lo_bound: float, hi_bound: float, x: float, y: float, z: float) -> float:
    """Raw noise mapped from ``[-1, 1]`` onto ``[lo_bound, hi_bound]``."""
    return _rescale(raw_noise_3d(x, y, z), lo_bound, hi_bound)


def scaled_raw_noise_4d(
    lo_bound: float, hi_bound: float, x: float, y: float, z: float, w: float
) -> float:
    """Raw noise mapped from ``[-1, 1]`` onto ``[lo_bound, hi_bound]``."""
    return _rescale(raw_noise_4d(x, y, z, w), lo_bound, hi_bound)