"""Raw simplex noise in two, three and four dimensions.

Each function returns a deterministic pseudo-random value in roughly
``(-1, 1)`` that varies smoothly with its coordinates.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

# Gradients at the midpoints of the edges of a cube.
_GRAD3: tuple[tuple[int, int, int], ...] = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

# Gradients at the midpoints of the edges of a hypercube.
_GRAD4: tuple[tuple[int, int, int, int], ...] = (
    (0, 1, 1, 1), (0, 1, 1, -1), (0, 1, -1, 1), (0, 1, -1, -1),
    (0, -1, 1, 1), (0, -1, 1, -1), (0, -1, -1, 1), (0, -1, -1, -1),
    (1, 0, 1, 1), (1, 0, 1, -1), (1, 0, -1, 1), (1, 0, -1, -1),
    (-1, 0, 1, 1), (-1, 0, 1, -1), (-1, 0, -1, 1), (-1, 0, -1, -1),
    (1, 1, 0, 1), (1, 1, 0, -1), (1, -1, 0, 1), (1, -1, 0, -1),
    (-1, 1, 0, 1), (-1, 1, 0, -1), (-1, -1, 0, 1), (-1, -1, 0, -1),
    (1, 1, 1, 0), (1, 1, -1, 0), (1, -1, 1, 0), (1, -1, -1, 0),
    (-1, 1, 1, 0), (-1, 1, -1, 0), (-1, -1, 1, 0), (-1, -1, -1, 0),
)

_PERM_BASE: tuple[int, ...] = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142,
    8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117,
    35, 11, 32, 57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71,
    134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41,
    55, 46, 245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89,
    18, 169, 200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226,
    250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182,
    189, 28, 42, 223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43,
    172, 9, 129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97,
    228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239,
    107, 49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# The permutation is repeated so that nested lookups never need wrapping.
_PERM: tuple[int, ...] = _PERM_BASE * 2

# Traversal order of the 4D simplex, indexed by the pairwise ordering bits.
_SIMPLEX: tuple[tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3), (0, 1, 3, 2), (0, 0, 0, 0), (0, 2, 3, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (1, 2, 3, 0),
    (0, 2, 1, 3), (0, 0, 0, 0), (0, 3, 1, 2), (0, 3, 2, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (1, 3, 2, 0),
    (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0),
    (1, 2, 0, 3), (0, 0, 0, 0), (1, 3, 0, 2), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (2, 3, 0, 1), (2, 3, 1, 0),
    (1, 0, 2, 3), (1, 0, 3, 2), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (2, 0, 3, 1), (0, 0, 0, 0), (2, 1, 3, 0),
    (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0),
    (2, 0, 1, 3), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (3, 0, 1, 2), (3, 0, 2, 1), (0, 0, 0, 0), (3, 1, 2, 0),
    (2, 1, 0, 3), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (3, 1, 0, 2), (0, 0, 0, 0), (3, 2, 0, 1), (3, 2, 1, 0),
)

_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
_G2 = (3.0 - math.sqrt(3.0)) / 6.0
_F3 = 1.0 / 3.0
_G3 = 1.0 / 6.0
_F4 = (math.sqrt(5.0) - 1.0) / 4.0
_G4 = (5.0 - math.sqrt(5.0)) / 20.0


def fastfloor(x: float) -> int:
    """Floor for positive input; for zero and negative integers one below the floor."""
    return int(x) if x > 0 else int(x) - 1


def _dot(grad: Sequence[int], offsets: Sequence[float]) -> float:
    return sum(g * o for g, o in zip(grad, offsets))


def _corner(radius: float, grad: Sequence[int], offsets: Sequence[float]) -> float:
    t = radius - sum(o * o for o in offsets)
    if t < 0:
        return 0.0
    t *= t
    return t * t * _dot(grad, offsets)


def raw_noise_2d(x: float, y: float) -> float:
    """2D simplex noise at ``(x, y)``."""
    s = (x + y) * _F2
    i = fastfloor(x + s)
    j = fastfloor(y + s)

    t = (i + j) * _G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    i1, j1 = (1, 0) if x0 > y0 else (0, 1)

    x1 = x0 - i1 + _G2
    y1 = y0 - j1 + _G2
    x2 = x0 - 1.0 + 2.0 * _G2
    y2 = y0 - 1.0 + 2.0 * _G2

    ii = i & 255
    jj = j & 255
    gi0 = _PERM[ii + _PERM[jj]] % 12
    gi1 = _PERM[ii + i1 + _PERM[jj + j1]] % 12
    gi2 = _PERM[ii + 1 + _PERM[jj + 1]] % 12

    n0 = _corner(0.5, _GRAD3[gi0][:2], (x0, y0))
    n1 = _corner(0.5, _GRAD3[gi1][:2], (x1, y1))
    n2 = _corner(0.5, _GRAD3[gi2][:2], (x2, y2))
    return 70.0 * (n0 + n1 + n2)


def _order_3d(x0: float, y0: float, z0: float) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    if x0 >= y0:
        if y0 >= z0:
            return (1, 0, 0), (1, 1, 0)
        if x0 >= z0:
            return (1, 0, 0), (1, 0, 1)
        return (0, 0, 1), (1, 0, 1)
    if y0 < z0:
        return (0, 0, 1), (0, 1, 1)
    if x0 < z0:
        return (0, 1, 0), (0, 1, 1)
    return (0, 1, 0), (1, 1, 0)


def raw_noise_3d(x: float, y: float, z: float) -> float:
    """3D simplex noise at ``(x, y, z)``."""
    s = (x + y + z) * _F3
    i = fastfloor(x + s)
    j = fastfloor(y + s)
    k = fastfloor(z + s)

    t = (i + j + k) * _G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    (i1, j1, k1), (i2, j2, k2) = _order_3d(x0, y0, z0)

    offsets = (
        (x0, y0, z0),
        (x0 - i1 + _G3, y0 - j1 + _G3, z0 - k1 + _G3),
        (x0 - i2 + 2.0 * _G3, y0 - j2 + 2.0 * _G3, z0 - k2 + 2.0 * _G3),
        (x0 - 1.0 + 3.0 * _G3, y0 - 1.0 + 3.0 * _G3, z0 - 1.0 + 3.0 * _G3),
    )

    ii = i & 255
    jj = j & 255
    kk = k & 255
    corners = ((0, 0, 0), (i1, j1, k1), (i2, j2, k2), (1, 1, 1))
    total = 0.0
    for (di, dj, dk), offset in zip(corners, offsets):
        gi = _PERM[ii + di + _PERM[jj + dj + _PERM[kk + dk]]] % 12
        total += _corner(0.6, _GRAD3[gi], offset)
    return 32.0 * total


def raw_noise_4d(x: float, y: float, z: float, w: float) -> float:
    """4D simplex noise at ``(x, y, z, w)``."""
    s = (x + y + z + w) * _F4
    i = fastfloor(x + s)
    j = fastfloor(y + s)
    k = fastfloor(z + s)
    l = fastfloor(w + s)  # noqa: E741
    t = (i + j + k + l) * _G4

    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    w0 = w - (l - t)

    c = (
        (32 if x0 > y0 else 0)
        + (16 if x0 > z0 else 0)
        + (8 if y0 > z0 else 0)
        + (4 if x0 > w0 else 0)
        + (2 if y0 > w0 else 0)
        + (1 if z0 > w0 else 0)
    )
    order = _SIMPLEX[c]
    # Corner n steps along every axis whose rank is at least 4 - n.
    steps = [tuple(1 if rank >= threshold else 0 for rank in order) for threshold in (3, 2, 1)]
    corners = [(0, 0, 0, 0), *steps, (1, 1, 1, 1)]

    ii = i & 255
    jj = j & 255
    kk = k & 255
    ll = l & 255
    total = 0.0
    for n, (di, dj, dk, dl) in enumerate(corners):
        g = n * _G4
        offset = (x0 - di + g, y0 - dj + g, z0 - dk + g, w0 - dl + g)
        gi = _PERM[ii + di + _PERM[jj + dj + _PERM[kk + dk + _PERM[ll + dl]]]] % 32
        total += _corner(0.6, _GRAD4[gi], offset)
    return 27.0 * total