import pytest

from shadekit.array2d import Array2D
from shadekit.bicubic import (
    cubic,
    cubic_coefs,
    dot4,
    get_bicubic,
    get_bicubic2,
    lerp,
)


def _ramp(w, h):
    a = Array2D(w, h)
    for x, y in a.points():
        a[(x, y)] = float(x + 10 * y)
    return a


def test_lerp_endpoints():
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0


def test_cubic_endpoints():
    assert cubic(3.0, 8.0, 1.0, -2.0, 0.0) == pytest.approx(3.0)
    assert cubic(3.0, 8.0, 1.0, -2.0, 1.0) == pytest.approx(8.0)


def test_cubic_coefs_at_zero():
    assert cubic_coefs(0.0) == pytest.approx((0.0, 1.0, 0.0, 0.0))


@pytest.mark.parametrize("x", [0.0, 0.1, 0.37, 0.5, 0.9, 1.0])
def test_cubic_coefs_partition_of_unity(x):
    assert sum(cubic_coefs(x)) == pytest.approx(1.0)


def test_cubic_coefs_symmetry():
    a = cubic_coefs(0.3)
    b = cubic_coefs(0.7)
    assert a == pytest.approx(tuple(reversed(b)))


def test_dot4():
    assert dot4((1.0, 2.0, 3.0, 4.0), (1.0, 0.0, 1.0, 0.0)) == 4.0


def test_bicubic_at_pixel_centres_returns_pixel():
    src = _ramp(5, 4)
    for x, y in src.points():
        xn = (x + 0.5) / 5
        yn = (y + 0.5) / 4
        assert get_bicubic(src, xn, yn) == pytest.approx(src[(x, y)])
        assert get_bicubic2(src, xn, yn) == pytest.approx(src[(x, y)])


def test_bicubic_constant_image():
    src = Array2D(4, 4, 2.5)
    assert get_bicubic(src, 0.31, 0.77) == pytest.approx(2.5)
    assert get_bicubic(src, -0.2, 1.3) == pytest.approx(2.5)


def test_bicubic_reproduces_linear_in_interior():
    src = _ramp(8, 8)
    # halfway between columns 3 and 4, on row 3
    xn = 4.0 / 8
    yn = 3.5 / 8
    expected = (src[(3, 3)] + src[(4, 3)]) / 2
    assert get_bicubic(src, xn, yn) == pytest.approx(expected)


def test_bicubic2_ignores_vertical_fraction():
    src = _ramp(8, 8)
    a = get_bicubic2(src, 4.0 / 8, 3.5 / 8)
    b = get_bicubic2(src, 4.0 / 8, 3.9 / 8)
    assert a == pytest.approx(b)
    assert a == pytest.approx((src[(3, 3)] + src[(4, 3)]) / 2)


def test_bicubic_wraps_negative_coordinates():
    src = _ramp(4, 4)
    inside = get_bicubic(src, 0.3, 0.6)
    assert get_bicubic(src, 0.3 - 1.0, 0.6 + 1.0) == pytest.approx(inside)