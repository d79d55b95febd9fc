import math

import pytest

from shadekit.fft_common import FFTDir, get_a_and_b


@pytest.mark.parametrize("n", [0, 1, 2, 8, 17, 64])
def test_lengths(n):
    a, b = get_a_and_b(n, FFTDir.FORWARD)
    assert len(a) == n // 2
    assert len(b) == n // 2


def test_first_entry_forward():
    a, b = get_a_and_b(8, FFTDir.FORWARD)
    assert a[0] == pytest.approx((0.5, -0.5))
    assert b[0] == pytest.approx((0.5, 0.5))


@pytest.mark.parametrize("direction", list(FFTDir))
def test_a_plus_b_is_one(direction):
    a, b = get_a_and_b(32, direction)
    for (ar, ai), (br, bi) in zip(a, b):
        assert ar + br == pytest.approx(1.0)
        assert ai + bi == pytest.approx(0.0, abs=1e-12)


def test_backward_is_conjugate_of_forward():
    fa, fb = get_a_and_b(16, FFTDir.FORWARD)
    ba, bb = get_a_and_b(16, FFTDir.BACKWARD)
    for (fr, fi), (br, bi) in zip(fa + fb, ba + bb):
        assert br == pytest.approx(fr)
        assert bi == pytest.approx(-fi)


def test_magnitude_identity():
    # |A|^2 = (1 - sin)^2/4 + cos^2/4 = (1 - sin)/2
    n = 16
    a, _ = get_a_and_b(n, FFTDir.FORWARD)
    for k, (re, im) in enumerate(a):
        s = math.sin(math.pi * k / (n // 2))
        assert re * re + im * im == pytest.approx((1 - s) / 2)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        get_a_and_b(-4, FFTDir.BACKWARD)