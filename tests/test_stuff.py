import io
import math
from pathlib import Path

import pytest

from shadekit.stuff import (
    DenormalCheck,
    FileCache,
    QDebug,
    clamp_point,
    compdiv,
    exp_range,
    ilog2,
    my_assert,
    nice_exp_range,
    pop_front,
    q_debug,
    safe_normalized,
    sign,
    to_strings,
)


def test_denormal_check_counts_only_denormals():
    dc = DenormalCheck()
    for v in (1e-40, -1e-42, 0.0, 1.0, 1e-30):
        dc.check(v)
    out = io.StringIO()
    dc.end_frame(out)
    assert out.getvalue() == "denormals detected: 2\n"
    dc.begin_frame()
    assert dc.num == 0


def test_file_cache_reads_once(tmp_path):
    (tmp_path / "a.txt").write_text("first", encoding="utf-8")
    cache = FileCache(tmp_path)
    assert cache.get("a.txt") == "first"
    (tmp_path / "a.txt").write_text("second", encoding="utf-8")
    assert cache.get("a.txt") == "first"


def test_file_cache_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileCache(tmp_path).get("nope.txt")


def test_qdebug_writes_and_terminates_line():
    out = io.StringIO()
    with q_debug(out) as d:
        d << "x=" << 3 << " " << 1.5
    assert out.getvalue() == "x=3 1.5\n"
    assert isinstance(QDebug(out) << "a", QDebug)


def test_my_assert():
    my_assert(True, "fine")
    with pytest.raises(RuntimeError, match="broken"):
        my_assert(False, "broken")


@pytest.mark.parametrize(
    "point,expected",
    [((-3, 2), (0, 2)), ((5, 9), (4, 4)), ((2, -1), (2, 0)), ((1, 3), (1, 3))],
)
def test_clamp_point(point, expected):
    assert clamp_point(point, 5, 5) == expected


def test_sign():
    assert [sign(-2.5), sign(0.0), sign(7)] == [-1, 0, 1]


def test_exp_range_endpoints_and_monotonic():
    assert exp_range(0.0, 0.01, 100.0) == pytest.approx(0.01)
    assert exp_range(1.0, 0.01, 100.0) == pytest.approx(100.0)
    assert exp_range(0.5, 0.01, 100.0) == pytest.approx(math.sqrt(0.01 * 100.0))


def test_nice_exp_range():
    assert nice_exp_range(0.01, 0.1, 10.0, 800.0) == 0
    pos = nice_exp_range(0.5, 0.1, 10.0, 800.0)
    neg = nice_exp_range(-0.5, 0.1, 10.0, 800.0)
    assert neg == pytest.approx(-pos)
    assert pos == pytest.approx(exp_range(0.5 - 40.0 / 800.0, 0.1, 10.0))


@pytest.mark.parametrize("exp", [0, 1, 5, 10, 31])
def test_ilog2_powers(exp):
    assert ilog2(2**exp) == exp
    assert ilog2(2 ** (exp + 1) - 1) == exp


def test_ilog2_rejects_zero():
    with pytest.raises(ValueError):
        ilog2(0)


def test_compdiv_matches_complex():
    q = compdiv((3.0, -2.0), (1.5, 4.0))
    expected = complex(3.0, -2.0) / complex(1.5, 4.0)
    assert q == pytest.approx((expected.real, expected.imag))
    with pytest.raises(ZeroDivisionError):
        compdiv((1.0, 1.0), (0.0, 0.0))


def test_safe_normalized():
    v = safe_normalized((3.0, 4.0, 12.0))
    assert math.hypot(*v) == pytest.approx(1.0)
    assert safe_normalized((0.0, 0.0)) == (0.0, 0.0)


def test_pop_front():
    items = [1, 2, 3]
    assert pop_front(items) == 1
    assert items == [2, 3]
    with pytest.raises(IndexError):
        pop_front([])


def test_to_strings():
    assert to_strings([Path("a") / "b", "c"]) == [str(Path("a") / "b"), "c"]