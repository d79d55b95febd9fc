"""Assorted numeric helpers, a file cache and small diagnostics."""

from __future__ import annotations

import math
import os
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, TextIO, TypeVar

from shadekit.bicubic import lerp

T = TypeVar("T")

# Smallest positive normal single-precision float.
FLT_MIN = 1.1754943508222875e-38


class DenormalCheck:
    """Counts denormal single-precision values seen during a frame."""

    def __init__(self) -> None:
        self.num = 0

    def begin_frame(self) -> None:
        self.num = 0

    def check(self, value: float) -> None:
        if value != 0 and abs(value) < FLT_MIN:
            self.num += 1

    def end_frame(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(f"denormals detected: {self.num}\n")


class FileCache:
    """Reads files below ``root`` once and serves later requests from memory."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self._db: dict[str, str] = {}

    def get(self, filename: str) -> str:
        if filename not in self._db:
            self._db[filename] = (self.root / filename).read_text(encoding="utf-8")
        return self._db[filename]


class QDebug:
    """Streams values with ``<<`` and ends the line when the block closes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def __lshift__(self, value: Any) -> QDebug:
        self.stream.write(str(value))
        return self

    def __enter__(self) -> QDebug:
        return self

    def __exit__(self, *args: Any) -> None:
        self.stream.write("\n")


def q_debug(stream: TextIO | None = None) -> QDebug:
    return QDebug(stream)


def my_assert(condition: bool, desc: str) -> None:
    """Report and raise :class:`RuntimeError` when ``condition`` is false."""
    if not condition:
        print(f"assert failure: {desc}")
        raise RuntimeError(desc)


def clamp_point(point: tuple[int, int], w: int, h: int) -> tuple[int, int]:
    """Clamp ``point`` into ``[0, w-1] x [0, h-1]``."""
    x, y = point
    x = min(max(x, 0), w - 1) if x >= 0 else 0
    y = min(max(y, 0), h - 1) if y >= 0 else 0
    return (x, y)


def sign(f: float) -> int:
    if f < 0:
        return -1
    if f > 0:
        return 1
    return 0


def exp_range(x: float, lo: float, hi: float) -> float:
    """Map ``x`` in ``[0, 1]`` exponentially onto ``[lo, hi]``."""
    return math.exp(lerp(math.log(lo), math.log(hi), x))


def nice_exp_range(value: float, lo: float, hi: float, extent: float) -> float:
    """Signed exponential mapping with a dead zone of 40 pixels over ``extent``."""
    x2 = sign(value) * max(0.0, abs(value) - 40.0 / extent)
    return sign(x2) * exp_range(abs(x2), lo, hi)


def ilog2(val: int) -> int:
    """Floor of the base-2 logarithm of a positive integer."""
    if val <= 0:
        raise ValueError(f"ilog2 needs a positive value, got {val}")
    return val.bit_length() - 1


def compdiv(v1: tuple[float, float], v2: tuple[float, float]) -> tuple[float, float]:
    """Divide two complex numbers given as ``(re, im)`` pairs."""
    a, b = v1
    c, d = v2
    cd = c * c + d * d
    if cd == 0:
        raise ZeroDivisionError("complex division by zero")
    return ((a * c + b * d) / cd, (b * c - a * d) / cd)


def safe_normalized(vec: Sequence[float]) -> tuple[float, ...]:
    """Unit vector in the direction of ``vec``; a zero vector is returned as is."""
    length = math.sqrt(sum(c * c for c in vec))
    if length == 0.0:
        return tuple(vec)
    return tuple(c / length for c in vec)


def pop_front(items: list[T]) -> T:
    """Remove and return the first element of a non-empty list."""
    if not items:
        raise IndexError("pop_front from empty list")
    return items.pop(0)


def to_strings(paths: Iterable[os.PathLike[str] | str]) -> list[str]:
    return [os.fspath(p) for p in paths]