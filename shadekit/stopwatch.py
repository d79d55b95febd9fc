"""Nested per-frame timing of named sections."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import TextIO, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Entry:
    """One timed section: position in the frame, label, whole milliseconds, depth."""

    index: int
    desc: str
    elapsed: float
    indent: int


class Stopwatch:
    """Collects timings for one frame; nested sections are indented."""

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._indent = 0

    @contextmanager
    def measure(self, desc: str) -> Iterator[None]:
        """Time the body of a ``with`` block under ``desc``."""
        start = perf_counter()
        self._indent += 1
        try:
            yield
        finally:
            self._indent -= 1
        elapsed = float(math.floor((perf_counter() - start) * 1000.0))
        self._entries.append(Entry(len(self._entries), desc, elapsed, self._indent))

    def timeit(self, desc: str, func: Callable[[], T]) -> T:
        """Call ``func`` and record how long it took; returns its result."""
        with self.measure(desc):
            return func()

    def begin_frame(self) -> None:
        """Forget the entries of the previous frame."""
        self._entries.clear()

    def end_frame(self, stream: TextIO | None = None) -> None:
        """Write the frame's timings, one per line, indented with tabs."""
        out = stream if stream is not None else sys.stdout
        for entry in self._entries:
            out.write(f"{chr(9) * entry.indent}{entry.desc} took {entry.elapsed:g}ms\n")

    def entries(self) -> list[Entry]:
        """The entries recorded so far this frame, in order of completion."""
        return list(self._entries)