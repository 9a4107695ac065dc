from __future__ import annotations

from typing import List

import numpy as np

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
_INT64_SPAN = 1 << 64


def wrap_int64(value: int) -> int:
    return (value - INT64_MIN) % _INT64_SPAN + INT64_MIN


class Tape:
    """
    Signed 64-bit cells with a cursor, growing one cell at a time to the right.

    Cells live in a numpy buffer that is reallocated geometrically; only the
    first ``len(tape)`` entries are part of the tape. Arithmetic is done on
    one-element array views so overflow wraps without a warning.

    Moving left of cell 0 is allowed, but any read or write there raises
    IndexError.
    """

    def __init__(self, capacity: int = 64):
        self._cells = np.zeros(max(1, capacity), dtype=np.int64)
        self._size = 1
        self.position = 0

    def __len__(self) -> int:
        return self._size

    def _current(self) -> np.ndarray:
        pos = self.position
        if pos < 0:
            raise IndexError(f"tape position {pos} is left of cell 0")
        return self._cells[pos:pos + 1]

    def read(self) -> int:
        return int(self._current()[0])

    def write(self, value: int) -> None:
        self._current()[0] = wrap_int64(value)

    def increment(self) -> None:
        cell = self._current()
        cell += 1

    def decrement(self) -> None:
        cell = self._current()
        cell -= 1

    def move_right(self) -> None:
        self.position += 1
        if self.position >= self._size:
            if self._size == len(self._cells):
                grown = np.zeros(len(self._cells) * 2, dtype=np.int64)
                grown[:self._size] = self._cells
                self._cells = grown
            self._size += 1

    def move_left(self) -> None:
        self.position -= 1

    def snapshot(self) -> List[int]:
        return [int(v) for v in self._cells[:self._size]]
