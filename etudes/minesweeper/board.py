"""A mutable minesweeper board with hidden bombs and a player's view."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator, MutableSequence
from enum import Enum, auto
from typing import TypeVar

_T = TypeVar("_T")

_MT_MASK = 0xFFFFFFFF


class TileDisplay(Enum):
    """What the player sees on a tile."""

    UNTOUCHED = auto()
    FLAGGED = auto()
    DUG = auto()


class TileHidden(Enum):
    """What is hidden under a tile."""

    BOMB = auto()
    EMPTY = auto()


class TooManyBombsError(ValueError):
    """Raised when more bombs are requested than the board has tiles."""


def _mt19937_first_output(seed: int) -> int:
    """Return the first 32-bit output of a Mersenne Twister seeded with seed."""
    state = [seed & _MT_MASK]
    for i in range(1, 624):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MT_MASK)
    y = (state[0] & 0x80000000) | (state[1] & 0x7FFFFFFF)
    value = state[397] ^ (y >> 1) ^ (0x9908B0DF if y & 1 else 0)
    value ^= value >> 11
    value ^= (value << 7) & 0x9D2C5680
    value ^= (value << 15) & 0xEFC60000
    value ^= value >> 18
    return value


class _MinStdRand0:
    """Park-Miller linear congruential generator (multiplier 16807)."""

    MODULUS = 2147483647
    MIN = 1
    MAX = MODULUS - 1

    def __init__(self, seed: int) -> None:
        self._state = seed % self.MODULUS or 1

    def __call__(self) -> int:
        self._state = (self._state * 16807) % self.MODULUS
        return self._state


def _uniform(gen: _MinStdRand0, low: int, high: int) -> int:
    """Draw an integer in [low, high] by rejection and downscaling."""
    gen_range = gen.MAX - gen.MIN
    span = high - low + 1
    if span > gen_range:
        raise ValueError("range too large for the generator")
    scaling = gen_range // span
    past = span * scaling
    while True:
        value = gen() - gen.MIN
        if value < past:
            return value // scaling + low


def _shuffle(items: MutableSequence[_T], gen: _MinStdRand0) -> None:
    """Shuffle items in place with the same draws as the standard library shuffle."""
    size = len(items)
    if size == 0:
        return
    gen_range = gen.MAX - gen.MIN

    def swap(a: int, b: int) -> None:
        items[a], items[b] = items[b], items[a]

    if gen_range // size >= size:
        i = 1
        if size % 2 == 0:
            swap(i, _uniform(gen, 0, 1))
            i += 1
        while i != size:
            swap_range = i + 1
            drawn = _uniform(gen, 0, swap_range * (swap_range + 1) - 1)
            first, second = divmod(drawn, swap_range + 1)
            swap(i, first)
            swap(i + 1, second)
            i += 2
        return

    for i in range(1, size):
        swap(i, _uniform(gen, 0, i))


class Board(ABC):
    """A mutable minesweeper board; all tiles start untouched, some hide bombs."""

    @abstractmethod
    def print(self) -> str:
        """Return the player's view, one line per row."""

    @abstractmethod
    def dig(self, y: int, x: int) -> bool:
        """Dig a tile; return False only if a bomb was dug."""

    @abstractmethod
    def flag(self, y: int, x: int) -> None:
        """Flag an untouched tile."""

    @abstractmethod
    def deflag(self, y: int, x: int) -> None:
        """Remove the flag from a flagged tile."""


class BoardImplementation(Board):
    """A thread-safe minesweeper board with bombs placed from a seed."""

    def __init__(
        self,
        y_size: int,
        x_size: int,
        bomb_count: int,
        seed: int | None = None,
    ) -> None:
        """Build a y_size by x_size board with bomb_count bombs.

        Raises ValueError if a size is not positive or bomb_count is negative,
        and TooManyBombsError if bomb_count exceeds the number of tiles.
        """
        if y_size < 1:
            raise ValueError("y_size must be positive.")
        if x_size < 1:
            raise ValueError("x_size must be positive.")
        if bomb_count < 0:
            raise ValueError("bomb_count must be non negative.")
        size = y_size * x_size
        if bomb_count > size:
            raise TooManyBombsError("bomb_count cannot be larger than the front size")
        if seed is None:
            seed = int(time.time())

        self._lock = threading.Lock()
        self._y_size = y_size
        self._x_size = x_size
        self._front = [TileDisplay.UNTOUCHED] * size
        self._back = [TileHidden.BOMB] * bomb_count + [TileHidden.EMPTY] * (
            size - bomb_count
        )
        _shuffle(self._back, _MinStdRand0(_mt19937_first_output(seed)))

        self._boundaries = [0] * size
        for y in range(y_size):
            for x in range(x_size):
                if self._back[self._index(y, x)] is TileHidden.BOMB:
                    for ny, nx in self._neighbors(y, x):
                        self._boundaries[self._index(ny, nx)] += 1

    @property
    def y_size(self) -> int:
        return self._y_size

    @property
    def x_size(self) -> int:
        return self._x_size

    def __copy__(self) -> BoardImplementation:
        with self._lock:
            clone = object.__new__(type(self))
            clone._lock = threading.Lock()
            clone._y_size = self._y_size
            clone._x_size = self._x_size
            clone._front = list(self._front)
            clone._back = list(self._back)
            clone._boundaries = list(self._boundaries)
        return clone

    def __deepcopy__(self, memo: dict) -> BoardImplementation:
        return self.__copy__()

    def _index(self, y: int, x: int) -> int:
        return y * self._x_size + x

    def _in_bounds(self, y: int, x: int) -> bool:
        return 0 <= y < self._y_size and 0 <= x < self._x_size

    def _neighbors(self, y: int, x: int) -> Iterator[tuple[int, int]]:
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if (dy, dx) != (0, 0) and self._in_bounds(y + dy, x + dx):
                    yield y + dy, x + dx

    def _rows(self, cell) -> str:
        return "\n".join(
            "".join(cell(self._index(y, x)) for x in range(self._x_size))
            for y in range(self._y_size)
        )

    def _view(self, index: int) -> str:
        tile = self._front[index]
        if tile is TileDisplay.UNTOUCHED:
            return "-"
        if tile is TileDisplay.FLAGGED:
            return "F"
        count = self._boundaries[index]
        return " " if count == 0 else chr(ord("0") + count)

    def print(self) -> str:
        with self._lock:
            return self._rows(self._view)

    def _flood(self, y: int, x: int) -> None:
        stack = [(y, x)]
        while stack:
            cy, cx = stack.pop()
            index = self._index(cy, cx)
            if self._front[index] is not TileDisplay.UNTOUCHED:
                continue
            self._front[index] = TileDisplay.DUG
            if self._boundaries[index] == 0:
                stack.extend(self._neighbors(cy, cx))

    def dig(self, y: int, x: int) -> bool:
        if not self._in_bounds(y, x):
            return True
        with self._lock:
            index = self._index(y, x)
            if self._front[index] is not TileDisplay.UNTOUCHED:
                return True
            if self._back[index] is TileHidden.EMPTY:
                self._flood(y, x)
                return True
            self._flood(y, x)
            for ny, nx in self._neighbors(y, x):
                self._boundaries[self._index(ny, nx)] -= 1
            return False

    def flag(self, y: int, x: int) -> None:
        if not self._in_bounds(y, x):
            return
        with self._lock:
            index = self._index(y, x)
            if self._front[index] is TileDisplay.UNTOUCHED:
                self._front[index] = TileDisplay.FLAGGED

    def deflag(self, y: int, x: int) -> None:
        if not self._in_bounds(y, x):
            return
        with self._lock:
            index = self._index(y, x)
            if self._front[index] is TileDisplay.FLAGGED:
                self._front[index] = TileDisplay.UNTOUCHED

    def print_debug(self) -> dict[str, str]:
        """Return the raw front, back and boundary layers; for debugging only."""
        front_chars = {
            TileDisplay.UNTOUCHED: "U",
            TileDisplay.FLAGGED: "F",
            TileDisplay.DUG: "D",
        }
        back_chars = {TileHidden.EMPTY: "E", TileHidden.BOMB: "B"}
        with self._lock:
            return {
                "front": self._rows(lambda i: front_chars[self._front[i]]),
                "back": self._rows(lambda i: back_chars[self._back[i]]),
                "boundaries": self._rows(
                    lambda i: chr(ord("0") + self._boundaries[i])
                ),
            }