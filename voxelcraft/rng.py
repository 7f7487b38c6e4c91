"""Random number engines and a uniform integer generator."""

from __future__ import annotations

import functools
import time
from typing import Callable, List, Optional, Protocol

_MASK32 = 0xFFFFFFFF


class _Engine(Protocol):
    min: int
    max: int

    def seed(self, value: int) -> None: ...

    def next(self) -> int: ...


class MinStdRand:
    """Lehmer generator with multiplier 48271 and modulus 2**31 - 1."""

    MULTIPLIER = 48271
    MODULUS = 2147483647
    min = 1
    max = MODULUS - 1

    def __init__(self, value: int = 1):
        self._state = 1
        self.seed(value)

    def seed(self, value: int) -> None:
        state = (value & _MASK32) % self.MODULUS
        self._state = state if state != 0 else 1

    def next(self) -> int:
        self._state = (self._state * self.MULTIPLIER) % self.MODULUS
        return self._state


class _MersenneTwister:
    """32-bit MT19937."""

    _N = 624
    _M = 397
    min = 0
    max = _MASK32

    def __init__(self, value: int = 5489):
        self._mt: List[int] = []
        self._index = self._N
        self.seed(value)

    def seed(self, value: int) -> None:
        mt = [value & _MASK32]
        for i in range(1, self._N):
            prev = mt[-1]
            mt.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._mt = mt
        self._index = self._N

    def _twist(self) -> None:
        mt = self._mt
        n = self._N
        for i in range(n):
            y = (mt[i] & 0x80000000) | (mt[(i + 1) % n] & 0x7FFFFFFF)
            mt[i] = mt[(i + self._M) % n] ^ (y >> 1) ^ (0x9908B0DF if y & 1 else 0)
        self._index = 0

    def next(self) -> int:
        if self._index >= self._N:
            self._twist()
        y = self._mt[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


class Random:
    """Uniform integers drawn from a seeded engine.

    The engine defaults to MT19937; pass ``engine=MinStdRand`` for the
    minimal standard generator. The seed defaults to the current time.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        engine: Optional[Callable[[], _Engine]] = None,
    ):
        self._engine: _Engine = (engine or _MersenneTwister)()
        self._engine.seed(int(time.time()) if seed is None else seed)
        for i in range(5):
            self.int_in_range(i, i * 5)

    def _draw(self, urange: int) -> int:
        engine = self._engine
        urng_range = engine.max - engine.min
        if urng_range > urange:
            buckets = urange + 1
            scaling = urng_range // buckets
            past = buckets * scaling
            value = engine.next() - engine.min
            while value >= past:
                value = engine.next() - engine.min
            return value // scaling
        if urng_range < urange:
            span = urng_range + 1
            while True:
                high = span * self._draw(urange // span)
                value = high + (engine.next() - engine.min)
                if high <= value <= urange:
                    return value
        return engine.next() - engine.min

    def int_in_range(self, low: int, high: int) -> int:
        """Return an integer in the closed range [low, high]."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        return low + self._draw(high - low)

    def set_seed(self, seed: int) -> None:
        self._engine.seed(seed)


@functools.lru_cache(maxsize=None)
def shared_random() -> Random:
    """The process-wide time-seeded generator."""
    return Random()