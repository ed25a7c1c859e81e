"""Deterministic random numbers using the "Algorithm M" generator.

The generator combines a congruential step with a shift-register step,
so a given seed always yields the same game.
"""

from __future__ import annotations

import time

_MASK64 = (1 << 64) - 1

DEFAULT_SEED = 1924085713


class Rng:
    """A random number generator producing integers in ``1..max_value``."""

    def __init__(self, state: int = DEFAULT_SEED) -> None:
        self.state = state & _MASK64

    def roll(self, max_value: int) -> int:
        """Return a random integer between 1 and ``max_value``, inclusive."""
        last = self.state

        # Congruential method: multiply the previous value by the prime 16417.
        cong_result = (last + (last << 5) + (last << 14)) & _MASK64

        # Shift-register method: shift right 15, shift left 17, combined by xor.
        shift_result = (last >> 15) ^ last
        shift_result ^= (shift_result << 17) & _MASK64

        self.state = cong_result ^ shift_result

        low = self.state & 0xFFFF
        return (((low * (max_value & _MASK64)) & _MASK64) >> 16) + 1

    def seed(self, value: int) -> None:
        """Reset the generator from ``value`` and discard a few hundred rolls."""
        self.state = value & _MASK64
        warm_up = self.roll(100) + self.roll(200) + self.roll(300)
        for _ in range(warm_up):
            self.roll(10)


_default = Rng()


def default_rng() -> Rng:
    """Return the shared generator used by the module-level functions."""
    return _default


def roll(max_value: int) -> int:
    """Return a random integer in ``1..max_value`` from the shared generator."""
    return _default.roll(max_value)


def seed(value: int) -> None:
    """Seed the shared generator."""
    _default.seed(value)


def seed_from_time() -> None:
    """Seed the shared generator from the current time in nanoseconds."""
    _default.seed(time.time_ns())