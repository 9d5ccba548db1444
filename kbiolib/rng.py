"""Small 128-bit xorshift-family pseudo-random generator.

The generator is seeded through SplitMix64 and produces 64-bit integers
and doubles in [0, 1).  ``jump`` advances the state by 2**64 steps, which
yields non-overlapping streams for parallel use.
"""

from __future__ import annotations

MASK64 = (1 << 64) - 1

_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_JUMP = (0xBEAC0467EBA5FACB, 0xD86B048B86AA9922)


def splitmix64(x: int) -> int:
    """One SplitMix64 step applied to ``x``; a bijection on 64-bit integers."""
    z = (x + _GOLDEN_GAMMA) & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


class Krng:
    """Pseudo-random generator with a two-word 64-bit state.

    ``state`` holds the two state words and may be read or assigned.
    """

    def __init__(self, seed: int = 0) -> None:
        self.state: tuple[int, int] = (0, 0)
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from ``seed``."""
        s0 = splitmix64(seed & MASK64)
        self.state = (s0, splitmix64(s0))

    def next_u64(self) -> int:
        """Return the next 64-bit unsigned integer."""
        s0, s1 = self.state
        result = (s0 + s1) & MASK64
        s1 ^= s0
        self.state = (
            _rotl(s0, 55) ^ s1 ^ ((s1 << 14) & MASK64),
            _rotl(s0, 36),
        )
        return result

    def random(self) -> float:
        """Return a double uniformly drawn from [0, 1) with 52 random bits."""
        return (self.next_u64() >> 12) * 2.0**-52

    def jump(self) -> None:
        """Advance the state as if ``next_u64`` had been called 2**64 times."""
        s0 = s1 = 0
        for word in _JUMP:
            for bit in range(64):
                if (word >> bit) & 1:
                    s0 ^= self.state[0]
                    s1 ^= self.state[1]
                self.next_u64()
        self.state = (s0, s1)