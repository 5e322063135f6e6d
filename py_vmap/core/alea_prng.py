"""
Alea pseudo-random number generator.

Johannes Baagøe's Alea algorithm: small, fast, and seeded from any string,
so a squiggly layer can be reproduced from the seed it was drawn with.
"""

import uuid

TWO_32 = 0x100000000
INV_TWO_32 = 2.3283064365386963e-10
MULTIPLIER = 2091639


def random_seed() -> str:
    """Fresh short seed string for runs that do not ask for one."""
    return str(uuid.uuid4())[:8]


class _Mash:
    """Hash that folds strings into fractions in [0, 1)."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        n = self.n
        for char in str(data):
            n += ord(char)
            h = 0.02519603282416938 * n
            n = int(h) & 0xFFFFFFFF
            h = (h - n) * n
            n = int(h) & 0xFFFFFFFF
            n += (h - n) * TWO_32
        self.n = n
        return (int(n) & 0xFFFFFFFF) * INV_TWO_32


class AleaPRNG:
    """Seeded uniform generator over [0, 1)."""

    def __init__(self, seed):
        self.seed = str(seed)
        self.call_count = 0

        mash = _Mash()
        state = [mash(" ") for _ in range(3)]
        for i in range(3):
            state[i] -= mash(self.seed)
            if state[i] < 0:
                state[i] += 1
        self.s0, self.s1, self.s2 = state
        self.c = 1

    def random(self) -> float:
        """Next number in [0, 1)."""
        self.call_count += 1
        t = MULTIPLIER * self.s0 + self.c * INV_TWO_32
        self.c = int(t)
        self.s0, self.s1, self.s2 = self.s1, self.s2, t - self.c
        return self.s2

    def bernoulli(self, probability: float) -> bool:
        """True with the given probability."""
        return self.random() < probability
