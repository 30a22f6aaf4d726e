"""Random number generation utilities for the food grid."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """Seeded random number generator for reproducible runs."""
    
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)
    
    def randrange(self, stop: int) -> int:
        """Generate random integer in [0, stop)."""
        return self._random.randrange(stop)
    
    def choice(self, seq: Sequence[T]) -> T:
        """Choose random element from sequence."""
        return self._random.choice(seq)


# Process-wide stream; reseed once at start with set_global_seed
default_rng = SeededRNG()


def set_global_seed(seed: Optional[int]) -> SeededRNG:
    """Reseed the process-wide stream and return it."""
    global default_rng
    default_rng = SeededRNG(seed)
    return default_rng


def get_default_rng() -> SeededRNG:
    """Return the current process-wide stream."""
    return default_rng
